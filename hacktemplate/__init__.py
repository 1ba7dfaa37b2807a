"""
HackTemplate API - hackathon starter backend.

Supabase handles accounts and sessions; Google Gemini handles completions.
"""

__version__ = "0.1.0"
