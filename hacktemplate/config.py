"""
Configuration module for the HackTemplate API.
Centralizes environment variables, logging setup, and constants.
"""
import os
import logging
from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

# ============================================================================
# Environment Configuration
# ============================================================================

# Environment identifier (production, staging, development, local)
ENVIRONMENT = os.environ.get("ENVIRONMENT", "production")

PORT = int(os.environ.get("PORT", "8080"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ============================================================================
# Frontend / CORS Configuration
# ============================================================================

# Frontend URL, used for CORS and for links in auth emails
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", FRONTEND_URL).split(",")
    if origin.strip()
]

# ============================================================================
# AI Provider Configuration
# ============================================================================

# Name of the env var holding the Gemini key. Read per request, not at import.
AI_API_KEY_ENV = "GOOGLE_API_KEY"

AI_DEFAULT_MODEL = os.environ.get("AI_DEFAULT_MODEL", "gemini-2.5-flash")
AI_DEFAULT_TEMPERATURE = float(os.environ.get("AI_DEFAULT_TEMPERATURE", "0.7"))

# Retries the SDK performs on transient provider failures
AI_MAX_RETRIES = int(os.environ.get("AI_MAX_RETRIES", "2"))

# Upper bound (seconds) for a single streamed completion
AI_REQUEST_TIMEOUT = int(os.environ.get("AI_REQUEST_TIMEOUT", "30"))

AI_AVAILABLE_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-2.5-pro",
]

AI_FEATURES = [
    "Streaming responses",
    "System instructions",
    "Multiple models",
    "Token usage tracking",
]


def get_ai_api_key():
    """Return the LLM provider key, or None when it is not configured."""
    return os.environ.get(AI_API_KEY_ENV) or None


# ============================================================================
# Logging Configuration
# ============================================================================

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
