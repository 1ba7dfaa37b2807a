"""
AI chat models.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single chat message as sent by the frontend."""
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Request model for a streamed chat completion."""
    messages: List[ChatMessage] = Field(..., min_length=1)
    model: Optional[str] = Field(None, min_length=1, description="Provider model name; server default when omitted")
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)


class AICapabilitiesResponse(BaseModel):
    """Response model for GET /api/ai."""
    message: str = "AI endpoint is ready"
    user: Optional[str] = None
    models: List[str]
    features: List[str]
    default_model: str
    configured: bool
