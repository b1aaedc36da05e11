"""
Pydantic models for advice chat request/response validation.
"""

from typing import Optional
from pydantic import BaseModel


class ChatRequest(BaseModel):
    """POST /api/gpt-chat"""
    message: Optional[str] = None


class ChatData(BaseModel):
    reply: str
