"""API request/response schemas"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """POST /api/generate request

    The prompt stays loosely typed so the route answers missing, blank or
    non-string values with its own 400 body rather than a 422.
    """
    prompt: Optional[Any] = Field(default=None, description="Free-text description of the landing page")


class GenerateResponse(BaseModel):
    """POST /api/generate response"""
    html: str


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    error_id: Optional[str] = None
    code: Optional[str] = None
    hint: Optional[str] = None
