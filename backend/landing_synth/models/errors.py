"""Error models for the HTTP and CLI boundary"""

from enum import Enum
from typing import Optional
import uuid


class ErrorCode(str, Enum):
    """Error codes surfaced to callers"""
    INVALID_PROMPT = "INVALID_PROMPT"
    PROMPT_TOO_LONG = "PROMPT_TOO_LONG"
    GENERATION_FAILED = "GENERATION_FAILED"


class ApplicationError(Exception):
    """Application error carrying a code, a user-facing message and an optional hint"""
    def __init__(self, code: ErrorCode, message: str, hint: Optional[str] = None):
        self.error_id = str(uuid.uuid4())
        self.code = code
        self.message = message
        self.hint = hint
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for API responses"""
        return {
            "error": self.message,
            "error_id": self.error_id,
            "code": self.code.value,
            "hint": self.hint,
        }

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        mapping = {
            ErrorCode.INVALID_PROMPT: 400,
            ErrorCode.PROMPT_TOO_LONG: 400,
            ErrorCode.GENERATION_FAILED: 500,
        }
        return mapping.get(self.code, 500)
