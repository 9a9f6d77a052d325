"""
Custom Exceptions - Application-specific error classes.

Each exception carries an HTTP status code and an error code so the
API layer can render a consistent error body.
"""
from typing import Optional


class LucyException(Exception):
    """
    Base exception for all backend errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(LucyException):
    """Raised when a required request field is missing or malformed."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class LLMError(LucyException):
    """Raised when a call to the model provider fails."""
    status_code = 503
    error_code = "llm_error"

    def __init__(self, message: str = "LLM service unavailable"):
        super().__init__(message)
