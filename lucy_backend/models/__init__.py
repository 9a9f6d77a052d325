"""
Models module - Pydantic schemas for request and response bodies.
"""
from lucy_backend.models.chat import (
    ActionCheckRequest,
    ActionCheckResponse,
    ChatMessage,
    ChatRequest,
    ErrorResponse,
    HealthResponse,
    SuggestionsRequest,
    SuggestionsResponse,
    WalletContext,
)

__all__ = [
    "ActionCheckRequest",
    "ActionCheckResponse",
    "ChatMessage",
    "ChatRequest",
    "ErrorResponse",
    "HealthResponse",
    "SuggestionsRequest",
    "SuggestionsResponse",
    "WalletContext",
]
