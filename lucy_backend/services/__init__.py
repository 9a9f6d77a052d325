"""
Services module - Business logic and orchestration.

Services contain the application logic between the HTTP layer and the
model provider:
- No HTTP concerns (those belong in api/)
- No provider SDK calls (those belong in llm/)
"""
from lucy_backend.services.action_service import ActionService
from lucy_backend.services.chat_service import ChatService
from lucy_backend.services.stream_relay import format_sse, relay_tokens
from lucy_backend.services.suggestion_service import SuggestionService

__all__ = [
    "ActionService",
    "ChatService",
    "SuggestionService",
    "format_sse",
    "relay_tokens",
]
