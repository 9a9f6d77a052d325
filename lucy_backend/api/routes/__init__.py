"""
API Routes module - Endpoint definitions.

- chat.py        : Streamed chat replies (SSE)
- suggestions.py : Follow-up suggestions
- actions.py     : Wallet action detection
- health.py      : Health check endpoints
"""
from lucy_backend.api.routes.actions import router as actions_router
from lucy_backend.api.routes.chat import router as chat_router
from lucy_backend.api.routes.health import router as health_router
from lucy_backend.api.routes.suggestions import router as suggestions_router

__all__ = [
    "actions_router",
    "chat_router",
    "health_router",
    "suggestions_router",
]
