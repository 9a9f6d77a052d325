"""
Chat Routes - streamed conversation with Lucy.

The reply is delivered as Server-Sent Events; see
``lucy_backend.services.stream_relay`` for the event format.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from lucy_backend.core.exceptions import ValidationError
from lucy_backend.core.logging_config import get_logger
from lucy_backend.core.validators import validate_messages
from lucy_backend.models.chat import ChatRequest, ErrorResponse
from lucy_backend.services.chat_service import ChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid messages"},
    }
)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


@router.post(
    "/chat",
    response_class=StreamingResponse,
    summary="Stream a reply from Lucy",
    description="""
    Send the full conversation transcript and an optional wallet snapshot.

    The response is a `text/event-stream` of JSON events:
    - `{"type": "token", "text": "..."}` for each fragment of the reply
    - `{"type": "done"}` once the reply is complete
    - `{"type": "error", "message": "..."}` if the model call fails
    """
)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> StreamingResponse:
    """Validate the transcript and relay the model's reply as SSE."""
    is_valid, error = validate_messages(request.messages)
    if not is_valid:
        raise ValidationError(error, field="messages")

    return StreamingResponse(
        chat_service.stream_reply(request),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
