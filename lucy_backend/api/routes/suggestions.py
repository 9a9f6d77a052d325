"""
Suggestion Routes - follow-up quick replies for the chat UI.
"""
from fastapi import APIRouter, Depends

from lucy_backend.core.exceptions import ValidationError
from lucy_backend.core.validators import validate_required_text
from lucy_backend.models.chat import ErrorResponse, SuggestionsRequest, SuggestionsResponse
from lucy_backend.services.suggestion_service import SuggestionService

router = APIRouter(
    prefix="/api",
    tags=["Suggestions"],
    responses={
        400: {"model": ErrorResponse, "description": "lastMessage missing"},
    }
)

_suggestion_service: SuggestionService | None = None


def get_suggestion_service() -> SuggestionService:
    """Get or create the suggestion service instance."""
    global _suggestion_service
    if _suggestion_service is None:
        _suggestion_service = SuggestionService()
    return _suggestion_service


@router.post(
    "/suggestions",
    response_model=SuggestionsResponse,
    summary="Suggest follow-up messages",
)
async def suggestions(
    request: SuggestionsRequest,
    service: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionsResponse:
    """
    Return 2-3 short follow-ups for the user's last message.

    Model failures return an empty list rather than an error.
    """
    is_valid, error = validate_required_text(request.last_message, "lastMessage")
    if not is_valid:
        raise ValidationError(error, field="lastMessage")

    items = await service.get_suggestions(request.last_message, request.wallet_context)
    return SuggestionsResponse(suggestions=items)
