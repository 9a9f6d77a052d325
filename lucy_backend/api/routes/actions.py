"""
Action Routes - detect wallet actions (send, deposit, swap) in a message.
"""
from fastapi import APIRouter, Depends

from lucy_backend.core.exceptions import ValidationError
from lucy_backend.core.validators import validate_required_text
from lucy_backend.models.chat import ActionCheckRequest, ActionCheckResponse, ErrorResponse
from lucy_backend.services.action_service import ActionService

router = APIRouter(
    prefix="/api",
    tags=["Actions"],
    responses={
        400: {"model": ErrorResponse, "description": "message missing"},
    }
)

_action_service: ActionService | None = None


def get_action_service() -> ActionService:
    """Get or create the action service instance."""
    global _action_service
    if _action_service is None:
        _action_service = ActionService()
    return _action_service


@router.post(
    "/check-action",
    response_model=ActionCheckResponse,
    summary="Check whether a message requests a wallet action",
)
async def check_action(
    request: ActionCheckRequest,
    service: ActionService = Depends(get_action_service),
) -> ActionCheckResponse:
    """
    Classify the message as send, deposit, swap or none.

    Model failures return ``none`` with zero confidence.
    """
    is_valid, error = validate_required_text(request.message, "message")
    if not is_valid:
        raise ValidationError(error, field="message")

    result = await service.check_action(request.message, request.wallet_context)
    return ActionCheckResponse(**result)
