"""
Input Validators - required-field checks for incoming requests.

Validators return ``(is_valid, error_message)`` tuples; the route layer
turns failures into ``ValidationError`` responses.
"""
from typing import Any, Optional, Tuple

from lucy_backend.core.logging_config import get_logger

logger = get_logger(__name__)


def validate_messages(messages: Any) -> Tuple[bool, Optional[str]]:
    """
    Check that a chat transcript is a non-empty list.

    Args:
        messages: The ``messages`` value from the request body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not messages or not isinstance(messages, list):
        logger.debug("Rejected chat request without messages")
        return False, "Messages array is required"
    return True, None


def validate_required_text(value: Any, field: str) -> Tuple[bool, Optional[str]]:
    """
    Check that a required text field is present and non-empty.

    Args:
        value: Field value from the request body
        field: Field name used in the error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(value, str) or not value:
        logger.debug(f"Rejected request without {field}")
        return False, f"{field} is required"
    return True, None
