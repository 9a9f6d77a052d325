"""
Stream Relay - re-emit provider text deltas as Server-Sent Events.

Every relayed stream ends with exactly one terminal event:
``{"type": "done"}`` on success or ``{"type": "error", "message": ...}``
when the upstream fails. If the downstream client goes away the task is
cancelled, the upstream iterator is closed and nothing more is emitted.
"""
import json
from typing import Any, AsyncIterator, Dict

from lucy_backend.core.logging_config import get_logger

logger = get_logger(__name__)


def format_sse(payload: Dict[str, Any]) -> str:
    """Encode one payload as an SSE ``data:`` frame."""
    return f"data: {json.dumps(payload, separators=(',', ':'), ensure_ascii=False)}\n\n"


async def relay_tokens(tokens: AsyncIterator[str]) -> AsyncIterator[str]:
    """
    Relay text deltas as SSE frames.

    Args:
        tokens: Async iterator of text fragments from the provider

    Yields:
        SSE frames: one ``token`` frame per fragment, then ``done`` or ``error``
    """
    count = 0
    try:
        async for text in tokens:
            count += 1
            yield format_sse({"type": "token", "text": text})
    except Exception as e:
        logger.error(f"Error in chat stream after {count} tokens: {e}")
        yield format_sse({"type": "error", "message": str(e)})
        return
    finally:
        aclose = getattr(tokens, "aclose", None)
        if aclose is not None:
            await aclose()

    logger.debug(f"Chat stream complete: tokens={count}")
    yield format_sse({"type": "done"})
