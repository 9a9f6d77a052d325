"""
Action Service - decide whether a message asks the wallet to do something.

The classifier answers with one of the supported wallet actions and a
confidence score. Anything it gets wrong collapses to ``none`` / 0 so the
client never executes an action on a malformed reply.
"""
import math
from typing import Any, Dict, Optional

from lucy_backend.core.config import Settings, get_settings
from lucy_backend.core.exceptions import LLMError
from lucy_backend.core.logging_config import get_logger
from lucy_backend.llm.client import LLMClient, get_llm_client
from lucy_backend.llm.parsing import extract_json
from lucy_backend.llm.prompts import ACTION_CHECK_PROMPT, get_action_check_user_prompt
from lucy_backend.models.chat import WalletContext

logger = get_logger(__name__)

SUPPORTED_ACTIONS = frozenset({"send", "deposit", "swap", "none"})
NO_ACTION: Dict[str, Any] = {"action": "none", "confidence": 0}


def _normalize_confidence(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    value = float(value)
    # json.loads accepts NaN and Infinity; treat them as a malformed reply
    if not math.isfinite(value):
        raise ValueError(f"non-finite confidence {value!r}")
    return min(max(value, 0.0), 1.0)


class ActionService:
    """Classifies a user message into a wallet action."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.llm_client = llm_client or get_llm_client()

    async def check_action(
        self,
        message: str,
        wallet_context: Optional[WalletContext] = None,
    ) -> Dict[str, Any]:
        """
        Detect the wallet action requested by a message.

        Args:
            message: The user's message
            wallet_context: Optional wallet snapshot

        Returns:
            Dict with ``action`` and ``confidence``; ``none`` / 0 on any failure
        """
        try:
            reply = await self.llm_client.complete(
                ACTION_CHECK_PROMPT,
                get_action_check_user_prompt(message, wallet_context),
                model=self.settings.llm_model_actions,
                max_tokens=self.settings.actions_max_tokens,
            )
            result = self._parse_action(reply)
        except LLMError as e:
            logger.warning(f"Action check unavailable: {e}")
            return dict(NO_ACTION)
        except ValueError as e:
            logger.warning(f"Unparseable action reply: {e}")
            return dict(NO_ACTION)
        except Exception as e:
            logger.exception(f"Unexpected error checking action: {e}")
            return dict(NO_ACTION)

        logger.info(f"Action check: action={result['action']}, confidence={result['confidence']}")
        return result

    @staticmethod
    def _parse_action(reply: str) -> Dict[str, Any]:
        data = extract_json(reply)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        action = data.get("action") or "none"
        if action not in SUPPORTED_ACTIONS:
            logger.debug(f"Ignoring unsupported action {action!r}")
            action = "none"

        return {
            "action": action,
            "confidence": _normalize_confidence(data.get("confidence")),
        }
