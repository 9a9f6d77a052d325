"""
Suggestion Service - quick-reply follow-ups for the chat UI.

Suggestions are a nice-to-have: any failure degrades to an empty list
rather than an error response.
"""
from typing import List, Optional

from lucy_backend.core.config import Settings, get_settings
from lucy_backend.core.exceptions import LLMError
from lucy_backend.core.logging_config import get_logger
from lucy_backend.llm.client import LLMClient, get_llm_client
from lucy_backend.llm.parsing import extract_json
from lucy_backend.llm.prompts import SUGGESTIONS_SYSTEM_PROMPT, get_suggestions_user_prompt
from lucy_backend.models.chat import WalletContext

logger = get_logger(__name__)

MAX_SUGGESTIONS = 3


class SuggestionService:
    """Generates 2-3 short follow-up suggestions for the last user message."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.llm_client = llm_client or get_llm_client()

    async def get_suggestions(
        self,
        last_message: str,
        wallet_context: Optional[WalletContext] = None,
    ) -> List[str]:
        """
        Ask the suggestions model for follow-ups.

        Args:
            last_message: The user's most recent message
            wallet_context: Optional wallet snapshot

        Returns:
            Up to three non-empty suggestion strings; empty on any failure
        """
        try:
            reply = await self.llm_client.complete(
                SUGGESTIONS_SYSTEM_PROMPT,
                get_suggestions_user_prompt(last_message, wallet_context),
                model=self.settings.llm_model_suggestions,
                max_tokens=self.settings.suggestions_max_tokens,
            )
            return self._parse_suggestions(reply)
        except LLMError as e:
            logger.warning(f"Suggestions unavailable: {e}")
        except ValueError as e:
            logger.warning(f"Unparseable suggestions reply: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error generating suggestions: {e}")
        return []

    @staticmethod
    def _parse_suggestions(reply: str) -> List[str]:
        data = extract_json(reply)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        suggestions = [
            item.strip() for item in data
            if isinstance(item, str) and item.strip()
        ]
        return suggestions[:MAX_SUGGESTIONS]
