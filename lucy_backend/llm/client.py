"""
LLM Client for Groq API integration.

This module provides the three provider calls the backend needs:
- a streaming chat completion (token deltas relayed to the wallet app)
- non-streaming completions for the suggestion and action classifiers

Provider errors are logged and re-raised as ``LLMError`` so the service
layer deals with a single exception type.
"""
from typing import AsyncIterator, Dict, List, Optional

from groq import APIError, AsyncGroq

from lucy_backend.core.config import Settings, get_settings
from lucy_backend.core.exceptions import LLMError
from lucy_backend.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Async client for the Groq chat completions API.

    Example:
        >>> client = LLMClient()
        >>> async for text in client.stream_chat(system, messages):
        ...     print(text, end="")
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[AsyncGroq] = None):
        """
        Initialize the provider client.

        Args:
            settings: Optional Settings instance. Uses cached settings if not provided.
            client: Optional preconfigured AsyncGroq client.
        """
        self.settings = settings or get_settings()
        self.client = client or AsyncGroq(
            api_key=self.settings.groq_api_key,
            timeout=self.settings.llm_timeout_seconds,
        )
        logger.info("Groq LLM client initialized")

    async def stream_chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> AsyncIterator[str]:
        """
        Stream a chat completion as text deltas.

        The upstream HTTP stream is closed when the consumer stops
        iterating, including when the downstream client disconnects.

        Args:
            system_prompt: System prompt for the conversation
            messages: Provider-format messages (role/content), oldest first
            model: Model override, defaults to the chat model
            max_tokens: Token budget override

        Yields:
            Non-empty text fragments in arrival order

        Raises:
            LLMError: If the provider call fails before or during streaming
        """
        model = model or self.settings.llm_model_chat
        max_tokens = max_tokens or self.settings.chat_max_tokens

        logger.debug(f"Opening chat stream: model={model}, messages={len(messages)}")

        try:
            stream = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "system", "content": system_prompt}, *messages],
                temperature=self.settings.llm_temperature,
                max_tokens=max_tokens,
                stream=True,
            )
        except APIError as e:
            logger.error(f"Chat stream request failed ({model}): {e}")
            raise LLMError(str(e)) from e

        try:
            async for chunk in stream:
                if not chunk.choices:
                    continue
                text = chunk.choices[0].delta.content
                if text:
                    yield text
        except APIError as e:
            logger.error(f"Chat stream interrupted ({model}): {e}")
            raise LLMError(str(e)) from e
        finally:
            await stream.close()

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: str,
        max_tokens: int,
    ) -> str:
        """
        Run a single non-streaming completion.

        Args:
            system_prompt: Instructions for the model
            user_message: The single user turn
            model: Model identifier
            max_tokens: Maximum response length

        Returns:
            Text of the first choice, or an empty string if there is none

        Raises:
            LLMError: If the provider call fails
        """
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                max_tokens=max_tokens,
            )
        except APIError as e:
            logger.error(f"Completion failed ({model}): {e}")
            raise LLMError(str(e)) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


# Global instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get or create the global LLMClient instance."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
