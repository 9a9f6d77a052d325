"""
Chat Service - streamed conversational replies.

The service orchestrates one chat turn:
1. Builds the persona prompt with the wallet snapshot
2. Converts the client transcript into provider messages
3. Opens a streaming completion
4. Hands the token stream to the SSE relay

No state is kept between requests; the client sends the whole transcript.
"""
from typing import AsyncIterator, Optional

from lucy_backend.core.config import Settings, get_settings
from lucy_backend.core.logging_config import get_logger
from lucy_backend.llm.client import LLMClient, get_llm_client
from lucy_backend.llm.prompts import build_system_prompt, format_messages
from lucy_backend.models.chat import ChatRequest
from lucy_backend.services.stream_relay import relay_tokens

logger = get_logger(__name__)


class ChatService:
    """
    Service for streaming Lucy's chat replies.

    Example:
        >>> service = ChatService()
        >>> async for frame in service.stream_reply(request):
        ...     print(frame, end="")
        data: {"type":"token","text":"Hi"}
        ...
        data: {"type":"done"}
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the chat service.

        Args:
            llm_client: Optional LLMClient instance. Uses global client if not provided.
            settings: Optional Settings instance. Uses cached settings if not provided.
        """
        self.settings = settings or get_settings()
        self.llm_client = llm_client or get_llm_client()

    def stream_reply(self, request: ChatRequest) -> AsyncIterator[str]:
        """
        Stream the assistant reply for a validated chat request.

        Provider errors never escape; they end the stream with an
        ``error`` event instead.

        Args:
            request: Chat request with a non-empty transcript

        Returns:
            Async iterator of SSE frames
        """
        system_prompt = build_system_prompt(request.wallet_context)
        messages = format_messages(request.messages or [])

        logger.info(
            f"Streaming chat reply: messages={len(messages)}, "
            f"wallet_context={'yes' if request.wallet_context else 'no'}"
        )

        tokens = self.llm_client.stream_chat(
            system_prompt,
            messages,
            model=self.settings.llm_model_chat,
            max_tokens=self.settings.chat_max_tokens,
        )
        return relay_tokens(tokens)
