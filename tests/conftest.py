import json
import os
import tempfile

import pytest

# Settings are read when the app module is imported
os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="lucy-logs-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from lucy_backend.api.main import app  # noqa: E402
from lucy_backend.api.routes.actions import get_action_service  # noqa: E402
from lucy_backend.api.routes.chat import get_chat_service  # noqa: E402
from lucy_backend.api.routes.suggestions import get_suggestion_service  # noqa: E402
from lucy_backend.core.config import get_settings  # noqa: E402
from lucy_backend.services import ActionService, ChatService, SuggestionService  # noqa: E402


class FakeLLMClient:
    """Stands in for LLMClient; records every call it receives."""

    def __init__(self, tokens=(), reply="", error=None, fail_after=None):
        self.tokens = list(tokens)
        self.reply = reply
        self.error = error
        self.fail_after = fail_after
        self.stream_calls = []
        self.complete_calls = []
        self.stream_closed = False

    async def stream_chat(self, system_prompt, messages, model=None, max_tokens=None):
        self.stream_calls.append(
            {"system": system_prompt, "messages": messages, "model": model, "max_tokens": max_tokens}
        )
        try:
            for i, token in enumerate(self.tokens):
                if self.fail_after is not None and i == self.fail_after:
                    raise self.error
                yield token
            if self.error is not None and self.fail_after is None:
                raise self.error
        finally:
            self.stream_closed = True

    async def complete(self, system_prompt, user_message, model, max_tokens):
        self.complete_calls.append(
            {"system": system_prompt, "user": user_message, "model": model, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.reply


def parse_sse(body):
    """Decode a text/event-stream body into its JSON payloads."""
    return [
        json.loads(frame[len("data: "):])
        for frame in body.split("\n\n")
        if frame.startswith("data: ")
    ]


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def client(fake_llm):
    settings = get_settings()
    app.dependency_overrides[get_chat_service] = lambda: ChatService(fake_llm, settings)
    app.dependency_overrides[get_suggestion_service] = lambda: SuggestionService(fake_llm, settings)
    app.dependency_overrides[get_action_service] = lambda: ActionService(fake_llm, settings)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
