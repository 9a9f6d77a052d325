import asyncio
from types import SimpleNamespace

import httpx
import pytest
from groq import APIConnectionError

from lucy_backend.core.config import get_settings
from lucy_backend.core.exceptions import LLMError
from lucy_backend.llm.client import LLMClient


def _chunk(content):
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class _FakeStream:
    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._chunks:
            raise StopAsyncIteration
        return self._chunks.pop(0)

    async def close(self):
        self.closed = True


class _FakeCompletions:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.result


def _client(completions):
    fake_sdk = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return LLMClient(settings=get_settings(), client=fake_sdk)


def _connection_error():
    return APIConnectionError(request=httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions"))


async def _collect(agen):
    return [item async for item in agen]


def test_stream_chat_yields_non_empty_deltas_and_closes():
    stream = _FakeStream([_chunk("Hel"), _chunk(None), _chunk("lo"), SimpleNamespace(choices=[])])
    completions = _FakeCompletions(result=stream)
    client = _client(completions)

    tokens = asyncio.run(_collect(client.stream_chat("sys", [{"role": "user", "content": "hi"}])))

    assert tokens == ["Hel", "lo"]
    assert stream.closed
    assert completions.kwargs["stream"] is True
    assert completions.kwargs["messages"][0] == {"role": "system", "content": "sys"}
    assert completions.kwargs["messages"][1] == {"role": "user", "content": "hi"}
    assert completions.kwargs["max_tokens"] == get_settings().chat_max_tokens


def test_stream_chat_wraps_provider_errors():
    client = _client(_FakeCompletions(error=_connection_error()))

    with pytest.raises(LLMError):
        asyncio.run(_collect(client.stream_chat("sys", [])))


def test_complete_returns_first_choice_text():
    response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content='["a"]'))])
    completions = _FakeCompletions(result=response)
    client = _client(completions)

    text = asyncio.run(client.complete("sys", "user text", model="m", max_tokens=10))

    assert text == '["a"]'
    assert completions.kwargs["model"] == "m"
    assert completions.kwargs["max_tokens"] == 10
    assert "stream" not in completions.kwargs


def test_complete_without_choices_is_empty():
    client = _client(_FakeCompletions(result=SimpleNamespace(choices=[])))

    assert asyncio.run(client.complete("sys", "u", model="m", max_tokens=1)) == ""


def test_complete_wraps_provider_errors():
    client = _client(_FakeCompletions(error=_connection_error()))

    with pytest.raises(LLMError):
        asyncio.run(client.complete("sys", "u", model="m", max_tokens=1))
