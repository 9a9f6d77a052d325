import asyncio

from conftest import parse_sse
from lucy_backend.core.exceptions import LLMError
from lucy_backend.services.stream_relay import format_sse, relay_tokens


async def _collect(agen):
    return [frame async for frame in agen]


class _Upstream:
    def __init__(self, tokens, error=None):
        self.tokens = tokens
        self.error = error
        self.closed = False

    async def iterate(self):
        try:
            for token in self.tokens:
                yield token
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


def test_format_sse_frame():
    assert format_sse({"type": "token", "text": "héllo"}) == 'data: {"type":"token","text":"héllo"}\n\n'


def test_relay_emits_done_after_tokens():
    upstream = _Upstream(["a", "b"])

    frames = asyncio.run(_collect(relay_tokens(upstream.iterate())))

    assert parse_sse("".join(frames)) == [
        {"type": "token", "text": "a"},
        {"type": "token", "text": "b"},
        {"type": "done"},
    ]
    assert upstream.closed


def test_relay_emits_single_error_event():
    upstream = _Upstream(["a"], error=LLMError("boom"))

    frames = asyncio.run(_collect(relay_tokens(upstream.iterate())))

    events = parse_sse("".join(frames))
    assert events == [{"type": "token", "text": "a"}, {"type": "error", "message": "boom"}]
    assert not any(event["type"] == "done" for event in events)


def test_relay_empty_stream_is_just_done():
    frames = asyncio.run(_collect(relay_tokens(_Upstream([]).iterate())))

    assert parse_sse("".join(frames)) == [{"type": "done"}]


def test_relay_closes_upstream_when_consumer_stops_early():
    upstream = _Upstream(["a", "b", "c"])

    async def consume_one():
        relay = relay_tokens(upstream.iterate())
        first = await relay.__anext__()
        await relay.aclose()
        return first

    first = asyncio.run(consume_one())

    assert parse_sse(first) == [{"type": "token", "text": "a"}]
    assert upstream.closed
