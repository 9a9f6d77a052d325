import pytest

from conftest import parse_sse
from lucy_backend.core.exceptions import LLMError
from lucy_backend.llm.prompts import LUCY_SYSTEM_PROMPT

pytestmark = pytest.mark.testclient


def test_chat_streams_tokens_then_done(client, fake_llm):
    fake_llm.tokens = ["Hi", " there", "!"]

    resp = client.post(
        "/api/chat",
        json={"messages": [{"type": "user", "text": "Hello"}]},
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    assert resp.headers["cache-control"] == "no-cache"
    assert resp.headers["x-accel-buffering"] == "no"

    events = parse_sse(resp.text)
    assert events == [
        {"type": "token", "text": "Hi"},
        {"type": "token", "text": " there"},
        {"type": "token", "text": "!"},
        {"type": "done"},
    ]
    assert fake_llm.stream_closed


def test_chat_maps_transcript_roles_and_uses_chat_model(client, fake_llm):
    fake_llm.tokens = ["ok"]

    client.post(
        "/api/chat",
        json={
            "messages": [
                {"type": "user", "text": "What is my balance?"},
                {"type": "lucy", "text": "You have $120.00."},
                {"type": "user", "text": "Thanks"},
            ]
        },
    )

    call = fake_llm.stream_calls[0]
    assert call["messages"] == [
        {"role": "user", "content": "What is my balance?"},
        {"role": "assistant", "content": "You have $120.00."},
        {"role": "user", "content": "Thanks"},
    ]
    assert call["system"] == LUCY_SYSTEM_PROMPT
    assert call["model"] == "llama-3.3-70b-versatile"
    assert call["max_tokens"] == 512


def test_chat_includes_wallet_context_in_system_prompt(client, fake_llm):
    client.post(
        "/api/chat",
        json={
            "messages": [{"type": "user", "text": "How am I doing?"}],
            "walletContext": {"totalBalance": 1500, "balances": {"usdc": 1000}},
        },
    )

    system = fake_llm.stream_calls[0]["system"]
    assert system.startswith(LUCY_SYSTEM_PROMPT)
    assert "CURRENT WALLET CONTEXT:" in system
    assert '"totalBalance": 1500' in system
    assert '"usdc": 1000' in system


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"messages": []},
        {"messages": None},
    ],
)
def test_chat_requires_messages(client, fake_llm, body):
    resp = client.post("/api/chat", json=body)

    assert resp.status_code == 400
    payload = resp.json()
    assert payload["error"] == "validation_error"
    assert payload["message"] == "Messages array is required"
    assert fake_llm.stream_calls == []


def test_chat_rejects_non_list_messages(client, fake_llm):
    resp = client.post("/api/chat", json={"messages": "hello"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"
    assert fake_llm.stream_calls == []


def test_chat_reports_provider_failure_as_error_event(client, fake_llm):
    fake_llm.error = LLMError("upstream unavailable")

    resp = client.post("/api/chat", json={"messages": [{"type": "user", "text": "Hi"}]})

    assert resp.status_code == 200
    assert parse_sse(resp.text) == [{"type": "error", "message": "upstream unavailable"}]


def test_chat_error_mid_stream_keeps_earlier_tokens(client, fake_llm):
    fake_llm.tokens = ["Your", " balance", " is"]
    fake_llm.error = LLMError("connection reset")
    fake_llm.fail_after = 2

    resp = client.post("/api/chat", json={"messages": [{"type": "user", "text": "Balance?"}]})

    events = parse_sse(resp.text)
    assert events == [
        {"type": "token", "text": "Your"},
        {"type": "token", "text": " balance"},
        {"type": "error", "message": "connection reset"},
    ]
    assert fake_llm.stream_closed


def test_chat_accepts_partial_wallet_context(client, fake_llm):
    fake_llm.tokens = ["ok"]

    resp = client.post(
        "/api/chat",
        json={
            "messages": [{"type": "user", "text": "How are my vaults?"}],
            "walletContext": {
                "totalBalance": "1,234.50",
                "vaults": [{"name": "Kamino", "balance": 10}],
            },
        },
    )

    assert resp.status_code == 200
    assert parse_sse(resp.text)[-1] == {"type": "done"}
    system = fake_llm.stream_calls[0]["system"]
    assert '"totalBalance": "1,234.50"' in system
    assert '"name": "Kamino"' in system
    assert '"apy"' not in system
