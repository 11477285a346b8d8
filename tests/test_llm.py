"""Tests for eternal_stream.llm: the lazily built Anthropic client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from eternal_stream.llm import DEFAULT_MODEL, ClaudeClient, LLMError, default_model


def _sdk(*blocks) -> MagicMock:
    """Stub SDK client whose messages.create returns the given content blocks."""
    sdk = MagicMock()
    sdk.messages.create = AsyncMock(return_value=SimpleNamespace(content=list(blocks)))
    return sdk


def _text(text: str) -> SimpleNamespace:
    return SimpleNamespace(type="text", text=text)


_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


# ---------------------------------------------------------------------------
# Model selection
# ---------------------------------------------------------------------------

def test_default_model(monkeypatch):
    monkeypatch.delenv("CLAUDE_MODEL", raising=False)
    assert default_model() == DEFAULT_MODEL


def test_default_model_from_env(monkeypatch):
    monkeypatch.setenv("CLAUDE_MODEL", "claude-test")
    assert default_model() == "claude-test"


# ---------------------------------------------------------------------------
# Probe / bind
# ---------------------------------------------------------------------------

class TestProbe:
    def test_injected_client(self) -> None:
        sdk = _sdk()
        client = ClaudeClient(client=sdk)
        assert client.available
        assert client.bind() is sdk

    def test_builds_sdk_client(self) -> None:
        client = ClaudeClient(api_key="sk-test")
        assert client.probe()
        assert isinstance(client.bind(), anthropic.AsyncAnthropic)

    def test_failure_is_remembered(self) -> None:
        factory = MagicMock(side_effect=anthropic.AnthropicError("no key"))
        with patch("anthropic.AsyncAnthropic", factory):
            client = ClaudeClient()
            assert client.available is False
            assert client.probe() is False
            with pytest.raises(LLMError, match="no key"):
                client.bind()
        assert factory.call_count == 1


# ---------------------------------------------------------------------------
# complete
# ---------------------------------------------------------------------------

class TestComplete:
    async def test_returns_first_text_block(self) -> None:
        sdk = _sdk(SimpleNamespace(type="thinking", text="hidden"), _text("The ledger balances."), _text("extra"))
        result = await ClaudeClient(client=sdk).complete("system", "prompt")
        assert result == "The ledger balances."

    async def test_no_text_block(self) -> None:
        assert await ClaudeClient(client=_sdk()).complete("system", "prompt") == ""

    async def test_sends_request(self, monkeypatch) -> None:
        monkeypatch.delenv("CLAUDE_MODEL", raising=False)
        sdk = _sdk(_text("ok"))
        await ClaudeClient(client=sdk).complete("be bones", "refine this", max_tokens=50, temperature=0.2)
        kwargs = sdk.messages.create.call_args.kwargs
        assert kwargs == {
            "model": DEFAULT_MODEL,
            "max_tokens": 50,
            "temperature": 0.2,
            "system": "be bones",
            "messages": [{"role": "user", "content": "refine this"}],
        }

    async def test_explicit_model(self) -> None:
        sdk = _sdk(_text("ok"))
        await ClaudeClient(client=sdk).complete("s", "p", model="claude-other")
        assert sdk.messages.create.call_args.kwargs["model"] == "claude-other"

    async def test_status_error(self) -> None:
        sdk = MagicMock()
        sdk.messages.create = AsyncMock(side_effect=anthropic.APIStatusError(
            "overloaded", response=httpx.Response(529, request=_REQUEST), body=None,
        ))
        with pytest.raises(LLMError, match="529"):
            await ClaudeClient(client=sdk).complete("s", "p")

    async def test_connection_error(self) -> None:
        sdk = MagicMock()
        sdk.messages.create = AsyncMock(side_effect=anthropic.APIConnectionError(request=_REQUEST))
        with pytest.raises(LLMError, match="Cannot connect"):
            await ClaudeClient(client=sdk).complete("s", "p")
