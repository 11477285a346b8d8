"""Anthropic client capability for the refinement pass."""

from __future__ import annotations

import logging
import os

import anthropic
import httpx

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class LLMError(RuntimeError):
    """Raised when the SDK client cannot be built or a call fails."""


def default_model() -> str:
    return os.environ.get("CLAUDE_MODEL") or DEFAULT_MODEL


class ClaudeClient:
    """Lazily built `anthropic.AsyncAnthropic`.

    `probe()` builds the SDK client once. A failed build is remembered, so
    later calls fail fast instead of retrying construction on every line.
    Tests pass a ready-made stub as `client`.
    """

    def __init__(self, client=None, api_key: str | None = None, timeout: float = 10.0) -> None:
        self._client = client
        self._api_key = api_key
        self._timeout = timeout
        self._failed: str | None = None

    def probe(self) -> bool:
        if self._client is not None:
            return True
        if self._failed is not None:
            return False
        try:
            self._client = anthropic.AsyncAnthropic(
                api_key=self._api_key or os.environ.get("ANTHROPIC_API_KEY"),
                timeout=httpx.Timeout(self._timeout),
                max_retries=0,
            )
        except anthropic.AnthropicError as e:
            self._failed = str(e)
            logger.error("Anthropic client unavailable: %s", e)
            return False
        return True

    @property
    def available(self) -> bool:
        return self.probe()

    def bind(self):
        """Return the SDK client or raise LLMError."""
        if not self.probe():
            raise LLMError(f"Anthropic SDK not available: {self._failed}")
        return self._client

    async def complete(
        self,
        system: str,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 300,
        temperature: float = 0.7,
    ) -> str:
        """One system+user exchange; returns the first text block, or "" if there is none."""
        client = self.bind()
        try:
            response = await client.messages.create(
                model=model or default_model(),
                max_tokens=max_tokens,
                temperature=temperature,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            raise LLMError(f"Claude API returned {e.status_code}") from e
        except anthropic.APIConnectionError as e:
            raise LLMError("Cannot connect to Claude API") from e
        for block in response.content:
            if getattr(block, "type", None) == "text":
                return block.text or ""
        return ""
