"""Optional LLM polish for a single generated line.

Refinement never raises. Every failure is logged and reported in
`RefineResult.error`, with the original text handed back unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from pydantic import BaseModel

from eternal_stream.llm import ClaudeClient, LLMError
from eternal_stream.prompts import PromptError, build_refine_prompt
from eternal_stream.registry import Registry, default_registry

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 5.0
MIN_REFINED_LENGTH = 3


class RefineRequest(BaseModel):
    npc_slug: str
    chatbase_text: str
    pool: str
    context: str | None = None
    conversation: dict[str, Any] | None = None  # target_npc_slug, target_npc_name, relationship_type, ...


class RefineResult(BaseModel):
    text: str
    refined: bool
    error: str | None = None


_default_client = ClaudeClient()


def is_refinement_enabled() -> bool:
    return os.environ.get("ENABLE_CLAUDE_REFINEMENT") == "true"


async def refine_with_claude(
    request: RefineRequest,
    client: ClaudeClient | None = None,
    model: str | None = None,
    registry: Registry | None = None,
    timeout: float = TIMEOUT_SECONDS,
) -> RefineResult:
    """Rewrite `request.chatbase_text` in the NPC's voice."""
    registry = registry or default_registry()
    original = request.chatbase_text

    persona = registry.persona(request.npc_slug)
    if persona is None:
        return RefineResult(
            text=original, refined=False, error=f"No persona found for NPC: {request.npc_slug}",
        )

    client = client or _default_client
    try:
        prompt = build_refine_prompt(
            persona.name, original, request.pool, request.context, request.conversation,
        )
        raw = await asyncio.wait_for(
            client.complete(persona.system_prompt, prompt, model=model, max_tokens=300, temperature=0.7),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.error("Refinement for %s timed out after %.1fs", request.npc_slug, timeout)
        return RefineResult(text=original, refined=False, error="Claude API timeout")
    except (LLMError, PromptError) as e:
        logger.error("Refinement for %s failed: %s", request.npc_slug, e)
        return RefineResult(text=original, refined=False, error=str(e))
    except Exception as e:
        logger.error("Refinement for %s failed: %s", request.npc_slug, e)
        return RefineResult(text=original, refined=False, error=str(e) or "Unknown error")

    text = (raw or "").strip()
    if len(text) < MIN_REFINED_LENGTH:
        logger.error("Refinement for %s produced an empty response", request.npc_slug)
        return RefineResult(text=original, refined=False, error="Refinement produced empty response")
    return RefineResult(text=text, refined=True)
