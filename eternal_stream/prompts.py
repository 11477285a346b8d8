"""Handlebars prompt rendering for the refinement pass."""

from collections.abc import Callable
from typing import Any

import pybars


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


REFINE_PROMPT = """Refine this dialogue line for {{{npc_name}}}. Make it sound more natural and strongly in-character while keeping the same general meaning and length.

Original line: "{{{text}}}"
Dialogue type: {{{pool}}}{{#if context}}
Player context: "{{{context}}}"{{/if}}{{#if conversation}}

Conversation context:{{#each conversation}}
- {{{this}}}{{/each}}{{/if}}

Rules:
- Keep similar length (1-3 sentences max)
- Stay completely in character
- Include *action* if appropriate
- Ensure that truncation of messages doesn't hinder meaning or intent
- Do NOT add explanations or meta-commentary
- Do NOT use modern internet slang unless it fits the character{{#if npc_dialogue}}
- Address the other NPC naturally (use their name or a nickname)
- Reflect the relationship dynamic in your tone
- React to what they said if responding to a previous message{{/if}}

Respond with ONLY the refined dialogue line, nothing else."""


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e


def conversation_lines(conversation: dict[str, Any] | None) -> list[str]:
    """Bullet lines describing an NPC-to-NPC exchange."""
    if not conversation:
        return []
    lines = []
    if conversation.get("target_npc_name"):
        lines.append(f"Speaking to: {conversation['target_npc_name']}")
    if conversation.get("relationship_type"):
        strength = conversation.get("relationship_strength")
        suffix = f" (strength {strength}/10)" if strength else ""
        lines.append(f"Relationship: {conversation['relationship_type'].replace('_', ' ')}{suffix}")
    tone = conversation.get("tone")
    if tone:
        lines.append(
            f"Tone: {tone.get('tone', 'neutral')} (warmth: {tone.get('warmth', 0)}%, "
            f"tension: {tone.get('tension', 0)}%, {tone.get('formality', 'casual')})"
        )
    if conversation.get("previous_text"):
        lines.append(f"Responding to: \"{conversation['previous_text']}\"")
    return lines


def build_refine_prompt(
    npc_name: str,
    text: str,
    pool: str,
    context: str | None = None,
    conversation: dict[str, Any] | None = None,
) -> str:
    """Render the refinement request sent as the user message."""
    npc_dialogue = pool.startswith("npc") or bool(conversation and conversation.get("target_npc_slug"))
    return render_prompt(REFINE_PROMPT, {
        "npc_name": npc_name,
        "text": text,
        "pool": pool,
        "context": context,
        "conversation": conversation_lines(conversation),
        "npc_dialogue": npc_dialogue,
    })
