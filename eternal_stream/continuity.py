"""Thread continuity: when an entry answers an earlier one, and how.

Reply decisions look only at a short window of earlier entries. Depth is
walked explicitly with a budget, never through call-stack recursion, so a
chain can be bounded without knowing how it began.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from eternal_stream.models import EntryKind, StreamConfig
from eternal_stream.registry import Registry
from eternal_stream.rng import SeededRng
from eternal_stream.templating import FillContext, FilledText, fill

logger = logging.getLogger(__name__)


class Utterance(Protocol):
    """Anything with an index, a speaker and an optional mention."""

    index: int
    speaker_id: str
    mentions: str | None


@dataclass(frozen=True)
class ParentView:
    """What a reply needs to know about the entry it answers."""

    index: int
    speaker_id: str
    kind: EntryKind
    mentions: str | None = None
    special: bool = False
    chain_depth: int = 0


def response_candidate(recent: Sequence[Utterance], speaker_id: str) -> Utterance | None:
    """The most recent entry in `recent` by someone other than the speaker."""
    for u in reversed(recent):
        if u.speaker_id != speaker_id:
            return u
    return None


def response_chance(
    registry: Registry, config: StreamConfig, parent: Utterance, speaker_id: str,
) -> float:
    base = config.mention_response_chance if parent.mentions == speaker_id else config.base_response_chance
    strength = registry.relationship_strength(speaker_id, parent.speaker_id)
    return min(config.max_response_chance, base * (1 + strength))


def should_respond(
    registry: Registry,
    config: StreamConfig,
    rng: SeededRng,
    recent: Sequence[Utterance],
    speaker_id: str,
) -> bool:
    """Roll for a reply to the latest eligible entry in the window.

    Only the last `config.response_window` entries of `recent` count.
    """
    window = recent[-config.response_window:] if config.response_window > 0 else ()
    parent = response_candidate(window, speaker_id)
    if parent is None:
        return False
    return rng.derive("respond").chance(response_chance(registry, config, parent, speaker_id))


def resolve_depth(index: int, budget: int, parent_of: Callable[[int], int | None]) -> int:
    """Length of the reply chain ending at `index`, walked back at most `budget` links."""
    depth = 0
    current = index
    while depth < budget:
        parent = parent_of(current)
        if parent is None:
            break
        depth += 1
        current = parent
    return depth


# ── Reply text ────────────────────────────────────────────

def _mention_bucket(registry: Registry, responder_id: str, other_id: str) -> str:
    voice = registry.voice(responder_id)
    if voice is not None:
        if other_id in voice.teases:
            return "teases"
        if other_id in voice.respects:
            return "respects"
        if other_id in voice.avoids:
            return "avoids"
    return "default"


def generate_response(
    registry: Registry,
    rng: SeededRng,
    parent: ParentView,
    speaker_id: str,
    domain_slug: str,
    cast: tuple[str, ...] = (),
    fields: dict[str, str] | None = None,
) -> FilledText:
    """Reply text addressed at the parent's speaker.

    An NPC named in the parent reacts to the mention; anyone else picks a
    reply template matching the parent's kind and their relationship.
    """
    context = FillContext(
        speaker_id=speaker_id,
        domain_slug=domain_slug,
        cast=cast,
        target_id=parent.speaker_id,
        fields=fields or {},
    )
    if parent.mentions == speaker_id and registry.mention_reactions:
        bucket = _mention_bucket(registry, speaker_id, parent.speaker_id)
        pool = registry.mention_reactions.get(bucket) or registry.mention_reactions.get("default", ())
        if pool:
            return fill(registry, rng.derive("mention").pick(pool), context, rng.derive("fill"))

    trigger = "special" if parent.special else parent.kind
    edge = registry.edge(speaker_id, parent.speaker_id)
    pool = [
        t for t in registry.reply_templates
        if t.triggered_by in ("any", trigger)
        and (t.relationships is None or (edge is not None and edge.type in t.relationships))
    ]
    if not pool:
        return fill(registry, "*acknowledges {{NPC_NAME}}*", context, rng.derive("fill"))
    template = rng.derive("reply").weighted_pick(pool, [t.weight for t in pool])
    filled = fill(registry, template.text, context, rng.derive("fill"))
    filled.template_id = template.id
    return filled
