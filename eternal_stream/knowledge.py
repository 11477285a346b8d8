"""Secrets and rumors: who knows what, and how it spreads.

Knowledge never mutates the registry. Discovery picks one of an NPC's seed
pieces; propagation returns a new piece attributed to the receiver. Which
pieces a channel has already surfaced is tracked in
`SpecialEventHistory.revealed`.
"""

from __future__ import annotations

import logging

from eternal_stream.models import KnowledgePiece, SpecialEventHistory, StreamConfig
from eternal_stream.registry import Registry
from eternal_stream.registry.social import KNOWLEDGE_CARRYING
from eternal_stream.rng import SeededRng

logger = logging.getLogger(__name__)

_HEDGE_PREFIXES = ("I heard", "Word is", "Someone told me", "Apparently", "Rumor has it")
_HEDGE_SUFFIXES = ("Or so they say.", "Don't quote me.", "Take it or leave it.", "If you believe that.")

_INJECT_FORMS = (
    "{text} ...{short}.",
    "{text} Also, {short}.",
    "{text} *quietly* {short}.",
)


def can_propagate(registry: Registry, source_id: str, target_id: str) -> bool:
    """True when knowledge may flow from source to target.

    Needs an ally, mentor or rumor-source edge between the two (either
    direction). Any rival edge between them blocks the flow outright.
    """
    if source_id == target_id:
        return False
    edges = registry.edges_between(source_id, target_id)
    if any(e.type == "rival" for e in edges):
        return False
    return any(e.type in KNOWLEDGE_CARRYING for e in edges)


def discover(
    registry: Registry,
    config: StreamConfig,
    owner_id: str,
    rng: SeededRng,
    revealed: tuple[str, ...] | frozenset[str] = (),
) -> KnowledgePiece | None:
    """Maybe surface one of the owner's pieces not yet revealed on this channel."""
    if not rng.derive("roll").chance(config.discover_chance):
        return None
    pool = [p for p in registry.knowledge_of(owner_id) if p.id not in revealed]
    if not pool:
        return None
    return rng.derive("piece").pick(pool)


def propagate(
    registry: Registry,
    config: StreamConfig,
    source_id: str,
    target_id: str,
    rng: SeededRng,
    index: int,
) -> KnowledgePiece | None:
    """Maybe copy one of the source's pieces to the target.

    The copy is owned by the target, tagged with the index at which it
    moved, downgraded from secret to rumor, and may come out evolved.
    """
    if not can_propagate(registry, source_id, target_id):
        return None
    if not rng.derive("roll").chance(config.propagate_chance):
        return None
    pool = [p for p in registry.knowledge_of(source_id) if p.secrecy != "public"]
    if not pool:
        return None
    piece = rng.derive("piece").pick(pool)
    copy = piece.model_copy(update={
        "id": f"{piece.id}>{target_id}@{index}",
        "owner_id": target_id,
        "origin_index": index,
        "source_id": source_id,
        "secrecy": "rumor" if piece.secrecy == "secret" else piece.secrecy,
    })
    logger.debug("Knowledge %s propagated %s -> %s at %d", piece.id, source_id, target_id, index)
    if rng.derive("evolve?").chance(0.5):
        return evolve(copy, rng.derive("evolve"))
    return copy


def evolve(piece: KnowledgePiece, rng: SeededRng) -> KnowledgePiece:
    """Retell a piece with a hedge, the way gossip drifts between mouths."""
    prefix = rng.derive("prefix").pick(_HEDGE_PREFIXES)
    suffix = rng.derive("suffix").pick(_HEDGE_SUFFIXES)
    content = piece.content
    if content and not content.startswith(("I ", "I'")):
        content = content[0].lower() + content[1:]
    return piece.model_copy(update={
        "content": f"{prefix} {content} {suffix}",
        "evolved": True,
    })


def inject(text: str, piece: KnowledgePiece, rng: SeededRng | None = None) -> str:
    """Layer a piece's short form onto an ordinary line."""
    form = _INJECT_FORMS[0] if rng is None else rng.pick(_INJECT_FORMS)
    return form.format(text=text.rstrip(), short=piece.short_form)


def mark_revealed(history: SpecialEventHistory, piece: KnowledgePiece) -> SpecialEventHistory:
    if piece.id in history.revealed:
        return history
    return history.model_copy(update={"revealed": history.revealed + (piece.id,)})
