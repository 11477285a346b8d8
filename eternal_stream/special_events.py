"""Rare, cooldown-gated special events.

History transitions are copy-on-write: `record()` returns a new
`SpecialEventHistory` and never touches the one passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eternal_stream.models import (
    DomainContext,
    SpecialEventHistory,
    SpecialEventSpec,
    SpecialEventType,
    StreamConfig,
)
from eternal_stream.registry import Registry
from eternal_stream.registry.events import TARGETED_EVENTS
from eternal_stream.rng import SeededRng, entry_rng
from eternal_stream.templating import FillContext, fill

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = StreamConfig()


@dataclass(frozen=True)
class EventChoice:
    spec: SpecialEventSpec
    target_id: str | None = None


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

def new_history(channel_id: str, cooldown: int = 5) -> SpecialEventHistory:
    return SpecialEventHistory(channel_id=channel_id, cooldown=cooldown)


def record(
    history: SpecialEventHistory,
    index: int,
    event_type: SpecialEventType,
    limit: int = 10,
) -> SpecialEventHistory:
    """Return a history with one more fired event, keeping the last `limit`."""
    return history.model_copy(update={
        "fired_indices": (history.fired_indices + (index,))[-limit:],
        "fired_types": (history.fired_types + (event_type,))[-limit:],
        "last_fired_index": index,
    })


def recent_special_count(history: SpecialEventHistory, window: int = 5) -> int:
    """How many fired events sit within `window` indices of the latest one."""
    if history.last_fired_index is None:
        return 0
    last = history.last_fired_index
    return sum(1 for i in history.fired_indices if last - i < window)


# ---------------------------------------------------------------------------
# Triggering
# ---------------------------------------------------------------------------

def trigger_chance(
    history: SpecialEventHistory,
    domain: DomainContext,
    config: StreamConfig = _DEFAULT_CONFIG,
) -> float:
    recent = recent_special_count(history, config.special_window)
    chance = config.base_special_chance + domain.volatility - config.special_decay * recent
    return max(config.min_special_chance, chance)


def in_cooldown(history: SpecialEventHistory, index: int) -> bool:
    last = history.last_fired_index
    return last is not None and index - last < history.cooldown


def should_trigger(
    history: SpecialEventHistory,
    index: int,
    domain: DomainContext,
    rng: SeededRng | None = None,
    config: StreamConfig = _DEFAULT_CONFIG,
) -> bool:
    """Whether `index` is a special-event slot.

    Always False inside the cooldown. Without an explicit rng the roll uses
    the same per-index stream the generator does, so both agree.
    """
    if in_cooldown(history, index):
        return False
    if rng is None:
        rng = entry_rng(history.channel_id, index).derive("special")
    return rng.derive("roll").chance(trigger_chance(history, domain, config))


# ---------------------------------------------------------------------------
# Selection and rendering
# ---------------------------------------------------------------------------

def _partners(
    registry: Registry, spec: SpecialEventSpec, speaker_id: str, cast: tuple[str, ...],
) -> list[str]:
    others = [npc for npc in cast if npc != speaker_id]
    if spec.requires_edge is None:
        return others
    return [
        npc for npc in others
        if any(e.type == spec.requires_edge for e in registry.edges_between(speaker_id, npc))
    ]


def eligible_events(
    registry: Registry, domain_slug: str, speaker_id: str, cast: tuple[str, ...],
) -> list[EventChoice]:
    """Events the speaker could fire here, given who else is on air."""
    out = []
    for spec in registry.special_events:
        if spec.eligible_npcs is not None and speaker_id not in spec.eligible_npcs:
            continue
        if spec.eligible_domains is not None and domain_slug not in spec.eligible_domains:
            continue
        if spec.requires_edge or spec.type in TARGETED_EVENTS:
            if not _partners(registry, spec, speaker_id, cast):
                continue
        out.append(EventChoice(spec))
    return out


def select_event(
    registry: Registry,
    rng: SeededRng,
    domain_slug: str,
    speaker_id: str,
    cast: tuple[str, ...],
) -> EventChoice | None:
    """Weighted pick among eligible events; None when nothing qualifies."""
    eligible = eligible_events(registry, domain_slug, speaker_id, cast)
    if not eligible:
        logger.debug("No eligible special event for %s in %s", speaker_id, domain_slug)
        return None
    choice = rng.derive("type").weighted_pick(eligible, [c.spec.weight for c in eligible])
    spec = choice.spec
    if spec.requires_edge or spec.type in TARGETED_EVENTS:
        partners = _partners(registry, spec, speaker_id, cast)
        weights = [1 + registry.relationship_strength(speaker_id, npc) for npc in partners]
        return EventChoice(spec, rng.derive("target").weighted_pick(partners, weights))
    return choice


def render_event(
    registry: Registry,
    rng: SeededRng,
    choice: EventChoice,
    speaker_id: str,
    domain_slug: str,
    cast: tuple[str, ...] = (),
) -> tuple[str, str | None]:
    """Fill one of the event's templates. Returns (text, target id)."""
    template = rng.derive("template").pick(choice.spec.templates)
    fields = {"SPEAKER": registry.name_of(speaker_id)}
    for name, pool in registry.event_pools.items():
        if pool:
            fields[name] = rng.derive(f"pool:{name}").pick(pool)
    context = FillContext(
        speaker_id=speaker_id,
        domain_slug=domain_slug,
        cast=cast,
        target_id=choice.target_id,
        fields=fields,
    )
    filled = fill(registry, template, context, rng.derive("fill"))
    return filled.text, choice.target_id
