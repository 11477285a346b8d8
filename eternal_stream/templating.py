"""Template selection and placeholder filling.

Resolved placeholders each draw from `rng.derive(f"ph:{position}:{kind}")`,
where `position` is the ordinal of the placeholder's first appearance in
the template. A placeholder repeated in one template resolves once. Draws
are therefore local to a template: adding a new placeholder kind never
shifts what existing templates produce.

Context fields are plain substitutions taken from `FillContext.fields`.
Anything else between double braces is left verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from eternal_stream.models import EntryKind, StreamConfig, StreamTemplate
from eternal_stream.registry import Registry
from eternal_stream.rng import SeededRng

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")

RESOLVED_KINDS = (
    "NPC_NAME",
    "LORE_FACT",
    "REACTION",
    "OPINION",
    "INTENSITY",
    "TIME_UNIT",
    "SHARED_EVENT",
)

CONTEXT_FIELDS = (
    "DOMAIN",
    "ELEMENT",
    "SEED",
    "SEED_DAY",
    "SPEAKER",
    "CATCHPHRASE",
    "ATMOSPHERE",
    "TOPIC",
    "FLAW",
    "BEHAVIOR",
    "KNOWLEDGE",
    "DIRECTOR_FACT",
    "ORIGIN_FACT",
)


@dataclass
class FillContext:
    """What a template is filled against."""

    speaker_id: str
    domain_slug: str
    cast: tuple[str, ...] = ()
    target_id: str | None = None  # forces NPC_NAME to this NPC
    fields: dict[str, str] = field(default_factory=dict)


@dataclass
class FilledText:
    text: str
    template_id: str | None = None
    mentions: str | None = None


class TemplateError(LookupError):
    """Raised when a template id is not in the registry."""


# ── Selection ─────────────────────────────────────────────

def choose(
    registry: Registry,
    config: StreamConfig,
    kind: EntryKind,
    speaker_id: str,
    domain_slug: str,
    rng: SeededRng,
) -> StreamTemplate | None:
    """Pick a template for the speaker.

    The NPC's override pool wins when it has templates of this kind and the
    override roll succeeds. Otherwise the domain's generic pool is used.
    """
    overrides = registry.overrides_for(speaker_id, kind)
    if overrides and rng.derive("override").chance(config.override_chance):
        pool = overrides
    else:
        pool = registry.templates_for(kind, domain_slug)
    if not pool:
        return None
    return rng.derive("template").weighted_pick(pool, [t.weight for t in pool])


def find_template(registry: Registry, template_id: str) -> StreamTemplate:
    for t in registry.templates:
        if t.id == template_id:
            return t
    for pool in registry.overrides.values():
        for t in pool:
            if t.id == template_id:
                return t
    raise TemplateError(f"Unknown template: {template_id}")


# ── Filling ───────────────────────────────────────────────

def fill(
    registry: Registry,
    template: StreamTemplate | str,
    context: FillContext,
    rng: SeededRng,
) -> FilledText:
    """Fill a template (object, id, or raw text) against a context."""
    template_id = None
    if isinstance(template, StreamTemplate):
        template_id, text = template.id, template.text
    elif PLACEHOLDER_RE.search(template) is None and _looks_like_id(registry, template):
        t = find_template(registry, template)
        template_id, text = t.id, t.text
    else:
        text = template

    values: dict[str, str] = {}
    mentions = None
    order = _placeholder_order(text)

    # NPC_NAME resolves first: reactions and opinions depend on who it is
    if "NPC_NAME" in order:
        mentions = resolve_mention(registry, text, context, rng)
        values["NPC_NAME"] = registry.name_of(mentions) if mentions else "someone"

    for name, position in order.items():
        if name in values:
            continue
        if name in RESOLVED_KINDS:
            sub = rng.derive(f"ph:{position}:{name}")
            values[name] = _resolve(registry, name, context, mentions, sub)
        elif name in context.fields:
            values[name] = context.fields[name]
        else:
            logger.debug("Unknown placeholder %s in %r", name, text)

    def replace(m: re.Match) -> str:
        return values.get(m.group(1), m.group(0))

    return FilledText(text=PLACEHOLDER_RE.sub(replace, text), template_id=template_id, mentions=mentions)


def _looks_like_id(registry: Registry, text: str) -> bool:
    try:
        find_template(registry, text)
    except TemplateError:
        return False
    return True


def _placeholder_order(text: str) -> dict[str, int]:
    order: dict[str, int] = {}
    for m in PLACEHOLDER_RE.finditer(text):
        order.setdefault(m.group(1), len(order))
    return order


def resolve_mention(
    registry: Registry, text: str, context: FillContext, rng: SeededRng,
) -> str | None:
    """The NPC that {{NPC_NAME}} in `text` would name, without filling anything else.

    Given the same rng as `fill`, this always agrees with `FilledText.mentions`.
    """
    order = _placeholder_order(text)
    if "NPC_NAME" not in order:
        return None
    return _resolve_npc(registry, context, rng.derive(f"ph:{order['NPC_NAME']}:NPC_NAME"))


def _resolve_npc(registry: Registry, context: FillContext, rng: SeededRng) -> str | None:
    if context.target_id:
        return context.target_id
    others = [npc for npc in context.cast if npc != context.speaker_id]
    if not others:
        return None
    weights = [2 if registry.edge(context.speaker_id, npc) else 1 for npc in others]
    return rng.weighted_pick(others, weights)


def attitude(registry: Registry, speaker_id: str, other_id: str | None) -> str:
    """How the speaker regards another NPC: positive, negative, teasing or neutral."""
    if other_id is None:
        return "neutral"
    voice = registry.voice(speaker_id)
    if voice is not None:
        if other_id in voice.teases:
            return "teasing"
        if other_id in voice.respects:
            return "positive"
        if other_id in voice.avoids:
            return "negative"
    edge = registry.edge(speaker_id, other_id)
    if edge is None:
        return "neutral"
    if edge.type in ("rival", "enemy"):
        return "negative"
    if edge.type in ("ally", "old-friend", "mentor", "fear-respect"):
        return "positive"
    return "neutral"


def _resolve(
    registry: Registry,
    kind: str,
    context: FillContext,
    mentions: str | None,
    rng: SeededRng,
) -> str:
    words = registry.words
    if kind == "REACTION":
        bucket = attitude(registry, context.speaker_id, mentions)
        return rng.pick(words.reactions.get(bucket) or words.reactions["neutral"])
    if kind == "OPINION":
        bucket = attitude(registry, context.speaker_id, mentions)
        return rng.pick(words.opinions.get(bucket) or words.opinions["neutral"])
    if kind == "INTENSITY":
        return rng.pick(words.intensities)
    if kind == "TIME_UNIT":
        return rng.pick(words.time_units)
    if kind == "SHARED_EVENT":
        return rng.pick(words.shared_events)
    if kind == "LORE_FACT":
        return _lore_fact(registry, context.domain_slug, rng)
    raise ValueError(f"not a resolved placeholder: {kind}")


def _lore_fact(registry: Registry, domain_slug: str, rng: SeededRng) -> str:
    """Public domain lore when there is any, else a generic fact."""
    open_lore = [
        item.short_form for item in registry.lore_for(domain_slug)
        if item.secrecy in ("public", "common")
    ]
    if open_lore and rng.derive("source").chance(0.5):
        return rng.derive("lore").pick(open_lore)
    return rng.derive("fact").pick(registry.words.lore_facts)
