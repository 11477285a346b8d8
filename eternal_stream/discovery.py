"""Discovery: find channels worth tuning into.

Searching samples the first `sample_size` entries of each candidate channel
and scores them against the query. It is never exhaustive: a channel that
only gets interesting after its sample window will not be found.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Literal

from pydantic import BaseModel, Field

from eternal_stream.calendar import active_cast, channel_of, today_seed
from eternal_stream.generator import StreamGenerator, default_generator
from eternal_stream.models import Channel, EntryKind, StreamEntry
from eternal_stream.rng import SeededRng

logger = logging.getLogger(__name__)

Mood = Literal["tense", "contemplative", "lighthearted", "ambient"]

# checked in order; the first match wins
_MOOD_PATTERNS: list[tuple[Mood, re.Pattern]] = [
    ("tense", re.compile(r"!|\bthreat|\bfight|\bwarn")),
    ("contemplative", re.compile(r"\.\.\.|…|\bhmm+\b|\bwonder|\bremember")),
    ("lighthearted", re.compile(r"\b(?:ha)+\b|\blol\b|\bfun(?:ny)?\b")),
]

# topic -> word stems that suggest it
TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "die-rectors": ("die-rector", "director"),
    "death": ("death", "soul"),
    "trade": ("trade", "gold", "deal"),
    "escape": ("exit", "escape", "door"),
    "fire": ("fire", "burn"),
    "ice": ("ice", "cold", "frost"),
    "void": ("void", "null"),
    "chaos": ("wind", "chaos"),
    "prophecy": ("prophecy", "foretold"),
    "secrets": ("secret", "hidden"),
    "revolution": ("revolution", "fight"),
    "gambling": ("gambl", "bet", "dice"),
}

SCORE_NPC = 0.3
SCORE_TOPIC = 0.3
SCORE_KIND = 0.2
SCORE_MOOD = 0.1
SCORE_INTERACTION = 0.4


class StreamQuery(BaseModel):
    npc_id: str | None = None
    topic: str | None = None
    mood: Mood | None = None
    domain_slug: str | None = None
    entry_kinds: list[EntryKind] | None = None
    interacts_with: str | None = None  # second NPC of an npc_id interaction
    limit: int = Field(default=10, ge=1)


class Interaction(BaseModel):
    source_id: str
    target_id: str


class StreamIndex(BaseModel):
    channel_id: str
    seed: str
    domain_slug: str
    npcs: list[str]
    topics: list[str]
    kind_counts: dict[str, int]
    interactions: list[Interaction]
    mood: Mood
    preview: StreamEntry | None = None


class DiscoveryResult(BaseModel):
    channel: Channel
    entries: list[StreamEntry]
    relevance: float
    reason: str


class NpcSighting(BaseModel):
    channel: Channel
    entry_count: int
    sample: StreamEntry | None = None


class NpcLocation(BaseModel):
    npc_id: str
    name: str
    channels: list[NpcSighting]


# ---------------------------------------------------------------------------
# Indexing
# ---------------------------------------------------------------------------

def detect_mood(text: str) -> Mood:
    lowered = text.lower()
    for mood, pattern in _MOOD_PATTERNS:
        if pattern.search(lowered):
            return mood
    return "ambient"


def topics_of(text: str) -> set[str]:
    """Topics whose word stems start a word in `text`."""
    lowered = text.lower()
    return {
        topic for topic, stems in TOPIC_KEYWORDS.items()
        if any(re.search(rf"\b{re.escape(stem)}", lowered) for stem in stems)
    }


def index_stream(channel: Channel, entries: list[StreamEntry]) -> StreamIndex:
    """Summarise a sampled stream for scoring."""
    npcs: list[str] = []
    topics: set[str] = set()
    kinds: Counter[str] = Counter()
    moods: Counter[str] = Counter()
    interactions: list[Interaction] = []

    for entry in entries:
        for npc in (entry.speaker_id, entry.mentions):
            if npc and npc not in npcs:
                npcs.append(npc)
        if entry.mentions:
            interactions.append(Interaction(source_id=entry.speaker_id, target_id=entry.mentions))
        kinds[entry.kind] += 1
        moods[detect_mood(entry.text)] += 1
        topics |= topics_of(entry.text)

    # most common mood among the entries that have one; ties go to the earlier mood
    mood: Mood = "ambient"
    best = 0
    for candidate, _ in _MOOD_PATTERNS:
        if moods[candidate] > best:
            mood, best = candidate, moods[candidate]

    return StreamIndex(
        channel_id=channel.id,
        seed=channel.seed,
        domain_slug=channel.domain_slug,
        npcs=npcs,
        topics=sorted(topics),
        kind_counts=dict(kinds),
        interactions=interactions,
        mood=mood,
        preview=entries[0] if entries else None,
    )


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def _score(query: StreamQuery, index: StreamIndex, entries: list[StreamEntry]) -> tuple[float, str]:
    score = 0.0
    reasons = []

    if query.npc_id and query.npc_id in index.npcs:
        score += SCORE_NPC
        reasons.append(f"Features {query.npc_id}")

    if query.topic:
        topic = query.topic.lower()
        if topic in index.topics or any(topic in e.text.lower() for e in entries):
            score += SCORE_TOPIC
            reasons.append(f"Discusses {query.topic}")

    if query.entry_kinds:
        present = [k for k in query.entry_kinds if index.kind_counts.get(k)]
        if present:
            score += SCORE_KIND * len(present) / len(query.entry_kinds)
            reasons.append(f"Contains {', '.join(present)} entries")

    if query.npc_id and query.interacts_with:
        pair = {query.npc_id, query.interacts_with}
        if any({i.source_id, i.target_id} == pair for i in index.interactions):
            score += SCORE_INTERACTION
            reasons.append(f"{query.npc_id} talks with {query.interacts_with}")

    if query.mood and index.mood == query.mood:
        score += SCORE_MOOD
        reasons.append(f"{query.mood} mood")

    return min(score, 1.0), "; ".join(reasons) or "General match"


def _matches(entry: StreamEntry, query: StreamQuery) -> bool:
    if query.npc_id and query.npc_id not in (entry.speaker_id, entry.mentions):
        return False
    if query.topic and query.topic.lower() not in entry.text.lower() and query.topic not in topics_of(entry.text):
        return False
    if query.entry_kinds and entry.kind not in query.entry_kinds:
        return False
    return True


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def _candidates(
    query: StreamQuery, seeds: list[str], generator: StreamGenerator,
) -> list[Channel]:
    registry = generator.registry
    if query.domain_slug:
        registry.domain(query.domain_slug)  # raises UnknownDomainError
        domains = [query.domain_slug]
    else:
        domains = list(registry.domains)
    out = []
    for seed in seeds:
        for slug in domains:
            channel = channel_of(slug, seed, registry)
            if query.npc_id and query.npc_id not in active_cast(channel, registry):
                continue
            out.append(channel)
    return out


def search_streams(
    query: StreamQuery,
    seeds: list[str] | None = None,
    sample_size: int = 20,
    generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    """Score candidate channels against `query`, best first."""
    generator = generator or default_generator()
    seeds = seeds or [today_seed()]
    results = []
    for channel in _candidates(query, seeds, generator):
        entries = generator.sample_stream(channel, 0, sample_size)
        index = index_stream(channel, entries)
        relevance, reason = _score(query, index, entries)
        if relevance <= 0:
            continue
        results.append(DiscoveryResult(
            channel=channel,
            entries=[e for e in entries if _matches(e, query)],
            relevance=relevance,
            reason=reason,
        ))
    logger.debug("Search matched %d of the candidate channels", len(results))
    # stable sort keeps seed/domain order among equal scores
    results.sort(key=lambda r: r.relevance, reverse=True)
    return results[:query.limit]


def find_streams_by_topic(
    topic: str, seeds: list[str] | None = None, limit: int = 5,
    generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    return search_streams(StreamQuery(topic=topic, limit=limit), seeds, generator=generator)


def find_lore_streams(
    seeds: list[str] | None = None, limit: int = 5, generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    return search_streams(StreamQuery(entry_kinds=["lore"], limit=limit), seeds, generator=generator)


def find_meta_streams(
    seeds: list[str] | None = None, limit: int = 5, generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    return search_streams(StreamQuery(entry_kinds=["meta"], limit=limit), seeds, generator=generator)


def find_interactions(
    npc_a: str, npc_b: str, seeds: list[str] | None = None, limit: int = 5,
    generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    query = StreamQuery(npc_id=npc_a, interacts_with=npc_b, limit=limit)
    return search_streams(query, seeds, generator=generator)


def find_npc(
    npc_id: str, seed: str | None = None, sample_size: int = 10,
    generator: StreamGenerator | None = None,
) -> NpcLocation | None:
    """Where an NPC is on air for `seed`, most active channel first.

    None when the NPC is not in the registry.
    """
    generator = generator or default_generator()
    registry = generator.registry
    voice = registry.voice(npc_id)
    if voice is None:
        return None
    seed = seed or today_seed()
    sightings = []
    for slug in registry.domains:
        channel = channel_of(slug, seed, registry)
        if npc_id not in active_cast(channel, registry):
            continue
        entries = [
            e for e in generator.sample_stream(channel, 0, sample_size)
            if npc_id in (e.speaker_id, e.mentions)
        ]
        if entries:
            sightings.append(NpcSighting(channel=channel, entry_count=len(entries), sample=entries[0]))
    sightings.sort(key=lambda s: s.entry_count, reverse=True)
    return NpcLocation(npc_id=npc_id, name=voice.name, channels=sightings)


def all_npc_locations(
    seed: str | None = None, sample_size: int = 10, generator: StreamGenerator | None = None,
) -> list[NpcLocation]:
    """Every registered NPC that is heard somewhere on `seed`."""
    generator = generator or default_generator()
    out = []
    for npc_id in generator.registry.voices:
        location = find_npc(npc_id, seed, sample_size, generator=generator)
        if location is not None and location.channels:
            out.append(location)
    return out


def recommendations(
    npc_id: str | None = None,
    seed: str | None = None,
    count: int = 3,
    exclude: tuple[str, ...] = (),
    generator: StreamGenerator | None = None,
) -> list[DiscoveryResult]:
    """Channels to try for `seed`.

    Channels featuring `npc_id` come first; the rest is filled with a fixed,
    seed-dependent pick of other domains. Channel ids in `exclude` are skipped.
    """
    generator = generator or default_generator()
    seed = seed or today_seed()
    picked: list[DiscoveryResult] = []

    if npc_id:
        query = StreamQuery(npc_id=npc_id, limit=count * 2)
        for result in search_streams(query, [seed], generator=generator):
            if result.channel.id not in exclude and len(picked) < count:
                picked.append(result)

    taken = {r.channel.id for r in picked} | set(exclude)
    rest = [
        channel_of(slug, seed, generator.registry) for slug in generator.registry.domains
    ]
    rest = [c for c in rest if c.id not in taken]
    rng = SeededRng(f"recommend:{seed}")
    for channel in rng.derive("fill").shuffle(rest):
        if len(picked) >= count:
            break
        picked.append(DiscoveryResult(
            channel=channel,
            entries=generator.sample_stream(channel, 0, 3),
            relevance=0.3,
            reason="Explore something new",
        ))
    return picked
