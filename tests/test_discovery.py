"""Tests for stream discovery: mood and topic detection, search scoring, NPC lookup."""

import pytest

from eternal_stream.discovery import (
    StreamQuery,
    all_npc_locations,
    detect_mood,
    find_interactions,
    find_lore_streams,
    find_meta_streams,
    find_npc,
    find_streams_by_topic,
    index_stream,
    recommendations,
    search_streams,
    topics_of,
)
from eternal_stream.generator import StreamGenerator
from eternal_stream.models import StreamConfig, StreamEntry
from eternal_stream.registry import UnknownDomainError

SEED = "2026-01-05"

BUSY = StreamConfig(base_response_chance=0.6, mention_response_chance=0.9)


def _entry(index: int, text: str, speaker: str = "mr-bones", mentions: str | None = None, kind: str = "idle") -> StreamEntry:
    return StreamEntry(
        id=f"earth:x:{index}",
        channel_id="earth:x",
        index=index,
        speaker_id=speaker,
        speaker_name=speaker,
        domain_slug="earth",
        entry_type="dialogue",
        kind=kind,
        text=text,
        mentions=mentions,
    )


@pytest.fixture
def gen() -> StreamGenerator:
    return StreamGenerator()


# ── detect_mood ──────────────────────────────────────────────


@pytest.mark.parametrize("text,mood", [
    ("Watch your back!", "tense"),
    ("That is a threat, not a warning.", "tense"),
    ("Hmm... I wonder where the door went.", "contemplative"),
    ("I remember the old days", "contemplative"),
    ("Hahaha, very funny.", "lighthearted"),
    ("Ha! Got you.", "tense"),  # "!" is checked first
    ("The ledger is balanced.", "ambient"),
    ("That chair has a fun shape", "lighthearted"),
    ("What is that thing", "ambient"),
])
def test_detect_mood(text, mood):
    assert detect_mood(text) == mood


def test_detect_mood_ignores_words_inside_words():
    assert detect_mood("The fundraiser is over") == "ambient"
    assert detect_mood("Shall we") == "ambient"


# ── topics_of ────────────────────────────────────────────────


def test_topics_of_matches_stems():
    assert topics_of("The fire burns cold tonight") == {"fire", "ice"}
    assert topics_of("A Die-rector walks by") == {"die-rectors"}
    assert topics_of("Gambling is a fool's trade") == {"gambling", "trade"}


def test_topics_of_needs_word_start():
    assert topics_of("Nice alphabet soup") == set()
    assert topics_of("") == set()


# ── index_stream ─────────────────────────────────────────────


def test_index_stream_collects_npcs_and_interactions(gen):
    channel = gen.channel("earth", "x")
    entries = [
        _entry(0, "Hmm... the void hums.", speaker="mr-bones"),
        _entry(1, "I remember the deal.", speaker="willy", mentions="mr-bones", kind="relationship"),
        _entry(2, "Fire!", speaker="stitch-up-girl"),
    ]
    index = index_stream(channel, entries)

    assert index.channel_id == "earth:x"
    assert index.npcs == ["mr-bones", "willy", "stitch-up-girl"]
    assert [(i.source_id, i.target_id) for i in index.interactions] == [("willy", "mr-bones")]
    assert index.kind_counts == {"idle": 2, "relationship": 1}
    assert index.topics == ["fire", "trade", "void"]
    assert index.mood == "contemplative"
    assert index.preview == entries[0]


def test_index_stream_mood_tie_goes_to_earlier(gen):
    channel = gen.channel("earth", "x")
    index = index_stream(channel, [_entry(0, "Run!"), _entry(1, "lol")])
    assert index.mood == "tense"


def test_index_stream_empty(gen):
    index = index_stream(gen.channel("earth", "x"), [])
    assert index.mood == "ambient"
    assert index.npcs == []
    assert index.preview is None


# ── search_streams ───────────────────────────────────────────


class TestSearch:
    def test_npc_query_finds_speaker(self, gen: StreamGenerator) -> None:
        channel = gen.channel("infernus", SEED)
        npc = gen.sample_stream(channel, 0, 1)[0].speaker_id

        results = search_streams(
            StreamQuery(npc_id=npc, domain_slug="infernus"), [SEED], generator=gen,
        )
        assert len(results) == 1
        assert results[0].channel == channel
        assert results[0].relevance >= 0.3
        assert f"Features {npc}" in results[0].reason
        assert results[0].entries
        assert all(npc in (e.speaker_id, e.mentions) for e in results[0].entries)

    def test_npc_query_skips_channels_without_npc(self, gen: StreamGenerator) -> None:
        results = search_streams(StreamQuery(npc_id="mr-bones"), [SEED, "day-one"], generator=gen)
        for result in results:
            assert "mr-bones" in gen.cast(result.channel)

    def test_domain_filter(self, gen: StreamGenerator) -> None:
        query = StreamQuery(domain_slug="frost-reach", entry_kinds=["idle"])
        results = search_streams(query, [SEED, "day-one", "x"], generator=gen)
        assert results
        assert {r.channel.domain_slug for r in results} == {"frost-reach"}

    def test_unknown_domain(self, gen: StreamGenerator) -> None:
        with pytest.raises(UnknownDomainError):
            search_streams(StreamQuery(domain_slug="atlantis"), [SEED], generator=gen)

    def test_sorted_and_limited(self, gen: StreamGenerator) -> None:
        query = StreamQuery(entry_kinds=["idle", "lore"], mood="tense", limit=4)
        results = search_streams(query, [SEED, "day-one"], generator=gen)
        assert len(results) <= 4
        scores = [r.relevance for r in results]
        assert scores == sorted(scores, reverse=True)
        assert all(0 < s <= 1.0 for s in scores)

    def test_kind_filter_applies_to_entries(self, gen: StreamGenerator) -> None:
        results = search_streams(StreamQuery(entry_kinds=["lore"]), [SEED], generator=gen)
        for result in results:
            assert all(e.kind == "lore" for e in result.entries)
            assert result.entries

    def test_deterministic(self) -> None:
        query = StreamQuery(topic="fire", limit=20)
        a = search_streams(query, [SEED, "x"], generator=StreamGenerator())
        b = search_streams(query, [SEED, "x"], generator=StreamGenerator())
        assert [r.model_dump() for r in a] == [r.model_dump() for r in b]

    def test_topic_helper(self, gen: StreamGenerator) -> None:
        for result in find_streams_by_topic("fire", [SEED, "x"], generator=gen):
            assert "Discusses fire" in result.reason

    def test_lore_helper(self, gen: StreamGenerator) -> None:
        results = find_lore_streams([SEED, "x"], limit=3, generator=gen)
        assert len(results) <= 3
        expected = search_streams(StreamQuery(entry_kinds=["lore"], limit=3), [SEED, "x"], generator=gen)
        assert [r.channel.id for r in results] == [r.channel.id for r in expected]
        for result in results:
            assert all(e.kind == "lore" for e in result.entries)

    def test_meta_helper(self, gen: StreamGenerator) -> None:
        for result in find_meta_streams([SEED, "x"], limit=20, generator=gen):
            assert result.entries
            assert all(e.kind == "meta" for e in result.entries)
            assert "Contains meta entries" in result.reason

    def test_interactions(self) -> None:
        gen = StreamGenerator(config=BUSY)
        channel = gen.channel("shadow-keep", SEED)
        reply = next(
            e for e in gen.sample_stream(channel, 0, 20)
            if e.mentions and e.mentions != e.speaker_id
        )
        results = find_interactions(reply.speaker_id, reply.mentions, [SEED], limit=10, generator=gen)
        match = next(r for r in results if r.channel == channel)
        assert match.relevance >= 0.7
        assert "talks with" in match.reason


# ── find_npc ─────────────────────────────────────────────────


class TestFindNpc:
    def test_unknown(self, gen: StreamGenerator) -> None:
        assert find_npc("nobody", SEED, generator=gen) is None

    def test_known(self, gen: StreamGenerator) -> None:
        location = find_npc("mr-bones", SEED, generator=gen)
        assert location is not None
        assert location.npc_id == "mr-bones"
        assert location.name == gen.registry.name_of("mr-bones")
        counts = [s.entry_count for s in location.channels]
        assert counts == sorted(counts, reverse=True)
        for sighting in location.channels:
            assert "mr-bones" in gen.cast(sighting.channel)
            assert "mr-bones" in (sighting.sample.speaker_id, sighting.sample.mentions)

    def test_first_speaker_is_found(self, gen: StreamGenerator) -> None:
        channel = gen.channel("earth", SEED)
        npc = gen.sample_stream(channel, 0, 1)[0].speaker_id
        location = find_npc(npc, SEED, generator=gen)
        assert channel in [s.channel for s in location.channels]


# ── recommendations ──────────────────────────────────────────


class TestRecommendations:
    def test_count_and_determinism(self, gen: StreamGenerator) -> None:
        a = recommendations(seed=SEED, count=3, generator=gen)
        b = recommendations(seed=SEED, count=3, generator=StreamGenerator())
        assert len(a) == 3
        assert [r.channel.id for r in a] == [r.channel.id for r in b]
        assert all(r.reason == "Explore something new" for r in a)
        assert len({r.channel.id for r in a}) == 3

    def test_exclude(self, gen: StreamGenerator) -> None:
        first = recommendations(seed=SEED, count=2, generator=gen)
        excluded = tuple(r.channel.id for r in first)
        rest = recommendations(seed=SEED, count=2, exclude=excluded, generator=gen)
        assert not {r.channel.id for r in rest} & set(excluded)

    def test_npc_channels_first(self, gen: StreamGenerator) -> None:
        featured = {
            r.channel.id for r in search_streams(StreamQuery(npc_id="mr-bones"), [SEED], generator=gen)
        }
        picks = recommendations(npc_id="mr-bones", seed=SEED, count=6, generator=gen)
        assert len(picks) == 6
        head = [r.channel.id for r in picks[:len(featured)]]
        assert set(head) == featured

    def test_never_more_than_domains(self, gen: StreamGenerator) -> None:
        picks = recommendations(seed=SEED, count=50, generator=gen)
        assert len(picks) == len(gen.registry.domains)


# ── all_npc_locations ────────────────────────────────────────


def test_all_npc_locations(gen):
    locations = all_npc_locations(SEED, generator=gen)
    assert locations
    ids = [loc.npc_id for loc in locations]
    assert len(ids) == len(set(ids))
    assert all(loc.channels for loc in locations)
    for loc in locations[:3]:
        assert find_npc(loc.npc_id, SEED, generator=gen) == loc


def test_all_npc_locations_covers_first_speakers(gen):
    speakers = {
        gen.sample_stream(gen.channel(slug, SEED), 0, 1)[0].speaker_id
        for slug in gen.registry.domains
    }
    found = {loc.npc_id for loc in all_npc_locations(SEED, generator=gen)}
    assert speakers <= found
