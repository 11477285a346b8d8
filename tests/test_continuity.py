"""Tests for reply decisions, chain depth and reply text."""

from dataclasses import dataclass

import pytest

from eternal_stream.continuity import (
    ParentView,
    generate_response,
    resolve_depth,
    response_candidate,
    response_chance,
    should_respond,
)
from eternal_stream.models import DomainContext, RelationshipEdge, ReplyTemplate, StreamConfig, VoiceProfile
from eternal_stream.registry import Registry
from eternal_stream.rng import SeededRng


@dataclass
class Line:
    index: int
    speaker_id: str
    mentions: str | None = None


@pytest.fixture
def reg() -> Registry:
    voices = [
        VoiceProfile(id="a", name="Alpha", teases=("b",)),
        VoiceProfile(id="b", name="Beta"),
        VoiceProfile(id="c", name="Gamma"),
    ]
    domain = DomainContext(slug="d", name="Dee", element="Dust", resident_ids=("a", "b", "c"), lore_pool_ref="d")
    edges = [
        RelationshipEdge(source_id="a", target_id="c", type="rival", strength=1.0),
        RelationshipEdge(source_id="a", target_id="b", type="ally", strength=0.5),
    ]
    replies = [
        ReplyTemplate(id="r-any", text="Any {{NPC_NAME}}"),
        ReplyTemplate(id="r-lore", text="Lore {{NPC_NAME}}", triggered_by="lore"),
        ReplyTemplate(id="r-special", text="Special {{NPC_NAME}}", triggered_by="special"),
        ReplyTemplate(id="r-rival", text="Rival {{NPC_NAME}}", relationships=("rival",)),
    ]
    reactions = {"teases": ["Tease {{NPC_NAME}}"], "default": ["Default {{NPC_NAME}}"]}
    return Registry.build(
        voices=voices, domains=[domain], edges=edges,
        reply_templates=replies, mention_reactions=reactions,
    )


# ── Decisions ────────────────────────────────────────────


class TestResponseCandidate:
    def test_latest_other_speaker(self) -> None:
        lines = [Line(0, "b"), Line(1, "c"), Line(2, "a")]
        assert response_candidate(lines, "a").index == 1

    def test_none_when_only_self(self) -> None:
        assert response_candidate([Line(0, "a"), Line(1, "a")], "a") is None
        assert response_candidate([], "a") is None


class TestResponseChance:
    def test_base(self, reg: Registry) -> None:
        assert response_chance(reg, StreamConfig(), Line(0, "b"), "c") == pytest.approx(0.25)

    def test_strength_scales(self, reg: Registry) -> None:
        assert response_chance(reg, StreamConfig(), Line(0, "b"), "a") == pytest.approx(0.375)

    def test_mention_capped(self, reg: Registry) -> None:
        chance = response_chance(reg, StreamConfig(), Line(0, "c", mentions="a"), "a")
        assert chance == pytest.approx(0.95)


class TestShouldRespond:
    def test_nothing_to_answer(self, reg: Registry) -> None:
        assert not should_respond(reg, StreamConfig(), SeededRng("x"), [Line(0, "a")], "a")

    def test_window_limits_lookback(self, reg: Registry) -> None:
        config = StreamConfig(response_window=1, base_response_chance=0.95, max_response_chance=1.0)
        lines = [Line(0, "b"), Line(1, "a")]
        for i in range(20):
            assert not should_respond(reg, config, SeededRng(f"w{i}"), lines, "a")

    def test_certain(self, reg: Registry) -> None:
        config = StreamConfig(base_response_chance=1.0, max_response_chance=1.0)
        assert should_respond(reg, config, SeededRng("x"), [Line(0, "b")], "c")


class TestResolveDepth:
    def test_chain(self) -> None:
        parents = {4: 3, 3: 2, 2: 1, 1: None}
        assert resolve_depth(4, 10, parents.get) == 3
        assert resolve_depth(1, 10, parents.get) == 0

    def test_budget_bounds_walk(self) -> None:
        calls = []

        def parent_of(i: int) -> int:
            calls.append(i)
            return i - 1

        assert resolve_depth(1000, 3, parent_of) == 3
        assert len(calls) == 3


# ── Reply text ───────────────────────────────────────────


class TestGenerateResponse:
    def test_mention_reaction_bucket(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="b", kind="idle", mentions="a")
        out = generate_response(reg, SeededRng("x"), parent, "a", "d", ("a", "b", "c"))
        assert out.text == "Tease Beta"
        assert out.mentions == "b"

    def test_mention_reaction_default(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="c", kind="idle", mentions="b")
        out = generate_response(reg, SeededRng("x"), parent, "b", "d", ("a", "b", "c"))
        assert out.text == "Default Gamma"

    def test_special_trigger(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="c", kind="lore", special=True)
        seen = {
            generate_response(reg, SeededRng(f"s{i}"), parent, "b", "d").text.split()[0]
            for i in range(40)
        }
        assert seen <= {"Any", "Special"}
        assert "Special" in seen

    def test_kind_trigger(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="c", kind="lore")
        seen = {
            generate_response(reg, SeededRng(f"k{i}"), parent, "b", "d").text.split()[0]
            for i in range(40)
        }
        assert seen <= {"Any", "Lore"}

    def test_relationship_filter(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="c", kind="idle")
        with_rival = {
            generate_response(reg, SeededRng(f"r{i}"), parent, "a", "d").text.split()[0]
            for i in range(40)
        }
        without = {
            generate_response(reg, SeededRng(f"r{i}"), parent, "b", "d").text.split()[0]
            for i in range(40)
        }
        assert "Rival" in with_rival
        assert "Rival" not in without

    def test_addresses_parent_speaker(self, reg: Registry) -> None:
        parent = ParentView(index=0, speaker_id="c", kind="meta")
        out = generate_response(reg, SeededRng("x"), parent, "b", "d")
        assert out.text == "Any Gamma"
        assert out.template_id == "r-any"

    def test_fallback_without_templates(self) -> None:
        voices = [VoiceProfile(id="a", name="Alpha"), VoiceProfile(id="b", name="Beta")]
        domain = DomainContext(slug="d", name="D", element="E", resident_ids=("a", "b"), lore_pool_ref="d")
        reg = Registry.build(voices=voices, domains=[domain])
        parent = ParentView(index=0, speaker_id="b", kind="idle")
        assert generate_response(reg, SeededRng("x"), parent, "a", "d").text == "*acknowledges Beta*"
