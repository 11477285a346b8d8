"""Tests for template selection and placeholder filling."""

import pytest

from eternal_stream.models import DomainContext, RelationshipEdge, StreamConfig, StreamTemplate, VoiceProfile
from eternal_stream.registry import Registry, default_registry
from eternal_stream.rng import SeededRng
from eternal_stream.templating import (
    FillContext,
    TemplateError,
    attitude,
    choose,
    fill,
    find_template,
    resolve_mention,
)


@pytest.fixture
def reg() -> Registry:
    voices = [
        VoiceProfile(id="a", name="Alpha", teases=("c",), template_override_key="alpha"),
        VoiceProfile(id="b", name="Beta"),
        VoiceProfile(id="c", name="Gamma"),
    ]
    domain = DomainContext(slug="d", name="Dee", element="Dust", resident_ids=("a", "b", "c"), lore_pool_ref="d")
    templates = [
        StreamTemplate(id="g-idle", kind="idle", text="Generic {{TOPIC}}."),
        StreamTemplate(id="g-only-e", kind="idle", text="Only in e.", requires_domain=("e",)),
        StreamTemplate(id="g-rel", kind="relationship", text="{{NPC_NAME}} is {{OPINION}}. {{NPC_NAME}}!"),
    ]
    overrides = {"alpha": [StreamTemplate(id="a-idle", kind="idle", text="Alpha speaks.")]}
    edges = [RelationshipEdge(source_id="a", target_id="b", type="rival", strength=0.5)]
    return Registry.build(
        voices=voices, domains=[domain], edges=edges, templates=templates, overrides=overrides,
    )


class TestChoose:
    def test_override_always_with_full_chance(self, reg: Registry) -> None:
        config = StreamConfig(override_chance=1.0)
        for i in range(20):
            t = choose(reg, config, "idle", "a", "d", SeededRng(f"c{i}"))
            assert t.id == "a-idle"

    def test_generic_without_override_chance(self, reg: Registry) -> None:
        config = StreamConfig(override_chance=0.0)
        t = choose(reg, config, "idle", "a", "d", SeededRng("c"))
        assert t.id == "g-idle"

    def test_domain_gate(self, reg: Registry) -> None:
        for i in range(30):
            t = choose(reg, StreamConfig(), "idle", "b", "d", SeededRng(f"c{i}"))
            assert t.id == "g-idle"

    def test_empty_pool(self, reg: Registry) -> None:
        assert choose(reg, StreamConfig(), "meta", "b", "d", SeededRng("c")) is None


class TestFill:
    def test_context_fields(self, reg: Registry) -> None:
        ctx = FillContext(speaker_id="b", domain_slug="d", fields={"TOPIC": "dice"})
        out = fill(reg, "g-idle", ctx, SeededRng("f"))
        assert out.text == "Generic dice."
        assert out.template_id == "g-idle"

    def test_unknown_placeholder_left_verbatim(self, reg: Registry) -> None:
        ctx = FillContext(speaker_id="b", domain_slug="d")
        assert fill(reg, "Hi {{WHATEVER}}", ctx, SeededRng("f")).text == "Hi {{WHATEVER}}"

    def test_repeated_placeholder_resolves_once(self, reg: Registry) -> None:
        ctx = FillContext(speaker_id="b", domain_slug="d", cast=("a", "b", "c"))
        out = fill(reg, "g-rel", ctx, SeededRng("f"))
        name = reg.name_of(out.mentions)
        assert out.text.startswith(f"{name} is ")
        assert out.text.endswith(f"{name}!")

    def test_never_mentions_speaker(self, reg: Registry) -> None:
        for i in range(40):
            ctx = FillContext(speaker_id="a", domain_slug="d", cast=("a", "b", "c"))
            assert fill(reg, "{{NPC_NAME}}", ctx, SeededRng(f"m{i}")).mentions in ("b", "c")

    def test_target_forces_mention(self, reg: Registry) -> None:
        ctx = FillContext(speaker_id="a", domain_slug="d", cast=("a", "b", "c"), target_id="c")
        out = fill(reg, "Hey {{NPC_NAME}}.", ctx, SeededRng("f"))
        assert out.text == "Hey Gamma."
        assert out.mentions == "c"

    def test_no_one_to_mention(self, reg: Registry) -> None:
        ctx = FillContext(speaker_id="a", domain_slug="d", cast=("a",))
        out = fill(reg, "Hey {{NPC_NAME}}.", ctx, SeededRng("f"))
        assert out.text == "Hey someone."
        assert out.mentions is None

    def test_deterministic(self) -> None:
        reg = default_registry()
        ctx = FillContext(speaker_id="willy", domain_slug="earth", cast=("willy", "boots", "xtreme"))
        t = find_template(reg, "rel-001")
        assert fill(reg, t, ctx, SeededRng("same")).text == fill(reg, t, ctx, SeededRng("same")).text

    def test_all_resolved_kinds_fill(self) -> None:
        reg = default_registry()
        ctx = FillContext(speaker_id="willy", domain_slug="earth", cast=("willy", "boots"))
        text = "{{NPC_NAME}} {{LORE_FACT}} {{REACTION}} {{OPINION}} {{INTENSITY}} {{TIME_UNIT}} {{SHARED_EVENT}}"
        assert "{{" not in fill(reg, text, ctx, SeededRng("all")).text

    def test_resolve_mention_agrees_with_fill(self) -> None:
        reg = default_registry()
        cast = ("willy", "boots", "xtreme", "boo-g")
        for i in range(30):
            ctx = FillContext(speaker_id="willy", domain_slug="earth", cast=cast)
            text = "{{REACTION}} {{NPC_NAME}}"
            rng_key = f"agree{i}"
            assert resolve_mention(reg, text, ctx, SeededRng(rng_key)) == fill(reg, text, ctx, SeededRng(rng_key)).mentions

    def test_find_template_unknown(self, reg: Registry) -> None:
        with pytest.raises(TemplateError):
            find_template(reg, "nope")


class TestAttitude:
    def test_voice_lists_win(self, reg: Registry) -> None:
        assert attitude(reg, "a", "c") == "teasing"

    def test_edge_type(self, reg: Registry) -> None:
        assert attitude(reg, "a", "b") == "negative"
        assert attitude(reg, "b", "a") == "negative"

    def test_neutral(self, reg: Registry) -> None:
        assert attitude(reg, "b", "c") == "neutral"
        assert attitude(reg, "b", None) == "neutral"
