"""Tests for the registry bundle: validation and lookups."""

import pytest

from eternal_stream.models import DomainContext, KnowledgePiece, LoreItem, RelationshipEdge, VoiceProfile
from eternal_stream.registry import Registry, RegistryError, UnknownDomainError, default_registry


def _voice(id: str, **kw) -> VoiceProfile:
    return VoiceProfile(id=id, name=id.title(), **kw)


def _domain(slug: str, *residents: str) -> DomainContext:
    return DomainContext(slug=slug, name=slug.title(), element="Test", resident_ids=residents, lore_pool_ref=slug)


class TestBuild:
    def test_minimal(self) -> None:
        reg = Registry.build(voices=[_voice("a"), _voice("b")], domains=[_domain("d", "a", "b")])
        assert set(reg.voices) == {"a", "b"}
        assert reg.domain("d").resident_ids == ("a", "b")

    def test_accepts_generators(self) -> None:
        reg = Registry.build(
            voices=(_voice(i) for i in ("a", "b")),
            domains=(d for d in [_domain("d", "a")]),
        )
        assert set(reg.voices) == {"a", "b"}

    def test_duplicate_voice(self) -> None:
        with pytest.raises(RegistryError, match="Duplicate voice 'a'"):
            Registry.build(voices=[_voice("a"), _voice("a")], domains=[_domain("d", "a")])

    def test_duplicate_domain(self) -> None:
        with pytest.raises(RegistryError, match="Duplicate domain"):
            Registry.build(voices=[_voice("a")], domains=[_domain("d", "a"), _domain("d", "a")])

    def test_unknown_resident(self) -> None:
        with pytest.raises(RegistryError, match="unknown NPC 'ghost'"):
            Registry.build(voices=[_voice("a")], domains=[_domain("d", "a", "ghost")])

    def test_empty_domain(self) -> None:
        with pytest.raises(RegistryError, match="no residents"):
            Registry.build(voices=[_voice("a")], domains=[_domain("d")])

    def test_edge_to_unknown(self) -> None:
        edge = RelationshipEdge(source_id="a", target_id="ghost", type="ally", strength=0.5)
        with pytest.raises(RegistryError):
            Registry.build(voices=[_voice("a")], domains=[_domain("d", "a")], edges=[edge])

    def test_self_edge(self) -> None:
        edge = RelationshipEdge(source_id="a", target_id="a", type="ally", strength=0.5)
        with pytest.raises(RegistryError, match="itself"):
            Registry.build(voices=[_voice("a")], domains=[_domain("d", "a")], edges=[edge])

    def test_registry_error_is_value_error(self) -> None:
        assert issubclass(RegistryError, ValueError)


class TestLookups:
    @pytest.fixture
    def reg(self) -> Registry:
        edges = [
            RelationshipEdge(source_id="a", target_id="b", type="ally", strength=0.8),
            RelationshipEdge(source_id="c", target_id="a", type="rival", strength=0.4),
        ]
        lore = {
            "d": [LoreItem(id="l1", domain="d", secrecy="rare", content="Deep.", short_form="deep", known_by=("a",))],
            "all": [LoreItem(id="l2", domain="all", secrecy="public", content="Wide.", short_form="wide", known_by=("b",))],
        }
        knowledge = [KnowledgePiece(id="k1", owner_id="a", topic="t", secrecy="secret", content="X.", short_form="x")]
        return Registry.build(
            voices=[_voice("a"), _voice("b"), _voice("c")],
            domains=[_domain("d", "a", "b", "c"), _domain("e", "b")],
            edges=edges, lore=lore, knowledge=knowledge,
        )

    def test_unknown_domain(self, reg: Registry) -> None:
        with pytest.raises(UnknownDomainError) as exc:
            reg.domain("nowhere")
        assert exc.value.slug == "nowhere"
        assert str(exc.value) == "Unknown domain: nowhere"
        assert isinstance(exc.value, LookupError)

    def test_name_of_falls_back_to_id(self, reg: Registry) -> None:
        assert reg.name_of("a") == "A"
        assert reg.name_of("stranger") == "stranger"

    def test_edge_reverse_fallback(self, reg: Registry) -> None:
        assert reg.edge("a", "b").type == "ally"
        assert reg.edge("b", "a").type == "ally"
        assert reg.edge("a", "c").type == "rival"
        assert reg.edge("b", "c") is None

    def test_relationship_strength(self, reg: Registry) -> None:
        assert reg.relationship_strength("a", "b") == 0.8
        assert reg.relationship_strength("b", "c") == 0.0

    def test_domains_of(self, reg: Registry) -> None:
        assert reg.domains_of("b") == ["d", "e"]
        assert reg.domains_of("c") == ["d"]

    def test_lore_for_includes_shared_pool(self, reg: Registry) -> None:
        assert [i.id for i in reg.lore_for("d")] == ["l1", "l2"]
        assert [i.id for i in reg.lore_for("e")] == ["l2"]

    def test_npc_domain_lore(self, reg: Registry) -> None:
        assert [i.id for i in reg.npc_domain_lore("a", "d")] == ["l1"]

    def test_knowledge_of_includes_lore(self, reg: Registry) -> None:
        pieces = {p.id: p for p in reg.knowledge_of("a")}
        assert set(pieces) == {"k1", "l1:a"}
        assert pieces["l1:a"].secrecy == "rumor"
        assert pieces["l1:a"].topic == "d"

    def test_overrides_for_unknown_key_is_empty(self) -> None:
        reg = Registry.build(
            voices=[_voice("a", template_override_key="missing")], domains=[_domain("d", "a")],
        )
        assert reg.overrides_for("a", "idle") == []


class TestDefaultRegistry:
    def test_builds(self) -> None:
        reg = default_registry()
        assert {"earth", "frost-reach", "infernus", "shadow-keep", "null-providence", "aberrant"} <= set(reg.domains)

    def test_every_home_domain_exists(self) -> None:
        reg = default_registry()
        for voice in reg.voices.values():
            for slug in voice.home_domains:
                assert slug in reg.domains, f"{voice.id} lists unknown home domain {slug}"

    def test_every_domain_has_generic_templates(self) -> None:
        reg = default_registry()
        for slug in reg.domains:
            for kind in ("idle", "relationship", "lore", "meta"):
                assert reg.templates_for(kind, slug), f"no {kind} templates for {slug}"

    def test_persona_alias(self) -> None:
        reg = default_registry()
        assert reg.persona("the-general-traveler").slug == "the-general"
        assert reg.persona("mr-bones") is not None
        assert reg.persona("nobody") is None
