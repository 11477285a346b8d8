"""Registry bundle: every static table the engine reads, with lookups.

A `Registry` is built once, validated, and then only read. Engines receive
it explicitly; `default_registry()` returns the process-wide instance built
from the bundled data. Tests build smaller ones with `Registry.build(...)`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from eternal_stream.models import (
    DomainContext,
    EntryKind,
    KnowledgePiece,
    LoreItem,
    Persona,
    RelationshipEdge,
    ReplyTemplate,
    SpecialEventSpec,
    StreamTemplate,
    VoiceProfile,
)

logger = logging.getLogger(__name__)

# Lore secrecy maps onto knowledge secrecy when lore is treated as something an NPC knows.
_LORE_SECRECY = {"public": "public", "common": "public", "rare": "rumor", "secret": "secret"}


class UnknownDomainError(LookupError):
    """Raised for a domain slug the registry does not know."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Unknown domain: {slug}")
        self.slug = slug


class RegistryError(ValueError):
    """Raised when registry data references something that does not exist."""


class WordPools(BaseModel):
    """Word lists the template resolvers and context fields draw from."""

    model_config = ConfigDict(frozen=True)

    reactions: dict[str, tuple[str, ...]]
    opinions: dict[str, tuple[str, ...]]
    intensities: tuple[str, ...]
    time_units: tuple[str, ...]
    shared_events: tuple[str, ...]
    lore_facts: tuple[str, ...]
    flaws: tuple[str, ...] = ()
    behaviors: tuple[str, ...] = ()
    director_facts: tuple[str, ...] = ()
    origin_facts: tuple[str, ...] = ()


def default_words() -> WordPools:
    from eternal_stream.registry import templates as t

    return WordPools(
        reactions=t.REACTIONS,
        opinions=t.OPINIONS,
        intensities=t.INTENSITIES,
        time_units=t.TIME_UNITS,
        shared_events=t.SHARED_EVENTS,
        lore_facts=t.LORE_FACTS,
        flaws=t.FLAWS,
        behaviors=t.BEHAVIORS,
        director_facts=t.DIRECTOR_FACTS,
        origin_facts=t.ORIGIN_FACTS,
    )


class Registry:
    """Immutable lookup tables for voices, domains, relationships, lore and templates."""

    def __init__(
        self,
        voices: dict[str, VoiceProfile],
        domains: dict[str, DomainContext],
        edges: tuple[RelationshipEdge, ...],
        lore: dict[str, tuple[LoreItem, ...]],
        knowledge: tuple[KnowledgePiece, ...],
        templates: tuple[StreamTemplate, ...],
        overrides: dict[str, tuple[StreamTemplate, ...]],
        special_events: tuple[SpecialEventSpec, ...],
        reply_templates: tuple[ReplyTemplate, ...],
        mention_reactions: dict[str, tuple[str, ...]],
        event_pools: dict[str, tuple[str, ...]],
        personas: dict[str, Persona],
        persona_aliases: dict[str, str],
        words: WordPools,
    ) -> None:
        self.voices = voices
        self.domains = domains
        self.edges = edges
        self.lore = lore
        self.knowledge = knowledge
        self.templates = templates
        self.overrides = overrides
        self.special_events = special_events
        self.reply_templates = reply_templates
        self.mention_reactions = mention_reactions
        self.event_pools = event_pools
        self.personas = personas
        self.persona_aliases = persona_aliases
        self.words = words

        self._edge_map: dict[tuple[str, str], RelationshipEdge] = {}
        self._edges_from: dict[str, list[RelationshipEdge]] = {}
        for e in edges:
            self._edge_map[(e.source_id, e.target_id)] = e
            self._edges_from.setdefault(e.source_id, []).append(e)
        self._residency: dict[str, list[str]] = {}
        for d in domains.values():
            for npc_id in d.resident_ids:
                self._residency.setdefault(npc_id, []).append(d.slug)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        voices: Iterable[VoiceProfile],
        domains: Iterable[DomainContext],
        edges: Iterable[RelationshipEdge] = (),
        lore: Mapping[str, Iterable[LoreItem]] | None = None,
        knowledge: Iterable[KnowledgePiece] = (),
        templates: Iterable[StreamTemplate] = (),
        overrides: Mapping[str, Iterable[StreamTemplate]] | None = None,
        special_events: Iterable[SpecialEventSpec] = (),
        reply_templates: Iterable[ReplyTemplate] = (),
        mention_reactions: Mapping[str, Iterable[str]] | None = None,
        event_pools: Mapping[str, Iterable[str]] | None = None,
        personas: Iterable[Persona] = (),
        persona_aliases: Mapping[str, str] | None = None,
        words: WordPools | None = None,
    ) -> Registry:
        """Validate the given tables and bundle them.

        Raises RegistryError on duplicate ids or on any reference to an
        unknown voice or domain.
        """
        voice_map = _unique(tuple(voices), "voice", lambda v: v.id)
        domain_map = _unique(tuple(domains), "domain", lambda d: d.slug)
        edges = tuple(edges)
        lore = {k: tuple(v) for k, v in (lore or {}).items()}
        knowledge = tuple(knowledge)
        templates = tuple(templates)
        overrides = {k: tuple(v) for k, v in (overrides or {}).items()}
        special_events = tuple(special_events)
        persona_map = {p.slug: p for p in personas}

        def known(npc_id: str, where: str) -> None:
            if npc_id not in voice_map:
                raise RegistryError(f"{where} references unknown NPC '{npc_id}'")

        for d in domain_map.values():
            if not d.resident_ids:
                raise RegistryError(f"Domain '{d.slug}' has no residents")
            for npc_id in d.resident_ids:
                known(npc_id, f"Domain '{d.slug}'")
        for e in edges:
            known(e.source_id, "Relationship edge")
            known(e.target_id, "Relationship edge")
            if e.source_id == e.target_id:
                raise RegistryError(f"Relationship edge from '{e.source_id}' to itself")
        for pool in lore.values():
            for item in pool:
                for npc_id in item.known_by:
                    known(npc_id, f"Lore '{item.id}'")
        for piece in knowledge:
            known(piece.owner_id, f"Knowledge '{piece.id}'")
        for spec in special_events:
            for npc_id in spec.eligible_npcs or ():
                known(npc_id, f"Special event '{spec.type}'")

        return cls(
            voices=voice_map,
            domains=domain_map,
            edges=edges,
            lore=lore,
            knowledge=knowledge,
            templates=templates,
            overrides=overrides,
            special_events=special_events,
            reply_templates=tuple(reply_templates),
            mention_reactions={k: tuple(v) for k, v in (mention_reactions or {}).items()},
            event_pools={k: tuple(v) for k, v in (event_pools or {}).items()},
            personas=persona_map,
            persona_aliases=dict(persona_aliases or {}),
            words=words or default_words(),
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def domain(self, slug: str) -> DomainContext:
        try:
            return self.domains[slug]
        except KeyError:
            raise UnknownDomainError(slug) from None

    def voice(self, npc_id: str) -> VoiceProfile | None:
        return self.voices.get(npc_id)

    def name_of(self, npc_id: str) -> str:
        v = self.voices.get(npc_id)
        return v.name if v else npc_id

    def edge(self, a: str, b: str) -> RelationshipEdge | None:
        """Edge describing how `a` regards `b`, falling back to b's view of a."""
        return self._edge_map.get((a, b)) or self._edge_map.get((b, a))

    def edges_between(self, a: str, b: str) -> list[RelationshipEdge]:
        return [e for e in (self._edge_map.get((a, b)), self._edge_map.get((b, a))) if e]

    def edges_from(self, a: str) -> list[RelationshipEdge]:
        return list(self._edges_from.get(a, ()))

    def relationship_strength(self, a: str, b: str) -> float:
        e = self.edge(a, b)
        return e.strength if e else 0.0

    def domains_of(self, npc_id: str) -> list[str]:
        return list(self._residency.get(npc_id, ()))

    def templates_for(self, kind: EntryKind, domain: str) -> list[StreamTemplate]:
        """Generic templates of `kind` usable in `domain`."""
        return [
            t for t in self.templates
            if t.kind == kind and (t.requires_domain is None or domain in t.requires_domain)
        ]

    def overrides_for(self, npc_id: str, kind: EntryKind) -> list[StreamTemplate]:
        """NPC-specific templates of `kind`; empty when the NPC has none."""
        v = self.voices.get(npc_id)
        if v is None or v.template_override_key is None:
            return []
        pool = self.overrides.get(v.template_override_key)
        if pool is None:
            logger.debug("No override pool '%s' for %s", v.template_override_key, npc_id)
            return []
        return [t for t in pool if t.kind == kind]

    def lore_for(self, domain: str) -> list[LoreItem]:
        """Lore visible from `domain`: its own pool plus the cross-domain pool."""
        d = self.domain(domain)
        return list(self.lore.get(d.lore_pool_ref, ())) + list(self.lore.get("all", ()))

    def npc_domain_lore(self, npc_id: str, domain: str) -> list[LoreItem]:
        return [item for item in self.lore_for(domain) if npc_id in item.known_by]

    def knowledge_of(self, npc_id: str) -> list[KnowledgePiece]:
        """Seed knowledge of an NPC: explicit pieces, then lore they know."""
        pieces = [p for p in self.knowledge if p.owner_id == npc_id]
        seen = set()
        for pool in self.lore.values():
            for item in pool:
                if npc_id not in item.known_by or item.id in seen:
                    continue
                seen.add(item.id)
                pieces.append(KnowledgePiece(
                    id=f"{item.id}:{npc_id}",
                    owner_id=npc_id,
                    topic=item.domain,
                    secrecy=_LORE_SECRECY[item.secrecy],
                    content=item.content,
                    short_form=item.short_form,
                ))
        return pieces

    def persona(self, slug: str) -> Persona | None:
        return self.personas.get(self.persona_aliases.get(slug, slug))


def _unique(items: tuple, what: str, key) -> dict:
    mapping = {}
    for item in items:
        k = key(item)
        if k in mapping:
            raise RegistryError(f"Duplicate {what} '{k}'")
        mapping[k] = item
    return mapping


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """The bundled registry, built and validated once per process."""
    from eternal_stream.registry import domains, events, lore, personas, social, templates, voices

    return Registry.build(
        voices=voices.VOICES,
        domains=domains.DOMAINS,
        edges=social.EDGES,
        lore=lore.LORE_POOLS,
        knowledge=lore.KNOWLEDGE,
        templates=templates.GENERIC_TEMPLATES,
        overrides=templates.NPC_OVERRIDES,
        special_events=events.SPECIAL_EVENTS,
        reply_templates=events.REPLY_TEMPLATES,
        mention_reactions=events.MENTION_REACTIONS,
        event_pools=events.EVENT_POOLS,
        personas=personas.PERSONAS,
        persona_aliases=personas.PERSONA_ALIASES,
    )
