"""Core domain models.

Every engine component produces and consumes these types. Registry data and
stream entries are frozen pydantic models: once built they are never mutated,
and state transitions (special-event history, propagated knowledge) always
return new instances.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

EntryType = Literal["dialogue", "reaction", "special", "event-response"]

EntryKind = Literal["idle", "relationship", "lore", "meta"]

RelationshipType = Literal[
    "ally",
    "rival",
    "mentor",
    "rumor-source",
    "old-friend",
    "enemy",
    "colleague",
    "acquaintance",
    "fear-respect",
]

Secrecy = Literal["public", "rumor", "secret"]

LoreSecrecy = Literal["public", "common", "rare", "secret"]

SpecialEventType = Literal[
    "secret-reveal",
    "confrontation",
    "prophecy",
    "director-appearance",
    "meta-glitch",
    "memory-fragment",
    "alliance",
    "threat",
    "exit-rumor",
    "player-reference",
]

ENTRY_KINDS: tuple[EntryKind, ...] = ("idle", "relationship", "lore", "meta")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Registry records
# ---------------------------------------------------------------------------

class VoiceProfile(_Frozen):
    """Static voice data for one NPC."""

    id: str
    name: str
    vocabulary: tuple[str, ...] = ()
    topics: tuple[str, ...] = ()
    tone: tuple[str, ...] = ()
    teases: tuple[str, ...] = ()
    respects: tuple[str, ...] = ()
    avoids: tuple[str, ...] = ()
    catchphrases: tuple[str, ...] = ()
    home_domains: tuple[str, ...] = ()
    template_override_key: str | None = None  # key into the override pools


class DomainContext(_Frozen):
    """A thematic namespace with its own cast."""

    slug: str
    name: str
    element: str
    description: str = ""
    resident_ids: tuple[str, ...]
    topics: tuple[str, ...] = ()
    atmosphere: tuple[str, ...] = ()
    lore_pool_ref: str
    volatility: float = 0.0  # added to the base special-event chance


class RelationshipEdge(_Frozen):
    source_id: str
    target_id: str
    type: RelationshipType
    strength: float = Field(ge=0.0, le=1.0)
    history: str = ""


class KnowledgePiece(_Frozen):
    """A secret, rumor or public fact held by one NPC."""

    id: str
    owner_id: str
    topic: str
    secrecy: Secrecy
    content: str
    short_form: str
    origin_index: int | None = None  # frequency at which it was received
    source_id: str | None = None  # NPC it was propagated from
    evolved: bool = False


class LoreItem(_Frozen):
    id: str
    domain: str  # domain slug or "all"
    secrecy: LoreSecrecy
    content: str
    short_form: str
    known_by: tuple[str, ...] = ()


class StreamTemplate(_Frozen):
    id: str
    kind: EntryKind
    text: str
    weight: int = 1
    requires_domain: tuple[str, ...] | None = None


class ReplyTemplate(_Frozen):
    """Template used when one NPC replies to another's entry."""

    id: str
    text: str
    weight: int = 1
    triggered_by: EntryKind | Literal["special", "any"] = "any"
    relationships: tuple[RelationshipType, ...] | None = None  # None = any


class SpecialEventSpec(_Frozen):
    type: SpecialEventType
    weight: int
    templates: tuple[str, ...]
    kind: EntryKind
    eligible_npcs: tuple[str, ...] | None = None  # None = any NPC
    eligible_domains: tuple[str, ...] | None = None  # None = any domain
    requires_edge: RelationshipType | None = None  # partner must share this edge


class Persona(_Frozen):
    """System prompt used by the refinement collaborator."""

    slug: str
    name: str
    system_prompt: str


# ---------------------------------------------------------------------------
# Addressing and state
# ---------------------------------------------------------------------------

class Channel(_Frozen):
    """A (domain, seed) pair. Derived, never stored."""

    id: str
    domain_slug: str
    seed: str


class SpecialEventHistory(_Frozen):
    """Caller-owned generation state for one channel.

    Never mutated: `special_events.record()` and `knowledge.mark_revealed()`
    return updated copies.
    """

    channel_id: str
    cooldown: int = 5
    fired_indices: tuple[int, ...] = ()
    fired_types: tuple[SpecialEventType, ...] = ()
    last_fired_index: int | None = None
    revealed: tuple[str, ...] = ()  # knowledge ids already discovered on this channel
    next_index: int = 0  # first index this history has not accounted for


class StreamEntry(_Frozen):
    """One produced line. Identity is (channel_id, index)."""

    id: str
    channel_id: str
    index: int
    speaker_id: str
    speaker_name: str
    domain_slug: str
    entry_type: EntryType
    kind: EntryKind
    text: str
    reactions_of: str | None = None  # id of the entry this one replies to
    mentions: str | None = None  # NPC id named in the text
    knowledge: KnowledgePiece | None = None
    special_event: SpecialEventType | None = None
    chain_depth: int = 0
    created_frequency: int = 0  # logical seconds since the start of the channel


# ---------------------------------------------------------------------------
# Tuning
# ---------------------------------------------------------------------------

class StreamConfig(_Frozen):
    """Tunable constants for one generator instance.

    Any change here changes generated output for every seed.
    """

    min_interval: int = Field(default=8, ge=1)
    max_interval: int = Field(default=45, ge=1)
    kind_weights: dict[EntryKind, int] = Field(
        default_factory=lambda: {"idle": 50, "relationship": 25, "lore": 15, "meta": 10}
    )
    cooldown: int = Field(default=5, ge=0)
    base_special_chance: float = Field(default=0.05, ge=0.0, le=1.0)
    special_decay: float = Field(default=0.02, ge=0.0, le=1.0)
    min_special_chance: float = Field(default=0.01, ge=0.0, le=1.0)
    special_window: int = Field(default=5, ge=0)
    history_limit: int = Field(default=10, ge=1)
    response_window: int = Field(default=3, ge=0)
    max_chain_depth: int = Field(default=3, ge=0)
    mention_response_chance: float = Field(default=0.7, ge=0.0, le=1.0)
    base_response_chance: float = Field(default=0.25, ge=0.0, le=1.0)
    max_response_chance: float = Field(default=0.95, ge=0.0, le=1.0)
    override_chance: float = Field(default=0.6, ge=0.0, le=1.0)
    domain_lore_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    discover_chance: float = Field(default=0.08, ge=0.0, le=1.0)
    propagate_chance: float = Field(default=0.35, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_ranges(self) -> StreamConfig:
        if self.max_interval < self.min_interval:
            raise ValueError("max_interval must be >= min_interval")
        if any(w < 0 for w in self.kind_weights.values()):
            raise ValueError("kind_weights must not be negative")
        if not any(w > 0 for w in self.kind_weights.values()):
            raise ValueError("kind_weights needs at least one positive weight")
        return self

    @classmethod
    def from_settings(cls, settings: dict | None) -> StreamConfig:
        """Build a config from stored settings, ignoring unknown keys.

        Raises pydantic.ValidationError for out-of-range values.
        """
        if not settings:
            return cls()
        known = {k: v for k, v in settings.items() if k in cls.model_fields}
        return cls(**known)
