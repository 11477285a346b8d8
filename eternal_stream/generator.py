"""Stream generator: turns a channel into an endless, addressable sequence.

Every index is built in two passes. `plan()` decides the branch (special
event, reply, or ordinary line) and threads the `SpecialEventHistory`
forward; it is cheap, so random access replays it from index 0.
`render()` turns a plan into a `StreamEntry`.

Branch priority is fixed for a given PIPELINE_VERSION:

    special event > reply > ordinary line with discovered knowledge > ordinary line

Who speaks, what kind of line they would say and whom they would name
(the "sketch") depends on nothing but the index. Reply decisions only look
at sketches, so they never depend on history either; history only carries
special-event cooldowns and the knowledge a channel has already surfaced.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from itertools import islice
from typing import Literal

from eternal_stream import continuity, knowledge, special_events
from eternal_stream.calendar import active_cast, channel_of, seed_to_day_number
from eternal_stream.models import (
    ENTRY_KINDS,
    Channel,
    EntryKind,
    KnowledgePiece,
    LoreItem,
    SpecialEventHistory,
    StreamConfig,
    StreamEntry,
    StreamTemplate,
)
from eternal_stream.registry import Registry, default_registry
from eternal_stream.rng import SeededRng, entry_rng
from eternal_stream.templating import FillContext, choose, fill, resolve_mention

logger = logging.getLogger(__name__)

PIPELINE_VERSION = 1

_CACHE_LIMIT = 8192  # sketches held per generator
_CHANNEL_LIMIT = 256  # channels with a cast and link table held per generator


@dataclass(frozen=True)
class Sketch:
    """History-free facts about one index."""

    index: int
    speaker_id: str
    kind: EntryKind
    template: StreamTemplate | None = None
    lore: LoreItem | None = None
    mentions: str | None = None


@dataclass(frozen=True)
class Plan:
    channel: Channel
    index: int
    branch: Literal["special", "reply", "default"]
    sketch: Sketch
    history: SpecialEventHistory  # as it was before this index
    event: special_events.EventChoice | None = None
    parent: int | None = None
    knowledge: KnowledgePiece | None = None


class _LinkTable:
    """Real reply links of one channel for a trailing window of indices.

    Links are filled in index order; only the last `keep` are held.
    """

    def __init__(self, keep: int) -> None:
        self.keep = keep
        self.start = 0
        self.links: deque[int | None] = deque()

    @property
    def end(self) -> int:
        return self.start + len(self.links)

    def get(self, index: int) -> int | None:
        if index < self.start:
            raise IndexError(f"link {index} has left the window (starts at {self.start})")
        return self.links[index - self.start]

    def append(self, link: int | None) -> None:
        self.links.append(link)
        if len(self.links) > self.keep:
            self.links.popleft()
            self.start += 1


class StreamGenerator:
    """Generates entries for any channel of one registry and config."""

    def __init__(self, registry: Registry | None = None, config: StreamConfig | None = None) -> None:
        self.registry = registry or default_registry()
        self.config = config or StreamConfig()
        self._casts: dict[str, tuple[str, ...]] = {}
        self._sketches: dict[tuple[str, int], Sketch] = {}
        self._links: dict[str, _LinkTable] = {}
        # a link looks back at most response_window entries, a depth walk at most max_chain_depth links
        self._link_window = (self.config.max_chain_depth + 2) * max(1, self.config.response_window) + 1

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def channel(self, domain_slug: str, seed: str) -> Channel:
        return channel_of(domain_slug, seed, self.registry)

    def cast(self, channel: Channel) -> tuple[str, ...]:
        if channel.id not in self._casts:
            if len(self._casts) >= _CHANNEL_LIMIT:
                self._casts.clear()
            self._casts[channel.id] = active_cast(channel, self.registry)
        return self._casts[channel.id]

    def new_history(self, channel: Channel) -> SpecialEventHistory:
        return special_events.new_history(channel.id, self.config.cooldown)

    def frequency(self, channel: Channel, index: int) -> int:
        """Logical timestamp of an entry, in seconds since the channel began.

        Consecutive entries are min_interval..max_interval apart, and any
        index can be stamped without looking at the ones before it.
        """
        half = (self.config.max_interval - self.config.min_interval) // 2
        step = self.config.min_interval + half
        jitter = entry_rng(channel.id, index).derive("time").randint(0, half)
        return index * step + jitter

    # ------------------------------------------------------------------
    # Sketches and reply decisions (history-free)
    # ------------------------------------------------------------------

    def sketch(self, channel: Channel, index: int) -> Sketch:
        key = (channel.id, index)
        cached = self._sketches.get(key)
        if cached is not None:
            return cached
        if len(self._sketches) >= _CACHE_LIMIT:
            self._sketches.clear()
        sketch = self._sketch(channel, index)
        self._sketches[key] = sketch
        return sketch

    def _sketch(self, channel: Channel, index: int) -> Sketch:
        rng = entry_rng(channel.id, index)
        cast = self.cast(channel)
        domain = channel.domain_slug

        weights = []
        for npc_id in cast:
            voice = self.registry.voice(npc_id)
            home = voice.home_domains[0] if voice and voice.home_domains else None
            weights.append(3 if home == domain else 2)
        speaker = rng.derive("speaker").weighted_pick(cast, weights)

        kinds = [k for k in ENTRY_KINDS if self.config.kind_weights.get(k, 0) > 0]
        kind = rng.derive("kind").weighted_pick(kinds, [self.config.kind_weights[k] for k in kinds])

        if kind == "lore":
            known = [
                item for item in self.registry.npc_domain_lore(speaker, domain)
                if item.secrecy != "secret"
            ]
            if known and rng.derive("lore?").chance(self.config.domain_lore_chance):
                return Sketch(index, speaker, kind, lore=rng.derive("lore").pick(known))

        template = choose(self.registry, self.config, kind, speaker, domain, rng.derive("choose"))
        if template is None:
            return Sketch(index, speaker, kind)
        context = FillContext(speaker_id=speaker, domain_slug=domain, cast=cast)
        mentions = resolve_mention(self.registry, template.text, context, rng.derive("fill"))
        return Sketch(index, speaker, kind, template=template, mentions=mentions)

    def _raw_parent(self, channel: Channel, index: int) -> int | None:
        """The entry `index` would answer, before depth limits."""
        me = self.sketch(channel, index)
        start = max(0, index - self.config.response_window)
        recent = [self.sketch(channel, j) for j in range(start, index)]
        rng = entry_rng(channel.id, index).derive("continuity")
        if not continuity.should_respond(self.registry, self.config, rng, recent, me.speaker_id):
            return None
        return continuity.response_candidate(recent, me.speaker_id).index

    def reply_parent(self, channel: Channel, index: int) -> int | None:
        """The entry `index` answers if it is not a special event, else None.

        A reply is dropped when the chain behind its parent already holds
        max_chain_depth links. Chains are measured as if no entry were a
        special event, which can only overcount. Links are filled in index
        order, so the walk never recurses. Asking for an index that has left
        the trailing window refills the table from index 0.
        """
        table = self._links.get(channel.id)
        if table is None or index < table.start:
            if len(self._links) >= _CHANNEL_LIMIT:
                self._links.clear()
            table = self._links[channel.id] = _LinkTable(self._link_window)
        while table.end <= index:
            j = table.end
            parent = self._raw_parent(channel, j)
            if parent is not None:
                depth = continuity.resolve_depth(parent, self.config.max_chain_depth, table.get)
                if depth >= self.config.max_chain_depth:
                    logger.debug("Reply at %s:%d forced off at depth %d", channel.id, j, depth)
                    parent = None
            table.append(parent)
        return table.get(index)

    def _chain_depth(self, channel: Channel, index: int, fired: tuple[int, ...]) -> int:
        """Actual depth of the reply chain ending at `index`."""
        def parent_of(i: int) -> int | None:
            return None if i in fired else self.reply_parent(channel, i)

        return continuity.resolve_depth(index, self.config.max_chain_depth, parent_of)

    # ------------------------------------------------------------------
    # Plan / render
    # ------------------------------------------------------------------

    def plan(self, channel: Channel, index: int, history: SpecialEventHistory) -> tuple[Plan, SpecialEventHistory]:
        """Decide the branch for `index` and return the history after it."""
        if history.next_index != index:
            raise ValueError(f"History for {channel.id} is at index {history.next_index}, not {index}")
        rng = entry_rng(channel.id, index)
        sketch = self.sketch(channel, index)
        domain = self.registry.domain(channel.domain_slug)
        after = history.model_copy(update={"next_index": index + 1})

        special_rng = rng.derive("special")
        if special_events.should_trigger(history, index, domain, special_rng, self.config):
            choice = special_events.select_event(
                self.registry, special_rng.derive("select"), domain.slug,
                sketch.speaker_id, self.cast(channel),
            )
            if choice is not None:
                logger.debug("Special event %s at %s:%d", choice.spec.type, channel.id, index)
                after = special_events.record(after, index, choice.spec.type, self.config.history_limit)
                return Plan(channel, index, "special", sketch, history, event=choice), after

        parent = self.reply_parent(channel, index)
        if parent is not None:
            source = self.sketch(channel, parent).speaker_id
            piece = knowledge.propagate(
                self.registry, self.config, source, sketch.speaker_id, rng.derive("propagate"), index,
            )
            logger.debug("Reply at %s:%d to %d", channel.id, index, parent)
            return Plan(channel, index, "reply", sketch, history, parent=parent, knowledge=piece), after

        piece = knowledge.discover(
            self.registry, self.config, sketch.speaker_id, rng.derive("discover"), history.revealed,
        )
        if piece is not None:
            logger.debug("Knowledge %s surfaced at %s:%d", piece.id, channel.id, index)
            after = knowledge.mark_revealed(after, piece)
        return Plan(channel, index, "default", sketch, history, knowledge=piece), after

    def render(self, plan: Plan) -> StreamEntry:
        channel, index, sketch = plan.channel, plan.index, plan.sketch
        rng = entry_rng(channel.id, index)
        cast = self.cast(channel)
        fields = self._fields(channel, sketch, plan.knowledge, rng)
        base = {
            "id": f"{channel.id}:{index}",
            "channel_id": channel.id,
            "index": index,
            "speaker_id": sketch.speaker_id,
            "speaker_name": self.registry.name_of(sketch.speaker_id),
            "domain_slug": channel.domain_slug,
            "created_frequency": self.frequency(channel, index),
        }

        if plan.branch == "special":
            text, target = special_events.render_event(
                self.registry, rng.derive("special").derive("render"), plan.event,
                sketch.speaker_id, channel.domain_slug, cast,
            )
            return StreamEntry(
                **base, entry_type="special", kind=plan.event.spec.kind, text=text,
                mentions=target, special_event=plan.event.spec.type,
            )

        if plan.branch == "reply":
            parent = self._parent_view(channel, plan.parent, plan.history.fired_indices)
            filled = continuity.generate_response(
                self.registry, rng.derive("reply"), parent, sketch.speaker_id,
                channel.domain_slug, cast, fields,
            )
            text = filled.text
            if plan.knowledge is not None:
                text = knowledge.inject(text, plan.knowledge, rng.derive("inject"))
            return StreamEntry(
                **base,
                entry_type="event-response" if parent.special else "reaction",
                kind=sketch.kind,
                text=text,
                reactions_of=f"{channel.id}:{parent.index}",
                mentions=parent.speaker_id,
                knowledge=plan.knowledge,
                chain_depth=parent.chain_depth + 1,
            )

        text, mentions = self._default_text(channel, sketch, fields, rng)
        if plan.knowledge is not None:
            text = knowledge.inject(text, plan.knowledge, rng.derive("inject"))
        return StreamEntry(
            **base, entry_type="dialogue", kind=sketch.kind, text=text,
            mentions=mentions, knowledge=plan.knowledge,
        )

    def _default_text(
        self, channel: Channel, sketch: Sketch, fields: dict[str, str], rng: SeededRng,
    ) -> tuple[str, str | None]:
        if sketch.lore is not None:
            return sketch.lore.content, None
        if sketch.template is not None:
            context = FillContext(
                speaker_id=sketch.speaker_id,
                domain_slug=channel.domain_slug,
                cast=self.cast(channel),
                fields=fields,
            )
            filled = fill(self.registry, sketch.template, context, rng.derive("fill"))
            return filled.text, filled.mentions
        return fields.get("CATCHPHRASE") or "...", None

    def _parent_view(self, channel: Channel, index: int, fired: tuple[int, ...]) -> continuity.ParentView:
        """What the entry at `index` actually was, rebuilt without rendering it."""
        sketch = self.sketch(channel, index)
        if index in fired:
            special_rng = entry_rng(channel.id, index).derive("special")
            choice = special_events.select_event(
                self.registry, special_rng.derive("select"), channel.domain_slug,
                sketch.speaker_id, self.cast(channel),
            )
            return continuity.ParentView(
                index=index, speaker_id=sketch.speaker_id, kind=choice.spec.kind,
                mentions=choice.target_id, special=True,
            )
        grandparent = self.reply_parent(channel, index)
        if grandparent is not None:
            return continuity.ParentView(
                index=index,
                speaker_id=sketch.speaker_id,
                kind=sketch.kind,
                mentions=self.sketch(channel, grandparent).speaker_id,
                chain_depth=self._chain_depth(channel, index, fired),
            )
        return continuity.ParentView(
            index=index, speaker_id=sketch.speaker_id, kind=sketch.kind, mentions=sketch.mentions,
        )

    def _fields(
        self, channel: Channel, sketch: Sketch, piece: KnowledgePiece | None, rng: SeededRng,
    ) -> dict[str, str]:
        """Per-entry context substitutions, each from its own sub-stream."""
        domain = self.registry.domain(channel.domain_slug)
        voice = self.registry.voice(sketch.speaker_id)
        words = self.registry.words

        def draw(name: str, pool) -> str:
            return rng.derive(f"ctx:{name}").pick(pool) if pool else ""

        topics = (voice.topics if voice and voice.topics else domain.topics)
        return {
            "DOMAIN": domain.name,
            "ELEMENT": domain.element,
            "SEED": channel.seed,
            "SEED_DAY": str(seed_to_day_number(channel.seed)),
            "SPEAKER": self.registry.name_of(sketch.speaker_id),
            "CATCHPHRASE": draw("catchphrase", voice.catchphrases if voice else ()),
            "ATMOSPHERE": draw("atmosphere", domain.atmosphere),
            "TOPIC": draw("topic", topics),
            "FLAW": draw("flaw", words.flaws),
            "BEHAVIOR": draw("behavior", words.behaviors),
            "DIRECTOR_FACT": draw("director", words.director_facts),
            "ORIGIN_FACT": draw("origin", words.origin_facts),
            "KNOWLEDGE": piece.short_form if piece else "",
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def step(
        self, channel: Channel, index: int, history: SpecialEventHistory,
    ) -> tuple[StreamEntry, SpecialEventHistory]:
        plan, after = self.plan(channel, index, history)
        return self.render(plan), after

    def history_at(self, channel: Channel, index: int) -> SpecialEventHistory:
        """History valid just before `index`, replayed from the start of the channel."""
        return self._replay(channel, self.new_history(channel), index)

    def _replay(self, channel: Channel, history: SpecialEventHistory, index: int) -> SpecialEventHistory:
        if history.next_index > index:
            raise ValueError(
                f"History for {channel.id} is already at index {history.next_index}, past {index}"
            )
        for i in range(history.next_index, index):
            _, history = self.plan(channel, i, history)
        return history

    def iter_stream(
        self, channel: Channel, offset: int = 0, history: SpecialEventHistory | None = None,
    ) -> Iterator[StreamEntry]:
        """Lazy, unbounded stream starting at `offset`.

        Without a history one is replayed from index 0. A history that stops
        short of `offset` is replayed forward.
        """
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if history is None:
            history = self.new_history(channel)
        history = self._replay(channel, history, offset)
        index = offset
        while True:
            entry, history = self.step(channel, index, history)
            yield entry
            index += 1

    def sample_stream(
        self,
        channel: Channel,
        offset: int,
        count: int,
        history: SpecialEventHistory | None = None,
    ) -> list[StreamEntry]:
        if count < 0:
            raise ValueError("count must be >= 0")
        if count == 0:
            return []
        return list(islice(self.iter_stream(channel, offset, history), count))

    def generate_day_stream(self, seed: str, domain_slug: str, count: int) -> list[StreamEntry]:
        return self.sample_stream(self.channel(domain_slug, seed), 0, count)

    def entry_at(self, channel: Channel, index: int) -> StreamEntry:
        return self.sample_stream(channel, index, 1)[0]

    def advance(
        self, channel: Channel, history: SpecialEventHistory, count: int,
    ) -> tuple[list[StreamEntry], SpecialEventHistory]:
        """Produce the next `count` entries after `history` and the history past them."""
        entries = []
        index = history.next_index
        for _ in range(count):
            entry, history = self.step(channel, index, history)
            entries.append(entry)
            index += 1
        return entries, history

    def tune_to_frequency(self, channel: Channel, frequency: int, window: int = 5) -> list[StreamEntry]:
        """Entries around a logical timestamp."""
        half = (self.config.max_interval - self.config.min_interval) // 2
        center = max(0, frequency // (self.config.min_interval + half))
        return self.sample_stream(channel, max(0, center - window // 2), window)


@lru_cache(maxsize=1)
def default_generator() -> StreamGenerator:
    return StreamGenerator()


def generate_day_stream(seed: str, domain_slug: str, count: int) -> list[StreamEntry]:
    return default_generator().generate_day_stream(seed, domain_slug, count)


def sample_stream(
    channel: Channel, offset: int, count: int, history: SpecialEventHistory | None = None,
) -> list[StreamEntry]:
    return default_generator().sample_stream(channel, offset, count, history)


# ---------------------------------------------------------------------------
# Entry filters
# ---------------------------------------------------------------------------

def entries_mentioning(entries: Iterable[StreamEntry], npc_id: str) -> list[StreamEntry]:
    """Entries spoken by `npc_id` or naming them."""
    return [e for e in entries if npc_id in (e.speaker_id, e.mentions)]


def entries_by_kind(entries: Iterable[StreamEntry], kind: EntryKind) -> list[StreamEntry]:
    return [e for e in entries if e.kind == kind]


def entries_in_range(entries: Iterable[StreamEntry], start: int, end: int) -> list[StreamEntry]:
    """Entries whose `created_frequency` lies in [start, end]."""
    return [e for e in entries if start <= e.created_frequency <= end]
