"""Eternal Stream: deterministic, endlessly addressable NPC chatter.

A seed and a domain name a channel. Every channel is an unbounded sequence
of in-character lines that is identical on every run and machine. Any
slice can be asked for directly: the cheap planning pass is replayed from
index 0, but no earlier line is rendered.

    from eternal_stream import generate_day_stream
    entries = generate_day_stream("2026-01-05", "earth", 20)
"""

from eternal_stream.calendar import (  # noqa: F401
    CalendarDay,
    active_cast,
    channel_of,
    channels_for_seed,
    get_adjacent_seeds,
    get_calendar_range,
    phrase_to_seed,
    seed_to_day_number,
    seed_to_label,
    today_seed,
)

from eternal_stream.discovery import (  # noqa: F401
    DiscoveryResult,
    StreamQuery,
    all_npc_locations,
    find_lore_streams,
    find_meta_streams,
    find_npc,
    find_streams_by_topic,
    recommendations,
    search_streams,
)

from eternal_stream.generator import (  # noqa: F401
    PIPELINE_VERSION,
    StreamGenerator,
    entries_by_kind,
    entries_in_range,
    entries_mentioning,
    generate_day_stream,
    sample_stream,
)

from eternal_stream.models import (  # noqa: F401
    Channel,
    SpecialEventHistory,
    StreamConfig,
    StreamEntry,
)

from eternal_stream.registry import (  # noqa: F401
    Registry,
    RegistryError,
    UnknownDomainError,
    default_registry,
)
