"""Seeds, days and channels.

A seed is any string; date seeds (YYYY-MM-DD) get calendar treatment,
everything else is addressed by a stable day number. A channel is the pure
key (domain, seed).
"""

from __future__ import annotations

import datetime as dt
import re
import unicodedata

from pydantic import BaseModel

from eternal_stream.models import Channel
from eternal_stream.registry import Registry, default_registry
from eternal_stream.rng import channel_rng

_DATE_SEED_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

SPECIAL_SEEDS = {
    "origin": "day-one",
    "ascension": "the-ascension",
    "end_times": "end-of-days",
    "glitched": "error-404",
    "chaos": "entropy-max",
    "order": "absolute-zero",
}


class CalendarDay(BaseModel):
    seed: str
    label: str
    day_number: int
    is_today: bool


# ---------------------------------------------------------------------------
# Seeds
# ---------------------------------------------------------------------------

def date_to_seed(date: dt.date) -> str:
    if isinstance(date, dt.datetime):
        date = date.date()
    return date.isoformat()


def today_seed() -> str:
    """Seed for the local date. A convenience only; nothing deterministic depends on it."""
    return date_to_seed(dt.date.today())


def is_date_seed(seed: str) -> bool:
    return _DATE_SEED_RE.match(seed) is not None


def seed_to_date(seed: str) -> dt.date | None:
    m = _DATE_SEED_RE.match(seed)
    if not m:
        return None
    try:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def phrase_to_seed(phrase: str) -> str:
    """Turn a free-form phrase into a seed.

    "The Ascension!" → "the-ascension"
    """
    text = unicodedata.normalize("NFKD", phrase)
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = re.sub(r"[^a-z0-9]+", "-", text).strip("-")
    if not text:
        raise ValueError(f"Phrase {phrase!r} has no letters or digits to build a seed from")
    return text


def seed_to_day_number(seed: str) -> int:
    """Stable day number in 1..99999.

    32-bit `h = h * 31 + c` string hash over UTF-16 code units, wrapped to
    a signed int at every step.
    """
    h = 0
    units = seed.encode("utf-16-le")
    for i in range(0, len(units), 2):
        h = (h << 5) - h + int.from_bytes(units[i:i + 2], "little")
        h = (h + 2**31) % 2**32 - 2**31
    return abs(h) % 99999 + 1


def seed_to_label(seed: str) -> str:
    """Human label: "Jan 5, 2026" for date seeds, "Day N" otherwise."""
    date = seed_to_date(seed)
    if date is not None:
        return f"{date:%b} {date.day}, {date.year}"
    return f"Day {seed_to_day_number(seed)}"


def get_adjacent_seeds(seed: str) -> tuple[str, str]:
    """(previous, next) seeds."""
    date = seed_to_date(seed)
    if date is not None:
        one = dt.timedelta(days=1)
        return date_to_seed(date - one), date_to_seed(date + one)
    n = seed_to_day_number(seed)
    return f"day-{n - 1}", f"day-{n + 1}"


def get_calendar_range(start: str, days: int = 7) -> list[CalendarDay]:
    """`days` consecutive days beginning at `start`."""
    today = today_seed()
    out = []
    date = seed_to_date(start)
    if date is not None:
        for offset in range(days):
            seed = date_to_seed(date + dt.timedelta(days=offset))
            out.append(CalendarDay(
                seed=seed, label=seed_to_label(seed),
                day_number=seed_to_day_number(seed), is_today=seed == today,
            ))
        return out
    base = seed_to_day_number(start)
    for offset in range(days):
        n = base + offset
        seed = start if offset == 0 else f"day-{n}"
        out.append(CalendarDay(seed=seed, label=f"Day {n}", day_number=n, is_today=False))
    return out


# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------

def channel_key(domain_slug: str, seed: str) -> str:
    return f"{domain_slug}:{seed}"


def channel_of(domain_slug: str, seed: str, registry: Registry | None = None) -> Channel:
    """Channel for (domain, seed). Raises UnknownDomainError for unknown domains."""
    registry = registry or default_registry()
    registry.domain(domain_slug)
    return Channel(id=channel_key(domain_slug, seed), domain_slug=domain_slug, seed=seed)


def channels_for_seed(seed: str, registry: Registry | None = None) -> list[Channel]:
    registry = registry or default_registry()
    return [channel_of(slug, seed, registry) for slug in registry.domains]


def active_cast(channel: Channel, registry: Registry | None = None) -> tuple[str, ...]:
    """The residents on air for this channel: a fixed shuffle, 3 to 6 of them."""
    registry = registry or default_registry()
    residents = registry.domain(channel.domain_slug).resident_ids
    rng = channel_rng(channel.id).derive("cast")
    shuffled = rng.derive("order").shuffle(residents)
    count = min(len(shuffled), rng.derive("count").randint(3, 6))
    return tuple(shuffled[:count])
