"""Deterministic RNG keyed by strings.

Every random decision in the engine flows through a `SeededRng`. A generator
is identified by its key path; `derive(key)` hashes the parent path with the
child key, so a derived stream never depends on how many other streams were
derived or consumed before it. That property is what lets any entry of a
channel be regenerated on its own.

All draws are built on `random.Random.random()` only, whose output for an
integer seed is stable across Python releases.
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def stable_hash(text: str) -> int:
    """63-bit hash of `text` that is identical on every machine and run.

    The builtin `hash()` is salted per process and must never be used here.
    """
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & ((1 << 63) - 1)


class SeededRng:
    """A reproducible pseudo-random stream identified by a key path."""

    def __init__(self, key: str) -> None:
        self.key = key
        self._random = random.Random(stable_hash(key))

    def __repr__(self) -> str:
        return f"SeededRng({self.key!r})"

    def derive(self, key: str) -> SeededRng:
        """Return an independent child stream for `key`."""
        return SeededRng(f"{self.key}/{key}")

    def next(self) -> float:
        """Next float in [0, 1)."""
        return self._random.random()

    def chance(self, p: float) -> bool:
        return self.next() < p

    def randint(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both inclusive."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + int(self.next() * (hi - lo + 1))

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return items[int(self.next() * len(items))]

    def weighted_pick(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one item with probability proportional to its weight."""
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        if len(items) != len(weights):
            raise ValueError("items and weights differ in length")
        total = float(sum(weights))
        if total <= 0:
            raise ValueError("weights must sum to a positive number")
        roll = self.next() * total
        for item, weight in zip(items, weights):
            roll -= weight
            if roll < 0:
                return item
        # float rounding: fall back to the last positively weighted item
        for item, weight in zip(reversed(items), reversed(weights)):
            if weight > 0:
                return item
        return items[-1]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy (Fisher-Yates); `items` is left untouched."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            out[i], out[j] = out[j], out[i]
        return out


def channel_rng(channel_id: str) -> SeededRng:
    """Root stream for a channel."""
    return SeededRng(f"eternal:{channel_id}")


def entry_rng(channel_id: str, index: int) -> SeededRng:
    """Stream owned by a single entry of a channel."""
    return channel_rng(channel_id).derive(f"entry:{index}")
