"""Tests for eternal_stream.rng: keyed, order-independent random streams."""

import pytest

from eternal_stream.rng import SeededRng, channel_rng, entry_rng, stable_hash


class TestStableHash:
    def test_same_text_same_hash(self) -> None:
        assert stable_hash("earth:2026-01-05") == stable_hash("earth:2026-01-05")

    def test_different_text_different_hash(self) -> None:
        assert stable_hash("earth:a") != stable_hash("earth:b")

    def test_fits_in_63_bits(self) -> None:
        for text in ("", "x", "a much longer key with spaces", "ünïcödé"):
            assert 0 <= stable_hash(text) < 2**63


class TestSeededRng:
    def test_same_key_same_sequence(self) -> None:
        a, b = SeededRng("k"), SeededRng("k")
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_derive_is_order_independent(self) -> None:
        """A child stream is the same however much the parent or siblings were used."""
        parent = SeededRng("root")
        first = parent.derive("child").next()
        parent.next()
        parent.derive("sibling").next()
        assert parent.derive("child").next() == first

    def test_derive_keys_differ(self) -> None:
        parent = SeededRng("root")
        assert parent.derive("a").next() != parent.derive("b").next()

    def test_next_in_unit_interval(self) -> None:
        rng = SeededRng("unit")
        assert all(0.0 <= rng.next() < 1.0 for _ in range(500))

    def test_randint_inclusive_bounds(self) -> None:
        rng = SeededRng("ints")
        seen = {rng.randint(3, 6) for _ in range(500)}
        assert seen == {3, 4, 5, 6}

    def test_randint_empty_range(self) -> None:
        with pytest.raises(ValueError):
            SeededRng("x").randint(5, 4)

    def test_chance_extremes(self) -> None:
        rng = SeededRng("chance")
        assert not any(rng.chance(0.0) for _ in range(100))
        assert all(rng.chance(1.0) for _ in range(100))

    def test_pick_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            SeededRng("x").pick([])

    def test_weighted_pick_skips_zero_weight(self) -> None:
        rng = SeededRng("weights")
        picks = {rng.weighted_pick(["a", "b", "c"], [0, 1, 0]) for _ in range(100)}
        assert picks == {"b"}

    def test_weighted_pick_rejects_mismatch(self) -> None:
        with pytest.raises(ValueError):
            SeededRng("x").weighted_pick(["a", "b"], [1])

    def test_weighted_pick_rejects_zero_total(self) -> None:
        with pytest.raises(ValueError):
            SeededRng("x").weighted_pick(["a"], [0])

    def test_shuffle_is_permutation_and_copy(self) -> None:
        items = list(range(10))
        out = SeededRng("shuffle").shuffle(items)
        assert sorted(out) == items
        assert items == list(range(10))

    def test_shuffle_deterministic(self) -> None:
        assert SeededRng("s").shuffle("abcdef") == SeededRng("s").shuffle("abcdef")


class TestChannelStreams:
    def test_entry_rng_is_derived_from_channel(self) -> None:
        assert entry_rng("earth:x", 7).key == channel_rng("earth:x").derive("entry:7").key

    def test_entries_independent(self) -> None:
        assert entry_rng("earth:x", 1).next() != entry_rng("earth:x", 2).next()
