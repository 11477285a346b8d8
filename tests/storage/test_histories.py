"""Tests for per-channel history files."""

import pytest

from backend import storage
from eternal_stream.models import SpecialEventHistory
from eternal_stream.registry import UnknownDomainError


def _history(**fields) -> SpecialEventHistory:
    return SpecialEventHistory(channel_id="earth:2026-01-05", **fields)


def test_get_missing():
    assert storage.get_history("earth", "2026-01-05") is None


def test_save_and_get():
    saved = _history(fired_indices=(3, 12), fired_types=("prophecy", "threat"), last_fired_index=12, next_index=20)
    storage.save_history("earth", "2026-01-05", saved)

    loaded = storage.get_history("earth", "2026-01-05")
    assert loaded == saved
    assert loaded.fired_types == ("prophecy", "threat")


def test_save_overwrites():
    storage.save_history("earth", "2026-01-05", _history(next_index=5))
    storage.save_history("earth", "2026-01-05", _history(next_index=9))
    assert storage.get_history("earth", "2026-01-05").next_index == 9


def test_histories_keyed_by_domain_and_seed():
    storage.save_history("earth", "x", SpecialEventHistory(channel_id="earth:x", next_index=1))
    storage.save_history("infernus", "x", SpecialEventHistory(channel_id="infernus:x", next_index=2))
    assert storage.get_history("earth", "x").next_index == 1
    assert storage.get_history("infernus", "x").next_index == 2
    assert storage.get_history("earth", "y") is None


def test_unsafe_seed_stays_inside_histories():
    storage.save_history("earth", "../escape", SpecialEventHistory(channel_id="earth:../escape"))
    files = list(storage.histories_dir().rglob("*.json"))
    assert len(files) == 1
    assert files[0].parent == storage.histories_dir() / "earth"


def test_delete():
    storage.save_history("earth", "2026-01-05", _history())
    assert storage.delete_history("earth", "2026-01-05") is True
    assert storage.get_history("earth", "2026-01-05") is None
    assert storage.delete_history("earth", "2026-01-05") is False


@pytest.mark.parametrize("domain", ["..", "atlantis", "../..", ""])
def test_unknown_domain_rejected(domain):
    with pytest.raises(UnknownDomainError):
        storage.get_history(domain, "config")
    with pytest.raises(UnknownDomainError):
        storage.save_history(domain, "config", _history())
    with pytest.raises(UnknownDomainError):
        storage.delete_history(domain, "config")


def test_delete_with_dotdot_domain_keeps_config():
    storage.update_config({"stream": {"default_count": 4}})
    with pytest.raises(UnknownDomainError):
        storage.delete_history("..", "config")
    assert (storage.data_dir() / "config.json").is_file()
