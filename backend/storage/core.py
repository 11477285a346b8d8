"""Storage initialization and path helpers."""

from pathlib import Path
from urllib.parse import quote

_data_dir: Path | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    histories_dir().mkdir(exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def histories_dir() -> Path:
    return data_dir() / "histories"


def seed_filename(seed: str) -> str:
    """Filesystem-safe, collision-free file stem for a seed.

    "The Ascension!" → "The%20Ascension%21"
    """
    return quote(seed, safe="-_") or "%"
