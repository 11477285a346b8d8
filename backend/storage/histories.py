"""Per-channel special-event history, one JSON file per channel.

    histories/<domain>/<seed>.json

Only registry domain slugs are used as directory names; anything else raises
UnknownDomainError before a path is built.
"""

from pathlib import Path

from eternal_stream.models import SpecialEventHistory
from eternal_stream.registry import default_registry

from .core import histories_dir, seed_filename


def _history_path(domain_slug: str, seed: str) -> Path:
    default_registry().domain(domain_slug)  # raises UnknownDomainError
    return histories_dir() / domain_slug / f"{seed_filename(seed)}.json"


def get_history(domain_slug: str, seed: str) -> SpecialEventHistory | None:
    path = _history_path(domain_slug, seed)
    if not path.is_file():
        return None
    return SpecialEventHistory.model_validate_json(path.read_text())


def save_history(domain_slug: str, seed: str, history: SpecialEventHistory) -> SpecialEventHistory:
    path = _history_path(domain_slug, seed)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(history.model_dump_json(indent=2))
    return history


def delete_history(domain_slug: str, seed: str) -> bool:
    path = _history_path(domain_slug, seed)
    if not path.is_file():
        return False
    path.unlink()
    return True
