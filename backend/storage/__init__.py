"""File-based JSON storage.

Data layout:
  data/
    config.json          App settings (stream tuning, refinement model)
    histories/           Caller-owned generation state
      <domain>/
        <seed>.json      SpecialEventHistory for one channel

Seeds are percent-encoded into file names, so distinct seeds never share a
file.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates, merging each group key-by-key.

Histories are only written by the advance endpoint, which reads, advances
and writes a channel's history within one request.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    histories_dir,
    init_storage,
    seed_filename,
)

from .config import (  # noqa: F401
    get_config,
    stream_settings,
    update_config,
)

from .histories import (  # noqa: F401
    delete_history,
    get_history,
    save_history,
)
