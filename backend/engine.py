"""Shared generator instances for the HTTP and MCP surfaces.

One generator is kept per distinct set of stored stream settings, so its
sketch caches survive across requests until the settings change.
"""

import json
import logging
from functools import lru_cache

from pydantic import ValidationError

from eternal_stream import StreamConfig, StreamGenerator, default_registry

from backend import storage

logger = logging.getLogger(__name__)

# sampling replays the plan pass from index 0, so offsets are capped for callers
MAX_OFFSET = 10_000


@lru_cache(maxsize=4)
def _generator_for(settings_json: str) -> StreamGenerator:
    try:
        config = StreamConfig.from_settings(json.loads(settings_json))
    except ValidationError as e:
        # only reachable when config.json was edited by hand
        logger.error("Stored stream settings are invalid, using defaults: %s", e)
        config = StreamConfig()
    logger.info("Building stream generator for %s", settings_json)
    return StreamGenerator(default_registry(), config)


def get_generator() -> StreamGenerator:
    settings = storage.stream_settings()
    return _generator_for(json.dumps(settings, sort_keys=True))


def default_count() -> int:
    return int(storage.stream_settings().get("default_count", 20))
