"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, Field

from eternal_stream.discovery import StreamQuery
from eternal_stream.models import SpecialEventHistory, StreamConfig, StreamEntry


class StreamSettings(StreamConfig):
    """The stored `stream` settings group: engine tuning plus the page size."""

    default_count: int = Field(default=20, ge=1, le=500)


class AdvanceBody(BaseModel):
    count: int | None = Field(default=None, ge=1, le=500)


class AdvanceResult(BaseModel):
    entries: list[StreamEntry]
    history: SpecialEventHistory


class SearchBody(BaseModel):
    query: StreamQuery
    seeds: list[str] | None = None
    sample_size: int = Field(default=20, ge=1, le=200)
