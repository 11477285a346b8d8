"""Domains, calendar, stream sampling/advancing, and discovery endpoints."""

from fastapi import APIRouter, HTTPException, Query

from backend import storage
from backend.engine import MAX_OFFSET, default_count, get_generator
from eternal_stream import UnknownDomainError, active_cast, channel_of, today_seed
from eternal_stream import discovery
from eternal_stream.calendar import get_calendar_range, seed_to_label

from .models import AdvanceBody, AdvanceResult, SearchBody

router = APIRouter()


@router.get("/domains")
async def list_domains():
    """List all domains with their residents."""
    registry = get_generator().registry
    return [
        {
            "slug": d.slug,
            "name": d.name,
            "element": d.element,
            "description": d.description,
            "residents": list(d.resident_ids),
        }
        for d in registry.domains.values()
    ]


@router.get("/calendar")
async def calendar(start: str | None = None, days: int = Query(default=7, ge=1, le=62)):
    """Consecutive days starting at `start` (default: today)."""
    return get_calendar_range(start or today_seed(), days)


@router.get("/channels/{seed}")
async def list_channels(seed: str):
    """Every domain's channel for a seed, with who is on air."""
    registry = get_generator().registry
    out = []
    for slug in registry.domains:
        channel = channel_of(slug, seed, registry)
        out.append({
            "channel": channel,
            "label": seed_to_label(seed),
            "cast": list(active_cast(channel, registry)),
        })
    return out


@router.get("/streams/{domain}/{seed}")
async def sample_stream(
    domain: str,
    seed: str,
    offset: int = Query(default=0, ge=0, le=MAX_OFFSET),
    count: int | None = Query(default=None, ge=0, le=500),
):
    """A slice of a channel. Same arguments, same entries, always."""
    generator = get_generator()
    try:
        channel = generator.channel(domain, seed)
    except UnknownDomainError as e:
        raise HTTPException(404, str(e))
    return generator.sample_stream(channel, offset, default_count() if count is None else count)


@router.post("/streams/{domain}/{seed}/advance")
async def advance_stream(domain: str, seed: str, body: AdvanceBody | None = None) -> AdvanceResult:
    """Continue a channel from its stored history and persist the new history."""
    generator = get_generator()
    try:
        channel = generator.channel(domain, seed)
    except UnknownDomainError as e:
        raise HTTPException(404, str(e))
    count = body.count if body and body.count else default_count()
    history = storage.get_history(domain, seed) or generator.new_history(channel)
    if history.channel_id != channel.id:
        raise HTTPException(409, "Stored history belongs to a different channel")
    entries, history = generator.advance(channel, history, count)
    storage.save_history(domain, seed, history)
    return AdvanceResult(entries=entries, history=history)


@router.get("/streams/{domain}/{seed}/history")
async def get_stream_history(domain: str, seed: str):
    """Stored history for a channel (a fresh one if nothing was advanced yet)."""
    generator = get_generator()
    try:
        channel = generator.channel(domain, seed)
    except UnknownDomainError as e:
        raise HTTPException(404, str(e))
    return storage.get_history(domain, seed) or generator.new_history(channel)


@router.delete("/streams/{domain}/{seed}/history")
async def reset_stream_history(domain: str, seed: str):
    """Forget a channel's stored history; the next advance starts at index 0."""
    try:
        get_generator().channel(domain, seed)
    except UnknownDomainError as e:
        raise HTTPException(404, str(e))
    if not storage.delete_history(domain, seed):
        raise HTTPException(404, "History not found")
    return {"ok": True}


@router.post("/search")
async def search(body: SearchBody):
    """Score channels against a query, best first."""
    try:
        return discovery.search_streams(
            body.query, body.seeds, body.sample_size, generator=get_generator(),
        )
    except UnknownDomainError as e:
        raise HTTPException(404, str(e))


@router.get("/npcs/{npc_id}")
async def find_npc(npc_id: str, seed: str | None = None):
    """Where an NPC is on air for a seed."""
    location = discovery.find_npc(npc_id, seed, generator=get_generator())
    if location is None:
        raise HTTPException(404, "NPC not found")
    return location


@router.get("/recommendations")
async def recommendations(
    npc_id: str | None = None,
    seed: str | None = None,
    count: int = Query(default=3, ge=1, le=12),
):
    """Channels worth tuning into."""
    return discovery.recommendations(npc_id, seed, count, generator=get_generator())
