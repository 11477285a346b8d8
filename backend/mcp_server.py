"""FastMCP server exposing the stream engine as MCP tools.

Tools:
  - sample_stream(domain, seed, offset, count)   a slice of a channel
  - search_streams(...)                          score channels against a query
  - find_npc(npc_id, seed)                       where an NPC is on air

The generator is replaced via set_generator() in tests; otherwise the
default registry and config are used.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from eternal_stream import StreamGenerator, discovery
from eternal_stream.generator import default_generator

from backend.engine import MAX_OFFSET

mcp = FastMCP("eternal-stream")

_generator: StreamGenerator | None = None


def set_generator(generator: StreamGenerator | None) -> None:
    """Replace the active generator (used in tests). None restores the default."""
    global _generator
    _generator = generator


def get_generator() -> StreamGenerator:
    return _generator or default_generator()


@mcp.tool()
def sample_stream(domain: str, seed: str, offset: int = 0, count: int = 10) -> list[dict]:
    """Return `count` entries of the (domain, seed) channel starting at `offset`."""
    if offset > MAX_OFFSET:
        raise ValueError(f"offset must be <= {MAX_OFFSET}")
    generator = get_generator()
    channel = generator.channel(domain, seed)
    return [e.model_dump() for e in generator.sample_stream(channel, offset, count)]


@mcp.tool()
def search_streams(
    npc_id: str | None = None,
    topic: str | None = None,
    mood: str | None = None,
    domain_slug: str | None = None,
    entry_kinds: list[str] | None = None,
    seeds: list[str] | None = None,
    limit: int = 5,
) -> list[dict]:
    """Find channels matching an NPC, topic, mood, domain or entry kinds, best first."""
    query = discovery.StreamQuery(
        npc_id=npc_id, topic=topic, mood=mood, domain_slug=domain_slug,
        entry_kinds=entry_kinds, limit=limit,
    )
    results = discovery.search_streams(query, seeds, generator=get_generator())
    return [r.model_dump() for r in results]


@mcp.tool()
def find_npc(npc_id: str, seed: str | None = None) -> dict | None:
    """Channels where an NPC is on air for a seed (default: today)."""
    location = discovery.find_npc(npc_id, seed, generator=get_generator())
    return location.model_dump() if location else None


if __name__ == "__main__":
    mcp.run()
