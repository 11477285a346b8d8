"""MCP tool tests using the FastMCP in-process client."""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

import backend.mcp_server as mcp_server
from eternal_stream import StreamGenerator

SEED = "2026-01-05"


@pytest.fixture(autouse=True)
def fresh_generator():
    """Each test gets its own generator; the default is restored afterwards."""
    mcp_server.set_generator(StreamGenerator())
    yield
    mcp_server.set_generator(None)


def _list_payload(result) -> list:
    """List return value, whether it came back structured or as text blocks."""
    structured = getattr(result, "structuredContent", None)
    if structured is not None:
        return structured["result"]
    items = [json.loads(c.text) for c in result.content]
    if len(items) == 1 and isinstance(items[0], list):
        return items[0]
    return items


def _one_payload(result):
    structured = getattr(result, "structuredContent", None)
    if structured is not None:
        return structured.get("result", structured)
    if not result.content:
        return None
    return json.loads(result.content[0].text)


async def _call(tool: str, args: dict):
    async with create_connected_server_and_client_session(mcp_server.mcp) as client:
        return await client.call_tool(tool, args)


async def test_tools_listed():
    async with create_connected_server_and_client_session(mcp_server.mcp) as client:
        tools = await client.list_tools()
    assert {t.name for t in tools.tools} == {"sample_stream", "search_streams", "find_npc"}


async def test_sample_stream():
    result = await _call("sample_stream", {"domain": "earth", "seed": SEED, "offset": 2, "count": 3})
    assert not result.isError
    entries = _list_payload(result)
    expected = StreamGenerator().generate_day_stream(SEED, "earth", 5)[2:]
    assert [e["id"] for e in entries] == [e.id for e in expected]
    assert [e["text"] for e in entries] == [e.text for e in expected]


async def test_sample_stream_unknown_domain():
    result = await _call("sample_stream", {"domain": "atlantis", "seed": SEED})
    assert result.isError


async def test_sample_stream_offset_over_cap():
    result = await _call("sample_stream", {"domain": "earth", "seed": SEED, "offset": mcp_server.MAX_OFFSET + 1})
    assert result.isError


async def test_search_streams():
    result = await _call("search_streams", {"domain_slug": "earth", "entry_kinds": ["idle"], "seeds": [SEED]})
    assert not result.isError
    results = _list_payload(result)
    assert len(results) == 1
    assert results[0]["channel"]["domain_slug"] == "earth"


async def test_find_npc():
    result = await _call("find_npc", {"npc_id": "mr-bones", "seed": SEED})
    location = _one_payload(result)
    assert location["npc_id"] == "mr-bones"
    assert location["name"] == "Mr. Bones"


async def test_find_npc_unknown():
    result = await _call("find_npc", {"npc_id": "nobody", "seed": SEED})
    assert not _one_payload(result)


async def test_set_generator_is_used():
    custom = StreamGenerator()
    mcp_server.set_generator(custom)
    assert mcp_server.get_generator() is custom
    mcp_server.set_generator(None)
    assert mcp_server.get_generator() is not custom
