"""End-to-end server tests."""

import pytest
import json

from treeview_mcp.server import server, list_tools, call_tool


@pytest.mark.asyncio
async def test_server_lists_three_tools():
    """Test that server lists all 3 tools."""
    tools = await list_tools()
    
    assert len(tools) == 3
    
    names = {t.name for t in tools}
    assert names == {"get_outline", "generate_skeleton", "list_languages"}


@pytest.mark.asyncio
async def test_generate_skeleton_tool_schema():
    """Test generate_skeleton tool has correct schema."""
    tools = await list_tools()
    
    skeleton = next(t for t in tools if t.name == "generate_skeleton")
    
    props = skeleton.inputSchema["properties"]
    assert "entity" in props
    assert "include_bodies" in props
    assert set(props["extension"]["enum"]) == {"ts", "js"}
    assert set(skeleton.inputSchema["required"]) == {"entity", "name"}


@pytest.mark.asyncio
async def test_call_get_outline():
    """Test calling get_outline through the server."""
    content = await call_tool("get_outline", {"source": "export function f() {}"})
    
    result = json.loads(content[0].text)
    assert result["outline"]["functions"][0]["name"] == "f"


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test unknown tools return an error payload."""
    content = await call_tool("nope", {})
    
    assert json.loads(content[0].text) == {"error": "Unknown tool: nope"}


@pytest.mark.asyncio
async def test_call_tool_missing_argument():
    """Test exceptions become error payloads."""
    content = await call_tool("generate_skeleton", {"name": "X"})
    
    assert "error" in json.loads(content[0].text)
