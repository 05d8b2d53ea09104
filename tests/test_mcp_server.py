"""
MCP 핸들러 테스트: 도구 목록 스키마 / 성공은 TextContent / 오류 결과는 ToolCallError
"""
from contextlib import asynccontextmanager

import mcp.types as types
import pytest

from youth_gateway import mcp_server


@pytest.fixture
def mcp_upstream(fake, monkeypatch):
    """MCP 핸들러가 여는 업스트림 세션을 FakeUpstream 으로 대체."""

    @asynccontextmanager
    async def session():
        upstream = fake.client()
        try:
            yield upstream
        finally:
            await upstream.http.aclose()

    monkeypatch.setattr(mcp_server, "upstream_session", session)
    return fake


async def test_list_tools_publishes_camel_case_schemas():
    tools = await mcp_server.handle_list_tools()

    assert len(tools) == 29
    assert all(isinstance(t, types.Tool) for t in tools)
    by_name = {t.name: t for t in tools}
    props = by_name["search_youth_policies"].inputSchema["properties"]
    assert "pageSize" in props
    assert "page_size" not in props
    assert by_name["get_policy_statistics"].inputSchema["required"] == ["type"]


async def test_call_tool_returns_text_content(mcp_upstream):
    mcp_upstream.json("policy", [{"plcyNo": "R1", "plcyNm": "청년 월세 지원"}], total=1)

    content = await mcp_server.handle_call_tool("search_youth_policies", {"keyword": "월세", "pageSize": 5})

    (item,) = content
    assert isinstance(item, types.TextContent)
    assert item.type == "text"
    assert "### 청년 월세 지원" in item.text
    (params,) = mcp_upstream.calls("policy")
    assert params["pageSize"] == "5"


async def test_call_tool_raises_on_upstream_failure(mcp_upstream):
    mcp_upstream.fail("policy", 503)

    with pytest.raises(mcp_server.ToolCallError) as e:
        await mcp_server.handle_call_tool("search_youth_policies", {"keyword": "월세"})

    assert "오류 발생" in str(e.value)
    assert "503" in str(e.value)


async def test_call_tool_raises_on_unknown_tool(mcp_upstream):
    with pytest.raises(mcp_server.ToolCallError) as e:
        await mcp_server.handle_call_tool("does_not_exist", {})

    assert "does_not_exist" in str(e.value)
    assert mcp_upstream.requests == []


async def test_call_tool_accepts_missing_arguments(mcp_upstream):
    mcp_upstream.json("policy", [])

    content = await mcp_server.handle_call_tool("search_youth_policies", None)

    assert isinstance(content[0], types.TextContent)
