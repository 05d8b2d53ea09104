# youth_gateway/mcp_server.py

"""
MCP stdio 서버

- list_tools: 레지스트리의 도구 + 파라미터 모델 JSON 스키마
- call_tool : registry.invoke() 에 위임
  - 오류 결과는 예외로 올려 프로토콜이 isError 로 표시하게 한다
- stdout은 프로토콜 전용이므로 로그는 stderr
"""

from typing import Any, Dict, List, Optional

import anyio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from youth_gateway.core.config import settings, warn_missing_keys
from youth_gateway.core.http import upstream_session
from youth_gateway.core.log import setup_logging
from youth_gateway.tools.registry import invoke, list_tools

SERVER_NAME = "youth-gateway"
SERVER_VERSION = "1.0.0"


class ToolCallError(Exception):
    """도구가 오류 결과를 돌려줌 (메시지는 사용자에게 그대로 노출)."""


server = Server(SERVER_NAME)


@server.list_tools()
async def handle_list_tools() -> List[types.Tool]:
    return [
        types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema())
        for t in list_tools()
    ]


@server.call_tool()
async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
    async with upstream_session() as upstream:
        result = await invoke(name, arguments, upstream)
    if result.is_error:
        raise ToolCallError(result.text)
    return [types.TextContent(type="text", text=result.text)]


async def _main() -> None:
    setup_logging(settings.log_level)
    warn_missing_keys(settings)

    async with stdio_server() as (read, write):
        init_opts = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            capabilities=server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )
        await server.run(read, write, init_opts)


def main() -> None:
    anyio.run(_main)


if __name__ == "__main__":
    main()
