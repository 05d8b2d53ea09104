# youth_gateway/routers/tools.py

"""
도구 조회 / 호출 API

- GET  /tools          : 도구 목록 + 입력 JSON 스키마
- POST /tools/{name}   : body(JSON 객체)를 인자로 도구 호출
  - 도구 실패는 HTTP 오류가 아니라 200 + isError=true 로 돌려준다
  - 존재하지 않는 도구만 404
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path

from youth_gateway.clients.upstream import UpstreamClient
from youth_gateway.core.http import get_upstream
from youth_gateway.schemas.tool import TextContent, ToolCallResponse, ToolInfo, ToolListResponse
from youth_gateway.tools.registry import get_tool, invoke, list_tools

router = APIRouter(tags=["[도구] 조회/호출"])


@router.get("/tools", response_model=ToolListResponse)
async def get_tool_list():
    tools = [
        ToolInfo(name=t.name, description=t.description, input_schema=t.input_schema())
        for t in list_tools()
    ]
    return ToolListResponse(total=len(tools), tools=tools)


@router.post(
    "/tools/{name}",
    response_model=ToolCallResponse,
    responses={
        200: {"description": "도구 호출 완료 (업스트림 실패 시 isError=true)"},
        404: {"description": "존재하지 않는 도구"},
    },
)
async def call_tool(
    name: str = Path(..., description="도구 이름"),
    arguments: Optional[Dict[str, Any]] = Body(default=None, description="도구 인자 (camelCase)"),
    upstream: UpstreamClient = Depends(get_upstream),
):
    if get_tool(name) is None:
        raise HTTPException(status_code=404, detail={"message": f"Tool not found: {name}"})

    result = await invoke(name, arguments, upstream)
    return ToolCallResponse(content=[TextContent(text=result.text)], is_error=result.is_error)
