# youth_gateway/schemas/tool.py
# 도구 호출 HTTP 응답 스키마

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(False, alias="isError")


class ToolInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema")


class ToolListResponse(BaseModel):
    total: int
    tools: List[ToolInfo]
