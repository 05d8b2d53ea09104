### http.py ###
# 업스트림 HTTP 클라이언트 팩토리 (호출 1회당 AsyncClient 1개, 공유 커넥션 풀 없음)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

import httpx

from youth_gateway.clients.upstream import UpstreamClient
from .config import settings


@asynccontextmanager
async def upstream_session() -> AsyncIterator[UpstreamClient]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as http:
        yield UpstreamClient(http, settings)


async def get_upstream() -> AsyncGenerator[UpstreamClient, None]:
    async with upstream_session() as upstream:
        yield upstream
