"""
Pytest configuration file for Youth Gateway Tests
업스트림(온통청년/고용24)은 httpx.MockTransport 로 대체한다.
"""
import asyncio
import inspect
from typing import Awaitable, Callable, Dict, List, Optional, Union

import httpx
import orjson
import pytest
from fastapi.testclient import TestClient

from youth_gateway.clients.providers import PROVIDERS
from youth_gateway.clients.upstream import UpstreamClient
from youth_gateway.core.config import Settings
from youth_gateway.core.http import get_upstream
from youth_gateway.main import create_app

TEST_SETTINGS = Settings(
    _env_file=None,
    youth_policy_api_key="policy-key",
    youth_center_api_key="center-key",
    work24_job_posting_api_key="job-key",
    work24_small_giant_api_key="giant-key",
    work24_job_info_api_key="jobinfo-key",
    work24_training_card_api_key="training-key",
    work24_employment_program_api_key="program-key",
)

Route = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


def json_page(records: List[dict], total: Optional[int] = None, result_code=200, message="정상") -> dict:
    """온통청년 응답 봉투."""
    return {
        "resultCode": result_code,
        "resultMessage": message,
        "result": {
            "pagging": {
                "totCount": len(records) if total is None else total,
                "pageNum": 1,
                "pageSize": len(records),
            },
            "youthPolicyList": records,
        },
    }


def xml_list(item_tag: str, items: List[Dict[str, str]]) -> str:
    """고용24 응답 본문 (아이템 태그 반복)."""
    body = "".join(
        f"<{item_tag}>" + "".join(f"<{k}>{v}</{k}>" for k, v in item.items()) + f"</{item_tag}>"
        for item in items
    )
    return f'<?xml version="1.0" encoding="UTF-8"?><root><total>{len(items)}</total>{body}</root>'


class FakeUpstream:
    """제공자(provider) 단위로 응답을 등록하고, 받은 요청을 기록한다."""

    def __init__(self):
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []
        self.settled: List[str] = []

    # 등록
    def route(self, provider: str, fn: Route) -> None:
        self.routes[provider] = fn

    def json(self, provider: str, records: List[dict], total: Optional[int] = None, **kw) -> None:
        content = orjson.dumps(json_page(records, total, **kw))
        self.route(provider, lambda req: httpx.Response(200, content=content))

    def xml(self, provider: str, items: List[Dict[str, str]]) -> None:
        text = xml_list(PROVIDERS[provider].item_tag, items)
        self.route(provider, lambda req: httpx.Response(200, text=text))

    def totals(self, provider: str, param: str, counts: Dict[str, int]) -> None:
        """쿼리 파라미터 값별로 totCount만 다르게 응답 (통계용)."""

        def respond(req: httpx.Request) -> httpx.Response:
            total = counts.get(req.url.params.get(param, ""), 0)
            return httpx.Response(200, content=orjson.dumps(json_page([], total)))

        self.route(provider, respond)

    def keyed(self, provider: str, param: str, records: Dict[str, List[dict]]) -> None:
        """쿼리 파라미터 값별로 다른 레코드 목록 (상세조회용)."""

        def respond(req: httpx.Request) -> httpx.Response:
            found = records.get(req.url.params.get(param, ""), [])
            return httpx.Response(200, content=orjson.dumps(json_page(found)))

        self.route(provider, respond)

    def fail(self, provider: str, status: int = 500) -> None:
        self.route(provider, lambda req: httpx.Response(status, text="error"))

    def raw(self, provider: str, content: bytes, status: int = 200) -> None:
        self.route(provider, lambda req: httpx.Response(status, content=content))

    def delay(self, provider: str, seconds: float) -> None:
        """등록된 응답을 seconds 만큼 늦게 돌려주고, 끝나면 settled 에 기록."""
        inner = self.routes[provider]

        async def respond(req: httpx.Request) -> httpx.Response:
            await asyncio.sleep(seconds)
            self.settled.append(provider)
            return inner(req)

        self.route(provider, respond)

    # 조회
    def calls(self, provider: str) -> List[Dict[str, str]]:
        path = PROVIDERS[provider].path
        return [dict(r.url.params) for r in self.requests if r.url.path == path]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for key, provider in PROVIDERS.items():
            if request.url.path == provider.path and key in self.routes:
                response = self.routes[key](request)
                if inspect.isawaitable(response):
                    response = await response
                return response
        return httpx.Response(404, text="not registered")

    def client(self) -> UpstreamClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return UpstreamClient(http, TEST_SETTINGS)


@pytest.fixture
def fake():
    return FakeUpstream()


@pytest.fixture
async def upstream(fake):
    client = fake.client()
    yield client
    await client.http.aclose()


@pytest.fixture
def app(fake):
    """Create and configure a new app instance for each test."""
    app = create_app()

    async def override_upstream():
        client = fake.client()
        try:
            yield client
        finally:
            await client.http.aclose()

    app.dependency_overrides[get_upstream] = override_upstream
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """A test client for the app."""
    with TestClient(app) as client:
        yield client
