# youth_gateway/clients/upstream.py

"""
업스트림 API 클라이언트

- 호출 1회 = HTTP GET 1회 (재시도/백오프 없음)
- JSON 제공자(온통청년): HTTP 상태 + resultCode 검사 후 Page[레코드] 반환
- XML 제공자(고용24): HTTP 상태만 검사, 아이템 추출 후 list[레코드] 반환
  (아이템이 없으면 빈 리스트, 태그가 없으면 빈 문자열: 내용 때문에 실패하지 않음)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
import orjson

from youth_gateway.clients.providers import PROVIDERS, Host, ProviderConfig, ResponseKind
from youth_gateway.core.config import Settings, settings
from youth_gateway.core.errors import UpstreamDecodeError, UpstreamHTTPError, UpstreamResultError
from youth_gateway.core.xml import extract_items, extract_value
from youth_gateway.schemas.records import (
    CenterRecord,
    EmploymentProgramRecord,
    JobInfoRecord,
    JobPostingRecord,
    Page,
    PagingInfo,
    PolicyRecord,
    SmallGiantCompanyRecord,
    TrainingCourseRecord,
    UpstreamRecord,
)

log = logging.getLogger(__name__)

Params = Mapping[str, Any]


def clean_params(params: Optional[Params]) -> Dict[str, str]:
    """생략된(None/빈 문자열) 파라미터는 버리고 나머지는 문자열로."""
    out: Dict[str, str] = {}
    for k, v in (params or {}).items():
        if v is None or v == "":
            continue
        out[k] = str(v)
    return out


def parse_xml_records(xml: str, provider: ProviderConfig) -> List[UpstreamRecord]:
    fields = provider.fields
    return [
        provider.record.model_validate({name: extract_value(item, name) for name in fields})
        for item in extract_items(xml, provider.item_tag)
    ]


def provider_of(key: str, kind: ResponseKind) -> ProviderConfig:
    """제공자 설정 조회. 응답 형식이 다른 경로로 부르면 ValueError."""
    provider = PROVIDERS.get(key)
    if provider is None:
        raise ValueError(f"unknown provider: {key}")
    if provider.kind is not kind:
        raise ValueError(f"provider {key} returns {provider.kind.value}, not {kind.value}")
    return provider


def _result_code_ok(code: Any, expected: int) -> bool:
    try:
        return int(code) == expected
    except (TypeError, ValueError):
        return False


class UpstreamClient:
    """요청마다 새로 만들어 쓰는 얇은 클라이언트. 공유 상태 없음."""

    def __init__(self, http: httpx.AsyncClient, cfg: Settings = settings):
        self.http = http
        self.cfg = cfg

    def url_for(self, provider: ProviderConfig) -> str:
        base = self.cfg.youthcenter_base_url if provider.host is Host.YOUTHCENTER else self.cfg.work24_base_url
        return base.rstrip("/") + provider.path

    def build_params(self, provider: ProviderConfig, params: Optional[Params]) -> Dict[str, str]:
        query = {provider.key_param: getattr(self.cfg, provider.key_setting)}
        query.update(provider.defaults)
        query.update(clean_params(params))
        return query

    async def _get(self, provider: ProviderConfig, params: Optional[Params]) -> httpx.Response:
        r = await self.http.get(self.url_for(provider), params=self.build_params(provider, params))
        if not r.is_success:
            log.warning("upstream %s failed: status=%s", provider.key, r.status_code)
            raise UpstreamHTTPError(provider.key, r.status_code)
        return r

    async def fetch_page(self, key: str, params: Optional[Params] = None) -> Page:
        provider = provider_of(key, ResponseKind.JSON)
        r = await self._get(provider, params)

        try:
            js = orjson.loads(r.content)
        except orjson.JSONDecodeError as e:
            raise UpstreamDecodeError(provider.key, "Invalid JSON response") from e
        if not isinstance(js, dict):
            raise UpstreamDecodeError(provider.key, "Invalid JSON response")

        if not _result_code_ok(js.get("resultCode"), provider.success_code):
            raise UpstreamResultError(provider.key, js.get("resultCode"), js.get("resultMessage") or "알 수 없는 오류")

        result = js.get("result")
        if not isinstance(result, dict):
            result = {}
        items = result.get(provider.list_key) or []
        paging = result.get("pagging") or result.get("paging") or {}

        records = [provider.record.model_validate(x) for x in items if isinstance(x, dict)]
        log.debug("upstream %s ok: %d records (total=%s)", provider.key, len(records), paging.get("totCount"))
        return Page[provider.record](records=records, paging=PagingInfo.model_validate(paging))

    async def fetch_list(self, key: str, params: Optional[Params] = None) -> List[UpstreamRecord]:
        provider = provider_of(key, ResponseKind.XML)
        r = await self._get(provider, params)
        records = parse_xml_records(r.text, provider)
        log.debug("upstream %s ok: %d records", provider.key, len(records))
        return records

    # -------------------------
    # 제공자별 진입점
    # -------------------------
    async def fetch_policies(self, params: Optional[Params] = None) -> Page[PolicyRecord]:
        return await self.fetch_page("policy", params)

    async def fetch_centers(self, params: Optional[Params] = None) -> Page[CenterRecord]:
        return await self.fetch_page("center", params)

    async def fetch_job_postings(self, params: Optional[Params] = None) -> List[JobPostingRecord]:
        return await self.fetch_list("job_posting", params)

    async def fetch_small_giant_companies(self, params: Optional[Params] = None) -> List[SmallGiantCompanyRecord]:
        return await self.fetch_list("small_giant", params)

    async def fetch_job_info(self, params: Optional[Params] = None) -> List[JobInfoRecord]:
        return await self.fetch_list("job_info", params)

    async def fetch_training_courses(self, params: Optional[Params] = None) -> List[TrainingCourseRecord]:
        return await self.fetch_list("training", params)

    async def fetch_employment_programs(self, params: Optional[Params] = None) -> List[EmploymentProgramRecord]:
        return await self.fetch_list("employment_program", params)
