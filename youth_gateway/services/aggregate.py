# youth_gateway/services/aggregate.py

"""
통합(패키지) 조회

- 집계마다 주(primary) 호출 1개: 실패하면 집계 전체가 실패
- 나머지 보조 호출은 degrade()로 감싸 실패 시 빈 결과로 대체
- 모든 호출은 asyncio.gather로 동시에 (재시도 없음)
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, timedelta
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from youth_gateway.clients.upstream import UpstreamClient
from youth_gateway.core.codes import POLICY_CATEGORIES, REGION_CODES, RegionScope, ncs_name_of
from youth_gateway.schemas.aggregate import (
    ComparisonResult,
    EligibilityPackageResult,
    EmploymentPackageResult,
    MegaSearchResult,
    PolicyCenterResult,
    RegionAllResult,
    SmallGiantPackageResult,
    StatisticsResult,
    TrainingBridgeResult,
    UrgentDeadlinesResult,
    ZeroCostPlanResult,
)
from youth_gateway.schemas.records import Page, PolicyRecord
from youth_gateway.services import filters
from youth_gateway.services.queries import (
    center_query,
    company_query,
    job_query,
    policy_detail_query,
    policy_query,
    program_query,
    training_query,
)

log = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")

EMPLOYMENT_CATEGORY = "일자리"
MAX_COMPARE = 5

# 비용 제로 플랜 관심분야 → 정책 대분류 (전체는 분류 없음)
ZERO_COST_INTERESTS = {
    "취업": EMPLOYMENT_CATEGORY,
    "창업": EMPLOYMENT_CATEGORY,
    "주거": "주거",
    "교육": "교육",
    "전체": None,
}


async def degrade(call: Awaitable[T], fallback: T, source: str) -> T:
    """보조 호출 실패를 빈 결과로 바꾼다. 원인은 WARNING으로 남긴다."""
    try:
        return await call
    except Exception as e:
        log.warning("secondary source '%s' failed, using empty result: %s", source, e)
        return fallback


async def settle(*calls: Awaitable[Any]) -> List[Any]:
    """
    모든 호출이 끝날 때까지 기다린 뒤 결과를 순서대로 돌려준다.
    실패가 있으면 나머지가 모두 끝난 다음 첫 번째 실패를 다시 던진다.
    """
    results = await asyncio.gather(*calls, return_exceptions=True)
    for r in results:
        if isinstance(r, BaseException):
            raise r
    return list(results)


async def fan_out(primary: Awaitable[P], **secondaries: Tuple[Awaitable[Any], Any]) -> Tuple[P, Dict[str, Any]]:
    """
    primary와 보조 호출들을 동시에 실행.
    secondaries: 이름=(코루틴, 실패 시 대체값)
    """
    names = list(secondaries)
    results = await settle(
        primary,
        *(degrade(call, fallback, name) for name, (call, fallback) in secondaries.items()),
    )
    return results[0], dict(zip(names, results[1:]))


# 섹션은 dict로 넘겨 결과 모델이 Section[레코드]로 검증하게 한다
def _page_section(page: Page) -> Dict[str, Any]:
    return {"records": page.records, "total_count": page.total_count}


def _section(records: Iterable[Any], total_count: Optional[int] = None) -> Dict[str, Any]:
    return {"records": list(records), "total_count": total_count}


def _empty_page() -> Page:
    return Page()


# -------------------------
# 지역/통합 검색
# -------------------------
async def search_region_all(upstream: UpstreamClient, region: str, limit: int = 5) -> RegionAllResult:
    scope = RegionScope.resolve(region)
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(limit, scope=scope)),
        centers=(upstream.fetch_centers(center_query(limit, scope=scope)), _empty_page()),
        jobs=(upstream.fetch_job_postings(job_query(limit, scope=scope)), []),
        companies=(upstream.fetch_small_giant_companies(company_query(limit, scope=scope)), []),
    )
    return RegionAllResult(
        region=scope,
        policies=_page_section(policies),
        centers=_page_section(rest["centers"]),
        jobs=_section(rest["jobs"]),
        companies=_section(rest["companies"]),
    )


async def search_all(
    upstream: UpstreamClient,
    region: str,
    category: Optional[str] = None,
    policy_limit: int = 5,
    center_limit: int = 5,
) -> PolicyCenterResult:
    scope = RegionScope.resolve(region)
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(policy_limit, scope=scope, category=category)),
        centers=(upstream.fetch_centers(center_query(center_limit, scope=scope)), _empty_page()),
    )
    return PolicyCenterResult(
        region=scope,
        category=category,
        policies=_page_section(policies),
        centers=_page_section(rest["centers"]),
    )


async def mega_search(
    upstream: UpstreamClient,
    keyword: str,
    age: Optional[int] = None,
    region: Optional[str] = None,
    limit: int = 5,
) -> MegaSearchResult:
    scope = RegionScope.resolve(region)
    # 나이 필터로 줄어들 것을 감안해 정책은 2배로 받는다
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(limit * 2, scope=scope, plcyNm=keyword)),
        centers=(upstream.fetch_centers(center_query(limit, scope=scope)), _empty_page()),
        jobs=(upstream.fetch_job_postings(job_query(limit, scope=scope, keyword=keyword)), []),
        companies=(upstream.fetch_small_giant_companies(company_query(limit, scope=scope)), []),
        courses=(upstream.fetch_training_courses(training_query(limit, scope=scope, srchTraNm=keyword)), []),
        programs=(upstream.fetch_employment_programs(program_query(limit)), []),
    )
    records = policies.records
    if age is not None:
        records = filters.filter_by_age(records, age)
    return MegaSearchResult(
        region=scope,
        keyword=keyword,
        age=age,
        policies=_section(records[:limit], policies.total_count),
        centers=_page_section(rest["centers"]),
        jobs=_section(rest["jobs"]),
        companies=_section(rest["companies"]),
        courses=_section(rest["courses"]),
        programs=_section(rest["programs"]),
    )


# -------------------------
# 취업 / 훈련
# -------------------------
async def employment_full_package(
    upstream: UpstreamClient,
    job_keyword: str,
    region: Optional[str] = None,
    age: Optional[int] = None,
    career: str = "N",
) -> EmploymentPackageResult:
    scope = RegionScope.resolve(region)
    career = career or "N"
    jobs, rest = await fan_out(
        upstream.fetch_job_postings(job_query(10, scope=scope, keyword=job_keyword, career=career)),
        companies=(upstream.fetch_small_giant_companies(company_query(5, scope=scope)), []),
        courses=(upstream.fetch_training_courses(training_query(10, scope=scope, srchTraNm=job_keyword)), []),
        policies=(upstream.fetch_policies(policy_query(10, scope=scope, category=EMPLOYMENT_CATEGORY)), _empty_page()),
    )
    policies: List[PolicyRecord] = rest["policies"].records
    if age is not None:
        policies = filters.filter_by_age(policies, age)
    return EmploymentPackageResult(
        region=scope,
        job_keyword=job_keyword,
        age=age,
        career=career,
        jobs=_section(jobs),
        courses=_section(rest["courses"]),
        policies=_section(policies),
        companies=_section(rest["companies"]),
    )


async def training_job_bridge(
    upstream: UpstreamClient,
    training_keyword: str,
    region: Optional[str] = None,
    ncs_code: Optional[str] = None,
) -> TrainingBridgeResult:
    """훈련과정 조회 후 이어서 채용정보 조회. NCS 분류는 첫 과정의 ncsCd 앞 2자리."""
    scope = RegionScope.resolve(region)
    courses = await upstream.fetch_training_courses(
        training_query(10, scope=scope, srchTraNm=training_keyword, srchNcs1=ncs_code)
    )

    resolved = next((c.ncs_code[:2] for c in courses if c.ncs_code), None) or ncs_code
    jobs = await degrade(
        upstream.fetch_job_postings(job_query(10, scope=scope, keyword=training_keyword)),
        [],
        "job_posting",
    )
    return TrainingBridgeResult(
        region=scope,
        training_keyword=training_keyword,
        ncs_code=resolved,
        ncs_name=ncs_name_of(resolved) if resolved else None,
        courses=_section(courses),
        jobs=_section(jobs),
    )


# -------------------------
# 나이 기반 패키지
# -------------------------
async def get_survival_kit(
    upstream: UpstreamClient,
    age: int,
    region: str,
    interest: Optional[str] = None,
) -> EligibilityPackageResult:
    scope = RegionScope.resolve(region)
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(10, scope=scope, category=interest)),
        centers=(upstream.fetch_centers(center_query(3, scope=scope)), _empty_page()),
        programs=(upstream.fetch_employment_programs(program_query(3)), []),
    )
    return EligibilityPackageResult(
        region=scope,
        age=age,
        category=interest,
        policies=_section(filters.filter_by_age(policies.records, age), policies.total_count),
        centers=_page_section(rest["centers"]),
        programs=_section(rest["programs"]),
    )


async def personalized_recommendations(
    upstream: UpstreamClient,
    age: int,
    region: str,
    category: Optional[str] = None,
    employment_status: Optional[str] = None,
    income_level: Optional[str] = None,
) -> EligibilityPackageResult:
    scope = RegionScope.resolve(region)
    if category == "전체":
        category = None
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(30, scope=scope, category=category)),
        centers=(upstream.fetch_centers(center_query(5, scope=scope)), _empty_page()),
        programs=(upstream.fetch_employment_programs(program_query(5)), []),
    )
    return EligibilityPackageResult(
        region=scope,
        age=age,
        category=category,
        employment_status=employment_status,
        income_level=income_level,
        policies=_section(filters.filter_by_age(policies.records, age), policies.total_count),
        centers=_page_section(rest["centers"]),
        programs=_section(rest["programs"]),
    )


# -------------------------
# 강소기업
# -------------------------
async def small_giant_package(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    industry: Optional[str] = None,
    age: Optional[int] = None,
) -> SmallGiantPackageResult:
    scope = RegionScope.resolve(region)
    companies, rest = await fan_out(
        upstream.fetch_small_giant_companies(company_query(10, scope=scope)),
        policies=(upstream.fetch_policies(policy_query(15, scope=scope, category=EMPLOYMENT_CATEGORY)), _empty_page()),
        jobs=(upstream.fetch_job_postings(job_query(5, scope=scope, keyword=industry)), []),
    )
    policies: List[PolicyRecord] = rest["policies"].records
    if age is not None:
        policies = filters.filter_by_age(policies, age)
    return SmallGiantPackageResult(
        region=scope,
        industry=industry,
        age=age,
        companies=_section(companies),
        policies=_section(filters.filter_employment_policies(policies)),
        jobs=_section(rest["jobs"]),
    )


async def match_company_with_policies(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    limit: int = 5,
) -> SmallGiantPackageResult:
    scope = RegionScope.resolve(region)
    # 정책은 지역과 무관하게 일자리 분류 상위 5건
    companies, rest = await fan_out(
        upstream.fetch_small_giant_companies(company_query(limit, scope=scope)),
        policies=(upstream.fetch_policies(policy_query(5, category=EMPLOYMENT_CATEGORY)), _empty_page()),
    )
    return SmallGiantPackageResult(
        region=scope,
        companies=_section(companies),
        policies=_page_section(rest["policies"]),
        jobs=_section([]),
    )


# -------------------------
# 마감 임박 / 비용 제로
# -------------------------
async def urgent_deadlines(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    days_within: int = 7,
    category: Optional[str] = None,
    today: Optional[date] = None,
) -> UrgentDeadlinesResult:
    scope = RegionScope.resolve(region)
    days = days_within or 7
    base = today or filters.kst_today()
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(30, scope=scope, category=category)),
        jobs=(upstream.fetch_job_postings(job_query(20, scope=scope)), []),
        programs=(upstream.fetch_employment_programs(program_query(10)), []),
    )
    return UrgentDeadlinesResult(
        region=scope,
        days_within=days,
        category=category,
        today=base.isoformat(),
        deadline=(base + timedelta(days=days)).isoformat(),
        urgent_jobs=filters.filter_urgent_jobs(rest["jobs"], days, base),
        urgent_policies=filters.filter_urgent_policies(policies.records, days, base),
        policies=_page_section(policies),
        programs=_section(rest["programs"]),
    )


async def zero_cost_plan(
    upstream: UpstreamClient,
    region: str,
    age: Optional[int] = None,
    interest: Optional[str] = None,
) -> ZeroCostPlanResult:
    scope = RegionScope.resolve(region)
    category = ZERO_COST_INTERESTS.get(interest or "전체", interest)
    policies, rest = await fan_out(
        upstream.fetch_policies(policy_query(20, scope=scope, category=category)),
        centers=(upstream.fetch_centers(center_query(5, scope=scope)), _empty_page()),
        # 지역 단위 국비훈련 (키워드 없음)
        courses=(upstream.fetch_training_courses(training_query(10, scope=scope)), []),
        programs=(upstream.fetch_employment_programs(program_query(5)), []),
    )
    records = policies.records
    if age is not None:
        records = filters.filter_by_age(records, age)
    # 본문에 무료/국비 표현이 있는 정책을 우선, 하나도 없으면 전체를 보여준다
    free = filters.filter_free_policies(records)
    return ZeroCostPlanResult(
        region=scope,
        age=age,
        interest=interest,
        free_matched=bool(free),
        policies=_section(free or records),
        centers=_page_section(rest["centers"]),
        courses=_section(rest["courses"]),
        programs=_section(rest["programs"]),
    )


# -------------------------
# 통계 / 비교 (모든 호출 필수)
# -------------------------
async def _count_all(labels: Sequence[str], calls: Sequence[Awaitable[Page]]) -> Dict[str, int]:
    pages = await settle(*calls)
    counts = {label: page.total_count for label, page in zip(labels, pages)}
    return dict(sorted(counts.items(), key=lambda kv: kv[1], reverse=True))


async def policy_statistics(upstream: UpstreamClient, kind: str = "category") -> StatisticsResult:
    if kind == "category":
        labels = list(POLICY_CATEGORIES)
        calls = [upstream.fetch_policies(policy_query(1, category=c)) for c in labels]
    elif kind == "region":
        labels = list(REGION_CODES)
        calls = [upstream.fetch_policies(policy_query(1, scope=RegionScope.resolve(r))) for r in labels]
    else:
        raise ValueError(f"unknown statistics kind: {kind}")
    return StatisticsResult(kind=kind, counts=await _count_all(labels, calls))


async def center_statistics(upstream: UpstreamClient) -> StatisticsResult:
    labels = list(REGION_CODES)
    calls = [upstream.fetch_centers(center_query(1, scope=RegionScope.resolve(r))) for r in labels]
    return StatisticsResult(kind="center", counts=await _count_all(labels, calls))


async def compare_policies(upstream: UpstreamClient, policy_nos: Sequence[str]) -> ComparisonResult:
    if len(policy_nos) > MAX_COMPARE:
        return ComparisonResult(requested=list(policy_nos), over_limit=True)
    pages = await settle(*(upstream.fetch_policies(policy_detail_query(no)) for no in policy_nos))
    found = [page.records[0] for page in pages if page.records]
    return ComparisonResult(requested=list(policy_nos), policies=_section(found))
