# youth_gateway/tools/registry.py

"""
도구 카탈로그 + 호출 경계

- 도구 = 이름 / 설명 / 파라미터 모델 / 핸들러
- invoke()가 유일한 오류 경계: 어떤 실패도 ToolResult(is_error=True)로 바뀌고
  호출자(HTTP, MCP)에게 예외가 새어 나가지 않는다
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type

import httpx
from pydantic import ValidationError

from youth_gateway.clients.upstream import UpstreamClient
from youth_gateway.core.codes import RegionScope
from youth_gateway.core.errors import UpstreamError
from youth_gateway.render import markdown as md
from youth_gateway.services import aggregate, lookup
from youth_gateway.tools import params as p

log = logging.getLogger(__name__)

Handler = Callable[[UpstreamClient, Any], Awaitable[str]]


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    params: Type[p.ToolParams]
    handler: Handler

    def input_schema(self) -> Dict[str, Any]:
        return self.params.model_json_schema(by_alias=True)


# -------------------------
# 핸들러: 서비스 호출 → Markdown
# -------------------------
async def _search_youth_policies(up: UpstreamClient, a: p.SearchYouthPoliciesParams) -> str:
    page = await lookup.search_youth_policies(
        up, a.keyword, a.region, a.category, a.subcategory, a.page_num, a.page_size
    )
    return md.render_policy_search(page, a.page_num)


async def _get_policy_detail(up: UpstreamClient, a: p.PolicyNoParams) -> str:
    return md.render_policy_detail(await lookup.get_policy_detail(up, a.policy_no), a.policy_no)


async def _search_youth_centers(up: UpstreamClient, a: p.SearchYouthCentersParams) -> str:
    page = await lookup.search_youth_centers(up, a.region, a.sgg_cd, a.page_num, a.page_size)
    return md.render_center_search(page)


async def _get_center_detail(up: UpstreamClient, a: p.CenterSnParams) -> str:
    return md.render_center_detail(await lookup.get_center_detail(up, a.center_sn), a.center_sn)


async def _recommend_policies_by_age(up: UpstreamClient, a: p.RecommendByAgeParams) -> str:
    result = await lookup.recommend_policies_by_age(up, a.age, a.category, a.region, a.page_size)
    return md.render_age_recommendation(result)


async def _get_policies_by_category(up: UpstreamClient, a: p.PoliciesByCategoryParams) -> str:
    page = await lookup.get_policies_by_category(up, a.category, a.subcategory, a.region, a.page_num, a.page_size)
    return md.render_policies_by_category(page, a.category, a.subcategory)


async def _get_policies_by_region(up: UpstreamClient, a: p.PoliciesByRegionParams) -> str:
    page = await lookup.get_policies_by_region(up, a.region, a.category, a.page_num, a.page_size)
    scope = RegionScope.resolve(a.region)
    return md.render_policies_by_region(page, scope.name if scope else "전국")


async def _search_policies_by_keyword(up: UpstreamClient, a: p.KeywordSearchParams) -> str:
    page = await lookup.search_policies_by_keyword(up, a.keywords, a.region, a.category, a.page_size)
    return md.render_keyword_search(page, a.keywords)


async def _check_policy_eligibility(up: UpstreamClient, a: p.EligibilityParams) -> str:
    policy = await lookup.get_policy_detail(up, a.policy_no)
    return md.render_eligibility(policy, a.policy_no, a.age)


async def _search_job_postings(up: UpstreamClient, a: p.SearchJobPostingsParams) -> str:
    jobs = await lookup.search_job_postings(
        up, a.keyword, a.region, a.career, a.education, a.salary_type, a.employment_type, a.start_page, a.display
    )
    return md.render_job_postings(jobs, a.keyword, a.region)


async def _search_small_giant_companies(up: UpstreamClient, a: p.SmallGiantSearchParams) -> str:
    companies = await lookup.search_small_giant_companies(up, a.region, a.start_page, a.display)
    return md.render_small_giant_companies(companies, a.region)


async def _search_job_info(up: UpstreamClient, a: p.JobInfoParams) -> str:
    return md.render_job_info(await lookup.search_job_info(up, a.keyword, a.avg_salary, a.prospect))


async def _search_training_courses(up: UpstreamClient, a: p.TrainingSearchParams) -> str:
    courses = await lookup.search_training_courses(
        up, a.region, a.ncs_code, a.keyword, a.training_type, a.start_date, a.end_date, a.page_num, a.page_size
    )
    return md.render_training_courses(courses, a.region)


async def _search_employment_programs(up: UpstreamClient, a: p.ProgramSearchParams) -> str:
    return md.render_employment_programs(await lookup.search_employment_programs(up, a.start_page, a.display))


async def _search_region_all(up: UpstreamClient, a: p.RegionAllParams) -> str:
    return md.render_region_all(await aggregate.search_region_all(up, a.region, a.limit))


async def _match_company_with_policies(up: UpstreamClient, a: p.CompanyMatchParams) -> str:
    return md.render_company_match(await aggregate.match_company_with_policies(up, a.region, a.limit))


async def _get_survival_kit(up: UpstreamClient, a: p.SurvivalKitParams) -> str:
    return md.render_survival_kit(await aggregate.get_survival_kit(up, a.age, a.region, a.interest))


async def _search_all(up: UpstreamClient, a: p.SearchAllParams) -> str:
    result = await aggregate.search_all(up, a.region, a.category, a.policy_limit, a.center_limit)
    return md.render_search_all(result)


async def _compare_policies(up: UpstreamClient, a: p.CompareParams) -> str:
    return md.render_comparison(await aggregate.compare_policies(up, a.policy_nos))


async def _get_policy_statistics(up: UpstreamClient, a: p.PolicyStatisticsParams) -> str:
    return md.render_policy_statistics(await aggregate.policy_statistics(up, a.kind))


async def _get_center_statistics(up: UpstreamClient, a: p.EmptyParams) -> str:
    return md.render_center_statistics(await aggregate.center_statistics(up))


async def _mega_search(up: UpstreamClient, a: p.MegaSearchParams) -> str:
    return md.render_mega_search(await aggregate.mega_search(up, a.keyword, a.age, a.region, a.limit))


async def _employment_full_package(up: UpstreamClient, a: p.EmploymentPackageParams) -> str:
    result = await aggregate.employment_full_package(up, a.job_keyword, a.region, a.age, a.career)
    return md.render_employment_package(result)


async def _training_job_bridge(up: UpstreamClient, a: p.TrainingBridgeParams) -> str:
    result = await aggregate.training_job_bridge(up, a.training_keyword, a.region, a.ncs_code)
    return md.render_training_bridge(result)


async def _personalized_recommendations(up: UpstreamClient, a: p.PersonalizedParams) -> str:
    result = await aggregate.personalized_recommendations(
        up, a.age, a.region, a.category, a.employment_status, a.income_level
    )
    return md.render_personalized(result)


async def _small_giant_package(up: UpstreamClient, a: p.SmallGiantPackageParams) -> str:
    return md.render_small_giant_package(await aggregate.small_giant_package(up, a.region, a.industry, a.age))


async def _urgent_deadlines(up: UpstreamClient, a: p.UrgentParams) -> str:
    return md.render_urgent(await aggregate.urgent_deadlines(up, a.region, a.days_within, a.category))


async def _zero_cost_plan(up: UpstreamClient, a: p.ZeroCostParams) -> str:
    return md.render_zero_cost(await aggregate.zero_cost_plan(up, a.region, a.age, a.interest))


async def _get_help(up: UpstreamClient, a: p.EmptyParams) -> str:
    return md.render_help([f"- **{t.name}**: {t.description}" for t in TOOLS.values()])


def _catalog(*tools: Tool) -> Mapping[str, Tool]:
    return MappingProxyType({t.name: t for t in tools})


TOOLS: Mapping[str, Tool] = _catalog(
    # 온통청년 - 정책/센터
    Tool("search_youth_policies", "청년정책을 검색합니다. 키워드, 지역, 분류 등으로 검색할 수 있습니다.",
         p.SearchYouthPoliciesParams, _search_youth_policies),
    Tool("get_policy_detail", "정책번호로 청년정책의 상세 정보를 조회합니다.",
         p.PolicyNoParams, _get_policy_detail),
    Tool("search_youth_centers", "전국 청년센터를 검색합니다. 지역별로 검색할 수 있습니다.",
         p.SearchYouthCentersParams, _search_youth_centers),
    Tool("get_center_detail", "센터 일련번호로 청년센터의 상세 정보를 조회합니다.",
         p.CenterSnParams, _get_center_detail),
    Tool("recommend_policies_by_age", "나이에 맞는 청년정책을 추천합니다.",
         p.RecommendByAgeParams, _recommend_policies_by_age),
    Tool("get_policies_by_category", "분류별로 청년정책을 조회합니다.",
         p.PoliciesByCategoryParams, _get_policies_by_category),
    Tool("get_policies_by_region", "특정 지역의 청년정책을 조회합니다.",
         p.PoliciesByRegionParams, _get_policies_by_region),
    # 고용24 - 채용/기업/훈련
    Tool("search_job_postings", "채용정보를 검색합니다. 지역, 직종, 학력, 경력 등으로 필터링 가능합니다.",
         p.SearchJobPostingsParams, _search_job_postings),
    Tool("search_small_giant_companies", "청년친화강소기업을 검색합니다.",
         p.SmallGiantSearchParams, _search_small_giant_companies),
    Tool("search_job_info", "직업정보를 검색합니다. 키워드 또는 조건으로 검색 가능합니다.",
         p.JobInfoParams, _search_job_info),
    Tool("search_training_courses", "국민내일배움카드 훈련과정을 검색합니다.",
         p.TrainingSearchParams, _search_training_courses),
    Tool("search_employment_programs", "고용센터 취업역량 강화프로그램을 검색합니다.",
         p.ProgramSearchParams, _search_employment_programs),
    # 통합 검색
    Tool("search_region_all", "지역 기반으로 정책, 센터, 채용, 강소기업을 통합 검색합니다.",
         p.RegionAllParams, _search_region_all),
    Tool("match_company_with_policies", "강소기업 정보와 관련 청년정책을 함께 제공합니다.",
         p.CompanyMatchParams, _match_company_with_policies),
    Tool("get_survival_kit", "청년 상황에 맞는 정책, 센터, 프로그램 패키지를 한 번에 제공합니다.",
         p.SurvivalKitParams, _get_survival_kit),
    # 유틸리티
    Tool("search_all", "청년정책과 청년센터를 동시에 검색합니다.",
         p.SearchAllParams, _search_all),
    Tool("compare_policies", "여러 정책을 비교합니다.",
         p.CompareParams, _compare_policies),
    Tool("check_policy_eligibility", "특정 정책에 대한 자격요건을 확인합니다.",
         p.EligibilityParams, _check_policy_eligibility),
    Tool("search_policies_by_keyword", "키워드로 청년정책을 검색합니다.",
         p.KeywordSearchParams, _search_policies_by_keyword),
    Tool("get_policy_statistics", "청년정책 통계를 조회합니다.",
         p.PolicyStatisticsParams, _get_policy_statistics),
    Tool("get_center_statistics", "전국 청년센터 통계를 조회합니다.",
         p.EmptyParams, _get_center_statistics),
    # 고급 통합
    Tool("mega_search", "키워드 하나로 정책, 센터, 채용, 훈련, 강소기업 등 모든 정보를 통합 검색합니다.",
         p.MegaSearchParams, _mega_search),
    Tool("employment_full_package", "목표 직종을 입력하면 관련 채용정보, 훈련, 지원 정책, 강소기업을 한번에 제공합니다.",
         p.EmploymentPackageParams, _employment_full_package),
    Tool("training_job_bridge", "훈련과정 검색 후 해당 훈련과 연관된 채용정보를 NCS 분류와 함께 매칭합니다.",
         p.TrainingBridgeParams, _training_job_bridge),
    Tool("personalized_recommendations", "나이, 지역, 관심분야, 취업상태에 맞는 정책과 프로그램만 추천합니다.",
         p.PersonalizedParams, _personalized_recommendations),
    Tool("small_giant_package", "강소기업 정보와 함께 취업 시 받을 수 있는 혜택 정책과 채용공고를 제공합니다.",
         p.SmallGiantPackageParams, _small_giant_package),
    Tool("urgent_deadlines", "마감이 임박한 채용, 정책, 프로그램을 긴급도 순으로 보여줍니다.",
         p.UrgentParams, _urgent_deadlines),
    Tool("zero_cost_plan", "무료로 이용 가능한 정책, 국비지원 훈련, 무료 상담만 모아서 보여줍니다.",
         p.ZeroCostParams, _zero_cost_plan),
    Tool("get_help", "사용법과 제공 도구를 안내합니다.",
         p.EmptyParams, _get_help),
)


def list_tools() -> List[Tool]:
    return list(TOOLS.values())


def get_tool(name: str) -> Optional[Tool]:
    return TOOLS.get(name)


def _describe_validation(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


async def invoke(name: str, arguments: Optional[Dict[str, Any]], upstream: UpstreamClient) -> ToolResult:
    tool = TOOLS.get(name)
    if tool is None:
        return ToolResult(f"알 수 없는 도구입니다: {name}", is_error=True)

    try:
        args = tool.params.model_validate(arguments or {})
    except ValidationError as e:
        return ToolResult(f"오류 발생: 필수 파라미터가 없거나 형식이 잘못되었습니다 ({_describe_validation(e)})", is_error=True)

    try:
        text = await tool.handler(upstream, args)
    except (UpstreamError, httpx.HTTPError) as e:
        log.warning("tool %s failed: %s", name, e)
        return ToolResult(f"오류 발생: {str(e) or type(e).__name__}", is_error=True)
    except Exception as e:
        log.exception("tool %s crashed", name)
        return ToolResult(f"오류 발생: {str(e) or '알 수 없는 오류'}", is_error=True)
    return ToolResult(text)
