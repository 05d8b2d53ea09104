# youth_gateway/services/lookup.py
# 단일 API 조회 (업스트림 1회 호출, 실패는 그대로 전파)

from __future__ import annotations

from typing import List, Optional

from youth_gateway.clients.upstream import UpstreamClient
from youth_gateway.core.codes import RegionScope
from youth_gateway.schemas.aggregate import AgeRecommendationResult
from youth_gateway.schemas.records import (
    CenterRecord,
    EmploymentProgramRecord,
    JobInfoRecord,
    JobPostingRecord,
    Page,
    PolicyRecord,
    SmallGiantCompanyRecord,
    TrainingCourseRecord,
)
from youth_gateway.services.filters import filter_by_age
from youth_gateway.services.queries import (
    cap,
    center_query,
    company_query,
    job_query,
    policy_detail_query,
    policy_query,
    program_query,
    training_query,
)


# -------------------------
# 온통청년 정책
# -------------------------
async def search_youth_policies(
    upstream: UpstreamClient,
    keyword: Optional[str] = None,
    region: Optional[str] = None,
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    page_num: int = 1,
    page_size: int = 10,
) -> Page[PolicyRecord]:
    return await upstream.fetch_policies(
        policy_query(
            cap(page_size, 10),
            page_num=page_num or 1,
            scope=RegionScope.resolve(region),
            category=category,
            plcyNm=keyword,
            mclsfNm=subcategory,
        )
    )


async def get_policy_detail(upstream: UpstreamClient, policy_no: str) -> Optional[PolicyRecord]:
    page = await upstream.fetch_policies(policy_detail_query(policy_no))
    return page.records[0] if page.records else None


async def recommend_policies_by_age(
    upstream: UpstreamClient,
    age: int,
    category: Optional[str] = None,
    region: Optional[str] = None,
    page_size: int = 20,
) -> AgeRecommendationResult:
    scope = RegionScope.resolve(region)
    page = await upstream.fetch_policies(policy_query(cap(page_size, 20), scope=scope, category=category))
    return AgeRecommendationResult(
        region=scope,
        age=age,
        category=category,
        fetched=len(page.records),
        policies={"records": filter_by_age(page.records, age), "total_count": page.total_count},
    )


async def get_policies_by_category(
    upstream: UpstreamClient,
    category: str,
    subcategory: Optional[str] = None,
    region: Optional[str] = None,
    page_num: int = 1,
    page_size: int = 10,
) -> Page[PolicyRecord]:
    return await upstream.fetch_policies(
        policy_query(
            cap(page_size, 10),
            page_num=page_num or 1,
            scope=RegionScope.resolve(region),
            category=category,
            mclsfNm=subcategory,
        )
    )


async def get_policies_by_region(
    upstream: UpstreamClient,
    region: str,
    category: Optional[str] = None,
    page_num: int = 1,
    page_size: int = 15,
) -> Page[PolicyRecord]:
    return await upstream.fetch_policies(
        policy_query(
            cap(page_size, 15),
            page_num=page_num or 1,
            scope=RegionScope.resolve(region),
            category=category,
        )
    )


async def search_policies_by_keyword(
    upstream: UpstreamClient,
    keywords: str,
    region: Optional[str] = None,
    category: Optional[str] = None,
    page_size: int = 15,
) -> Page[PolicyRecord]:
    # 정책명(plcyNm)이 아니라 정책 키워드(plcyKywdNm)로 검색
    return await upstream.fetch_policies(
        policy_query(
            cap(page_size, 15),
            scope=RegionScope.resolve(region),
            category=category,
            plcyKywdNm=keywords,
        )
    )


# -------------------------
# 온통청년 센터
# -------------------------
async def search_youth_centers(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    sgg_cd: Optional[str] = None,
    page_num: int = 1,
    page_size: int = 10,
) -> Page[CenterRecord]:
    return await upstream.fetch_centers(
        center_query(cap(page_size, 10), page_num=page_num or 1, scope=RegionScope.resolve(region), sggCd=sgg_cd)
    )


async def get_center_detail(upstream: UpstreamClient, center_sn: str) -> Optional[CenterRecord]:
    page = await upstream.fetch_centers({"plcSn": center_sn})
    return page.records[0] if page.records else None


# -------------------------
# 고용24
# -------------------------
async def search_job_postings(
    upstream: UpstreamClient,
    keyword: Optional[str] = None,
    region: Optional[str] = None,
    career: Optional[str] = None,
    education: Optional[str] = None,
    salary_type: Optional[str] = None,
    employment_type: Optional[str] = None,
    start_page: int = 1,
    display: int = 10,
) -> List[JobPostingRecord]:
    return await upstream.fetch_job_postings(
        job_query(
            cap(display, 10),
            start_page=start_page or 1,
            scope=RegionScope.resolve(region),
            keyword=keyword,
            career=career,
            education=education,
            salTp=salary_type,
            empTp=employment_type,
        )
    )


async def search_small_giant_companies(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    start_page: int = 1,
    display: int = 10,
) -> List[SmallGiantCompanyRecord]:
    return await upstream.fetch_small_giant_companies(
        company_query(cap(display, 10), start_page=start_page or 1, scope=RegionScope.resolve(region))
    )


async def search_job_info(
    upstream: UpstreamClient,
    keyword: Optional[str] = None,
    avg_salary: Optional[str] = None,
    prospect: Optional[str] = None,
) -> List[JobInfoRecord]:
    # 키워드가 있으면 키워드 검색(K), 없으면 조건 검색(C)
    if keyword:
        params = {"srchType": "K", "keyword": keyword}
    else:
        params = {"srchType": "C", "avgSal": avg_salary, "prospect": prospect}
    return await upstream.fetch_job_info(params)


async def search_training_courses(
    upstream: UpstreamClient,
    region: Optional[str] = None,
    ncs_code: Optional[str] = None,
    keyword: Optional[str] = None,
    training_type: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    page_num: int = 1,
    page_size: int = 10,
) -> List[TrainingCourseRecord]:
    return await upstream.fetch_training_courses(
        training_query(
            cap(page_size, 10),
            page_num=page_num or 1,
            scope=RegionScope.resolve(region),
            start_date=start_date,
            end_date=end_date,
            sort="DESC",
            sortCol="2",
            srchNcs1=ncs_code,
            srchTraNm=keyword,
            crseTracseSe=training_type,
        )
    )


async def search_employment_programs(
    upstream: UpstreamClient,
    start_page: int = 1,
    display: int = 10,
) -> List[EmploymentProgramRecord]:
    return await upstream.fetch_employment_programs(program_query(cap(display, 10), start_page=start_page or 1))
