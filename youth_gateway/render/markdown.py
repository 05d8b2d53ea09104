# youth_gateway/render/markdown.py

"""
조회 결과 → Markdown 텍스트

- 레코드 타입별 brief / detailed 포맷
- 도구(작업)별 렌더러 1개씩
- 빈 섹션은 생략하지 않고 기울임 안내 문구를 넣는다
- 주 결과가 비면 NO_RESULTS (오류 아님)
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from youth_gateway.core.codes import NCS_CATEGORIES, POLICY_CATEGORIES, REGION_CODES
from youth_gateway.schemas.aggregate import (
    AgeRecommendationResult,
    ComparisonResult,
    EligibilityPackageResult,
    EmploymentPackageResult,
    MegaSearchResult,
    PolicyCenterResult,
    RegionAllResult,
    Section,
    SmallGiantPackageResult,
    StatisticsResult,
    TrainingBridgeResult,
    UrgentDeadlinesResult,
    UrgentItem,
    ZeroCostPlanResult,
)
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
from youth_gateway.services.filters import age_eligibility

T = TypeVar("T")

NO_RESULTS = "검색 결과가 없습니다. 다른 검색 조건을 시도해보세요."
EMPTY_SECTION = "_검색 결과 없음_"
TOO_MANY_TO_COMPARE = "최대 5개까지만 비교할 수 있습니다."

CAREER_LABELS = {"N": "신입", "E": "경력", "Z": "무관"}

STATUS_TIPS = {
    "구직중": "**구직자 추천:** 취업성공패키지, 국민취업지원제도를 우선 확인하세요!",
    "창업준비": "**창업준비생 추천:** 청년창업사관학교, 창업지원금 정책을 확인하세요!",
    "학생": "**학생 추천:** 국가장학금, 학자금대출, 인턴십 프로그램을 확인하세요!",
}

EMPLOYMENT_BENEFITS_TIP = "**TIP:** 강소기업 취업 시 '청년내일채움공제', '중소기업취업청년 소득세 감면' 혜택을 꼭 확인하세요!"


def lines(*parts: Optional[str]) -> str:
    """None은 건너뛰고 줄바꿈으로 잇는다. 빈 문자열은 빈 줄로 남긴다."""
    return "\n".join(p for p in parts if p is not None)


def _opt(cond: object, text: str) -> Optional[str]:
    return text if cond else None


def _clip(text: str, n: int) -> str:
    return text[:n] + ("..." if len(text) > n else "")


def section(
    title: str,
    records: Sequence[T],
    fmt: Callable[[T], str],
    empty: str = EMPTY_SECTION,
) -> str:
    body = "\n".join(fmt(r) for r in records) if records else empty
    return f"## {title}\n{body}\n"


def _count_title(label: str, sec: Section) -> str:
    if sec.total_count:
        return f"{label} ({sec.total_count}개 중 {sec.count}개)"
    return f"{label} ({sec.count}개)"


# -------------------------
# 레코드 포맷
# -------------------------
def policy_brief(p: PolicyRecord) -> str:
    return lines(
        f"### {p.name}",
        f"- **번호:** {p.policy_no}",
        f"- **분류:** {p.category_large} > {p.category_medium}",
        f"- **연령:** {p.min_age or '?'} ~ {p.max_age or '?'}세",
        f"- **신청:** {p.apply_period or '상시'}",
        _opt(p.description, f"- **설명:** {_clip(p.description, 100)}"),
        "",
    )


def policy_detailed(p: PolicyRecord) -> str:
    return lines(
        f"## {p.name}",
        "",
        f"**정책번호:** {p.policy_no}",
        f"**분류:** {p.category_large} > {p.category_medium}",
        _opt(p.keywords, f"**키워드:** {p.keywords}"),
        "",
        "### 정책 설명",
        p.description or "정보 없음",
        "",
        "### 지원 내용",
        p.support_content or "정보 없음",
        "",
        "### 지원 대상",
        f"- **지원연령:** {p.min_age or '제한없음'} ~ {p.max_age or '제한없음'}세",
        _opt(p.additional_qualification, f"- **추가자격조건:** {p.additional_qualification}"),
        _opt(p.participant_target, f"- **참여대상:** {p.participant_target}"),
        "",
        "### 신청 정보",
        f"- **주관기관:** {p.supervising_org or '정보 없음'}",
        f"- **운영기관:** {p.operating_org or '정보 없음'}",
        f"- **신청기간:** {p.apply_period or '상시'}",
        f"- **사업기간:** {p.biz_start or '?'} ~ {p.biz_end or '?'}",
        _opt(p.support_scale, f"- **지원규모:** {p.support_scale}명"),
        "",
        "### 신청 방법",
        p.apply_method or "정보 없음",
        "",
        _opt(p.documents, f"### 제출서류\n{p.documents}"),
        _opt(p.screening_method, f"### 심사방법\n{p.screening_method}"),
        _opt(p.etc, f"### 기타사항\n{p.etc}"),
        _opt(p.apply_url, f"**신청 URL:** {p.apply_url}"),
        _opt(p.ref_url_1, f"**참고 URL:** {p.ref_url_1}"),
        "",
        "---",
    )


def center_detailed(c: CenterRecord) -> str:
    return lines(
        f"## {c.name}",
        "",
        f"- **센터번호:** {c.center_sn}",
        f"- **지역:** {c.province_name} {c.district_name}".rstrip(),
        f"- **주소:** {c.address} {c.address_detail}".rstrip(),
        f"- **전화번호:** {c.phone or '정보 없음'}",
        _opt(c.url, f"- **홈페이지:** {c.url}"),
        "",
        "---",
    )


def center_brief(c: CenterRecord) -> str:
    return lines(
        f"### {c.name}",
        f"- **주소:** {c.address}",
        f"- **전화:** {c.phone or '정보 없음'}",
        "",
    )


def job_posting(j: JobPostingRecord) -> str:
    return lines(
        f"### {j.title}",
        f"- **회사:** {j.company}",
        f"- **지역:** {j.region or j.work_region}",
        f"- **급여:** {j.salary_type} {j.salary}".rstrip(),
        f"- **학력:** {j.min_education}",
        f"- **경력:** {j.career}",
        f"- **고용형태:** {j.employment_type}",
        f"- **마감일:** {j.close_date}",
        _opt(j.detail_url, f"- **상세보기:** {j.detail_url}"),
        "",
    )


def small_giant(c: SmallGiantCompanyRecord) -> str:
    return lines(
        f"### {c.name}",
        _opt(c.brand, f"- **브랜드:** {c.brand}"),
        f"- **대표자:** {c.ceo}",
        f"- **업종:** {c.industry}",
        f"- **주소:** {c.address}",
        f"- **연락처:** {c.phone}",
        f"- **상시근로자:** {c.employee_count}명",
        _opt(c.main_product, f"- **주요생산품:** {c.main_product}"),
        _opt(c.homepage, f"- **홈페이지:** {c.homepage}"),
        f"- **선정연도:** {c.selection_year}",
        "",
    )


def training_course(c: TrainingCourseRecord) -> str:
    return lines(
        f"### {c.name}",
        f"- **훈련기관:** {c.institution}",
        f"- **주소:** {c.address}",
        f"- **훈련기간:** {c.start_date} ~ {c.end_date}",
        f"- **정원:** {c.planned_capacity}명 (실제 {c.actual_capacity}명)",
        _opt(c.employment_rate_3m, f"- **취업률:** {c.employment_rate_3m}%"),
        _opt(c.grade, f"- **만족도:** {c.grade}점"),
        _opt(c.ncs_name, f"- **NCS분류:** {c.ncs_name}"),
        f"- **연락처:** {c.phone}",
        "",
    )


def training_course_free(c: TrainingCourseRecord) -> str:
    return lines(
        f"### {c.name}",
        f"- **기관:** {c.institution}",
        f"- **기간:** {c.start_date} ~ {c.end_date}",
        "- **자부담:** 국비지원 (카드 발급 필요)",
        _opt(c.employment_rate_3m, f"- **취업률:** {c.employment_rate_3m}%"),
        "",
    )


def employment_program(p: EmploymentProgramRecord) -> str:
    return lines(
        f"### {p.program_name}",
        f"- **과정명:** {p.course_name}",
        f"- **고용센터:** {p.org_name}",
        f"- **대상:** {p.target}",
        f"- **기간:** {p.start_date} ~ {p.end_date}",
        f"- **시간:** {p.start_time} ({p.hours}시간)",
        f"- **장소:** {p.venue}",
        "",
    )


def job_info(j: JobInfoRecord) -> str:
    return lines(
        f"### {j.name}",
        f"- **직업코드:** {j.job_code}",
        f"- **분류:** {j.classification_name}",
        "",
    )


def urgent_job(item: UrgentItem[JobPostingRecord]) -> str:
    j = item.record
    return lines(
        f"### [D-{item.days_left}] {j.title}",
        f"- **회사:** {j.company}",
        f"- **마감:** {j.close_date}",
        f"- **지역:** {j.region or j.work_region}",
        _opt(j.detail_url, f"- **지원:** {j.detail_url}"),
        "",
    )


def urgent_policy(item: UrgentItem[PolicyRecord]) -> str:
    p = item.record
    return lines(
        f"### [D-{item.days_left}] {p.name}",
        f"- **지원기간:** {p.support_term or p.apply_period}",
        f"- **분류:** {p.category_large}",
        "",
    )


def policy_apply_period(p: PolicyRecord) -> str:
    return lines(
        f"### {p.name}",
        f"- **신청기간:** {p.apply_period or '상시'}",
        f"- **분류:** {p.category_large}",
        "",
    )


# -------------------------
# 단일 조회
# -------------------------
def render_policy_search(page: Page[PolicyRecord], page_num: int = 1) -> str:
    if not page.records:
        return NO_RESULTS
    return lines(
        "# 청년정책 검색 결과",
        f"총 **{page.total_count}개** 중 {len(page.records)}개 표시 (페이지 {page_num})",
        "",
        *map(policy_brief, page.records),
    )


def render_policy_detail(policy: Optional[PolicyRecord], policy_no: str) -> str:
    if policy is None:
        return f"정책번호 '{policy_no}'에 해당하는 정책을 찾을 수 없습니다."
    return lines(
        "# 청년정책 상세 정보",
        "",
        policy_detailed(policy),
        "",
        f"**조회수:** {policy.view_count or 0}회",
    )


def render_center_search(page: Page[CenterRecord]) -> str:
    if not page.records:
        return NO_RESULTS
    return lines(
        "# 청년센터 검색 결과",
        f"총 **{page.total_count}개** 중 {len(page.records)}개 센터",
        "",
        *map(center_detailed, page.records),
    )


def render_center_detail(center: Optional[CenterRecord], center_sn: str) -> str:
    if center is None:
        return f"센터 일련번호 '{center_sn}'에 해당하는 센터를 찾을 수 없습니다."
    return lines("# 청년센터 상세 정보", "", center_detailed(center))


def render_age_recommendation(result: AgeRecommendationResult) -> str:
    if result.policies.is_empty:
        return f"{result.age}세에 해당하는 정책을 찾을 수 없습니다. 다른 검색 조건을 시도해보세요."
    return lines(
        f"# {result.age}세 맞춤 청년정책 추천",
        "",
        f"총 {result.fetched}개 정책 중 **{result.policies.count}개** 해당",
        _opt(result.category, f"분야: {result.category}"),
        _opt(result.region, f"지역: {result.region_label}"),
        "",
        *map(policy_brief, result.policies.records),
    )


def render_policies_by_category(page: Page[PolicyRecord], category: str, subcategory: Optional[str] = None) -> str:
    if not page.records:
        return NO_RESULTS
    return lines(
        f"# {category} 분야 청년정책",
        _opt(subcategory, f"중분류: {subcategory}"),
        f"총 **{page.total_count}개** 정책",
        "",
        *map(policy_brief, page.records),
    )


def render_policies_by_region(page: Page[PolicyRecord], region_label: str) -> str:
    if not page.records:
        return NO_RESULTS
    return lines(
        f"# {region_label} 청년정책",
        f"총 **{page.total_count}개** 정책",
        "",
        *map(policy_brief, page.records),
    )


def render_keyword_search(page: Page[PolicyRecord], keywords: str) -> str:
    if not page.records:
        return NO_RESULTS
    return lines(
        f'# 키워드 검색 결과: "{keywords}"',
        f"총 **{page.total_count}개** 정책",
        "",
        *map(policy_brief, page.records),
    )


def render_eligibility(policy: Optional[PolicyRecord], policy_no: str, age: Optional[int] = None) -> str:
    if policy is None:
        return f"정책번호 '{policy_no}'를 찾을 수 없습니다."
    lo, hi, ok = age_eligibility(policy, age)
    verdict = "확인 필요" if ok is None else ("해당" if ok else "미해당")
    return lines(
        f"# 자격요건 확인: {policy.name}",
        "",
        "## 기본 요건",
        "| 항목 | 조건 | 판정 |",
        "|------|------|------|",
        f"| 연령 | {lo}세 ~ {hi}세 | {verdict} |",
        "",
        _opt(policy.additional_qualification, f"## 추가 자격조건\n{policy.additional_qualification}\n"),
        _opt(policy.participant_target, f"## 참여 대상\n{policy.participant_target}\n"),
        _opt(policy.earn_etc, f"## 소득 조건\n{policy.earn_etc}\n"),
        "## 신청 방법",
        policy.apply_method or "정보 없음",
        _opt(policy.documents, f"\n## 제출 서류\n{policy.documents}"),
    )


def render_job_postings(jobs: Sequence[JobPostingRecord], keyword: Optional[str] = None, region: Optional[str] = None) -> str:
    if not jobs:
        return NO_RESULTS
    return lines(
        "# 채용정보 검색 결과",
        f"총 {len(jobs)}건",
        _opt(keyword, f"키워드: {keyword}"),
        _opt(region, f"지역: {region}"),
        "",
        *map(job_posting, jobs),
    )


def render_small_giant_companies(companies: Sequence[SmallGiantCompanyRecord], region: Optional[str] = None) -> str:
    if not companies:
        return NO_RESULTS
    return lines(
        "# 청년친화강소기업 검색 결과",
        f"총 {len(companies)}개 기업",
        _opt(region, f"지역: {region}"),
        "",
        *map(small_giant, companies),
    )


def render_job_info(jobs: Sequence[JobInfoRecord]) -> str:
    if not jobs:
        return NO_RESULTS
    return lines("# 직업정보 검색 결과", f"총 {len(jobs)}개 직업", "", *map(job_info, jobs))


def render_training_courses(courses: Sequence[TrainingCourseRecord], region: Optional[str] = None) -> str:
    if not courses:
        return NO_RESULTS
    return lines(
        "# 훈련과정 검색 결과",
        f"총 {len(courses)}개 과정",
        _opt(region, f"지역: {region}"),
        "",
        *map(training_course, courses),
    )


def render_employment_programs(programs: Sequence[EmploymentProgramRecord]) -> str:
    if not programs:
        return NO_RESULTS
    return lines(
        "# 취업역량 강화프로그램 검색 결과",
        f"총 {len(programs)}개 프로그램",
        "",
        *map(employment_program, programs),
    )


# -------------------------
# 통합 조회
# -------------------------
def render_region_all(r: RegionAllResult) -> str:
    return lines(
        f"# {r.region_label} 통합 검색 결과",
        "",
        section(_count_title("청년정책", r.policies), r.policies.records, policy_brief, "_해당 지역 정책이 없습니다._"),
        section(_count_title("청년센터", r.centers), r.centers.records, center_brief, "_해당 지역 센터가 없습니다._"),
        section(_count_title("채용정보", r.jobs), r.jobs.records, job_posting, "_해당 지역 채용정보가 없습니다._"),
        section(
            _count_title("청년친화강소기업", r.companies),
            r.companies.records,
            small_giant,
            "_해당 지역 강소기업 정보가 없습니다._",
        ),
    )


def render_search_all(r: PolicyCenterResult) -> str:
    return lines(
        f"# {r.region_label} 통합 검색 결과",
        _opt(r.category, f"분류: {r.category}"),
        "",
        section(_count_title("청년정책", r.policies), r.policies.records, policy_brief, "_해당 지역 정책이 없습니다._"),
        section(_count_title("청년센터", r.centers), r.centers.records, center_brief, "_해당 지역 센터가 없습니다._"),
    )


def render_company_match(r: SmallGiantPackageResult) -> str:
    if r.companies.is_empty:
        return NO_RESULTS
    return lines(
        "# 강소기업 + 청년정책 매칭",
        _opt(r.region, f"지역: {r.region_label}"),
        "",
        section(_count_title("청년친화강소기업", r.companies), r.companies.records, small_giant),
        "---",
        "",
        section(
            "강소기업 취업 시 활용 가능한 청년정책",
            r.policies.records,
            policy_brief,
        ),
        EMPLOYMENT_BENEFITS_TIP,
    )


def render_survival_kit(r: EligibilityPackageResult) -> str:
    return lines(
        f"# {r.age}세 {r.region_label} 청년 생존키트",
        "",
        _opt(r.category, f"관심분야: {r.category}"),
        section(
            f"맞춤 청년정책 ({r.policies.count}개)",
            r.policies.records[:5],
            policy_brief,
            "_해당 조건의 정책이 없습니다._",
        ),
        section("가까운 청년센터", r.centers.records, center_brief, "_해당 지역 센터가 없습니다._"),
        section("취업역량 프로그램", r.programs.records, employment_program, "_현재 진행 중인 프로그램이 없습니다._"),
        "---",
        "**다음 단계:** 청년센터를 방문하여 맞춤 상담을 받아보세요!",
    )


def render_personalized(r: EligibilityPackageResult) -> str:
    return lines(
        f"# {r.age}세 {r.region_label} 청년 맞춤 추천",
        "",
        "**프로필:**",
        f"- 나이: {r.age}세",
        f"- 지역: {r.region_label}",
        _opt(r.category, f"- 관심분야: {r.category}"),
        _opt(r.employment_status, f"- 현재상태: {r.employment_status}"),
        _opt(r.income_level, f"- 소득수준: {r.income_level}"),
        "",
        _opt(r.employment_status in STATUS_TIPS, STATUS_TIPS.get(r.employment_status or "", "") + "\n"),
        "---",
        "",
        section(
            f"자격요건 충족 정책 ({r.policies.count}개)",
            r.policies.records[:10],
            policy_brief,
            "_해당 조건의 정책이 없습니다_",
        ),
        section(f"가까운 청년센터 ({r.centers.count}개)", r.centers.records, center_brief, "_해당 지역 센터 없음_"),
        section("취업역량 프로그램", r.programs.records, employment_program, "_현재 진행 중인 프로그램 없음_"),
    )


def render_comparison(r: ComparisonResult) -> str:
    if r.over_limit:
        return TOO_MANY_TO_COMPARE
    if r.policies.is_empty:
        return "비교할 정책을 찾을 수 없습니다."
    ps = r.policies.records

    def row(label: str, value: Callable[[PolicyRecord], str]) -> str:
        return f"| **{label}** | " + " | ".join(value(p) for p in ps) + " |"

    return lines(
        "# 청년정책 비교",
        "",
        "| 항목 | " + " | ".join(p.name[:15] for p in ps) + " |",
        "|------|" + "|".join("------" for _ in ps) + "|",
        row("분류", lambda p: p.category_large),
        row("연령", lambda p: f"{p.min_age or '?'}-{p.max_age or '?'}세"),
        row("신청기간", lambda p: p.apply_period or "상시"),
        row("주관기관", lambda p: p.supervising_org[:10]),
    )


def _stat_rows(counts: Iterable[tuple], total: int, with_ratio: bool) -> List[str]:
    rows = []
    for label, n in counts:
        if with_ratio:
            ratio = (n / total * 100) if total else 0.0
            rows.append(f"| {label} | {n}개 | {ratio:.1f}% |")
        else:
            rows.append(f"| {label} | {n}개 |")
    return rows


def render_policy_statistics(r: StatisticsResult) -> str:
    if r.kind == "category":
        return lines(
            "# 분류별 청년정책 통계",
            "",
            "| 분류 | 정책 수 | 비율 |",
            "|------|---------|------|",
            *_stat_rows(r.counts.items(), r.total, True),
            f"| **총계** | **{r.total}개** | 100% |",
        )
    return lines(
        "# 지역별 청년정책 통계",
        "",
        "| 지역 | 정책 수 |",
        "|------|---------|",
        *_stat_rows(r.counts.items(), r.total, False),
    )


def render_center_statistics(r: StatisticsResult) -> str:
    return lines(
        "# 전국 청년센터 통계",
        f"**전국 총 {r.total}개 청년센터**",
        "",
        "| 지역 | 센터 수 |",
        "|------|---------|",
        *_stat_rows(r.counts.items(), r.total, False),
    )


def render_mega_search(r: MegaSearchResult) -> str:
    return lines(
        f'# "{r.keyword}" 메가 통합 검색 결과',
        _opt(r.age is not None, f"**필터:** {r.age}세"),
        _opt(r.region, f"**지역:** {r.region_label}"),
        "",
        "---",
        "",
        section(_count_title("청년정책", r.policies), r.policies.records, policy_brief),
        section(_count_title("청년센터", r.centers), r.centers.records, center_brief),
        section(_count_title("채용정보", r.jobs), r.jobs.records, job_posting),
        section(_count_title("청년친화강소기업", r.companies), r.companies.records, small_giant),
        section(_count_title("훈련과정", r.courses), r.courses.records, training_course),
        section(_count_title("취업역량 프로그램", r.programs), r.programs.records, employment_program),
    )


def render_employment_package(r: EmploymentPackageResult) -> str:
    return lines(
        f'# "{r.job_keyword}" 취업 풀패키지',
        "",
        f"**목표:** {r.job_keyword}",
        _opt(r.region, f"**희망지역:** {r.region_label}"),
        _opt(r.age is not None, f"**나이:** {r.age}세"),
        f"**경력:** {CAREER_LABELS.get(r.career, r.career)}",
        "",
        "---",
        "",
        section(f"Step 1: 채용정보 ({r.jobs.count}개)", r.jobs.records, job_posting, "_현재 채용공고 없음_"),
        section(f"Step 2: 준비할 훈련과정 ({r.courses.count}개)", r.courses.records, training_course, "_관련 훈련과정 없음_"),
        section(f"Step 3: 활용 가능한 정책 ({r.policies.count}개)", r.policies.records, policy_brief, "_해당 정책 없음_"),
        section(f"Step 4: 추천 강소기업 ({r.companies.count}개)", r.companies.records, small_giant, "_해당 지역 강소기업 없음_"),
        "---",
        EMPLOYMENT_BENEFITS_TIP,
    )


def render_training_bridge(r: TrainingBridgeResult) -> str:
    return lines(
        "# 훈련→채용 브릿지",
        "",
        f"**검색 키워드:** {r.training_keyword}",
        _opt(r.region, f"**지역:** {r.region_label}"),
        _opt(r.ncs_code, f"**NCS 분류:** {r.ncs_name} ({r.ncs_code})"),
        "",
        "---",
        "",
        section(f"관련 훈련과정 ({r.courses.count}개)", r.courses.records, training_course, "_관련 훈련과정 없음_"),
        section(f"연계 채용정보 ({r.jobs.count}개)", r.jobs.records, job_posting, "_관련 채용정보 없음_"),
        "---",
        "**경로:** 훈련 수료 → 자격증 취득 → 채용 지원 → 취업",
    )


def render_small_giant_package(r: SmallGiantPackageResult) -> str:
    return lines(
        "# 강소기업 취업 패키지",
        "",
        f"**지역:** {r.region_label}",
        _opt(r.industry, f"**업종:** {r.industry}"),
        _opt(r.age is not None, f"**나이:** {r.age}세"),
        "",
        "---",
        "",
        section(f"청년친화강소기업 ({r.companies.count}개)", r.companies.records, small_giant, "_해당 조건 기업 없음_"),
        "---",
        "",
        f"## 강소기업 취업 시 혜택 정책 ({r.policies.count}개)",
        "",
        "| 혜택 | 내용 |",
        "|------|------|",
        "| 청년내일채움공제 | 2년 근무 → 1,200만원+ 목돈 마련 |",
        "| 소득세 감면 | 중소기업 취업 청년 5년간 90% 감면 |",
        "| 전세자금 대출 | 중소기업 재직자 우대 금리 |",
        "",
        "\n".join(map(policy_brief, r.policies.records[:5])) if r.policies.records else EMPTY_SECTION,
        "",
        section(f"관련 채용공고 ({r.jobs.count}개)", r.jobs.records, job_posting, "_현재 채용공고 없음_"),
    )


def render_urgent(r: UrgentDeadlinesResult) -> str:
    return lines(
        f"# 긴급! {r.days_within}일 내 마감",
        "",
        _opt(r.region, f"**지역:** {r.region_label}"),
        _opt(r.category, f"**분야:** {r.category}"),
        f"**기준일:** {r.today}",
        f"**마감기한:** {r.deadline}까지",
        "",
        "---",
        "",
        section(
            f"마감 임박 채용공고 ({len(r.urgent_jobs)}개)",
            r.urgent_jobs,
            urgent_job,
            f"_{r.days_within}일 내 마감 채용공고 없음_",
        ),
        section(
            f"마감 임박 청년정책 ({len(r.urgent_policies)}개)",
            r.urgent_policies,
            urgent_policy,
            f"_{r.days_within}일 내 마감 정책 없음_",
        ),
        section(f"주요 청년정책 ({r.policies.count}개)", r.policies.records[:10], policy_apply_period, "_해당 정책 없음_"),
        section("취업역량 프로그램", r.programs.records[:5], employment_program, "_현재 프로그램 없음_"),
    )


def render_zero_cost(r: ZeroCostPlanResult) -> str:
    policy_title = "무료 청년정책" if r.free_matched else "지원 가능한 청년정책"
    return lines(
        "# 비용 제로 플랜",
        "",
        f"- **지역:** {r.region_label}",
        _opt(r.age is not None, f"- **나이:** {r.age}세"),
        _opt(r.interest and r.interest != "전체", f"- **관심분야:** {r.interest}"),
        "",
        "---",
        "",
        section(f"{policy_title} ({r.policies.count}개)", r.policies.records[:8], policy_brief, "_해당 정책 없음_"),
        section(f"국비지원 훈련과정 ({r.courses.count}개)", r.courses.records[:5], training_course_free, "_훈련과정 없음_"),
        section(f"무료 상담 청년센터 ({r.centers.count}개)", r.centers.records, center_brief, "_센터 없음_"),
        section("무료 취업 프로그램", r.programs.records, employment_program, "_프로그램 없음_"),
        "---",
        "**TIP:** 국민내일배움카드는 HRD-Net(hrd.go.kr)에서 신청하세요!",
    )


def render_help(tool_lines: Sequence[str]) -> str:
    regions = ", ".join(f"{name}({code})" for name, code in REGION_CODES.items())
    ncs = ", ".join(f"{code} {name}" for code, name in NCS_CATEGORIES.items())
    return lines(
        "# 청년 정책·일자리 게이트웨이 도움말",
        "",
        f"## 사용 가능한 도구 ({len(tool_lines)}개)",
        "",
        *tool_lines,
        "",
        "## 지역코드",
        regions,
        "",
        "## 정책분류",
        ", ".join(POLICY_CATEGORIES),
        "",
        "## NCS 대분류",
        ncs,
    )
