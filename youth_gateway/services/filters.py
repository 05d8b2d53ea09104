# youth_gateway/services/filters.py
# 정책/채용 레코드에 대한 도메인 필터 (순수 함수, 예외 없음)

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

import pytz

from youth_gateway.schemas.aggregate import UrgentItem
from youth_gateway.schemas.records import JobPostingRecord, PolicyRecord

DEFAULT_MIN_AGE = 0
DEFAULT_MAX_AGE = 100

# 무료/국비 판별 키워드 (plcySprtCn 본문 기준 best-effort)
FREE_KEYWORDS = ("무료", "국비", "전액", "지원금")

# 강소기업 취업 시 활용 가능한 정책명 키워드
EMPLOYMENT_KEYWORDS = ("취업", "채용", "일자리", "내일채움", "소득세", "중소기업")

_LEADING_INT = re.compile(r"^\s*(\d+)")
_YMD_8 = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
_DATE_IN_TEXT = re.compile(r"(\d{4})[-./]?(\d{1,2})[-./]?(\d{1,2})")


def _leading_int(text: str) -> Optional[int]:
    m = _LEADING_INT.match(text or "")
    return int(m.group(1)) if m else None


def age_bounds(policy: PolicyRecord) -> Tuple[int, int]:
    """
    정책의 유효 연령 구간.
    - 최소/최대가 없거나 숫자가 아니면 0 / 100
    - 업스트림은 제한없음을 최대 0으로 주기도 하므로 0도 100으로 본다
    - 연령제한여부가 N이면 0~100
    """
    if policy.age_limit_yn.upper() == "N":
        return DEFAULT_MIN_AGE, DEFAULT_MAX_AGE
    lo = _leading_int(policy.min_age)
    hi = _leading_int(policy.max_age)
    return (lo if lo else DEFAULT_MIN_AGE), (hi if hi else DEFAULT_MAX_AGE)


def is_age_eligible(policy: PolicyRecord, age: int) -> bool:
    lo, hi = age_bounds(policy)
    return lo <= age <= hi


def filter_by_age(policies: Iterable[PolicyRecord], age: int) -> List[PolicyRecord]:
    return [p for p in policies if is_age_eligible(p, age)]


def age_eligibility(policy: PolicyRecord, age: Optional[int]) -> Tuple[int, int, Optional[bool]]:
    """(최소, 최대, 판정). 나이를 모르면 판정은 None."""
    lo, hi = age_bounds(policy)
    return lo, hi, (None if age is None else lo <= age <= hi)


# -------------------------
# 날짜 (업스트림 날짜는 모두 한국 기준)
# -------------------------
KST = pytz.timezone("Asia/Seoul")


def kst_today() -> date:
    return datetime.now(KST).date()


def date_string(days_from_now: int = 0, today: Optional[date] = None) -> str:
    base = today or kst_today()
    return (base + timedelta(days=days_from_now)).strftime("%Y%m%d")


def parse_yyyymmdd(text: str) -> Optional[date]:
    m = _YMD_8.match((text or "").strip())
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def last_date_in(text: str) -> Optional[date]:
    """자유서술 기간 문자열에서 마지막 날짜 (예: '20250101 ~ 20250331')."""
    found: Optional[date] = None
    for y, m, d in _DATE_IN_TEXT.findall(text or ""):
        try:
            found = date(int(y), int(m), int(d))
        except ValueError:
            continue
    return found


def days_until(close_dt: str, today: Optional[date] = None) -> Optional[int]:
    closing = parse_yyyymmdd(close_dt)
    if closing is None:
        return None
    return (closing - (today or kst_today())).days


def filter_urgent_jobs(
    jobs: Sequence[JobPostingRecord],
    days: int,
    today: Optional[date] = None,
) -> List[UrgentItem[JobPostingRecord]]:
    """마감일이 [오늘, 오늘+days] 안에 드는 공고만, 남은 일수 오름차순."""
    urgent = []
    for job in jobs:
        left = days_until(job.close_date, today)
        if left is not None and 0 <= left <= days:
            urgent.append(UrgentItem[JobPostingRecord](record=job, days_left=left))
    return sorted(urgent, key=lambda item: item.days_left)


def filter_urgent_policies(
    policies: Sequence[PolicyRecord],
    days: int,
    today: Optional[date] = None,
) -> List[UrgentItem[PolicyRecord]]:
    """
    정책 마감 임박 판별 (best-effort).
    정책 응답에는 구조화된 마감일이 없어 plcySprtTermCn / aplyYmd 서술에서
    마지막 날짜를 마감일로 간주한다. 날짜를 못 찾으면 제외.
    기간은 채용공고와 같은 [오늘, 오늘+days].
    """
    base = today or kst_today()
    urgent = []
    for p in policies:
        end = last_date_in(p.support_term) or last_date_in(p.apply_period)
        if end is None:
            continue
        left = (end - base).days
        if 0 <= left <= days:
            urgent.append(UrgentItem[PolicyRecord](record=p, days_left=left))
    return sorted(urgent, key=lambda item: item.days_left)


# -------------------------
# 본문 키워드
# -------------------------
def filter_free_policies(policies: Iterable[PolicyRecord]) -> List[PolicyRecord]:
    out = []
    for p in policies:
        content = f"{p.support_content} {p.description}".lower()
        if any(k in content for k in FREE_KEYWORDS):
            out.append(p)
    return out


def filter_employment_policies(policies: Iterable[PolicyRecord]) -> List[PolicyRecord]:
    return [p for p in policies if any(k in p.name for k in EMPLOYMENT_KEYWORDS)]
