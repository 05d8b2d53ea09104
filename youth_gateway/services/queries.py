# youth_gateway/services/queries.py
# 의미 파라미터(지역/분류/키워드/기간) → 제공자별 쿼리 방언

from __future__ import annotations

from typing import Dict, Optional

from youth_gateway.core.codes import RegionScope
from youth_gateway.services.filters import date_string

MAX_PAGE_SIZE = 100

# 훈련과정 기본 검색 기간: 오늘 ~ +90일
TRAINING_WINDOW_DAYS = 90


def cap(size: Optional[int], default: int) -> int:
    return min(size or default, MAX_PAGE_SIZE)


def policy_query(
    page_size: int,
    page_num: int = 1,
    scope: Optional[RegionScope] = None,
    category: Optional[str] = None,
    **extra: Optional[str],
) -> Dict[str, object]:
    """온통청년 정책 목록 (pageType=1). 지역은 5자리 zipCd."""
    return {
        "pageNum": page_num,
        "pageSize": page_size,
        "pageType": "1",
        "zipCd": scope.zip_code if scope else None,
        "lclsfNm": category,
        **extra,
    }


def policy_detail_query(policy_no: str) -> Dict[str, object]:
    return {"plcyNo": policy_no, "pageType": "2"}


def center_query(page_size: int, page_num: int = 1, scope: Optional[RegionScope] = None, **extra) -> Dict[str, object]:
    """청년센터 목록. 지역은 시도 2자리 ctpvCd."""
    return {
        "pageNum": page_num,
        "pageSize": page_size,
        "ctpvCd": scope.province if scope else None,
        **extra,
    }


def job_query(display: int, start_page: int = 1, scope: Optional[RegionScope] = None, **extra) -> Dict[str, object]:
    """채용정보. 지역은 5자리."""
    return {
        "startPage": start_page,
        "display": display,
        "region": scope.zip_code if scope else None,
        **extra,
    }


def company_query(display: int, start_page: int = 1, scope: Optional[RegionScope] = None) -> Dict[str, object]:
    """강소기업. 지역은 입력 코드 그대로."""
    return {
        "startPage": start_page,
        "display": display,
        "region": scope.code if scope else None,
    }


def training_query(
    page_size: int,
    page_num: int = 1,
    scope: Optional[RegionScope] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    **extra,
) -> Dict[str, object]:
    """국민내일배움카드 훈련과정. 지역은 시도 2자리, 기간 미지정 시 오늘~+90일."""
    return {
        "pageNum": page_num,
        "pageSize": page_size,
        "srchTraStDt": start_date or date_string(),
        "srchTraEndDt": end_date or date_string(TRAINING_WINDOW_DAYS),
        "srchTraArea1": scope.province if scope else None,
        **extra,
    }


def program_query(display: int, start_page: int = 1) -> Dict[str, object]:
    return {"startPage": start_page, "display": display}
