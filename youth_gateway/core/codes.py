# youth_gateway/core/codes.py
# ==========================================================
# 정적 코드 테이블 (지역 / 정책분류 / NCS 대분류)
# 모듈 로드 이후 읽기 전용
# ==========================================================

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

# 지역명(약칭) → 시도 코드
REGION_CODES: Mapping[str, str] = MappingProxyType({
    "서울": "11", "부산": "26", "대구": "27", "인천": "28",
    "광주": "29", "대전": "30", "울산": "31", "세종": "36",
    "경기": "41", "강원": "42", "충북": "43", "충남": "44",
    "전북": "45", "전남": "46", "경북": "47", "경남": "48", "제주": "50",
})

# 시도 코드 → 표시명
REGION_NAMES: Mapping[str, str] = MappingProxyType({
    "11": "서울특별시", "26": "부산광역시", "27": "대구광역시", "28": "인천광역시",
    "29": "광주광역시", "30": "대전광역시", "31": "울산광역시", "36": "세종특별자치시",
    "41": "경기도", "42": "강원도", "43": "충청북도", "44": "충청남도",
    "45": "전라북도", "46": "전라남도", "47": "경상북도", "48": "경상남도", "50": "제주특별자치도",
})

# 온통청년 정책 대분류 (lclsfNm 그대로 전달)
POLICY_CATEGORIES = ("일자리", "주거", "교육", "복지문화", "참여권리")

# NCS 대분류 코드 → 분류명
NCS_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "01": "사업관리", "02": "경영/회계/사무", "03": "금융/보험",
    "04": "교육/자연/사회과학", "05": "법률/경찰/소방/교도/국방",
    "06": "보건/의료", "07": "사회복지/종교", "08": "문화/예술/디자인/방송",
    "09": "운전/운송", "10": "영업판매", "11": "경비/청소",
    "12": "이용/숙박/여행/오락/스포츠", "13": "음식서비스", "14": "건설",
    "15": "기계", "16": "재료", "17": "화학/바이오", "18": "섬유/의복",
    "19": "전기/전자", "20": "정보통신", "21": "식품가공",
    "22": "인쇄/목재/가구/공예", "23": "환경/에너지/안전", "24": "농림어업",
})


def region_code_of(name_or_code: str) -> str:
    """알려진 지역명이면 코드로, 아니면 이미 코드라고 보고 그대로 반환."""
    return REGION_CODES.get(name_or_code, name_or_code)


def province_of(code: str) -> str:
    return code[:2]


def region_name_of(code: str) -> str:
    return REGION_NAMES.get(province_of(code), code)


def zip_from_region(code: str) -> str:
    # 시도 단위 입력은 시군구 자리를 000으로 채운다
    return f"{code}000" if len(code) == 2 else code


def ncs_name_of(code: str) -> str:
    return NCS_CATEGORIES.get(code[:2], "기타")


@dataclass(frozen=True)
class RegionScope:
    """요청 1회 동안 한 번만 해석한 지역의 코드 형태들."""

    raw: str
    code: str        # 강소기업 API: 원본 코드
    province: str    # 센터/훈련 API: 시도 2자리
    zip_code: str    # 정책/채용 API: 5자리
    name: str        # 표시명

    @classmethod
    def resolve(cls, region: Optional[str]) -> Optional["RegionScope"]:
        if not region:
            return None
        code = region_code_of(region)
        return cls(
            raw=region,
            code=code,
            province=province_of(code),
            zip_code=zip_from_region(code),
            name=REGION_NAMES.get(province_of(code), region),
        )
