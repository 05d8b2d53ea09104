"""
코드 테이블 / 지역 해석 테스트
"""
import pytest

from youth_gateway.core.codes import (
    NCS_CATEGORIES,
    POLICY_CATEGORIES,
    REGION_CODES,
    REGION_NAMES,
    RegionScope,
    ncs_name_of,
    region_code_of,
    region_name_of,
    zip_from_region,
)


def test_region_tables_cover_17_provinces():
    assert len(REGION_CODES) == 17
    assert set(REGION_CODES.values()) == set(REGION_NAMES)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        REGION_CODES["독도"] = "99"  # type: ignore[index]


def test_policy_categories():
    assert POLICY_CATEGORIES == ("일자리", "주거", "교육", "복지문화", "참여권리")


def test_ncs_categories_has_24_codes():
    assert len(NCS_CATEGORIES) == 24
    assert NCS_CATEGORIES["20"] == "정보통신"


@pytest.mark.parametrize("name", list(REGION_CODES))
def test_known_region_name_resolves_to_code(name):
    code = region_code_of(name)
    assert code == REGION_CODES[name]
    assert len(code) == 2


def test_unknown_region_passes_through():
    assert region_code_of("11110") == "11110"
    assert region_code_of("어딘가") == "어딘가"


def test_zip_from_region():
    assert zip_from_region("11") == "11000"
    assert zip_from_region("11110") == "11110"


def test_region_name_uses_province_prefix():
    assert region_name_of("26") == "부산광역시"
    assert region_name_of("26440") == "부산광역시"
    assert region_name_of("99") == "99"


def test_ncs_name_fallback():
    assert ncs_name_of("2001") == "정보통신"
    assert ncs_name_of("99") == "기타"


def test_region_scope_from_name():
    scope = RegionScope.resolve("서울")
    assert scope.code == "11"
    assert scope.province == "11"
    assert scope.zip_code == "11000"
    assert scope.name == "서울특별시"


def test_region_scope_from_district_code():
    scope = RegionScope.resolve("41135")
    assert scope.code == "41135"
    assert scope.province == "41"
    assert scope.zip_code == "41135"
    assert scope.name == "경기도"


def test_region_scope_empty():
    assert RegionScope.resolve(None) is None
    assert RegionScope.resolve("") is None


@pytest.mark.parametrize("name", list(REGION_CODES))
def test_region_round_trip_gives_display_name(name):
    display = region_name_of(region_code_of(name))
    assert display == REGION_NAMES[REGION_CODES[name]]
    assert display.startswith(name[0])
