"""
통합(패키지) 조회 테스트: 주 호출 실패는 전파, 보조 호출 실패는 빈 섹션
"""
import asyncio
from datetime import date

import httpx
import pytest

from youth_gateway.core.errors import UpstreamHTTPError
from youth_gateway.services import aggregate


async def test_fan_out_keeps_primary_and_degrades_secondaries():
    async def ok():
        return "primary"

    async def boom():
        raise RuntimeError("down")

    primary, rest = await aggregate.fan_out(ok(), a=(boom(), []), b=(ok(), None))

    assert primary == "primary"
    assert rest == {"a": [], "b": "primary"}


async def test_region_all_survives_failing_job_source(upstream, fake):
    fake.json("policy", [{"plcyNo": "P1", "plcyNm": "서울 청년수당"}], total=12)
    fake.json("center", [{"cntrNm": "서울청년센터"}])
    fake.fail("job_posting", 500)
    fake.xml("small_giant", [{"enpNm": "강소기업"}])

    result = await aggregate.search_region_all(upstream, "서울", limit=5)

    assert result.region.code == "11"
    assert [p.name for p in result.policies.records] == ["서울 청년수당"]
    assert result.policies.total_count == 12
    assert result.centers.records[0].name == "서울청년센터"
    assert result.jobs.is_empty
    assert result.companies.count == 1

    assert fake.calls("policy")[0]["zipCd"] == "11000"
    assert fake.calls("center")[0]["ctpvCd"] == "11"
    assert fake.calls("small_giant")[0]["region"] == "11"


async def test_primary_failure_propagates(upstream, fake):
    fake.fail("policy", 502)
    fake.json("center", [])

    with pytest.raises(UpstreamHTTPError):
        await aggregate.search_all(upstream, "부산")


async def test_primary_failure_waits_for_secondaries_to_settle(upstream, fake):
    fake.fail("policy", 500)
    fake.json("center", [{"cntrNm": "부산청년센터"}])
    fake.delay("center", 0.2)

    with pytest.raises(UpstreamHTTPError):
        await aggregate.search_all(upstream, "부산")

    assert fake.settled == ["center"]


async def test_statistics_wait_for_every_count_before_failing(upstream, fake):
    answered = []

    async def respond(request):
        category = request.url.params.get("lclsfNm")
        if category == "일자리":
            return httpx.Response(500, text="error")
        await asyncio.sleep(0.1)
        answered.append(category)
        return httpx.Response(200, json={"resultCode": 200, "result": {"pagging": {"totCount": 1}}})

    fake.route("policy", respond)

    with pytest.raises(UpstreamHTTPError):
        await aggregate.policy_statistics(upstream, "category")

    assert sorted(answered) == sorted(["주거", "교육", "복지문화", "참여권리"])


async def test_compare_waits_for_every_lookup_before_failing(upstream, fake):
    answered = []

    async def respond(request):
        no = request.url.params.get("plcyNo")
        if no == "A":
            return httpx.Response(503, text="error")
        await asyncio.sleep(0.1)
        answered.append(no)
        return httpx.Response(200, json={"resultCode": 200, "result": {"youthPolicyList": [{"plcyNo": no}]}})

    fake.route("policy", respond)

    with pytest.raises(UpstreamHTTPError):
        await aggregate.compare_policies(upstream, ["A", "B", "C"])

    assert sorted(answered) == ["B", "C"]


async def test_search_all_sends_category(upstream, fake):
    fake.json("policy", [])
    fake.json("center", [])

    result = await aggregate.search_all(upstream, "부산", category="주거", policy_limit=3)

    (params,) = fake.calls("policy")
    assert params["lclsfNm"] == "주거"
    assert params["pageSize"] == "3"
    assert params["zipCd"] == "26000"
    assert result.region_label == "부산광역시"


async def test_mega_search_over_fetches_then_filters_by_age(upstream, fake):
    fake.json(
        "policy",
        [
            {"plcyNo": "1", "sprtTrgtMinAge": "19", "sprtTrgtMaxAge": "34"},
            {"plcyNo": "2", "sprtTrgtMinAge": "40", "sprtTrgtMaxAge": "49"},
            {"plcyNo": "3"},
            {"plcyNo": "4", "sprtTrgtMinAge": "18", "sprtTrgtMaxAge": "39"},
        ],
    )

    result = await aggregate.mega_search(upstream, "창업", age=25, limit=2)

    assert fake.calls("policy")[0]["pageSize"] == "4"
    assert fake.calls("policy")[0]["plcyNm"] == "창업"
    assert [p.policy_no for p in result.policies.records] == ["1", "3"]
    # 나머지 소스는 등록되지 않아 404 → 빈 섹션
    assert result.jobs.is_empty and result.courses.is_empty and result.programs.is_empty
    assert result.region is None


async def test_employment_package_primary_is_job_postings(upstream, fake):
    fake.xml("job_posting", [{"title": "데이터 분석가"}])

    result = await aggregate.employment_full_package(upstream, "데이터", region="경기", career="")

    assert result.career == "N"
    assert result.jobs.records[0].title == "데이터 분석가"
    (params,) = fake.calls("job_posting")
    assert params["career"] == "N"
    assert params["keyword"] == "데이터"
    assert params["region"] == "41000"
    assert result.policies.is_empty


async def test_employment_package_fails_without_jobs(upstream, fake):
    fake.json("policy", [])
    fake.fail("job_posting", 500)

    with pytest.raises(UpstreamHTTPError):
        await aggregate.employment_full_package(upstream, "데이터")


async def test_training_bridge_takes_ncs_from_first_course(upstream, fake):
    fake.xml(
        "training",
        [
            {"trprNm": "엑셀 기초"},
            {"trprNm": "파이썬 웹개발", "ncsCd": "20010202"},
            {"trprNm": "회계 실무", "ncsCd": "02030201"},
        ],
    )
    fake.xml("job_posting", [{"title": "웹개발자"}])

    result = await aggregate.training_job_bridge(upstream, "개발", region="서울")

    assert result.ncs_code == "20"
    assert result.ncs_name == "정보통신"
    assert result.courses.count == 3
    assert result.jobs.records[0].title == "웹개발자"
    assert fake.calls("training")[0]["srchTraArea1"] == "11"
    assert fake.calls("training")[0]["srchTraNm"] == "개발"


async def test_training_bridge_keeps_given_ncs_when_courses_have_none(upstream, fake):
    fake.xml("training", [])
    fake.fail("job_posting", 500)

    result = await aggregate.training_job_bridge(upstream, "용접", ncs_code="15")

    assert result.ncs_code == "15"
    assert fake.calls("training")[0]["srchNcs1"] == "15"
    assert result.jobs.is_empty


async def test_personalized_treats_all_category_as_none(upstream, fake):
    fake.json("policy", [{"plcyNo": "1", "sprtTrgtMinAge": "30", "sprtTrgtMaxAge": "39"}])

    result = await aggregate.personalized_recommendations(upstream, 25, "서울", category="전체")

    assert "lclsfNm" not in fake.calls("policy")[0]
    assert fake.calls("policy")[0]["pageSize"] == "30"
    assert result.category is None
    assert result.policies.is_empty


async def test_small_giant_package_keeps_employment_policies(upstream, fake):
    fake.xml("small_giant", [{"enpNm": "A"}, {"enpNm": "B"}])
    fake.json(
        "policy",
        [
            {"plcyNo": "1", "plcyNm": "청년내일채움공제"},
            {"plcyNo": "2", "plcyNm": "청년 문화패스"},
        ],
    )
    fake.xml("job_posting", [])

    result = await aggregate.small_giant_package(upstream, region="서울", industry="제조")

    assert result.companies.count == 2
    assert [p.policy_no for p in result.policies.records] == ["1"]
    assert fake.calls("policy")[0]["lclsfNm"] == "일자리"
    assert fake.calls("job_posting")[0]["keyword"] == "제조"


async def test_match_company_policies_ignore_region(upstream, fake):
    fake.xml("small_giant", [{"enpNm": "A"}])
    fake.json("policy", [{"plcyNo": "1"}])

    result = await aggregate.match_company_with_policies(upstream, region="부산")

    (params,) = fake.calls("policy")
    assert "zipCd" not in params
    assert params["pageSize"] == "5"
    assert result.policies.count == 1
    assert result.jobs.is_empty


async def test_urgent_deadlines(upstream, fake):
    fake.json("policy", [{"plcyNo": "1", "aplyYmd": "20250101 ~ 20250112"}])
    fake.xml(
        "job_posting",
        [
            {"title": "곧 마감", "closeDt": "20250113"},
            {"title": "여유", "closeDt": "20250209"},
        ],
    )

    result = await aggregate.urgent_deadlines(upstream, region="서울", days_within=7, today=date(2025, 1, 10))

    assert result.today == "2025-01-10"
    assert result.deadline == "2025-01-17"
    assert [(u.record.title, u.days_left) for u in result.urgent_jobs] == [("곧 마감", 3)]
    assert [(u.record.policy_no, u.days_left) for u in result.urgent_policies] == [("1", 2)]
    assert result.programs.is_empty


async def test_zero_cost_plan_prefers_free_policies(upstream, fake):
    fake.json(
        "policy",
        [
            {"plcyNo": "1", "plcySprtCn": "국비 전액 지원"},
            {"plcyNo": "2", "plcySprtCn": "저금리 대출"},
        ],
    )

    result = await aggregate.zero_cost_plan(upstream, "서울", interest="취업")

    assert fake.calls("policy")[0]["lclsfNm"] == "일자리"
    assert result.free_matched is True
    assert [p.policy_no for p in result.policies.records] == ["1"]
    # 훈련과정은 키워드 없이 지역 단위
    assert "srchTraNm" not in fake.calls("training")[0]


async def test_zero_cost_plan_falls_back_to_all(upstream, fake):
    fake.json("policy", [{"plcyNo": "2", "plcySprtCn": "저금리 대출"}])

    result = await aggregate.zero_cost_plan(upstream, "서울", interest="전체")

    assert "lclsfNm" not in fake.calls("policy")[0]
    assert result.free_matched is False
    assert [p.policy_no for p in result.policies.records] == ["2"]




async def test_category_statistics_sorted_by_count(upstream, fake):
    fake.totals("policy", "lclsfNm", {"일자리": 120, "주거": 300, "교육": 80, "복지문화": 40, "참여권리": 10})

    result = await aggregate.policy_statistics(upstream, "category")

    assert list(result.counts) == ["주거", "일자리", "교육", "복지문화", "참여권리"]
    assert result.total == 550
    assert all(p["pageSize"] == "1" for p in fake.calls("policy"))


async def test_region_statistics_queries_every_province(upstream, fake):
    fake.totals("policy", "zipCd", {"11000": 50, "26000": 20})

    result = await aggregate.policy_statistics(upstream, "region")

    assert len(fake.calls("policy")) == 17
    assert list(result.counts)[:2] == ["서울", "부산"]
    assert result.counts["제주"] == 0


async def test_statistics_fail_when_any_call_fails(upstream, fake):
    fake.fail("center", 500)

    with pytest.raises(UpstreamHTTPError):
        await aggregate.center_statistics(upstream)


async def test_unknown_statistics_kind(upstream):
    with pytest.raises(ValueError):
        await aggregate.policy_statistics(upstream, "age")


async def test_compare_policies(upstream, fake):
    fake.keyed("policy", "plcyNo", {"A": [{"plcyNo": "A"}], "B": [{"plcyNo": "B"}]})

    result = await aggregate.compare_policies(upstream, ["A", "B", "Z"])

    assert [p.policy_no for p in result.policies.records] == ["A", "B"]
    assert all(p["pageType"] == "2" for p in fake.calls("policy"))
    assert not result.over_limit


async def test_compare_more_than_five_makes_no_calls(upstream, fake):
    result = await aggregate.compare_policies(upstream, ["1", "2", "3", "4", "5", "6"])

    assert result.over_limit
    assert result.policies.is_empty
    assert fake.requests == []
