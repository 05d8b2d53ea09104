"""
정책/채용 필터 테스트
"""
from datetime import date

import pytest

from youth_gateway.schemas.records import JobPostingRecord, PolicyRecord
from youth_gateway.services.filters import (
    age_bounds,
    age_eligibility,
    date_string,
    days_until,
    filter_by_age,
    filter_employment_policies,
    filter_free_policies,
    filter_urgent_jobs,
    filter_urgent_policies,
    last_date_in,
)

TODAY = date(2025, 1, 10)


def policy(**kw) -> PolicyRecord:
    return PolicyRecord.model_validate(kw)


def job(no: str, close: str) -> JobPostingRecord:
    return JobPostingRecord(wantedAuthNo=no, closeDt=close)


def test_age_filter_keeps_matching_and_unbounded():
    p1 = policy(plcyNo="1", sprtTrgtMinAge="18", sprtTrgtMaxAge="34")
    p2 = policy(plcyNo="2", sprtTrgtMinAge="35", sprtTrgtMaxAge="45")
    p3 = policy(plcyNo="3")

    kept = filter_by_age([p1, p2, p3], 25)

    assert [p.policy_no for p in kept] == ["1", "3"]


@pytest.mark.parametrize("age", [0, 25, 100])
def test_policy_without_age_bounds_matches_every_age(age):
    p = policy(plcyNo="open")
    assert filter_by_age([p], age) == [p]


def test_age_bounds_are_inclusive():
    p = policy(sprtTrgtMinAge="19", sprtTrgtMaxAge="34")
    assert filter_by_age([p], 19) == [p]
    assert filter_by_age([p], 34) == [p]
    assert filter_by_age([p], 35) == []


def test_zero_max_age_means_unbounded():
    assert age_bounds(policy(sprtTrgtMinAge="19", sprtTrgtMaxAge="0")) == (19, 100)


def test_non_numeric_age_falls_back():
    assert age_bounds(policy(sprtTrgtMinAge="만 19세", sprtTrgtMaxAge="제한없음")) == (0, 100)
    assert age_bounds(policy(sprtTrgtMinAge="19세", sprtTrgtMaxAge="39세")) == (19, 39)


def test_age_limit_flag_n_widens_bounds():
    p = policy(sprtTrgtMinAge="19", sprtTrgtMaxAge="34", sprtTrgtAgeLmtYn="N")
    assert age_bounds(p) == (0, 100)
    assert filter_by_age([p], 50) == [p]


def test_age_eligibility_without_age():
    p = policy(sprtTrgtMinAge="19", sprtTrgtMaxAge="34")
    assert age_eligibility(p, None) == (19, 34, None)
    assert age_eligibility(p, 40) == (19, 34, False)


def test_date_string_and_days_until():
    assert date_string(0, TODAY) == "20250110"
    assert date_string(90, TODAY) == "20250410"
    assert days_until("20250113", TODAY) == 3
    assert days_until("2025-01-13", TODAY) is None
    assert days_until("", TODAY) is None
    assert days_until("20250230", TODAY) is None


def test_urgent_jobs_window_and_order():
    jobs = [
        job("far", "20250209"),
        job("soon", "20250113"),
        job("today", "20250110"),
        job("past", "20250109"),
        job("nodate", ""),
        job("edge", "20250117"),
    ]

    urgent = filter_urgent_jobs(jobs, 7, TODAY)

    assert [(u.record.auth_no, u.days_left) for u in urgent] == [("today", 0), ("soon", 3), ("edge", 7)]


def test_last_date_in_free_text():
    assert last_date_in("20250101 ~ 20250331") == date(2025, 3, 31)
    assert last_date_in("2025.01.01 ~ 2025.2.5") == date(2025, 2, 5)
    assert last_date_in("상시 모집") is None


def test_urgent_policies_best_effort():
    policies = [
        policy(plcyNo="A", aplyYmd="20250101 ~ 20250115"),
        policy(plcyNo="B", plcySprtTermCn="20250101 ~ 20250112"),
        policy(plcyNo="C", aplyYmd="상시"),
        policy(plcyNo="D", aplyYmd="20250101 ~ 20250110"),
        policy(plcyNo="E", aplyYmd="20250101 ~ 20250301"),
    ]

    urgent = filter_urgent_policies(policies, 7, TODAY)

    assert [(u.record.policy_no, u.days_left) for u in urgent] == [("D", 0), ("B", 2), ("A", 5)]


def test_free_policies():
    policies = [
        policy(plcyNo="1", plcySprtCn="교육비 전액 지원"),
        policy(plcyNo="2", plcyExplnCn="국비 훈련 연계"),
        policy(plcyNo="3", plcySprtCn="월 20만원 대출 이자"),
    ]
    assert [p.policy_no for p in filter_free_policies(policies)] == ["1", "2"]


def test_employment_policies_by_name():
    policies = [
        policy(plcyNo="1", plcyNm="청년내일채움공제"),
        policy(plcyNo="2", plcyNm="중소기업 취업청년 소득세 감면"),
        policy(plcyNo="3", plcyNm="청년 월세 지원"),
    ]
    assert [p.policy_no for p in filter_employment_policies(policies)] == ["1", "2"]


def test_urgent_policy_and_job_windows_match():
    policies = [
        policy(plcyNo="today", aplyYmd="20250110"),
        policy(plcyNo="edge", aplyYmd="20250117"),
        policy(plcyNo="out", aplyYmd="20250118"),
    ]
    jobs = [job("today", "20250110"), job("edge", "20250117"), job("out", "20250118")]

    urgent_policies = [u.record.policy_no for u in filter_urgent_policies(policies, 7, TODAY)]
    urgent_jobs = [u.record.auth_no for u in filter_urgent_jobs(jobs, 7, TODAY)]

    assert urgent_policies == urgent_jobs == ["today", "edge"]
