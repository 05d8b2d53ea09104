# youth_gateway/schemas/aggregate.py
# 여러 업스트림 호출을 합친 통합(패키지) 결과

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from youth_gateway.core.codes import RegionScope
from youth_gateway.schemas.records import (
    CenterRecord,
    EmploymentProgramRecord,
    JobPostingRecord,
    PolicyRecord,
    SmallGiantCompanyRecord,
    TrainingCourseRecord,
)

T = TypeVar("T")


class Section(BaseModel, Generic[T]):
    """통합 결과의 한 섹션. 비어 있어도 생략하지 않는다."""

    model_config = ConfigDict(frozen=True)

    records: List[T] = []
    # 업스트림이 알려준 전체 건수 (JSON API만)
    total_count: Optional[int] = None

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


class AggregateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: Optional[RegionScope] = None

    @property
    def region_label(self) -> str:
        return self.region.name if self.region else "전국"


class RegionAllResult(AggregateResult):
    policies: Section[PolicyRecord]
    centers: Section[CenterRecord]
    jobs: Section[JobPostingRecord]
    companies: Section[SmallGiantCompanyRecord]


class PolicyCenterResult(AggregateResult):
    category: Optional[str] = None
    policies: Section[PolicyRecord]
    centers: Section[CenterRecord]


class MegaSearchResult(AggregateResult):
    keyword: str
    age: Optional[int] = None
    policies: Section[PolicyRecord]
    centers: Section[CenterRecord]
    jobs: Section[JobPostingRecord]
    companies: Section[SmallGiantCompanyRecord]
    courses: Section[TrainingCourseRecord]
    programs: Section[EmploymentProgramRecord]


class EmploymentPackageResult(AggregateResult):
    job_keyword: str
    age: Optional[int] = None
    career: str = "N"
    jobs: Section[JobPostingRecord]
    courses: Section[TrainingCourseRecord]
    policies: Section[PolicyRecord]
    companies: Section[SmallGiantCompanyRecord]


class TrainingBridgeResult(AggregateResult):
    training_keyword: str
    ncs_code: Optional[str] = None
    ncs_name: Optional[str] = None
    courses: Section[TrainingCourseRecord]
    jobs: Section[JobPostingRecord]


class EligibilityPackageResult(AggregateResult):
    """생존키트 / 맞춤추천 공통: 나이로 걸러낸 정책 + 센터 + 프로그램."""

    age: int
    category: Optional[str] = None
    employment_status: Optional[str] = None
    income_level: Optional[str] = None
    policies: Section[PolicyRecord]
    centers: Section[CenterRecord]
    programs: Section[EmploymentProgramRecord]


class SmallGiantPackageResult(AggregateResult):
    industry: Optional[str] = None
    age: Optional[int] = None
    companies: Section[SmallGiantCompanyRecord]
    policies: Section[PolicyRecord]
    jobs: Section[JobPostingRecord]


class AgeRecommendationResult(AggregateResult):
    age: int
    category: Optional[str] = None
    # 나이 필터 적용 전 받아온 건수
    fetched: int = 0
    policies: Section[PolicyRecord]


class UrgentItem(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    record: T
    days_left: int


class UrgentDeadlinesResult(AggregateResult):
    days_within: int
    category: Optional[str] = None
    today: str
    deadline: str
    urgent_jobs: List[UrgentItem[JobPostingRecord]] = []
    urgent_policies: List[UrgentItem[PolicyRecord]] = []
    policies: Section[PolicyRecord]
    programs: Section[EmploymentProgramRecord]


class ZeroCostPlanResult(AggregateResult):
    age: Optional[int] = None
    interest: Optional[str] = None
    # False면 무료/국비 표현이 있는 정책이 없어 조건에 맞는 정책 전체를 담았다
    free_matched: bool = False
    policies: Section[PolicyRecord]
    centers: Section[CenterRecord]
    courses: Section[TrainingCourseRecord]
    programs: Section[EmploymentProgramRecord]


class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested: List[str]
    over_limit: bool = False
    policies: Section[PolicyRecord] = Section[PolicyRecord]()


class StatisticsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str  # category | region | center
    counts: Dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())
