# youth_gateway/tools/params.py
# 도구별 입력 파라미터 (camelCase 별칭으로 받고 snake_case로 사용)

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PolicyCategory = Literal["일자리", "주거", "교육", "복지문화", "참여권리"]
Career = Literal["N", "E", "Z"]


class ToolParams(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class EmptyParams(ToolParams):
    pass


# -------------------------
# 온통청년
# -------------------------
class SearchYouthPoliciesParams(ToolParams):
    keyword: Optional[str] = Field(None, description="검색 키워드 (정책명에서 검색)")
    region: Optional[str] = Field(None, description="지역명 또는 지역코드 (예: 서울, 부산, 11, 26)")
    category: Optional[str] = Field(None, description="정책 대분류 (일자리, 주거, 교육, 복지문화, 참여권리)")
    subcategory: Optional[str] = Field(None, description="정책 중분류")
    page_num: int = Field(1, description="페이지 번호")
    page_size: int = Field(10, description="페이지 크기 (최대 100)")


class PolicyNoParams(ToolParams):
    policy_no: str = Field(..., description="정책번호")


class SearchYouthCentersParams(ToolParams):
    region: Optional[str] = Field(None, description="지역명 또는 시도코드 (예: 서울, 부산, 11, 26)")
    sgg_cd: Optional[str] = Field(None, description="시군구코드")
    page_num: int = Field(1, description="페이지 번호")
    page_size: int = Field(10, description="페이지 크기")


class CenterSnParams(ToolParams):
    center_sn: str = Field(..., description="센터 일련번호")


class RecommendByAgeParams(ToolParams):
    age: int = Field(..., description="나이 (만 나이)")
    category: Optional[str] = Field(None, description="관심 분야 (일자리, 주거, 교육, 복지문화, 참여권리)")
    region: Optional[str] = Field(None, description="지역명 또는 지역코드")
    page_size: int = Field(20, description="검색할 정책 수")


class PoliciesByCategoryParams(ToolParams):
    category: PolicyCategory = Field(..., description="정책 대분류")
    subcategory: Optional[str] = Field(None, description="정책 중분류")
    region: Optional[str] = Field(None, description="지역명 또는 지역코드")
    page_num: int = Field(1, description="페이지 번호")
    page_size: int = Field(10, description="페이지 크기")


class PoliciesByRegionParams(ToolParams):
    region: str = Field(..., description="지역명 (서울, 부산 등) 또는 지역코드")
    category: Optional[str] = Field(None, description="정책 분류 필터")
    page_num: int = Field(1, description="페이지 번호")
    page_size: int = Field(15, description="페이지 크기")


class KeywordSearchParams(ToolParams):
    keywords: str = Field(..., description="검색 키워드")
    region: Optional[str] = Field(None, description="지역 필터")
    category: Optional[str] = Field(None, description="분류 필터")
    page_size: int = Field(15, description="검색 결과 수")


class EligibilityParams(ToolParams):
    policy_no: str = Field(..., description="정책번호")
    age: Optional[int] = Field(None, description="나이 (만 나이)")


class CompareParams(ToolParams):
    policy_nos: List[str] = Field(..., description="비교할 정책번호 목록 (최대 5개)")


class PolicyStatisticsParams(ToolParams):
    kind: Literal["category", "region"] = Field(..., alias="type", description="통계 유형")


# -------------------------
# 고용24
# -------------------------
class SearchJobPostingsParams(ToolParams):
    keyword: Optional[str] = Field(None, description="검색 키워드")
    region: Optional[str] = Field(None, description="근무지역 (서울, 부산 등)")
    career: Optional[Career] = Field(None, description="경력 (N:신입, E:경력, Z:관계없음)")
    education: Optional[str] = Field(
        None,
        description="학력코드 (00:학력무관, 01:초졸, 02:중졸, 03:고졸, 04:대졸2~3, 05:대졸4, 06:석사, 07:박사)",
    )
    salary_type: Optional[Literal["D", "H", "M", "Y"]] = Field(None, description="임금형태 (D:일급, H:시급, M:월급, Y:연봉)")
    employment_type: Optional[str] = Field(None, description="고용형태코드")
    start_page: int = Field(1, description="시작 페이지")
    display: int = Field(10, description="출력 건수 (최대 100)")


class SmallGiantSearchParams(ToolParams):
    region: Optional[str] = Field(None, description="기업 소재지역 (서울, 부산 등)")
    start_page: int = Field(1, description="시작 페이지")
    display: int = Field(10, description="출력 건수")


class JobInfoParams(ToolParams):
    keyword: Optional[str] = Field(None, description="직업명 키워드")
    avg_salary: Optional[Literal["10", "20", "30", "40"]] = Field(
        None, description="평균연봉 (10:3천미만, 20:3~4천, 30:4~5천, 40:5천이상)"
    )
    prospect: Optional[Literal["1", "2", "3", "4", "5"]] = Field(
        None, description="직업전망 (1:증가, 2:다소증가, 3:유지, 4:다소감소, 5:감소)"
    )


class TrainingSearchParams(ToolParams):
    region: Optional[str] = Field(None, description="훈련지역 (서울, 부산 등)")
    ncs_code: Optional[str] = Field(None, description="NCS 대분류코드 (01~24)")
    keyword: Optional[str] = Field(None, description="훈련과정명 키워드")
    training_type: Optional[str] = Field(None, description="훈련유형 (C0061:일반, C0054:국가기간, C0104:K-디지털)")
    start_date: Optional[str] = Field(None, description="훈련시작일 From (YYYYMMDD)")
    end_date: Optional[str] = Field(None, description="훈련시작일 To (YYYYMMDD)")
    page_num: int = Field(1, description="페이지 번호")
    page_size: int = Field(10, description="출력 건수")


class ProgramSearchParams(ToolParams):
    start_page: int = Field(1, description="시작 페이지")
    display: int = Field(10, description="출력 건수")


# -------------------------
# 통합
# -------------------------
class RegionAllParams(ToolParams):
    region: str = Field(..., description="지역명 (서울, 부산 등)")
    limit: int = Field(5, description="각 항목별 표시 개수")


class CompanyMatchParams(ToolParams):
    region: Optional[str] = Field(None, description="지역명 (서울, 부산 등)")
    limit: int = Field(5, description="표시할 기업 수")


class SurvivalKitParams(ToolParams):
    age: int = Field(..., description="나이 (만 나이)")
    region: str = Field(..., description="지역명")
    interest: Optional[PolicyCategory] = Field(None, description="관심 분야")


class SearchAllParams(ToolParams):
    region: str = Field(..., description="지역명 또는 지역코드")
    category: Optional[str] = Field(None, description="정책 분류")
    policy_limit: int = Field(5, description="표시할 정책 수")
    center_limit: int = Field(5, description="표시할 센터 수")


class MegaSearchParams(ToolParams):
    keyword: str = Field(..., description="검색 키워드 (예: IT, 주거, 창업, 취업)")
    age: Optional[int] = Field(None, description="나이 (만 나이) - 입력 시 자격요건 자동 필터링")
    region: Optional[str] = Field(None, description="지역명 (서울, 부산 등) - 입력 시 지역 필터링")
    limit: int = Field(5, description="각 항목별 최대 결과 수")


class EmploymentPackageParams(ToolParams):
    job_keyword: str = Field(..., description="목표 직종/직업 키워드 (예: 개발자, 디자이너, 마케터, 요리사)")
    region: Optional[str] = Field(None, description="희망 근무지역 (서울, 부산 등)")
    age: Optional[int] = Field(None, description="나이 (만 나이) - 자격요건 필터링용")
    career: Career = Field("N", description="경력 (N:신입, E:경력, Z:무관)")


class TrainingBridgeParams(ToolParams):
    training_keyword: str = Field(..., description="훈련과정 키워드 (예: 웹개발, 데이터분석, 요리, 용접)")
    region: Optional[str] = Field(None, description="훈련/취업 희망 지역")
    ncs_code: Optional[str] = Field(None, description="NCS 대분류코드 (01~24) - 직접 지정 시")


class PersonalizedParams(ToolParams):
    age: int = Field(..., description="나이 (만 나이)")
    region: str = Field(..., description="거주 지역 (서울, 부산 등)")
    category: Literal["일자리", "주거", "교육", "복지문화", "참여권리", "전체"] = Field("전체", description="관심 분야")
    employment_status: Optional[Literal["구직중", "재직중", "창업준비", "학생", "기타"]] = Field(None, description="현재 상태")
    income_level: Optional[Literal["무소득", "저소득", "중위소득", "일반"]] = Field(None, description="소득 수준")


class SmallGiantPackageParams(ToolParams):
    region: Optional[str] = Field(None, description="지역명 (서울, 부산 등)")
    industry: Optional[str] = Field(None, description="업종 키워드 (IT, 제조, 서비스 등)")
    age: Optional[int] = Field(None, description="나이 (만 나이) - 정책 필터링용")


class UrgentParams(ToolParams):
    region: Optional[str] = Field(None, description="지역명 (서울, 부산 등)")
    days_within: int = Field(7, description="며칠 이내 마감 (기본: 7일)")
    category: Optional[str] = Field(None, description="관심 분야 (일자리, 주거, 교육 등)")


class ZeroCostParams(ToolParams):
    region: str = Field(..., description="지역명 (서울, 부산 등)")
    age: Optional[int] = Field(None, description="나이 (만 나이)")
    interest: Literal["취업", "창업", "주거", "교육", "전체"] = Field("전체", description="관심 분야")
