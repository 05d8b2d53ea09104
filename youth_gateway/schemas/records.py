# youth_gateway/schemas/records.py
# 업스트림 응답을 정규화한 불변 레코드 (요청 1회 동안만 존재)
#
# 필드명은 snake_case, alias는 업스트림 키 그대로.
# XML 레코드는 alias 선언 순서가 곧 추출 필드 목록이다.

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UpstreamRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # null/숫자가 섞여 와도 항상 문자열 (없으면 "")
    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def upstream_fields(cls) -> List[str]:
        return [f.alias or name for name, f in cls.model_fields.items()]


class PolicyRecord(UpstreamRecord):
    policy_no: str = Field("", alias="plcyNo")
    name: str = Field("", alias="plcyNm")
    description: str = Field("", alias="plcyExplnCn")
    keywords: str = Field("", alias="plcyKywdNm")
    category_large: str = Field("", alias="lclsfNm")
    category_medium: str = Field("", alias="mclsfNm")
    support_content: str = Field("", alias="plcySprtCn")
    supervising_org: str = Field("", alias="sprvsnInstCdNm")
    operating_org: str = Field("", alias="operInstCdNm")
    min_age: str = Field("", alias="sprtTrgtMinAge")
    max_age: str = Field("", alias="sprtTrgtMaxAge")
    age_limit_yn: str = Field("", alias="sprtTrgtAgeLmtYn")
    earn_condition: str = Field("", alias="earnCndSeCd")
    earn_min: str = Field("", alias="earnMinAmt")
    earn_max: str = Field("", alias="earnMaxAmt")
    earn_etc: str = Field("", alias="earnEtcCn")
    marital_status: str = Field("", alias="mrgSttsCd")
    zip_code: str = Field("", alias="zipCd")
    apply_method: str = Field("", alias="plcyAplyMthdCn")
    apply_url: str = Field("", alias="aplyUrlAddr")
    biz_start: str = Field("", alias="bizPrdBgngYmd")
    biz_end: str = Field("", alias="bizPrdEndYmd")
    apply_period: str = Field("", alias="aplyYmd")
    view_count: str = Field("", alias="inqCnt")
    additional_qualification: str = Field("", alias="addAplyQlfcCndCn")
    participant_target: str = Field("", alias="ptcpPrpTrgtCn")
    documents: str = Field("", alias="sbmsnDcmntCn")
    etc: str = Field("", alias="etcMttrCn")
    screening_method: str = Field("", alias="srngMthdCn")
    support_scale: str = Field("", alias="sprtSclCnt")
    ref_url_1: str = Field("", alias="refUrlAddr1")
    ref_url_2: str = Field("", alias="refUrlAddr2")
    # 일부 응답에만 존재 (마감 임박 판별용 best-effort)
    support_term: str = Field("", alias="plcySprtTermCn")


class CenterRecord(UpstreamRecord):
    center_sn: str = Field("", alias="cntrSn")
    name: str = Field("", alias="cntrNm")
    phone: str = Field("", alias="cntrTelno")
    address: str = Field("", alias="cntrAddr")
    address_detail: str = Field("", alias="cntrDaddr")
    url: str = Field("", alias="cntrUrlAddr")
    province_code: str = Field("", alias="stdgCtpvCd")
    province_name: str = Field("", alias="stdgCtpvCdNm")
    district_code: str = Field("", alias="stdgSggCd")
    district_name: str = Field("", alias="stdgSggCdNm")


class JobPostingRecord(UpstreamRecord):
    auth_no: str = Field("", alias="wantedAuthNo")
    company: str = Field("", alias="company")
    title: str = Field("", alias="title")
    salary_type: str = Field("", alias="salTpNm")
    salary: str = Field("", alias="sal")
    region: str = Field("", alias="region")
    holiday_type: str = Field("", alias="holidayTpNm")
    min_education: str = Field("", alias="minEdubg")
    career: str = Field("", alias="career")
    close_date: str = Field("", alias="closeDt")  # YYYYMMDD
    detail_url: str = Field("", alias="wantedInfoUrl")
    job_code: str = Field("", alias="jobsCd")
    employment_type: str = Field("", alias="empTpNm")
    work_region: str = Field("", alias="workRegion")


class SmallGiantCompanyRecord(UpstreamRecord):
    business_no: str = Field("", alias="enpBizrNo")
    name: str = Field("", alias="enpNm")
    brand: str = Field("", alias="brndNm")
    ceo: str = Field("", alias="ceoNm")
    industry: str = Field("", alias="indNm")
    address: str = Field("", alias="addr")
    phone: str = Field("", alias="telNo")
    homepage: str = Field("", alias="homepg")
    main_product: str = Field("", alias="mnPrdct")
    employee_count: str = Field("", alias="empCnt")
    selection_year: str = Field("", alias="selYear")


class JobInfoRecord(UpstreamRecord):
    job_code: str = Field("", alias="jobCd")
    name: str = Field("", alias="jobNm")
    classification_code: str = Field("", alias="jobClsfCd")
    classification_name: str = Field("", alias="jobClsfNm")


class TrainingCourseRecord(UpstreamRecord):
    course_id: str = Field("", alias="trprId")
    name: str = Field("", alias="trprNm")
    institution_id: str = Field("", alias="trainstCstId")
    institution: str = Field("", alias="inoNm")
    chapter: str = Field("", alias="trprChap")
    degree: str = Field("", alias="trprDegr")
    start_date: str = Field("", alias="traStartDate")
    end_date: str = Field("", alias="traEndDate")
    target: str = Field("", alias="trainTarget")
    target_code: str = Field("", alias="trainTargetCd")
    address: str = Field("", alias="address")
    phone: str = Field("", alias="telNo")
    planned_capacity: str = Field("", alias="courseMan")
    actual_capacity: str = Field("", alias="realMan")
    available_capacity: str = Field("", alias="yardMan")
    employment_rate_3m: str = Field("", alias="eiEmplRate3")
    grade: str = Field("", alias="grade")
    ncs_yn: str = Field("", alias="ncsYn")
    ncs_code: str = Field("", alias="ncsCd")
    ncs_name: str = Field("", alias="ncsNm")


class EmploymentProgramRecord(UpstreamRecord):
    org_name: str = Field("", alias="orgNm")
    program_name: str = Field("", alias="pgmNm")
    course_name: str = Field("", alias="crseNm")
    target: str = Field("", alias="trgterIndvdlNm")
    start_date: str = Field("", alias="crseStdt")
    end_date: str = Field("", alias="crseEnddt")
    start_time: str = Field("", alias="crseBgngHm")
    hours: str = Field("", alias="crseHr")
    venue: str = Field("", alias="holdPlc")


class PagingInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    total_count: int = Field(0, alias="totCount")
    page_num: int = Field(0, alias="pageNum")
    page_size: int = Field(0, alias="pageSize")

    @field_validator("*", mode="before")
    @classmethod
    def _as_int(cls, v):
        try:
            return int(v)
        except (TypeError, ValueError):
            return 0


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """JSON API 응답 봉투: 레코드 + 서버측 페이징 정보."""

    model_config = ConfigDict(frozen=True)

    records: List[T] = []
    paging: PagingInfo = PagingInfo()

    @property
    def total_count(self) -> int:
        return self.paging.total_count
