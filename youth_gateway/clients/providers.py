# youth_gateway/clients/providers.py
# ==========================================================
# 업스트림 제공자별 쿼리 방언 정의 (7개 API)
# 하나의 범용 클라이언트가 이 설정만 바꿔 끼워 호출한다.
# ==========================================================

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Type

from youth_gateway.schemas.records import (
    CenterRecord,
    EmploymentProgramRecord,
    JobInfoRecord,
    JobPostingRecord,
    PolicyRecord,
    SmallGiantCompanyRecord,
    TrainingCourseRecord,
    UpstreamRecord,
)


class ResponseKind(str, Enum):
    JSON = "json"
    XML = "xml"


class Host(str, Enum):
    YOUTHCENTER = "youthcenter"
    WORK24 = "work24"


@dataclass(frozen=True)
class ProviderConfig:
    key: str
    host: Host
    path: str
    key_param: str            # API 키 쿼리 파라미터명
    key_setting: str          # Settings 속성명
    kind: ResponseKind
    record: Type[UpstreamRecord]
    defaults: Dict[str, str] = field(default_factory=dict)
    item_tag: Optional[str] = None    # XML 아이템 태그
    list_key: Optional[str] = None    # JSON 레코드 배열 키
    success_code: Optional[int] = None

    @property
    def fields(self) -> List[str]:
        return self.record.upstream_fields()


# 온통청년: apiKeyNm + rtnType=json, resultCode == 200 이어야 성공
# 고용24: authKey + returnType=XML, 애플리케이션 결과코드 없음
PROVIDERS: Mapping[str, ProviderConfig] = MappingProxyType({
    "policy": ProviderConfig(
        key="policy",
        host=Host.YOUTHCENTER,
        path="/go/ythip/getPlcy",
        key_param="apiKeyNm",
        key_setting="youth_policy_api_key",
        kind=ResponseKind.JSON,
        record=PolicyRecord,
        defaults={"rtnType": "json"},
        list_key="youthPolicyList",
        success_code=200,
    ),
    "center": ProviderConfig(
        key="center",
        host=Host.YOUTHCENTER,
        path="/go/ythip/getSpace",
        key_param="apiKeyNm",
        key_setting="youth_center_api_key",
        kind=ResponseKind.JSON,
        record=CenterRecord,
        defaults={"rtnType": "json"},
        # 센터 API도 정책 API와 같은 배열 키로 응답한다
        list_key="youthPolicyList",
        success_code=200,
    ),
    "job_posting": ProviderConfig(
        key="job_posting",
        host=Host.WORK24,
        path="/cm/openApi/call/wk/callOpenApiSvcInfo210L01.do",
        key_param="authKey",
        key_setting="work24_job_posting_api_key",
        kind=ResponseKind.XML,
        record=JobPostingRecord,
        defaults={"returnType": "XML", "callTp": "L"},
        item_tag="wanted",
    ),
    "small_giant": ProviderConfig(
        key="small_giant",
        host=Host.WORK24,
        path="/cm/openApi/call/wk/callOpenApiSvcInfo216L01.do",
        key_param="authKey",
        key_setting="work24_small_giant_api_key",
        kind=ResponseKind.XML,
        record=SmallGiantCompanyRecord,
        defaults={"returnType": "XML"},
        item_tag="smallGiant",
    ),
    "job_info": ProviderConfig(
        key="job_info",
        host=Host.WORK24,
        path="/cm/openApi/call/wk/callOpenApiSvcInfo212L01.do",
        key_param="authKey",
        key_setting="work24_job_info_api_key",
        kind=ResponseKind.XML,
        record=JobInfoRecord,
        defaults={"returnType": "XML", "target": "JOBCD"},
        item_tag="jobInfo",
    ),
    "training": ProviderConfig(
        key="training",
        host=Host.WORK24,
        path="/cm/openApi/call/hr/callOpenApiSvcInfo310L01.do",
        key_param="authKey",
        key_setting="work24_training_card_api_key",
        kind=ResponseKind.XML,
        record=TrainingCourseRecord,
        defaults={"returnType": "XML", "outType": "1"},
        item_tag="scn_list",
    ),
    "employment_program": ProviderConfig(
        key="employment_program",
        host=Host.WORK24,
        path="/cm/openApi/call/wk/callOpenApiSvcInfo217L01.do",
        key_param="authKey",
        key_setting="work24_employment_program_api_key",
        kind=ResponseKind.XML,
        record=EmploymentProgramRecord,
        defaults={"returnType": "XML"},
        item_tag="empPgm",
    ),
})
