# youth_gateway/core/config.py
# 환경변수 / API 키 로드 설정 (pydantic-settings 기반)

import logging
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

# 업스트림별 API 키 필드 (Settings 속성명)
API_KEY_FIELDS = (
    "youth_policy_api_key",
    "youth_center_api_key",
    "work24_job_posting_api_key",
    "work24_small_giant_api_key",
    "work24_job_info_api_key",
    "work24_training_card_api_key",
    "work24_employment_program_api_key",
)


class Settings(BaseSettings):
    # 기본 환경
    app_env: str = "dev"
    log_level: str = "INFO"

    # 온통청년 API (2개)
    youth_policy_api_key: str = ""
    youth_center_api_key: str = ""

    # 고용24 API (5개)
    work24_job_posting_api_key: str = ""
    work24_small_giant_api_key: str = ""
    work24_job_info_api_key: str = ""
    work24_training_card_api_key: str = ""
    work24_employment_program_api_key: str = ""

    # 업스트림 호스트
    youthcenter_base_url: str = "https://www.youthcenter.go.kr"
    work24_base_url: str = "https://www.work24.go.kr"

    # HTTP 타임아웃(초), 재시도 없음
    http_timeout: float = 20.0

    # CORS 허용 도메인
    cors_origins: List[str] = []

    # 키가 없어도 기동은 막지 않음 (호출 시점에 업스트림 오류로 드러남)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",           # .env 키 그대로 사용
        case_sensitive=False,    # 대소문자 무시
        extra="ignore"           # Settings에 없는 키는 무시
    )

    def missing_api_keys(self) -> List[str]:
        return [name.upper() for name in API_KEY_FIELDS if not getattr(self, name)]


def warn_missing_keys(cfg: Settings) -> None:
    for name in cfg.missing_api_keys():
        log.warning("환경변수 %s 이(가) 설정되지 않았습니다.", name)


# 인스턴스 생성
settings = Settings()
