# youth_gateway/core/log.py
# stdio 전송은 stdout을 프로토콜이 사용하므로 로그는 항상 stderr로 보낸다.

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # httpx는 요청 URL(API 키 포함)을 INFO로 남기므로 한 단계 올린다
    logging.getLogger("httpx").setLevel(logging.WARNING)
