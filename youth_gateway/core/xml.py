# youth_gateway/core/xml.py

"""
고용24 XML 응답용 필드 추출기

업스트림 XML은 정형성이 보장되지 않아 파서 대신 정규식으로 스캔합니다.
- 같은 이름의 태그가 중첩되지 않고, 아이템은 평평한 레코드라는 전제
- CDATA 형태(<tag><![CDATA[...]]></tag>)를 일반 텍스트 형태보다 우선
- 태그 이름은 대소문자 무시
- 어떤 입력에도 예외를 던지지 않음 (없는 값은 "")
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List


@lru_cache(maxsize=256)
def _value_pattern(tag: str) -> re.Pattern[str]:
    t = re.escape(tag)
    # 같은 위치에서는 CDATA 대안이 먼저 시도된다
    return re.compile(
        rf"<{t}>\s*<!\[CDATA\[(.*?)\]\]>\s*</{t}>|<{t}>([^<]*)</{t}>",
        re.IGNORECASE | re.DOTALL,
    )


@lru_cache(maxsize=64)
def _item_pattern(item_tag: str) -> re.Pattern[str]:
    t = re.escape(item_tag)
    # <wanted> / <wanted attr="..."> 만 매칭 (<wantedList> 같은 접두 태그 제외)
    return re.compile(rf"<{t}(?:\s[^>]*)?>.*?</{t}>", re.IGNORECASE | re.DOTALL)


def extract_value(xml: str, tag: str) -> str:
    if not xml:
        return ""
    m = _value_pattern(tag).search(xml)
    if not m:
        return ""
    return (m.group(1) if m.group(1) is not None else m.group(2) or "").strip()


def extract_items(xml: str, item_tag: str) -> List[str]:
    if not xml:
        return []
    return _item_pattern(item_tag).findall(xml)
