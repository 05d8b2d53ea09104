# youth_gateway/core/errors.py
# 업스트림 호출 오류 분류

class UpstreamError(Exception):
    """업스트림 API 호출 1회가 실패했을 때의 공통 상위 예외."""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider


class UpstreamHTTPError(UpstreamError):
    """2xx가 아닌 HTTP 상태."""

    def __init__(self, provider: str, status_code: int):
        super().__init__(provider, f"API 요청 실패: {status_code}")
        self.status_code = status_code


class UpstreamResultError(UpstreamError):
    """JSON API의 resultCode가 성공값(200)이 아님."""

    def __init__(self, provider: str, result_code, result_message: str):
        super().__init__(provider, f"API 오류: {result_message}")
        self.result_code = result_code
        self.result_message = result_message


class UpstreamDecodeError(UpstreamError):
    """JSON 본문을 해석할 수 없음. (XML은 관대하게 처리하므로 해당 없음)"""
