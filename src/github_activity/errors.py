"""GitHub 활동 조회 실패 유형."""

from __future__ import annotations


class ActivityError(Exception):
    """GitHub API 호출 실패의 공통 부모."""


class InvalidInputError(ActivityError):
    """요청 전에 거부된 입력 (빈 username 등)."""


class TransportError(ActivityError):
    """DNS/연결/타임아웃 등 네트워크 수준 실패."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to send request: {cause}")


class RateLimitedError(ActivityError):
    """403 응답. reset_at은 HH:MM:SS 또는 'unknown time'."""

    def __init__(self, reset_at: str):
        self.reset_at = reset_at
        super().__init__(f"Rate limit exceeded. Resets at {reset_at}")


class HttpStatusError(ActivityError):
    """403 이외의 non-2xx 응답."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Failed to fetch github activity: HTTP {status_code}")


class DecodeError(ActivityError):
    """2xx 응답 본문이 기대한 JSON 구조가 아님."""

    def __init__(self, detail: str):
        super().__init__(f"Failed to read response body: {detail}")
