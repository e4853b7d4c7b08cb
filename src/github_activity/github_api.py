"""GitHub REST API 동기 클라이언트.

유저 공개 이벤트 피드를 조회하고, push 이벤트의 커밋 수를 compare API로 보강한다.
- 요청당 1회 호출 (재시도/pagination 없음)
- 403은 rate limit으로 간주하고 reset 시각을 메시지에 포함
- 응답 본문은 Pydantic 모델로 검증
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from github_activity.config import GitHubApiConfig
from github_activity.errors import (
    DecodeError,
    HttpStatusError,
    InvalidInputError,
    RateLimitedError,
    TransportError,
)
from github_activity.models import CompareResult, Event

logger = logging.getLogger(__name__)

_EVENTS_ADAPTER = TypeAdapter(list[Event])

UNKNOWN_RESET_TIME = "unknown time"


def format_reset_time(value: str | None) -> str:
    """X-RateLimit-Reset (epoch 초)를 UTC HH:MM:SS로 변환한다.

    헤더가 없거나 파싱할 수 없으면 'unknown time'.
    """
    if value is None or not value.strip().isdigit():
        return UNKNOWN_RESET_TIME
    try:
        reset = datetime.fromtimestamp(int(value), tz=UTC)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_RESET_TIME
    return reset.strftime("%H:%M:%S")


def _describe_validation_error(exc: ValidationError) -> str:
    """ValidationError를 한 줄 요약으로 만든다."""
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    summary = f"{first['msg']} at {loc}" if loc else first["msg"]
    if exc.error_count() > 1:
        summary += f" (+{exc.error_count() - 1} more)"
    return summary


class GitHubActivityClient:
    """GitHub REST API 동기 클라이언트."""

    def __init__(self, config: GitHubApiConfig) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            headers={
                "Accept": config.accept,
                "X-GitHub-Api-Version": config.api_version,
                "User-Agent": config.user_agent,
            },
            timeout=config.request_timeout_sec,
            follow_redirects=True,
        )

    def _get(self, path: str) -> httpx.Response:
        """공통 GET.

        - 압축 해제 실패 → DecodeError
        - 그 밖의 요청 실패 (연결, 타임아웃, 리다이렉트 초과 등) → TransportError
        - 403 → RateLimitedError, 그 밖의 non-2xx → HttpStatusError
        """
        start = time.monotonic()
        try:
            resp = self._client.get(path)
        except httpx.DecodingError as exc:
            logger.debug("GET %s undecodable body: %s", path, exc, extra={"event_code": "DECODE_ERROR"})
            raise DecodeError(str(exc)) from exc
        except httpx.RequestError as exc:
            logger.debug("GET %s failed: %s", path, exc, extra={"event_code": "TRANSPORT_ERROR"})
            raise TransportError(exc) from exc

        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(
            "GET %s -> %d",
            path,
            resp.status_code,
            extra={"status_code": resp.status_code, "duration_ms": round(duration_ms, 1)},
        )

        if resp.status_code == 403:
            raise RateLimitedError(format_reset_time(resp.headers.get("X-RateLimit-Reset")))

        if not resp.is_success:
            raise HttpStatusError(resp.status_code)

        return resp

    def fetch_user_events(self, username: str) -> list[Event]:
        """GET /users/{username}/events: 최신순 이벤트 목록 (응답 순서 유지).

        Raises:
            InvalidInputError: username이 비어 있음 (요청 전)
            TransportError, RateLimitedError, HttpStatusError, DecodeError
        """
        username = username.strip()
        if not username:
            raise InvalidInputError("Username cannot be empty")

        resp = self._get(f"/users/{quote(username, safe='')}/events")
        try:
            events = _EVENTS_ADAPTER.validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(_describe_validation_error(exc)) from exc

        logger.info(
            "Fetched %d events for %s",
            len(events),
            username,
            extra={"username": username, "count": len(events)},
        )
        return events

    def count_commits(self, repo: str, before: str, head: str) -> int:
        """GET /repos/{repo}/compare/{before}...{head}: 두 리비전 사이 커밋 수."""
        resp = self._get(f"/repos/{repo}/compare/{before}...{head}")
        try:
            result = CompareResult.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(_describe_validation_error(exc)) from exc
        return result.total_commits

    def close(self) -> None:
        """httpx.Client를 종료한다."""
        self._client.close()

    def __enter__(self) -> GitHubActivityClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
