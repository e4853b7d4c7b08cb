"""GitHub 유저 이벤트 데이터 모델 (Pydantic).

`GET /users/{username}/events` 응답 배열의 원소와
`GET /repos/{repo}/compare/{base}...{head}` 응답을 정규화한다.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventKind(str, Enum):
    """렌더러가 알고 있는 GitHub 이벤트 타입."""

    COMMIT_COMMENT = "CommitCommentEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    DISCUSSION = "DiscussionEvent"
    FORK = "ForkEvent"
    GOLLUM = "GollumEvent"  # 위키 편집
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    MEMBER = "MemberEvent"
    PUBLIC = "PublicEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    PUSH = "PushEvent"
    RELEASE = "ReleaseEvent"
    WATCH = "WatchEvent"


class UnknownEventKind(BaseModel):
    """EventKind에 없는 타입. 원본 문자열을 그대로 보존한다."""

    model_config = ConfigDict(frozen=True)

    raw: str


class RepoRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str  # owner/name


class IssueRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str


class Payload(BaseModel):
    """이벤트 payload 중 렌더링에 쓰는 필드만.

    이벤트 타입마다 채워지는 필드가 다르므로 모두 선택 필드다.
    """

    model_config = ConfigDict(frozen=True)

    action: str | None = None
    issue: IssueRef | None = None
    head: str | None = None  # push 이후 SHA
    before: str | None = None  # push 이전 SHA


class Event(BaseModel):
    """GitHub 유저 활동 이벤트 1건.

    - type이 알려지지 않은 값이어도 실패하지 않고 UnknownEventKind로 파싱
    - payload 누락 시 빈 Payload
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: EventKind | UnknownEventKind = Field(..., alias="type")
    payload: Payload = Field(default_factory=Payload)
    repo: RepoRef
    created_at: str

    @field_validator("kind", mode="before")
    @classmethod
    def tolerate_unknown_kind(cls, v: Any) -> Any:
        """문자열만 받는다. 객체/숫자 type은 UnknownEventKind로 흘러가지 않게 거부."""
        if isinstance(v, EventKind | UnknownEventKind):
            return v
        if not isinstance(v, str):
            raise ValueError(f"event type must be a string, got {type(v).__name__}")
        try:
            return EventKind(v)
        except ValueError:
            return UnknownEventKind(raw=v)

    @property
    def type_name(self) -> str:
        """플랫폼이 보낸 원본 type 문자열."""
        if isinstance(self.kind, UnknownEventKind):
            return self.kind.raw
        return self.kind.value


class CompareResult(BaseModel):
    """compare API 응답 중 커밋 수."""

    total_commits: int
