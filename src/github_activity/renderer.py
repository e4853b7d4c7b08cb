"""이벤트 → 한 줄 요약 렌더링.

이벤트 타입별로 고정 문구를 만들고, push 이벤트는 compare API로 커밋 수를 보강한다.
입력 순서를 그대로 유지하며, 출력할 것이 없는 이벤트는 건너뛴다.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from github_activity.errors import ActivityError
from github_activity.models import Event, EventKind

# (repo, before, head) -> 커밋 수. ActivityError를 던질 수 있다.
CommitCounter = Callable[[str, str, str], int]

_REPO_TEMPLATES: dict[EventKind, str] = {
    EventKind.CREATE: "Created {repo}",
    EventKind.DELETE: "Deleted {repo}",
    EventKind.FORK: "Forked {repo}",
    EventKind.WATCH: "Starred {repo}",
}

_ACTION_TEMPLATES: dict[EventKind, str] = {
    EventKind.ISSUES: "{action} issue on {repo}",
    EventKind.PULL_REQUEST: "{action} pull request on {repo}",
    EventKind.COMMIT_COMMENT: "{action} {repo}",
}


def _commit_count_or_none(event: Event, count_commits: CommitCounter) -> int | None:
    """push 이벤트의 커밋 수. 알 수 없으면 None."""
    before = event.payload.before
    head = event.payload.head
    if before is None or head is None:
        return None
    try:
        return count_commits(event.repo.name, before, head)
    except ActivityError:
        # 보강은 best-effort: 실패는 "커밋 수 모름"으로 취급하고 로그도 남기지 않는다.
        return None


def _render_push(event: Event, count_commits: CommitCounter) -> str:
    count = _commit_count_or_none(event, count_commits)
    if count is not None and count > 0:
        return f"Pushed {count} commit(s) to {event.repo.name}"
    return f"Pushed to {event.repo.name}"


def render_event(event: Event, count_commits: CommitCounter) -> str | None:
    """이벤트 1건을 렌더링한다. 출력할 것이 없으면 None."""
    repo = event.repo.name
    payload = event.payload
    kind = event.kind

    if kind in _REPO_TEMPLATES:
        return _REPO_TEMPLATES[kind].format(repo=repo)

    if kind is EventKind.PUSH:
        return _render_push(event, count_commits)

    if kind is EventKind.ISSUE_COMMENT:
        if payload.issue is None:
            return None
        return f"Commented on {payload.issue.url}"

    if kind in _ACTION_TEMPLATES:
        if payload.action is None:
            return None
        return _ACTION_TEMPLATES[kind].format(action=payload.action, repo=repo)

    return f"[{event.type_name}] on {repo} at {event.created_at} {payload.action or ''}"


def render_events(events: Iterable[Event], count_commits: CommitCounter) -> Iterator[str]:
    """이벤트 순서대로 렌더링된 줄을 yield한다 (None은 건너뜀)."""
    for event in events:
        line = render_event(event, count_commits)
        if line is not None:
            yield line
