"""공통 fixture."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
import yaml

from github_activity.config import GitHubApiConfig
from github_activity.github_api import GitHubActivityClient


@pytest.fixture(autouse=True)
def _reset_logging() -> None:
    """CLI가 설정한 github_activity 로거 핸들러를 테스트마다 초기화한다."""
    yield
    logger = logging.getLogger("github_activity")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def make_event(
    event_type: str,
    *,
    repo: str = "octocat/hello-world",
    payload: dict[str, Any] | None = None,
    created_at: str = "2024-01-15T10:30:00Z",
) -> dict[str, Any]:
    """최소 필드만 가진 이벤트 JSON."""
    return {
        "id": "12345678901",
        "type": event_type,
        "actor": {"id": 1, "login": "octocat"},
        "repo": {"id": 100, "name": repo, "url": f"https://api.github.com/repos/{repo}"},
        "payload": payload if payload is not None else {},
        "public": True,
        "created_at": created_at,
    }


@pytest.fixture()
def push_event_data() -> dict[str, Any]:
    """before/head가 모두 있는 PushEvent."""
    return make_event(
        "PushEvent",
        payload={
            "repository_id": 100,
            "push_id": 999,
            "ref": "refs/heads/main",
            "head": "b" * 40,
            "before": "a" * 40,
        },
    )


@pytest.fixture()
def mixed_events_data() -> list[dict[str, Any]]:
    """타입별 최소 이벤트 (최신순)."""
    return [
        make_event("CreateEvent", repo="octocat/new-repo", payload={"ref_type": "repository"}),
        make_event("IssueCommentEvent", payload={"action": "created"}),  # issue 누락 → skip
        make_event("WatchEvent", repo="torvalds/linux", payload={"action": "started"}),
        make_event("IssuesEvent", payload={"action": "opened"}),
        make_event("ForkEvent", repo="python/cpython"),
        make_event("PullRequestEvent", payload={"number": 1}),  # action 누락 → skip
        make_event("DeleteEvent", repo="octocat/old-repo"),
        make_event("MemberEvent", payload={"action": "added"}),
    ]


@pytest.fixture()
def api_config() -> GitHubApiConfig:
    return GitHubApiConfig(request_timeout_sec=5)


@pytest.fixture()
def api_client(api_config: GitHubApiConfig) -> GitHubActivityClient:
    client = GitHubActivityClient(api_config)
    yield client
    client.close()


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """임시 YAML 설정 파일."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump(
            {
                "github_api": {
                    "base_url": "https://ghe.example.com/api/v3",
                    "user_agent": "test-agent",
                    "request_timeout_sec": 3,
                }
            }
        ),
        encoding="utf-8",
    )
    return config_path
