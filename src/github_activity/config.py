"""YAML 설정 로딩 + Pydantic 모델."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# ── 설정 모델 ──────────────────────────────────────────


class GitHubApiConfig(BaseModel):
    base_url: str = "https://api.github.com"
    accept: str = "application/vnd.github.v3+json"
    api_version: str = "2022-11-28"
    user_agent: str = "github-activity/0.1.0"
    request_timeout_sec: float = Field(default=10.0, gt=0)


class AppConfig(BaseModel):
    """애플리케이션 전체 설정."""

    github_api: GitHubApiConfig = Field(default_factory=GitHubApiConfig)


# ── 로딩 ───────────────────────────────────────────────


def load_config(path: Path | None = None) -> AppConfig:
    """YAML 설정 파일을 로딩하고 Pydantic 모델로 검증한다.

    path가 없으면 기본값만으로 구성한다 (설정 파일은 선택 사항).
    """
    if path is None:
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raise ValueError(f"Empty config file: {path}")

    logger.debug("Loaded config from %s", path)
    return AppConfig.model_validate(raw)
