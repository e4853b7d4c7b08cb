"""click CLI 엔트리포인트.

github-activity <username> 명령으로 유저의 최근 GitHub 활동을 한 줄씩 출력합니다.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml

from github_activity.config import load_config
from github_activity.errors import ActivityError
from github_activity.github_api import GitHubActivityClient
from github_activity.logging_config import setup_logging
from github_activity.renderer import render_events

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    """stderr에 한 줄 출력 후 종료 코드 1로 종료한다."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command()
@click.version_option(version="0.1.0", prog_name="github-activity")
@click.argument("username", required=False, default="")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="설정 파일 경로 (기본: 내장 기본값)",
)
@click.option("--json-log/--no-json-log", default=True, help="JSON 로그 포맷 (기본: 활성)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="DEBUG 로그 출력")
def main(username: str, config_path: Path | None, json_log: bool, verbose: bool) -> None:
    """GitHub 유저의 최근 공개 활동을 출력합니다.

    사용 예:\n
        github-activity octocat\n
        github-activity octocat --verbose --no-json-log
    """
    setup_logging(json_format=json_log, level=logging.DEBUG if verbose else logging.WARNING)

    try:
        config = load_config(config_path)
    except (ValueError, yaml.YAMLError) as exc:
        _fail(f"Invalid config: {exc}")

    with GitHubActivityClient(config.github_api) as api:
        try:
            events = api.fetch_user_events(username)
        except ActivityError as exc:
            logger.debug("Fetch failed: %s", exc, extra={"event_code": type(exc).__name__})
            _fail(str(exc))

        for line in render_events(events, api.count_commits):
            click.echo(line)


if __name__ == "__main__":
    main()
