"""stderr 전용 로깅 설정.

stdout은 이벤트 요약 줄만 나가야 하므로, 로그는 JSON이든 plain이든 항상 stderr로 보낸다.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

# LogRecord 기본 속성. 이 외의 속성은 logger 호출 시 extra로 넘어온 값이다.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """record에 붙은 extra 필드만 추려낸다."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_") and value is not None
    }


class JsonFormatter(logging.Formatter):
    """로그 레코드 1건을 JSON 한 줄로 만든다 (extra 필드 포함)."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(record_extras(record))
        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(*, json_format: bool = True, level: int = logging.WARNING) -> None:
    """github_activity 로거를 stderr 핸들러 하나로 (재)설정한다.

    Args:
        json_format: True이면 JSON 한 줄, False이면 PLAIN_FORMAT
        level: 로그 레벨 (CLI 기본 WARNING, --verbose 시 DEBUG)
    """
    logger = logging.getLogger("github_activity")
    logger.setLevel(level)
    logger.handlers.clear()

    # 호출 시점의 sys.stderr를 잡는다 (CliRunner처럼 스트림을 바꿔치는 환경 포함).
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)
