"""JSON logging for the desk: one object per line, to 04_logs and stdout."""

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import DEFAULT_LOG_PATH

# Never written to log output as-is.
_REDACTED_KEYS = {"password", "access_token", "accessToken", "authorization"}

_LOG_FILE_BYTES = 10 * 1024 * 1024
_LOG_FILE_BACKUPS = 5


def _redact(context: Any) -> Any:
    if isinstance(context, dict):
        return {
            key: "***" if key in _REDACTED_KEYS else _redact(value)
            for key, value in context.items()
        }
    return context


class JSONFormatter(logging.Formatter):
    """Renders a record plus its optional ``context`` extra as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "context"):
            entry["context"] = _redact(record.context)
        return json.dumps(entry, default=str)


def setup_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """Route the root logger to a rotating JSON file and the console.

    `log_level` falls back to ``LOG_LEVEL`` (default INFO) and `log_file`
    to ``04_logs/app.log``.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    path = Path(log_file) if log_file else DEFAULT_LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JSONFormatter}},
            "handlers": {
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "filename": str(path),
                    "maxBytes": _LOG_FILE_BYTES,
                    "backupCount": _LOG_FILE_BACKUPS,
                    "formatter": "json",
                    "encoding": "utf-8",
                },
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                },
            },
            # httpx logs every request line at INFO
            "loggers": {
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
            "root": {"level": level, "handlers": ["file", "console"]},
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
