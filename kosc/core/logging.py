"""
Structured logging configuration.

Standard output carries translated text, so every handler configured here
writes to standard error or to a file.

The translator attaches what it knows about a run to its records through the
standard ``extra=`` mapping; both formatters pick up the fields listed in
``PROGRAM_FIELDS`` and ignore everything else.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from .config import Settings, get_settings

# Record attributes describing the program being translated, in output order.
PROGRAM_FIELDS = (
    "source_length",
    "statements",
    "offset",
    "line",
    "column",
    "expected",
)


def program_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the ``PROGRAM_FIELDS`` present on ``record``."""
    return {
        name: getattr(record, name)
        for name in PROGRAM_FIELDS
        if hasattr(record, name)
    }


class StructuredFormatter(logging.Formatter):
    """One JSON object per record; program fields go under ``"program"``."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = program_fields(record)
        if fields:
            log_data["program"] = fields

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable lines with program fields appended as ``key=value``."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        fields = program_fields(record)
        if not fields:
            return text
        suffix = " ".join(f"{name}={value}" for name, value in fields.items())
        return f"{text} [{suffix}]"


def setup_logging(settings: Settings | None = None, level: str | None = None) -> None:
    """
    Configure translator logging.

    Args:
        settings: Settings to read from (defaults to the cached settings)
        level: Optional level name overriding ``settings.LOG_LEVEL``
    """
    settings = settings or get_settings()

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers: list[logging.Handler] = [console_handler]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
