"""Logging setup (formatter + dictConfig builder)."""

from __future__ import annotations

import json
import logging
from logging.config import dictConfig
from typing import Any


class ExtrasFormatter(logging.Formatter):
    """Append structured `data` payloads when present."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        record_data = record.__dict__.get("data")
        if record_data:
            try:
                encoded = json.dumps(record_data, sort_keys=True, separators=(",", ":"))
            except TypeError:
                encoded = str(record_data)
            return f"{formatted} | data={encoded}"
        return formatted


def build_log_config(level: str = "INFO") -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
        "loggers": {
            "roshambo": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    dictConfig(build_log_config(level))


__all__ = ["ExtrasFormatter", "build_log_config", "configure_logging"]
