"""Logging helpers."""

from .logging import build_log_config, configure_logging

__all__ = ["build_log_config", "configure_logging"]
