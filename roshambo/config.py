"""Environment configuration."""

from __future__ import annotations
import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    ROSHAMBO_STORE_PATH   JSON file for the game store (unset: in-memory)
    ROSHAMBO_LOG_LEVEL    level for the roshambo loggers
    ROSHAMBO_OWNER        owner recorded when a new store is instantiated
    ALLOWED_ORIGINS       comma-separated CORS origins
    """
    store_path: str | None = None
    log_level: str = "INFO"
    owner: str = "admin"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            store_path=os.getenv("ROSHAMBO_STORE_PATH") or None,
            log_level=os.getenv("ROSHAMBO_LOG_LEVEL", "INFO"),
            owner=os.getenv("ROSHAMBO_OWNER", "admin"),
            allowed_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
        )
