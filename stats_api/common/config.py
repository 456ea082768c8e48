"""Server configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(slots=True, frozen=True)
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]

    @staticmethod
    def from_env() -> ServerConfig:
        raw_port = os.getenv("STATS_API_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"STATS_API_PORT must be an integer, got {raw_port!r}") from None

        return ServerConfig(
            host=os.getenv("STATS_API_HOST", DEFAULT_HOST),
            port=port,
            log_level=os.getenv("STATS_API_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            json_logs=os.getenv("STATS_API_LOG_JSON", "").strip().lower() in TRUTHY,
        )
