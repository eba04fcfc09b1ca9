from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from config import settings


@dataclass(slots=True)
class TimeoutConfig:
    """Per-request timeouts for backend calls, with env overrides."""
    connect_timeout_ms: int
    read_timeout_ms: int
    total_timeout_ms: int

    @classmethod
    def from_env(cls) -> "TimeoutConfig":
        """Build TimeoutConfig from environment variables, defaulting to REQUEST_TIMEOUT."""
        total_ms = int(settings.REQUEST_TIMEOUT * 1000)

        def _int(name: str, default: int) -> int:
            try:
                return int(os.getenv(name, str(default)))
            except ValueError:
                return default

        return cls(
            connect_timeout_ms=_int("HTTP_CONNECT_TIMEOUT_MS", min(5000, total_ms)),
            read_timeout_ms=_int("HTTP_READ_TIMEOUT_MS", total_ms),
            total_timeout_ms=_int("HTTP_TOTAL_TIMEOUT_MS", total_ms),
        )

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_ms / 1000.0,
            read=self.read_timeout_ms / 1000.0,
            write=self.read_timeout_ms / 1000.0,
            pool=self.total_timeout_ms / 1000.0,
        )
