from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from config import settings
from core.logging import StructuredLogger


TransientPredicate = Callable[[BaseException], bool]
Supplier = Callable[[], Awaitable[Any]]


@dataclass(slots=True)
class RetryPolicy:
    max_attempts: int
    backoff_base_ms: int
    backoff_factor: float
    jitter_ms: int = 0

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        """One initial attempt plus MAX_RETRIES retries."""
        return cls(
            max_attempts=max(1, settings.MAX_RETRIES + 1),
            backoff_base_ms=settings.RETRY_BACKOFF_MS,
            backoff_factor=settings.RETRY_FACTOR,
        )

    def backoff_ms(self, attempt: int) -> int:
        return int(self.backoff_base_ms * math.pow(self.backoff_factor, attempt - 1)) + self.jitter_ms

    async def run(
        self,
        supplier: Supplier,
        *,
        is_transient: TransientPredicate,
        logger: StructuredLogger,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Execute an async supplier, retrying transient errors with exponential backoff.

        Terminal errors and the last transient error are re-raised unchanged.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await supplier()
            except Exception as e:
                transient = is_transient(e)
                if attempt >= self.max_attempts or not transient:
                    raise
                wait_ms = self.backoff_ms(attempt)
                logger.warning(
                    lambda: f"retry {attempt}/{self.max_attempts - 1} in {wait_ms}ms",
                    extra={**(context or {}), "attempt": attempt, "error": str(e)},
                )
                await asyncio.sleep(wait_ms / 1000.0)
        raise RuntimeError("unreachable: retry loop exited without result")
