from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .context import get_context
from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


class _ServiceFilter(logging.Filter):
    """Stamp records with a service and snapshot the bound context.

    The snapshot is taken on the emitting task; the queue listener formats
    records on its own thread where the context variable is empty.
    """

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        if getattr(record, "context", None) is None:
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "timeline",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "timeline.jsonl",
    console: bool | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    JSON lines go to a rotating file through a queue so that writes never
    block the event loop. The console handler is opt-in (``LOG_CONSOLE``).
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    service_filter = _ServiceFilter(service)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler = logging.StreamHandler()
        handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
        handler.setFormatter(ConsoleFormatter())
        handler.addFilter(service_filter)
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(service_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    # httpx logs every request at INFO; keep it out of the timeline output.
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
