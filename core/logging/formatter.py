from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Keys a caller may pass through ``extra=`` that are worth surfacing.
_EXTRA_KEYS = ("account", "game_id", "generation", "status", "url", "attempt", "error", "count")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "context", None)
    return dict(ctx) if ctx is not None else get_context()


def _record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: getattr(record, k) for k in _EXTRA_KEYS if getattr(record, k, None) is not None}


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        fields = {**_record_context(record), **_record_extras(record)}
        lvl = record.levelname
        parts = [
            md["timestamp"],
            f"{lvl:<8}",
            md["service"] or "-",
            f"{md['logger']}:{md['line_number']}",
            record.getMessage(),
        ]
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            parts.append(f"t={exec_ms}ms")
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        line = " | ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return f"{_LEVEL_COLORS.get(lvl, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = _record_context(record)
        if ctx:
            payload["context"] = ctx
        payload.update(_record_extras(record))
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
