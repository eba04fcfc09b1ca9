from __future__ import annotations

import contextvars
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

# Fields (account puuid, game id, fetch generation) attached to every record
# emitted while bound. Each asyncio task runs in a copy of its creator's
# context, so concurrent per-account fetches keep separate fields.
_fields: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar(
    "timeline_log_fields", default=MappingProxyType({})
)


def _merged(values: Mapping[str, Any]) -> Mapping[str, Any]:
    current = dict(_fields.get())
    current.update((k, v) for k, v in values.items() if v is not None)
    return MappingProxyType(current)


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


def bind(**values: Any) -> None:
    """Bind fields until the current task ends; None values are ignored."""
    _fields.set(_merged(values))


def unbind(*keys: str) -> None:
    _fields.set(MappingProxyType({k: v for k, v in _fields.get().items() if k not in keys}))


@contextmanager
def context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind fields for the duration of a ``with`` block."""
    token = _fields.set(_merged(values))
    try:
        yield get_context()
    finally:
        _fields.reset(token)
