from __future__ import annotations

import contextvars
from typing import Any, Dict

# Fields bound here (puuid, region, match_id, ...) are attached to every
# record emitted from the same task, including fan-out children.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("rift_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _context.set(current)


def unbind(*keys: str) -> None:
    current = dict(_context.get())
    for key in keys:
        current.pop(key, None)
    _context.set(current)


class log_context(object):
    """Bind fields for the duration of a ``with`` block.

    >>> with log_context(puuid="abc", region="europe"):
    ...     logger.info("history-load")
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
