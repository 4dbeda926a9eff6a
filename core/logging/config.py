from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None


class _ContextFilter(logging.Filter):
    """Copies the bound log context onto the record in the emitting task."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "rift.jsonl",
    console: bool | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    The JSON file handler sits behind a queue so that logging from the
    event loop never blocks on disk I/O. Console output is off unless
    ``console=True`` or ``LOG_CONSOLE=true``.
    """
    global _listener
    register_levels()
    shutdown_logging()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler = logging.StreamHandler()
        handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
        handler.setFormatter(ConsoleFormatter())
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(_ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    # httpx logs every request at INFO, which would leak the api_key query param.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def shutdown_logging() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
