from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

HANDLER_NAME = "fastalens"


def get_logger(name: str = "fastalens") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    *,
    log_dir: Path,
    level: str = "info",
    format_name: str = "json",
    filename: str = "fastalens.log",
) -> Path:
    """
    Send log records to ``log_dir/filename`` and return the file path.

    Calling it again replaces (and closes) the handler installed previously.
    Raises OSError when the directory or file cannot be created.
    """
    level_value = getattr(logging, level.strip().upper(), logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / filename
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)
    root.setLevel(level_value)
    return log_path


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, sort_keys=True, default=str))
