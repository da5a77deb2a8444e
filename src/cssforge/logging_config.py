from __future__ import annotations

import json
import logging
import sys
from typing import TextIO


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(jsonl: bool) -> logging.Formatter:
    if jsonl:
        return JsonFormatter()
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_logging(
    *,
    level: str = "WARNING",
    jsonl: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route ``cssforge`` log records to a single stderr handler."""
    root = logging.getLogger("cssforge")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_make_formatter(jsonl))
    root.addHandler(handler)
    return handler


__all__ = ["JsonFormatter", "configure_logging"]
