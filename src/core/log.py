"""
Minimal JSON logging for the server process.

Logs go to stderr as one JSON object per line; stdout carries the MCP
stdio transport and must stay clean.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Union


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": round(record.created, 3),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()
    if any(getattr(h, "_kv_json", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_JsonFormatter())
    handler._kv_json = True  # type: ignore[attr-defined]
    root.setLevel(level)
    root.addHandler(handler)
