"""Logging setup.

Route handlers attach identifiers with ``extra=`` (``user_id``, ``wishlist_id``,
``item_id``, ...). Both formatters render those next to the message, so a
single request can be followed through the log by its trace id and ids.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .middleware import get_request_id

# Attributes present on every LogRecord; anything else arrived through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def structured_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def __init__(self, service: str | None = None, environment: str | None = None) -> None:
        super().__init__()
        self.static_fields: dict[str, str] = {}
        if service:
            self.static_fields["service"] = service
        if environment:
            self.static_fields["environment"] = environment

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.static_fields,
        }

        request_id = get_request_id()
        if request_id:
            log_entry["trace_id"] = request_id

        # Fixed keys win over a colliding extra
        for key, value in structured_fields(record).items():
            log_entry.setdefault(key, value)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with ``key=value`` pairs appended."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = structured_fields(record)
        request_id = get_request_id()
        if request_id:
            fields = {"trace_id": request_id, **fields}
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


def configure_logging(
    level_name: str = "INFO",
    log_format: str = "json",
    service: str | None = None,
    environment: str | None = None,
) -> None:
    level = getattr(logging, level_name.strip().upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if log_format.strip().lower() == "json":
        handler.setFormatter(JSONFormatter(service=service, environment=environment))
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)
