"""JSON logging for the stylist service: correlation ids, service tags and redaction."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}
# Free-text or user-identifying item metadata never reaches the log stream.
_SENSITIVE_KEYS = frozenset({"user_id", "email", "notes", "name", "image_uri", "image_uris", "product_url"})
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")
_URL = re.compile(r"^https?://", re.IGNORECASE)
_HANDLER_NAME = "stylist-json"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object tagged with service and correlation id."""

    def __init__(self, service_name: Optional[str] = None) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        if self.service_name:
            payload["service"] = self.service_name
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key, value in redact_for_log(extras).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None, service_name: Optional[str] = None) -> None:
    """Install the JSON handler on the root logger, replacing any earlier one of ours."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter(service_name))
    root.addHandler(handler)
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def redact_for_log(payload: Any) -> Any:
    """Recursively mask sensitive keys, email addresses and links."""

    if isinstance(payload, dict):
        return {
            key: "[redacted]" if key in _SENSITIVE_KEYS else redact_for_log(value) for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set, frozenset)):
        return [redact_for_log(value) for value in payload]
    if isinstance(payload, str):
        if _EMAIL.search(payload):
            return _EMAIL.sub("[redacted-email]", payload)
        return "[redacted-url]" if _URL.match(payload) else payload
    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id`` when given, else reuse the current one or mint a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted structured fields; never pass reserved record names as fields."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    extra = {"event": event, "correlation_id": correlation_id}
    extra.update(redact_for_log(fields))
    logger.log(level, event, exc_info=exc_info, extra=extra)


@contextlib.contextmanager
def operation_context(operation: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id around ``operation`` and log its duration at debug level."""

    logger = logging.getLogger(__name__)
    start = time.perf_counter()
    with correlation_context(correlation_id) as scoped_id:
        try:
            yield scoped_id
        finally:
            logger.debug(
                "operation %s finished",
                operation,
                extra={
                    "operation": operation,
                    "correlation_id": scoped_id,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
