"""
JSON logging for presign.

Each record is one line of JSON carrying the S3 call it describes: the
operation, target bucket and object key, and the provider error code
when the call failed. Only these named fields are emitted, so
credentials and signed URLs never reach the log stream.

The initial level comes from ``PRESIGN_LOG_LEVEL`` (``INFO`` when unset).
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from functools import partialmethod
from typing import Any

LOG_LEVEL_ENV = "PRESIGN_LOG_LEVEL"

_CONTEXT_FIELDS = ("request_id", "operation", "bucket", "key", "code")


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


class StructuredFormatter(logging.Formatter):
    """Render a record and its S3 context as compact JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in _CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            payload["exception"] = f"{type(exc).__name__}: {exc}"
        return json.dumps(payload, default=str, separators=(",", ":"))


class PresignLogger:
    """Logs S3 operations with their bucket/key context attached."""

    def __init__(self, name: str = "presign", level: int | None = None) -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(_level_from_env() if level is None else level)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        operation: str | None = None,
        bucket: str | None = None,
        key: str | None = None,
        code: str | None = None,
        request_id: str | None = None,
        exc_info: bool = False,
    ) -> None:
        """Log *message* tagged with the S3 call it belongs to.

        A fresh 12-character ``request_id`` is generated unless one is
        passed, so records from separate calls can be told apart.
        ``code`` is the S3 error code (``AccessDenied``, ``NoSuchBucket``)
        or the botocore exception name for failures that never got a
        response.
        """
        context = {
            "operation": operation,
            "bucket": bucket,
            "key": key,
            "code": code,
            "request_id": request_id or uuid.uuid4().hex[:12],
        }
        self.logger.log(level, message, extra=context, exc_info=exc_info)

    debug = partialmethod(log_operation, logging.DEBUG)
    info = partialmethod(log_operation, logging.INFO)
    warning = partialmethod(log_operation, logging.WARNING)
    error = partialmethod(log_operation, logging.ERROR)


presign_logger = PresignLogger()
