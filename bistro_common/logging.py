"""Logging helpers shared across Bistro services."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

# Set by the request logging middleware for the lifetime of one request.
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestJSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that injects the active request id.
    """

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        request_id = request_id_var.get()
        if request_id and "request_id" not in log_record:
            log_record["request_id"] = request_id

        # Normalize level casing
        if "level" in log_record:
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logger to emit JSON logs to stdout.
    """
    handler = logging.StreamHandler(sys.stdout)
    formatter = RequestJSONFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"asctime": "timestamp", "levelname": "level"},
    )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Remove existing handlers to avoid duplicate logs when reloading
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    root_logger.addHandler(handler)

    # The request logging middleware already reports every request
    logging.getLogger("uvicorn.access").disabled = True
    logging.getLogger("pymongo").setLevel("WARNING")
