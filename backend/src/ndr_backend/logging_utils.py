"""Logging helpers that keep credentials out of the audit trail."""

from __future__ import annotations

import json
import logging
import os
import re
from threading import Lock
from typing import Union

_CONFIG_LOCK = Lock()
_CONFIGURED = False

_REDACTED = "[REDACTED]"
_SECRET_PATTERNS = (
    re.compile(r"(?i)\bbearer\s+[A-Za-z0-9\-._~+/]+=*"),
    re.compile(r"(?i)\b(password|passwd|secret|token)\s*[=:]\s*\S+"),
    re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+"),
)


def scrub_text(text: str) -> str:
    """Mask bearer tokens, inline secrets and e-mail addresses."""

    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(_REDACTED, text)
    return text


class SecretScrubberFilter(logging.Filter):
    """Scrubs credentials from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub_text(record.msg)

        if record.args:
            if isinstance(record.args, tuple):
                record.args = tuple(
                    scrub_text(arg) if isinstance(arg, str) else arg for arg in record.args
                )
            elif isinstance(record.args, dict):
                record.args = {
                    key: scrub_text(value) if isinstance(value, str) else value
                    for key, value in record.args.items()
                }

        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = record.event
        if hasattr(record, "payload"):
            payload["payload"] = record.payload
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: Union[int, str] = logging.INFO, log_format: str | None = None) -> None:
    """Configure root logger with secret scrubbing and consistent format."""

    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED:
            return

        log_format = (log_format or os.getenv("NDR_LOG_FORMAT", "plain")).lower()
        if log_format == "json":
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            logging.basicConfig(level=level, handlers=[handler])
        else:
            logging.basicConfig(level=level, format="[%(levelname)s] %(name)s - %(message)s")

        root_logger = logging.getLogger()
        root_logger.addFilter(SecretScrubberFilter())
        _CONFIGURED = True


__all__ = ["JSONFormatter", "SecretScrubberFilter", "configure_logging", "scrub_text"]
