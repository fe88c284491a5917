"""Simple configuration loader for the dashboard backend."""

from __future__ import annotations

import math
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _flag(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in {"true", "1", "yes"}:
        return True
    if raw in {"false", "0", "no", ""}:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _threshold_ms(name: str, default: str) -> float:
    value = float(os.getenv(name, default))
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite, non-negative number of milliseconds, got {value!r}")
    return value


class Settings:
    """Runtime configuration derived from environment variables."""

    def __init__(self) -> None:
        self.env: str = os.getenv("NDR_ENV") or os.getenv("ENV", "development")
        self.app_name: str = os.getenv("APP_NAME", "NDR Dashboard Backend")
        self.app_version: str = os.getenv("APP_VERSION", "1.0.0")

        # CORS
        self.cors_origins: List[str] = _split(os.getenv("CORS_ORIGIN", "*"))
        self.cors_methods: List[str] = _split(
            os.getenv("CORS_METHODS", "GET,HEAD,PUT,PATCH,POST,DELETE,OPTIONS")
        )
        self.cors_credentials: bool = _flag("CORS_CREDENTIALS", "false")

        self.enable_docs: bool = _flag("ENABLE_DOCS", "false")

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format: str = os.getenv("NDR_LOG_FORMAT", "plain").lower()

        # Requests slower than this are logged as warnings
        self.slow_request_ms: float = _threshold_ms("SLOW_REQUEST_MS", "1000")

    def dict(self) -> dict[str, object]:
        return self.__dict__.copy()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
