"""FastAPI application for the NDR dashboard backend."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..logging_utils import configure_logging
from ..metrics import latency_summary, monitor
from .response_time import RESPONSE_TIME_HEADER, ResponseTimeMiddleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_credentials,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
        expose_headers=[RESPONSE_TIME_HEADER],
    )

    # Added last so it wraps every other middleware.
    app.add_middleware(
        ResponseTimeMiddleware,
        monitor=monitor,
        slow_request_ms=settings.slow_request_ms,
    )

    @app.get("/healthz", tags=["system"])
    def healthcheck() -> Dict[str, Any]:
        return {"status": "ok", "environment": settings.env}

    @app.get("/metrics/latency", tags=["metrics"])
    def latency_metrics() -> Dict[str, Any]:
        return {"latency": latency_summary()}

    return app


app = create_app()
