"""HTTP surface of the dashboard backend."""

from .response_time import RESPONSE_TIME_HEADER, RequestTiming, ResponseTimeMiddleware, format_elapsed
from .server import create_app

__all__ = [
    "RESPONSE_TIME_HEADER",
    "RequestTiming",
    "ResponseTimeMiddleware",
    "create_app",
    "format_elapsed",
]
