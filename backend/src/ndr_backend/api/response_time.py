"""Middleware that stamps every response with its processing time."""

from __future__ import annotations

import logging
import math
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..metrics import LatencyMonitor

RESPONSE_TIME_HEADER = "X-Response-Time"

Clock = Callable[[], int]

_NS_PER_MS = Decimal(1_000_000)
_TWO_PLACES = Decimal("0.01")

logger = logging.getLogger(__name__)


def format_elapsed(elapsed_ms: Decimal) -> str:
    """Render milliseconds as ``<D.DD>ms`` using round-half-up."""

    rounded = elapsed_ms.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return f"{rounded:f}ms"


class RequestTiming:
    """Timing record owned by a single request/response exchange."""

    __slots__ = ("start_ns", "elapsed_ms", "_clock")

    def __init__(self, clock: Clock = time.perf_counter_ns) -> None:
        self._clock = clock
        self.start_ns: int = clock()
        self.elapsed_ms: Optional[Decimal] = None

    @property
    def finished(self) -> bool:
        return self.elapsed_ms is not None

    def finish(self, response: Response, header: str = RESPONSE_TIME_HEADER) -> Optional[str]:
        """Compute the elapsed time once and attach it to ``response``.

        Returns the header value, or ``None`` when the record was already
        finished. A response whose headers can no longer be changed keeps
        its headers as they are.
        """

        if self.finished:
            return None

        elapsed_ns = max(self._clock() - self.start_ns, 0)
        self.elapsed_ms = Decimal(elapsed_ns) / _NS_PER_MS
        value = format_elapsed(self.elapsed_ms)

        try:
            response.headers[header] = value
        except (RuntimeError, TypeError) as exc:
            logger.debug("Could not set %s header: %s", header, exc)
        return value


class ResponseTimeMiddleware(BaseHTTPMiddleware):
    """Attach ``X-Response-Time`` to each response that completes normally."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        clock: Clock = time.perf_counter_ns,
        monitor: Optional[LatencyMonitor] = None,
        slow_request_ms: Optional[float] = None,
        header: str = RESPONSE_TIME_HEADER,
    ) -> None:
        super().__init__(app)
        self._clock = clock
        self._monitor = monitor
        if slow_request_ms is not None and not math.isfinite(slow_request_ms):
            slow_request_ms = None
        self._slow_request_ms = slow_request_ms
        self._header = header

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        timing = RequestTiming(self._clock)
        request.state.timing = timing

        # Downstream errors propagate; the header is only emitted on completion.
        response = await call_next(request)

        if timing.finish(response, self._header) is not None:
            self._observe(request, response, timing.elapsed_ms)
        return response

    def _observe(self, request: Request, response: Response, elapsed_ms: Decimal) -> None:
        elapsed = float(elapsed_ms)
        if self._monitor is not None:
            self._monitor.observe(response.status_code, elapsed)

        if self._slow_request_ms is not None and elapsed > self._slow_request_ms:
            logger.warning(
                "Request exceeded %.0f ms: %s %s took %s",
                self._slow_request_ms,
                request.method,
                request.url.path,
                format_elapsed(elapsed_ms),
                extra={
                    "event": "slow_request",
                    "payload": {
                        "method": request.method,
                        "path": request.url.path,
                        "status": response.status_code,
                        "elapsed_ms": elapsed,
                    },
                },
            )


__all__ = [
    "RESPONSE_TIME_HEADER",
    "RequestTiming",
    "ResponseTimeMiddleware",
    "format_elapsed",
]
