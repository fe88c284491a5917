"""NDR security-operations dashboard backend package."""

from .logging_utils import configure_logging
from .metrics import LatencyMonitor

__all__ = ["configure_logging", "LatencyMonitor"]
