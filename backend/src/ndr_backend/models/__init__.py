"""Alert and user schemas exchanged by the dashboard and its services."""

from .alerts import Alert, AlertSeverity, AlertStatus, NetworkAlert, NetworkAlertStatus
from .users import NotificationSettings, Theme, User, UserSettings

__all__ = [
    "Alert",
    "AlertSeverity",
    "AlertStatus",
    "NetworkAlert",
    "NetworkAlertStatus",
    "NotificationSettings",
    "Theme",
    "User",
    "UserSettings",
]
