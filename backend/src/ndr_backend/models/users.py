"""Dashboard user profile schema."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from zoneinfo import available_timezones

from pydantic import EmailStr, Field, field_validator

from .alerts import AlertSeverity, _CamelModel


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class NotificationSettings(_CamelModel):
    email: bool = True
    browser: bool = True
    severity: List[AlertSeverity] = Field(default_factory=list)


class UserSettings(_CamelModel):
    theme: Optional[Theme] = None
    notifications: Optional[NotificationSettings] = None
    dashboard_layout: Optional[Any] = None
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in available_timezones():
            raise ValueError(f"unknown timezone: {value}")
        return value


class User(_CamelModel):
    id: str
    username: str = Field(..., min_length=1)
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    permissions: Optional[List[str]] = None
    last_login: Optional[datetime] = None
    settings: Optional[UserSettings] = None

    @field_validator("roles")
    @classmethod
    def _dedupe_roles(cls, value: List[str]) -> List[str]:
        # Role set: keep first occurrence order.
        return list(dict.fromkeys(value))

    def has_role(self, role: str) -> bool:
        return role in self.roles


__all__ = ["NotificationSettings", "Theme", "User", "UserSettings"]
