"""Alert records shared between the dashboard and detection services.

Two independent alert shapes exist: the dashboard alert with its five-state
triage lifecycle, and the network-monitoring alert that only tracks
open/closed and carries the flow endpoints. They are not interchangeable.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AlertSeverity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class AlertStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"
    FALSE_POSITIVE = "false_positive"


class NetworkAlertStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Alert(_CamelModel):
    id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    severity: AlertSeverity = AlertSeverity.MEDIUM
    status: AlertStatus = AlertStatus.OPEN
    source: str
    type: Optional[str] = None
    entity_id: Optional[str] = None
    event_ids: List[str] = Field(default_factory=list)
    timestamp: datetime
    created_at: datetime
    updated_at: datetime
    closed_at: Optional[datetime] = None
    closed_by: Optional[str] = None
    assigned_to: Optional[str] = None
    # MITRE ATT&CK
    tactic: Optional[str] = None
    technique: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None


class NetworkAlert(_CamelModel):
    id: str
    title: str = Field(..., min_length=1)
    description: str
    source_ip: Union[IPv4Address, IPv6Address]
    target_ip: Union[IPv4Address, IPv6Address]
    severity: AlertSeverity
    status: NetworkAlertStatus = NetworkAlertStatus.OPEN
    timestamp: datetime
    category: str
    assigned_to: Optional[str] = None
    resolution_notes: Optional[str] = None
    related_alerts: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


__all__ = ["Alert", "AlertSeverity", "AlertStatus", "NetworkAlert", "NetworkAlertStatus"]
