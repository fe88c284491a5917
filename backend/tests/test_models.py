import unittest
from ipaddress import IPv4Address

from pydantic import ValidationError

from ndr_backend.models import (
    Alert,
    AlertSeverity,
    AlertStatus,
    NetworkAlert,
    NetworkAlertStatus,
    Theme,
    User,
)


def _alert_payload(**overrides) -> dict:
    payload = {
        "id": "alert-1",
        "title": "Port scan detected",
        "severity": "high",
        "status": "in_progress",
        "source": "suricata",
        "eventIds": ["evt-1", "evt-2"],
        "timestamp": "2024-03-01T10:00:00Z",
        "createdAt": "2024-03-01T10:00:01Z",
        "updatedAt": "2024-03-01T10:05:00Z",
        "assignedTo": "analyst-7",
        "tactic": "TA0043",
        "technique": "T1046",
    }
    payload.update(overrides)
    return payload


def _network_alert_payload(**overrides) -> dict:
    payload = {
        "id": "net-1",
        "title": "Outbound beacon",
        "description": "Periodic connection to a known C2 host",
        "sourceIp": "10.0.0.12",
        "targetIp": "203.0.113.5",
        "severity": "critical",
        "status": "open",
        "timestamp": "2024-03-01T10:00:00Z",
        "category": "command_and_control",
    }
    payload.update(overrides)
    return payload


class AlertModelTests(unittest.TestCase):
    def test_parses_camel_case_payload(self) -> None:
        alert = Alert.model_validate(_alert_payload())
        self.assertEqual(alert.severity, AlertSeverity.HIGH)
        self.assertEqual(alert.status, AlertStatus.IN_PROGRESS)
        self.assertEqual(alert.event_ids, ["evt-1", "evt-2"])
        self.assertEqual(alert.assigned_to, "analyst-7")
        self.assertIsNone(alert.closed_at)

    def test_serializes_with_camel_case_keys(self) -> None:
        alert = Alert.model_validate(_alert_payload())
        data = alert.model_dump(mode="json", by_alias=True, exclude_none=True)
        self.assertEqual(data["eventIds"], ["evt-1", "evt-2"])
        self.assertEqual(data["status"], "in_progress")
        self.assertNotIn("event_ids", data)

    def test_rejects_unknown_severity(self) -> None:
        with self.assertRaises(ValidationError):
            Alert.model_validate(_alert_payload(severity="urgent"))

    def test_accepts_every_lifecycle_state(self) -> None:
        for status in ("open", "in_progress", "resolved", "closed", "false_positive"):
            alert = Alert.model_validate(_alert_payload(status=status))
            self.assertEqual(alert.status.value, status)


class NetworkAlertModelTests(unittest.TestCase):
    def test_parses_ip_addresses(self) -> None:
        alert = NetworkAlert.model_validate(_network_alert_payload())
        self.assertEqual(alert.source_ip, IPv4Address("10.0.0.12"))
        self.assertEqual(alert.status, NetworkAlertStatus.OPEN)
        data = alert.model_dump(mode="json", by_alias=True)
        self.assertEqual(data["targetIp"], "203.0.113.5")

    def test_rejects_invalid_ip(self) -> None:
        with self.assertRaises(ValidationError):
            NetworkAlert.model_validate(_network_alert_payload(sourceIp="not-an-ip"))

    def test_only_open_or_closed(self) -> None:
        closed = NetworkAlert.model_validate(_network_alert_payload(status="closed"))
        self.assertEqual(closed.status, NetworkAlertStatus.CLOSED)
        with self.assertRaises(ValidationError):
            NetworkAlert.model_validate(_network_alert_payload(status="in_progress"))


class UserModelTests(unittest.TestCase):
    def _payload(self, **overrides) -> dict:
        payload = {
            "id": "user-1",
            "username": "soc.analyst",
            "email": "analyst@ndr-soc.io",
            "roles": ["analyst", "viewer", "analyst"],
            "settings": {
                "theme": "dark",
                "notifications": {"email": True, "browser": False, "severity": ["critical", "high"]},
                "dashboardLayout": {"widgets": ["alerts", "traffic"]},
                "timezone": "Europe/Istanbul",
            },
        }
        payload.update(overrides)
        return payload

    def test_parses_settings(self) -> None:
        user = User.model_validate(self._payload())
        self.assertEqual(user.settings.theme, Theme.DARK)
        self.assertFalse(user.settings.notifications.browser)
        self.assertEqual(
            user.settings.notifications.severity, [AlertSeverity.CRITICAL, AlertSeverity.HIGH]
        )
        self.assertEqual(user.settings.dashboard_layout, {"widgets": ["alerts", "traffic"]})

    def test_roles_behave_as_a_set(self) -> None:
        user = User.model_validate(self._payload())
        self.assertEqual(user.roles, ["analyst", "viewer"])
        self.assertTrue(user.has_role("viewer"))
        self.assertFalse(user.has_role("admin"))

    def test_optional_fields_default_to_none(self) -> None:
        user = User.model_validate(self._payload(settings=None))
        self.assertIsNone(user.settings)
        self.assertIsNone(user.permissions)
        self.assertIsNone(user.last_login)

    def test_rejects_unknown_timezone(self) -> None:
        payload = self._payload()
        payload["settings"]["timezone"] = "Mars/Olympus_Mons"
        with self.assertRaises(ValidationError):
            User.model_validate(payload)

    def test_rejects_invalid_email(self) -> None:
        with self.assertRaises(ValidationError):
            User.model_validate(self._payload(email="not-an-email"))


if __name__ == "__main__":
    unittest.main()
