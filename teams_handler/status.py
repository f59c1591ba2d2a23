"""Mapping of Sensu check status codes to notification severity."""

from enum import Enum
from typing import NamedTuple


class EventAction(str, Enum):
    RESOLVED = "RESOLVED"
    ALERT = "ALERT"


class Severity(str, Enum):
    RESOLVED = "Resolved"
    WARNING = "Warning"
    CRITICAL = "Critical"


class Classification(NamedTuple):
    action: EventAction
    severity_label: Severity
    color: str


RESOLVED = Classification(EventAction.RESOLVED, Severity.RESOLVED, "00FF00")
CRITICAL = Classification(EventAction.ALERT, Severity.CRITICAL, "FF0000")
WARNING = Classification(EventAction.ALERT, Severity.WARNING, "FFFF00")


def classify(status: int) -> Classification:
    """Classify a check status.

    0 is resolved and 2 is critical. Every other value, including 1,
    unknown codes above 2 and negative values, is a warning.
    """
    if status == 0:
        return RESOLVED
    if status == 2:
        return CRITICAL
    return WARNING


def event_action(status: int) -> str:
    return classify(status).action.value


def message_color(status: int) -> str:
    return classify(status).color


def message_status(status: int) -> str:
    return classify(status).severity_label.value
