"""Shared fixtures for the Teams handler test suite."""

import json
import os
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import httpx
import pytest

from teams_handler.config import HandlerSettings
from teams_handler.models.event import Check, Entity, Event, ObjectMeta

WEBHOOK_URL = "https://example.webhook.office.com/webhookb2/test"

EXPECTED_TEST_CARD = (
    '{"@type":"MessageCard","@context":"https://schema.org/extensions","summary":"Sensu alert card",'
    '"title":"Sensu - RESOLVED","themeColor":"00FF00",'
    '"sections":[{"text":"Test","activityTitle":"check1","activitySubtitle":"2021-11-17 02:00",'
    '"facts":[{"name":"Sender:","value":"Sensu"},{"name":"Status:","value":"Resolved"},'
    '{"name":"Entity:","value":"entity1"}]}],'
    '"potentialAction":[{"@type":"OpenUri","name":"View in Sensu",'
    '"targets":[{"os":"default","uri":"http://localhost:3000"}]}]}'
)


def fixture_event(entity_name: str, check_name: str, **check_fields: Any) -> Event:
    """Minimal well-formed event with the given check fields."""
    return Event(
        entity=Entity(metadata=ObjectMeta(name=entity_name, namespace="default")),
        check=Check(metadata=ObjectMeta(name=check_name, namespace="default"), **check_fields),
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TEAMS_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("TEAMS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def event() -> Event:
    return fixture_event("entity1", "check1")


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def _make(status: int = 0, output: str = "", **check_fields: Any) -> Event:
        return fixture_event("entity1", "check1", status=status, output=output, **check_fields)

    return _make


@pytest.fixture
def settings() -> HandlerSettings:
    return HandlerSettings(webhook_url=WEBHOOK_URL)


@pytest.fixture
def test_settings() -> HandlerSettings:
    return HandlerSettings(
        webhook_url=WEBHOOK_URL,
        is_test=True,
        sender="Sensu",
        sensu_url="http://localhost:3000",
        description_template="{{ check output }}",
    )


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


class WebhookRecorder:
    """Fake Teams webhook backed by httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.text = "1"
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    @property
    def last_body(self) -> str:
        return self.requests[-1].content.decode("utf-8")

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last_body)


@pytest.fixture
def webhook() -> WebhookRecorder:
    return WebhookRecorder()


def sensu_event_json(
    status: int = 0,
    output: str = "disk is full",
    entity_annotations: dict[str, str] | None = None,
    check_annotations: dict[str, str] | None = None,
    handlers: list[str] | None = None,
) -> str:
    """Event JSON in the shape sensu-backend pipes to handlers."""
    return json.dumps(
        {
            "timestamp": 1700000000,
            "id": "3a5f0d13-1d5a-4b6e-8b8e-6ed1fd3e3b0c",
            "entity": {
                "entity_class": "agent",
                "system": {"hostname": "entity1", "os": "linux"},
                "metadata": {
                    "name": "entity1",
                    "namespace": "default",
                    "labels": None,
                    "annotations": entity_annotations,
                },
            },
            "check": {
                "command": "check-disk-usage.rb",
                "handlers": handlers,
                "interval": 60,
                "status": status,
                "output": output,
                "issued": 1700000000,
                "executed": 1700000000,
                "occurrences": 1,
                "metadata": {
                    "name": "check1",
                    "namespace": "default",
                    "labels": {"team": "ops"},
                    "annotations": check_annotations,
                },
            },
        }
    )
