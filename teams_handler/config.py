"""Configuration management for the Teams handler."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from teams_handler.errors import ConfigurationError
from teams_handler.models.event import Event

logger = logging.getLogger(__name__)

PLUGIN_NAME = "sensu-teams-handler"
KEYSPACE = "sensu.io/plugins/teams/config"

DEFAULT_SENDER = "Sensu"
DEFAULT_SENSU_URL = "http://localhost:3000"
DEFAULT_TEMPLATE = "{{ .Check.Output }}"


class HandlerSettings(BaseSettings):
    """Handler settings loaded from CLI flags and TEAMS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEAMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    webhook_url: str = Field(default="")
    is_test: bool = Field(default=False)
    sender: str = Field(default=DEFAULT_SENDER)
    sensu_url: str = Field(default=DEFAULT_SENSU_URL)
    description_template: str = Field(default=DEFAULT_TEMPLATE)
    log_level: str = Field(default="INFO")


@dataclass(frozen=True)
class ConfigOption:
    path: str
    field: str
    secret: bool = False

    @property
    def annotation_key(self) -> str:
        return f"{KEYSPACE}/{self.path}"


OPTIONS: tuple[ConfigOption, ...] = (
    ConfigOption("webhook-url", "webhook_url", secret=True),
    ConfigOption("is-test", "is_test"),
    ConfigOption("sender", "sender"),
    ConfigOption("sensu-url", "sensu_url"),
    ConfigOption("description-template", "description_template"),
)


def load_settings(**overrides: Any) -> HandlerSettings:
    """Build settings; explicit (non-None) overrides win over the environment."""
    return HandlerSettings(**{k: v for k, v in overrides.items() if v is not None})


def apply_annotation_overrides(settings: HandlerSettings, event: Event) -> HandlerSettings:
    """Return settings with per-event annotation overrides applied.

    Entity annotations are applied first and check annotations second, so
    the check wins. Secret options are never read from annotations.
    """
    annotations: dict[str, str] = {}
    if event.entity:
        annotations.update(event.entity.metadata.annotations)
    if event.check:
        annotations.update(event.check.metadata.annotations)

    updates: dict[str, str] = {}
    for option in OPTIONS:
        if option.secret or option.annotation_key not in annotations:
            continue
        updates[option.field] = annotations[option.annotation_key]
        logger.debug(f"Overriding {option.path} from annotation {option.annotation_key}")

    if not updates:
        return settings

    try:
        return type(settings)(**{**settings.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(f"invalid annotation override: {e}") from e


def check_args(settings: HandlerSettings) -> None:
    """Validate settings before the event is handled."""
    if not settings.webhook_url:
        raise ConfigurationError("--webhook-url or TEAMS_WEBHOOK_URL environment variable is required")
