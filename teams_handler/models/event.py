"""Sensu event models.

Only the parts of the Sensu event the handler reads are modelled; unknown
keys in the incoming JSON are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ObjectMeta(BaseModel):
    """Metadata shared by entities and checks."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)

    # Sensu serializes nil maps as null
    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return value or {}


class Entity(BaseModel):
    """The monitored entity the event is about."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    entity_class: str = ""


class Check(BaseModel):
    """Result of a single check execution."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    output: str = ""
    status: int = 0
    occurrences: int = 0


class Event(BaseModel):
    """A Sensu event: one check result for one entity."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    entity: Entity | None = None
    check: Check | None = None
    timestamp: int = 0
    id: str = ""

    @property
    def entity_name(self) -> str:
        return self.entity.metadata.name if self.entity else ""

    @property
    def check_name(self) -> str:
        return self.check.metadata.name if self.check else ""

    @property
    def check_output(self) -> str:
        return self.check.output if self.check else ""

    @property
    def check_status(self) -> int:
        return self.check.status if self.check else 0

    def validate_event(self) -> None:
        """Raise ValueError if the event cannot be handled."""
        if self.entity is None:
            raise ValueError("event does not contain an entity")
        if self.check is None:
            raise ValueError("event does not contain a check")
        if not self.entity_name:
            raise ValueError("entity name must not be empty")
        if not self.check_name:
            raise ValueError("check name must not be empty")
