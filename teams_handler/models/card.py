"""Microsoft Teams MessageCard models.

Field order matches the connector card schema and is preserved on
serialization.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CardModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Fact(CardModel):
    name: str
    value: str


class OpenUriTarget(CardModel):
    os: str = "default"
    uri: str


class OpenUriAction(CardModel):
    type: Literal["OpenUri"] = Field(default="OpenUri", alias="@type")
    name: str
    targets: list[OpenUriTarget] = Field(default_factory=list)


class CardSection(CardModel):
    text: str = ""
    activity_title: str = Field(default="", alias="activityTitle")
    activity_subtitle: str = Field(default="", alias="activitySubtitle")
    facts: list[Fact] = Field(default_factory=list)


class MessageCard(CardModel):
    """Legacy actionable message card accepted by Teams incoming webhooks."""

    type: Literal["MessageCard"] = Field(default="MessageCard", alias="@type")
    context: str = Field(default="https://schema.org/extensions", alias="@context")
    summary: str = ""
    title: str = ""
    theme_color: str = Field(default="", alias="themeColor")
    sections: list[CardSection] = Field(default_factory=list)
    potential_action: list[OpenUriAction] = Field(default_factory=list, alias="potentialAction")

    def to_json(self) -> str:
        """Compact wire representation."""
        return self.model_dump_json(by_alias=True)
