"""Assembly of the Teams MessageCard for an event."""

from collections.abc import Callable
from datetime import datetime

from teams_handler.config import HandlerSettings
from teams_handler.formatting import formatted_title
from teams_handler.models.card import CardSection, Fact, MessageCard, OpenUriAction, OpenUriTarget
from teams_handler.models.event import Event
from teams_handler.status import message_color, message_status
from teams_handler.templates import Renderer, render_description

Clock = Callable[[], datetime]

CARD_SUMMARY = "Sensu alert card"
VIEW_ACTION_NAME = "View in Sensu"
TEST_SUBTITLE = "2021-11-17 02:00"
TEST_TEXT = "Test"


def local_now() -> datetime:
    return datetime.now().astimezone()


def build_section(
    event: Event,
    settings: HandlerSettings,
    clock: Clock = local_now,
    renderer: Renderer | None = None,
) -> CardSection:
    description = render_description(settings.description_template, event, renderer)

    if settings.is_test:
        subtitle, text = TEST_SUBTITLE, TEST_TEXT
    else:
        subtitle, text = str(clock()), description

    return CardSection(
        text=text,
        activity_title=event.check_name,
        activity_subtitle=subtitle,
        facts=[
            Fact(name="Sender:", value=settings.sender),
            Fact(name="Status:", value=message_status(event.check_status)),
            Fact(name="Entity:", value=event.entity_name),
        ],
    )


def open_uri_action(name: str, target_url: str) -> OpenUriAction:
    return OpenUriAction(name=name, targets=[OpenUriTarget(os="default", uri=target_url)])


def build_card(
    event: Event,
    settings: HandlerSettings,
    clock: Clock | None = None,
    renderer: Renderer | None = None,
) -> MessageCard:
    """Build the notification card for ``event``.

    In test mode the subtitle and body are fixed so the card is
    reproducible; otherwise the subtitle is ``clock()``'s local time.
    """
    return MessageCard(
        summary=CARD_SUMMARY,
        title=formatted_title(event, settings.sender),
        theme_color=message_color(event.check_status),
        sections=[build_section(event, settings, clock or local_now, renderer)],
        potential_action=[open_uri_action(VIEW_ACTION_NAME, settings.sensu_url)],
    )
