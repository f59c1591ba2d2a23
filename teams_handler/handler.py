"""Handler pipeline: read an event, build its card and deliver it."""

import logging
from typing import TextIO

from pydantic import ValidationError

from teams_handler.builder import Clock, build_card
from teams_handler.channels.base import BaseChannel
from teams_handler.channels.teams import TeamsChannel
from teams_handler.config import HandlerSettings, apply_annotation_overrides, check_args
from teams_handler.errors import EventError
from teams_handler.formatting import formatted_message
from teams_handler.models.event import Event
from teams_handler.templates import Renderer

logger = logging.getLogger(__name__)


def read_event(stream: TextIO) -> Event:
    """Parse and validate a Sensu event from ``stream``."""
    data = stream.read()
    if not data.strip():
        raise EventError("failed to read event: stdin is empty")

    try:
        event = Event.model_validate_json(data)
    except ValidationError as e:
        raise EventError(f"failed to unmarshal event: {e}") from e

    try:
        event.validate_event()
    except ValueError as e:
        raise EventError(f"invalid event: {e}") from e

    return event


def send_message(
    event: Event,
    settings: HandlerSettings,
    channel: BaseChannel | None = None,
    clock: Clock | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Build the card for ``event`` and deliver it."""
    channel = channel or TeamsChannel(settings.webhook_url)
    card = build_card(event, settings, clock=clock, renderer=renderer)
    logger.info(f"Sending {formatted_message(event)}")
    channel.deliver(card)


def handle(
    stream: TextIO,
    settings: HandlerSettings,
    channel: BaseChannel | None = None,
    clock: Clock | None = None,
) -> Event:
    """Run the whole handler for the event on ``stream``."""
    event = read_event(stream)
    settings = apply_annotation_overrides(settings, event)
    check_args(settings)
    send_message(event, settings, channel=channel, clock=clock)
    return event
