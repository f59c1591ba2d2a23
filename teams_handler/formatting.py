"""Plain-text formatting of events for titles and one-line summaries."""

from teams_handler.models.event import Event
from teams_handler.status import event_action

SUMMARY_MAX_LENGTH = 100


def chomp(s: str) -> str:
    """Strip every trailing newline and carriage return."""
    return s.rstrip("\r\n")


def event_key(event: Event) -> str:
    return f"{event.entity_name}/{event.check_name}"


def event_summary(event: Event, max_length: int) -> str:
    """Return ``entity/check:output``, truncating long output.

    The length test is made on the raw check output while the slice is
    taken from the chomped output, so trailing line terminators count
    towards the limit.
    """
    output = chomp(event.check_output)
    if len(event.check_output) > max_length:
        output = output[:max_length] + "..."
    return f"{event_key(event)}:{output}"


def formatted_title(event: Event, sender: str) -> str:
    return f"{sender} - {event_action(event.check_status)}"


def formatted_message(event: Event) -> str:
    return f"{event_action(event.check_status)} - {event_summary(event, SUMMARY_MAX_LENGTH)}"
