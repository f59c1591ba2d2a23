"""Error types raised by the handler."""


class HandlerError(Exception):
    """Base class for errors that abort a handler run."""


class ConfigurationError(HandlerError):
    """Required configuration is missing."""


class EventError(HandlerError):
    """The event read from stdin is missing or malformed."""


class TemplateEvaluationError(HandlerError):
    """A description template could not be evaluated against the event."""


class DeliveryError(HandlerError):
    """The notification could not be delivered to the webhook."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
