"""Base class for notification channels."""

import logging
from abc import ABC, abstractmethod

from teams_handler.errors import ConfigurationError, DeliveryError
from teams_handler.models.card import MessageCard

logger = logging.getLogger(__name__)


class BaseChannel(ABC):
    """Abstract base class for notification channels."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name for logging."""
        ...

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether the channel has a destination configured."""
        ...

    @abstractmethod
    def send(self, card: MessageCard) -> None:
        """Send the card, raising DeliveryError on failure."""
        ...

    def deliver(self, card: MessageCard) -> None:
        """Send the card once, logging the outcome."""
        if not self.enabled:
            raise ConfigurationError(f"Channel {self.name} has no webhook URL configured")
        try:
            self.send(card)
        except DeliveryError as e:
            logger.error(f"Failed to send to channel {self.name}: {e}")
            raise
        logger.info(f"Notification sent to {self.name}")
