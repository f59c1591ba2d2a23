"""Microsoft Teams incoming-webhook channel."""

import logging

import httpx

from teams_handler.channels.base import BaseChannel
from teams_handler.errors import DeliveryError
from teams_handler.models.card import MessageCard

logger = logging.getLogger(__name__)

# Legacy Office 365 connectors answer a successful post with this body.
CONNECTOR_ACK = "1"


class TeamsChannel(BaseChannel):
    """Posts MessageCards to a Teams webhook.

    The webhook URL is used as given, without shape validation. A single
    attempt is made with the HTTP client's default timeout.
    """

    def __init__(self, webhook_url: str, client: httpx.Client | None = None):
        self._webhook_url = webhook_url
        self._client = client

    @property
    def name(self) -> str:
        return "teams"

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    def _post(self, client: httpx.Client, body: str) -> httpx.Response:
        return client.post(
            self._webhook_url,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    def send(self, card: MessageCard) -> None:
        body = card.to_json()
        logger.debug(f"Posting {len(body)} byte card to Teams webhook")

        try:
            if self._client is not None:
                response = self._post(self._client, body)
            else:
                with httpx.Client() as client:
                    response = self._post(client, body)
        except httpx.HTTPError as e:
            raise DeliveryError(f"failed to send Teams message: {e}") from e

        self._check_response(response)

    def _check_response(self, response: httpx.Response) -> None:
        text = response.text.strip()
        if not response.is_success:
            raise DeliveryError(
                f"failed to send Teams message: error on notification: "
                f"{response.status_code} {response.reason_phrase}, {text!r}",
                status_code=response.status_code,
            )
        if text and text != CONNECTOR_ACK:
            raise DeliveryError(
                f"failed to send Teams message: unexpected response from webhook: {text!r}",
                status_code=response.status_code,
            )
