"""
Webhook Client

Delivers a reminder payload to a Slack or Microsoft Teams incoming webhook.
"""

import logging
from typing import Any, Dict

import requests

from ..errors import TransportError


logger = logging.getLogger(__name__)


class WebhookError(TransportError):
    """Webhook delivery failed"""


class WebhookClient:
    """Posts JSON payloads to incoming webhooks, once and without retries."""

    def __init__(self, timeout: float = 30):
        self.timeout = timeout
        self.session = requests.Session()

    def send(self, webhook_url: str, payload: Dict[str, Any]) -> requests.Response:
        """
        POST a payload as the JSON request body.

        Args:
            webhook_url: Incoming webhook URL
            payload: Message payload

        Returns:
            Response object

        Raises:
            WebhookError: For transport errors and non-2xx responses
        """
        try:
            response = self.session.request('POST', webhook_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Webhook request failed: {e}")
            raise WebhookError(f"Webhook request failed: {str(e)}") from e

        if not response.ok:
            raise WebhookError(
                f"Webhook error: {response.status_code} - {response.text or 'Unknown error'}",
                status_code=response.status_code
            )

        return response
