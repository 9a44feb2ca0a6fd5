"""Post notification payloads to a chat incoming webhook."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from notify_newsml.config import NotifyConfig
from notify_newsml.errors import DeliveryError
from notify_newsml.models import NotificationPayload

logger = logging.getLogger(__name__)


def post_payload(payload: NotificationPayload, config: NotifyConfig) -> Optional[str]:
    """Post the payload to the configured webhook.

    Returns:
        Response body text, or None if delivery is disabled.

    Raises:
        DeliveryError: If the request fails or returns an error status
    """
    if not config.delivery_enabled:
        logger.info(
            "Delivery disabled (environment=%s, webhook set=%s)",
            config.environment,
            bool(config.webhook_url),
        )
        return None

    try:
        response = requests.post(
            config.webhook_url,
            json=payload.to_webhook_body(),
            timeout=config.request_timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Webhook delivery failed: %s", exc)
        raise DeliveryError(str(exc)) from exc

    logger.info("Posted %d attachments to webhook", len(payload.attachments))
    return response.text
