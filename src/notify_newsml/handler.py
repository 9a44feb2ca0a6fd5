"""AWS Lambda entry point: NewsML in the request body, Slack out."""

from __future__ import annotations

import base64
import json
import logging

from notify_newsml.config import load_config
from notify_newsml.deliver.post_webhook import post_payload
from notify_newsml.errors import DeliveryError
from notify_newsml.notify_newsml import Outcome, build_notification

logger = logging.getLogger(__name__)
# Lambda leaves the root logger at WARNING
package_logger = logging.getLogger("notify_newsml")
package_logger.setLevel(logging.INFO)


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "body": json.dumps(body),
    }


def _event_body(event: dict) -> str | bytes:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body


def lambda_handler(event, context):
    """
    Build a notification from event["body"] and post it.

    Status codes:
        200 - delivered, or built and returned when delivery is disabled
        200 - withheld because of the minimum-priority threshold
        400 - invalid document, no articles, or missing methode property
        500 - configuration could not be parsed
        502 - webhook delivery failed
    """
    try:
        config = load_config()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return _response(500, {"error": "invalid_config", "message": str(e)})

    package_logger.setLevel(logging.DEBUG if config.debug else logging.INFO)

    body = _event_body(event)
    logger.info("Processing NewsML event (%d characters)", len(body))
    result = build_notification(body, config)

    if result.outcome is Outcome.BELOW_PRIORITY_THRESHOLD:
        return _response(200, {
            "delivered": False,
            "message": "Below priority threshold",
            "priority": result.payload.priority.level,
        })

    if not result.ok:
        return _response(400, {
            "error": result.outcome.value,
            "message": str(result.error),
        })

    payload = result.payload
    try:
        webhook_response = post_payload(payload, config)
    except DeliveryError as e:
        return _response(502, {"error": "delivery_failed", "message": str(e)})

    if webhook_response is None:
        return _response(200, {"delivered": False, "payload": payload.to_webhook_body()})

    return _response(200, {"delivered": True, "response": webhook_response})
