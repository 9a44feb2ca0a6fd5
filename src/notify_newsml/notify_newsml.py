"""Turn a NewsML document into a webhook notification."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from notify_newsml.build_payload.assemble_payload import assemble_payload
from notify_newsml.build_payload.classify_priority import classify_priority
from notify_newsml.build_payload.priority_gate import check_threshold
from notify_newsml.config import NotifyConfig
from notify_newsml.errors import BelowPriorityThreshold, NoArticlesFound, NotifyError
from notify_newsml.models import NotificationPayload
from notify_newsml.parse_document.detect_dialect import detect_dialect, parse_xml
from notify_newsml.parse_document.extract_articles import extract_articles, extract_document

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    SUCCESS = "success"
    INVALID_DOCUMENT = "invalid_document"
    NO_ARTICLES_FOUND = "no_articles_found"
    MISSING_METHODE_PROPERTY = "missing_methode_property"
    BELOW_PRIORITY_THRESHOLD = "below_priority_threshold"


@dataclass(frozen=True)
class NotificationResult:
    """Payload for delivery, or the reason there isn't one.

    A BelowPriorityThreshold result still carries the withheld payload.
    """
    payload: Optional[NotificationPayload] = None
    error: Optional[NotifyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def outcome(self) -> Outcome:
        if self.error is None:
            return Outcome.SUCCESS
        return Outcome(self.error.kind)


def _build_payload(xml_text: str | bytes, config: NotifyConfig) -> NotificationPayload:
    root = parse_xml(xml_text)
    dialect = detect_dialect(root)

    document = extract_document(root, dialect, require_methode=config.require_methode)
    if not document.articles:
        raise NoArticlesFound("No articles found.")

    priority = classify_priority(document.metadata.raw_priority)
    articles = extract_articles(document.articles, dialect)

    return assemble_payload(
        articles=articles,
        priority=priority,
        metadata=document.metadata,
        dialect=dialect,
        alert_priority=config.alert_priority,
    )


def build_notification(xml_text: str | bytes, config: NotifyConfig) -> NotificationResult:
    """Parse a NewsML document and build its notification payload.

    Document problems are returned on the result rather than raised.

    Args:
        xml_text: Raw NewsML document
        config: Thresholds and policy switches

    Returns:
        NotificationResult with a payload, an error, or both for
        below-threshold documents
    """
    try:
        payload = _build_payload(xml_text, config)
    except NotifyError as exc:
        logger.warning("Document rejected (%s): %s", exc.kind, exc)
        return NotificationResult(error=exc)

    try:
        check_threshold(payload, config.min_priority)
    except BelowPriorityThreshold as exc:
        return NotificationResult(payload=payload, error=exc)

    if config.debug:
        logger.debug("---- Payload ----\n%s", json.dumps(payload.to_webhook_body(), indent=2))
        if isinstance(xml_text, bytes):
            xml_text = xml_text.decode("utf-8", errors="replace")
        logger.debug("---- Input ----\n%s", xml_text)

    return NotificationResult(payload=payload)
