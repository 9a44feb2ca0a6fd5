"""Failure kinds surfaced by the notify_newsml pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from notify_newsml.models import NotificationPayload


class NotifyError(Exception):
    """Base class for document-level failures."""

    kind = "notify_error"


class InvalidDocument(NotifyError):
    """Input is not well-formed XML or has an unrecognised root element."""

    kind = "invalid_document"


class NoArticlesFound(NotifyError):
    """Document contains no usable news items."""

    kind = "no_articles_found"


class MissingMethodeProperty(NotifyError):
    """Document has no NIMethodeName property and one is required."""

    kind = "missing_methode_property"


class BelowPriorityThreshold(NotifyError):
    """Document priority is lower than the configured minimum.

    The payload is valid but must not be delivered.
    """

    kind = "below_priority_threshold"

    def __init__(self, level: int, min_priority: int, payload: NotificationPayload | None = None):
        super().__init__(f"Priority {level} is below threshold {min_priority}")
        self.level = level
        self.min_priority = min_priority
        self.payload = payload


class DeliveryError(Exception):
    """Posting the payload to the webhook failed."""
