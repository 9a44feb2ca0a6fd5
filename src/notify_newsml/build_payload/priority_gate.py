"""Minimum-priority gate applied before delivery."""

from __future__ import annotations

import logging

from notify_newsml.errors import BelowPriorityThreshold
from notify_newsml.models import NotificationPayload

logger = logging.getLogger(__name__)


def passes_threshold(level: int, min_priority: int | None) -> bool:
    """Lower numbers are more important; level must not exceed min_priority."""
    if min_priority is None:
        return True
    return level <= min_priority


def check_threshold(payload: NotificationPayload, min_priority: int | None) -> NotificationPayload:
    """Return the payload if it may be delivered.

    Raises:
        BelowPriorityThreshold: If the document priority exceeds min_priority
    """
    level = payload.priority.level
    if not passes_threshold(level, min_priority):
        logger.info("Priority %d below threshold %d, not delivering", level, min_priority)
        raise BelowPriorityThreshold(level, min_priority, payload=payload)
    return payload
