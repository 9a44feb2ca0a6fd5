"""Map NewsML editorial priority to a label and a colour."""

from __future__ import annotations

import logging
import re

from notify_newsml.models import PriorityInfo

logger = logging.getLogger(__name__)

PRIORITY_NOT_SET = 9
LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

PRIORITY_LABELS = {
    1: "CRAZY-HIGH PRIORITY",
    2: "High priority",
    3: "High priority",
    4: "Medium priority",
    5: "Medium-low priority",
    6: "Low priority",
    7: "Lower priority",
    8: "Lowest priority",
    PRIORITY_NOT_SET: "Priority not set",
}

# Gradient anchors: lowest priority is green, 3 is yellow, top priority is red
COLOR_DOMAIN = (8, 3, 1)
COLOR_RANGE = (
    (0x00, 0x80, 0x00),
    (0xFF, 0xFF, 0x00),
    (0xFF, 0x00, 0x00),
)


def parse_priority_level(raw_priority: str | int | None) -> int:
    """Parse a raw priority value into a level in [1, 9].

    Only the leading integer counts, so "2.0" and "3abc" are 2 and 3.
    """
    if raw_priority is None or isinstance(raw_priority, bool):
        return PRIORITY_NOT_SET
    match = LEADING_INTEGER.match(str(raw_priority))
    if match is None:
        logger.debug("Unparsable priority: %r", raw_priority)
        return PRIORITY_NOT_SET
    level = int(match.group(1))
    if not 1 <= level < PRIORITY_NOT_SET:
        return PRIORITY_NOT_SET
    return level


def priority_color(level: float) -> str:
    """Return a hex colour for a priority level.

    Linear RGB interpolation over COLOR_DOMAIN. Levels outside [1, 8]
    extrapolate along the nearest segment, so level 9 lands slightly past
    green. Channels are clamped to [0, 255] when formatted.
    """
    # Segment 0 covers 8..3, segment 1 covers 3..1
    segment = 0 if level >= COLOR_DOMAIN[1] else 1
    d0, d1 = COLOR_DOMAIN[segment], COLOR_DOMAIN[segment + 1]
    c0, c1 = COLOR_RANGE[segment], COLOR_RANGE[segment + 1]
    t = (level - d0) / (d1 - d0)

    channels = []
    for a, b in zip(c0, c1):
        value = round(a + (b - a) * t)
        channels.append(max(0, min(255, value)))
    return "#{:02x}{:02x}{:02x}".format(*channels)


def classify_priority(raw_priority: str | int | None) -> PriorityInfo:
    """Classify a raw NewsML priority value."""
    level = parse_priority_level(raw_priority)
    return PriorityInfo(
        level=level,
        label=PRIORITY_LABELS[level],
        color=priority_color(level),
    )
