"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def save_json_local(
    record: dict[str, Any],
    prefix: str,
    output_dir: str = "output",
    timestamp: datetime | None = None,
) -> Path:
    """Save a single record to a timestamped local JSON file.

    Args:
        record: Dictionary to save
        prefix: Filename prefix (e.g., "notification")
        output_dir: Directory to save to (default: "output")
        timestamp: Timestamp for the filename (default: now, UTC)

    Returns:
        Path to the created file.
    """
    now = timestamp or datetime.now(timezone.utc)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    filename = f"{prefix}_{now.strftime('%Y_%m_%d_%H_%M_%S_%f')}.json"
    filepath = output_path / filename

    with filepath.open("w") as f:
        json.dump(record, f, default=str, ensure_ascii=False, indent=2)

    logger.info("Saved %s to %s", prefix, filepath)
    return filepath
