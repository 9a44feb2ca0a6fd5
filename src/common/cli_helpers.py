"""Common CLI helper utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(debug: bool = False) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def read_input(path: str) -> tuple[str, bytes]:
    """Read raw bytes from a file path, or from stdin when path is "-".

    Returns:
        Tuple of (display name, content).
    """
    if path == "-":
        return "<stdin>", sys.stdin.buffer.read()
    return path, Path(path).read_bytes()
