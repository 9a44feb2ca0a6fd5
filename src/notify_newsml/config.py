"""Configuration for notify_newsml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from common.config import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_ALERT_PRIORITY = 3


@dataclass(frozen=True)
class NotifyConfig:
    webhook_url: str | None = None
    min_priority: int | None = None
    alert_priority: int = DEFAULT_ALERT_PRIORITY
    debug: bool = False
    environment: str = "testing"  # only "production" posts to the webhook
    require_methode: bool = False
    request_timeout: int = 30

    @property
    def delivery_enabled(self) -> bool:
        return self.environment == "production" and bool(self.webhook_url)


# Environment variable -> config field
ENV_VARS = {
    "SLACK_WEBHOOK": "webhook_url",
    "MIN_PRIORITY": "min_priority",
    "ALERT_PRIORITY": "alert_priority",
    "NEWSML_DEBUG": "debug",
    "DEPLOY_ENV": "environment",
    "REQUIRE_METHODE_NAME": "require_methode",
    "REQUEST_TIMEOUT": "request_timeout",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _parse_optional_int(value) -> int | None:
    if value is None or str(value).strip() == "":
        return None
    return int(value)


def _parse_config(data: dict) -> NotifyConfig:
    """Parse a flat config dictionary into a NotifyConfig."""
    alert_priority = _parse_optional_int(data.get("alert_priority"))
    request_timeout = _parse_optional_int(data.get("request_timeout"))
    return NotifyConfig(
        webhook_url=data.get("webhook_url") or None,
        min_priority=_parse_optional_int(data.get("min_priority")),
        alert_priority=DEFAULT_ALERT_PRIORITY if alert_priority is None else alert_priority,
        debug=_parse_bool(data.get("debug", False)),
        environment=str(data.get("environment") or "testing"),
        require_methode=_parse_bool(data.get("require_methode", False)),
        request_timeout=30 if request_timeout is None else request_timeout,
    )


def load_config(config_path: str | Path | None = None) -> NotifyConfig:
    """Load configuration from an optional YAML file and the environment.

    Environment variables (including those from a .env file) take
    precedence over values in the YAML file.

    Args:
        config_path: Path to a YAML file with NotifyConfig field names as keys.

    Returns:
        Loaded NotifyConfig object

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If a numeric setting cannot be parsed
    """
    load_dotenv()

    data: dict = {}
    if config_path is not None:
        data.update(load_yaml(Path(config_path)) or {})
        logger.debug("Loaded config from %s", config_path)

    for env_var, key in ENV_VARS.items():
        if env_var in os.environ:
            data[key] = os.environ[env_var]

    return _parse_config(data)
