"""CLI for turning NewsML files into webhook notifications."""

from __future__ import annotations

import json
import logging
import sys

from common.cli_helpers import read_input, setup_logging
from common.local_io import save_json_local
from notify_newsml.config import load_config
from notify_newsml.deliver.post_webhook import post_payload
from notify_newsml.errors import DeliveryError
from notify_newsml.helpers import apply_cli_overrides, parse_notify_newsml_args
from notify_newsml.notify_newsml import Outcome, build_notification

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_notify_newsml_args(argv)
    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except (OSError, ValueError) as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return 2
    setup_logging(config.debug)

    failures = 0
    for path in args.paths:
        try:
            name, content = read_input(path)
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            failures += 1
            continue

        result = build_notification(content, config)

        if result.outcome is Outcome.BELOW_PRIORITY_THRESHOLD:
            logger.info("%s: %s", name, result.error)
            continue

        if not result.ok:
            logger.error("%s: %s (%s)", name, result.error, result.outcome.value)
            failures += 1
            continue

        body = result.payload.to_webhook_body()
        logger.info(
            "%s: %s document, %d attachments, priority %s",
            name,
            result.payload.dialect.value,
            len(body["attachments"]),
            result.payload.priority.display,
        )

        if args.save_local:
            save_json_local(body, "notification")

        if args.deliver:
            try:
                post_payload(result.payload, config)
            except DeliveryError:
                failures += 1
        else:
            print(json.dumps(body, ensure_ascii=False, indent=2))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
