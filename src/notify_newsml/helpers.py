"""Helper functions for notify_newsml CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace

from notify_newsml.config import NotifyConfig


def parse_notify_newsml_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for notify_newsml.'''

    parser = argparse.ArgumentParser(
        description="Convert NewsML documents into chat-webhook notifications.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="NewsML files to process ('-' reads stdin).",
    )
    parser.add_argument("--config", default=None, help="YAML config file.")
    parser.add_argument("--min-priority", type=int, default=None)
    parser.add_argument("--alert-priority", type=int, default=None)
    parser.add_argument("--require-methode", action="store_true")
    parser.add_argument(
        "--deliver",
        action="store_true",
        help="Post to the webhook (requires SLACK_WEBHOOK).",
    )
    parser.add_argument("--save-local", action="store_true")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def apply_cli_overrides(config: NotifyConfig, args: argparse.Namespace) -> NotifyConfig:
    '''Override loaded config values with those given on the command line.'''

    overrides = {}
    if args.min_priority is not None:
        overrides["min_priority"] = args.min_priority
    if args.alert_priority is not None:
        overrides["alert_priority"] = args.alert_priority
    if args.require_methode:
        overrides["require_methode"] = True
    if args.debug:
        overrides["debug"] = True
    # --deliver is an explicit request, so it stands in for DEPLOY_ENV=production
    if args.deliver:
        overrides["environment"] = "production"
    return replace(config, **overrides)
