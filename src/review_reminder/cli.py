"""
Review Reminder Entry Point

Runs a single reminder pass, typically as a scheduled GitHub Action step.

Usage:
    pr-review-reminder [--config reminder.yaml] [--provider slack|msteams] [--log-level DEBUG]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import ReminderPipeline
from .config import AppConfig, setup_logging
from .errors import ReviewReminderError


logger = logging.getLogger(__name__)


def escape_annotation(message: str) -> str:
    """Escape a message for a GitHub Actions workflow command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pr-review-reminder',
        description='Remind reviewers about pull requests waiting for their review',
    )
    parser.add_argument('--config', help='YAML configuration file (default: read the environment)')
    parser.add_argument('--provider', choices=['slack', 'msteams'], help='Override the chat provider')
    parser.add_argument('--log-level', help='Override the log level')
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration from file or environment and apply overrides."""
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()
    if args.provider:
        config.reminder.provider = args.provider
    if args.log_level:
        config.logging.level = args.log_level
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Run the reminder; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        setup_logging(config.logging)
        ReminderPipeline(config).run()
    except ReviewReminderError as e:
        logger.error(f"Review reminder failed: {e}")
        print(f"::error::{escape_annotation(str(e))}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
