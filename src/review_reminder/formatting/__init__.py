"""
Reminder Formatter

This module renders reminder text and wraps it into
Slack and Microsoft Teams webhook payloads.
"""

from .message import pretty_message
from .envelope import (
    build_envelope,
    format_slack_message,
    format_teams_message,
    get_teams_mentions,
)

__all__ = [
    'pretty_message',
    'build_envelope',
    'format_slack_message',
    'format_teams_message',
    'get_teams_mentions',
]
