"""
PR Review Reminder

Reminds requested reviewers about pull requests waiting for their
review through Slack or Microsoft Teams incoming webhooks.
"""

__version__ = "1.0.0"

from .api import ReminderPipeline, ReminderResult
from .config import AppConfig
from .errors import ReviewReminderError, UnsupportedProviderError

__all__ = [
    "ReminderPipeline",
    "ReminderResult",
    "AppConfig",
    "ReviewReminderError",
    "UnsupportedProviderError",
]
