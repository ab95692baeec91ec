"""
Review Reminder Pipeline

Main interface that runs one reminder pass, from the open pull
request listing to the webhook notification.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .config import AppConfig
from .formatting.envelope import build_envelope
from .formatting.message import pretty_message
from .github.client import GitHubClient
from .models.identity import IdentityMap
from .models.reminder import Provider, Recipient
from .notifications.webhook import WebhookClient
from .review.filters import (
    get_pull_requests_reviewers_count,
    get_pull_requests_to_review,
    get_pull_requests_without_label,
)
from .review.recipients import create_recipients


logger = logging.getLogger(__name__)


@dataclass
class ReminderResult:
    """Outcome of a reminder run."""
    total_pull_requests: int
    total_reviewers: int
    waiting_pull_requests: int
    recipients: List[Recipient] = field(default_factory=list)
    payload: Optional[Dict[str, Any]] = None
    notified: bool = False


class ReminderPipeline:
    """
    Review reminder pipeline.

    Runs once per invocation:
    1. List open pull requests
    2. Keep the ones with pending reviewers that are eligible for a reminder
    3. Expand them into recipients and format the message
    4. Send a single webhook notification
    """

    def __init__(
        self,
        config: AppConfig,
        github_client: Optional[GitHubClient] = None,
        webhook_client: Optional[WebhookClient] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration
            github_client: Optional GitHub client (built from config by default)
            webhook_client: Optional webhook client (built from config by default)
        """
        self.config = config
        self.provider = Provider.parse(config.reminder.provider)
        self.github_client = github_client or GitHubClient(
            config.github.token,
            base_url=config.github.api_base_url,
            timeout=config.github.timeout_seconds,
        )
        self.webhook_client = webhook_client or WebhookClient(
            timeout=config.reminder.timeout_seconds,
        )

    def run(self, now: Optional[datetime] = None) -> ReminderResult:
        """
        Run one reminder pass.

        Args:
            now: Reference time for the waiting time check (default: current UTC time)

        Returns:
            ReminderResult describing what was sent

        Raises:
            GitHubAPIError: When the pull requests cannot be listed
            WebhookError: When the notification cannot be delivered
        """
        reminder = self.config.reminder

        logger.info("Getting open pull requests...")
        pull_requests = self.github_client.list_open_pull_requests(self.config.github.repository)
        total_reviewers = get_pull_requests_reviewers_count(pull_requests)
        logger.info(
            f"There are {len(pull_requests)} open pull requests and {total_reviewers} reviewers"
        )

        to_review = get_pull_requests_to_review(pull_requests)
        waiting = get_pull_requests_without_label(
            to_review,
            reminder.ignore_label,
            reminder.waiting_time_days,
            now=now,
        )
        logger.info(f"There are {len(waiting)} pull requests waiting for reviews")

        result = ReminderResult(
            total_pull_requests=len(pull_requests),
            total_reviewers=total_reviewers,
            waiting_pull_requests=len(waiting),
        )
        if not waiting:
            return result

        recipients = create_recipients(waiting)
        identity_map = IdentityMap.parse(reminder.identity_map_raw)
        message = pretty_message(recipients, identity_map, self.provider)
        payload = build_envelope(self.provider, reminder.channel, message, recipients, identity_map)

        self.webhook_client.send(reminder.webhook_url, payload)
        logger.info("Notification sent successfully!")

        result.recipients = recipients
        result.payload = payload
        result.notified = True
        return result
