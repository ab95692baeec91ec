"""
Pull Request Filters

Selects the pull requests that are still waiting for a review:
pending reviewers, no ignore label, not a draft and old enough.
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models.pull_request import PullRequest


logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO-8601 timestamp; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_number_of_waiting_days(created_at: Optional[str], now: Optional[datetime] = None) -> float:
    """
    Day difference between a creation timestamp and now.

    Computed as ceil((created_at - now) / 1 day), so a pull request opened
    in the past yields zero or a negative number.

    Args:
        created_at: ISO-8601 creation timestamp
        now: Reference time (default: current UTC time)

    Returns:
        Whole number of days as a float, or NaN when created_at is malformed
    """
    created = _parse_timestamp(created_at)
    if created is None:
        return math.nan

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    difference = (created - now).total_seconds()
    return float(math.ceil(difference / SECONDS_PER_DAY))


def get_pull_requests_to_review(pull_requests: Sequence[PullRequest]) -> List[PullRequest]:
    """Keep pull requests with at least one requested reviewer or team."""
    return [pr for pr in pull_requests if pr.has_pending_reviewers]


def _is_old_enough(pr: PullRequest, waiting_time: int, now: Optional[datetime]) -> bool:
    waiting_days = get_number_of_waiting_days(pr.created_at, now)
    if math.isnan(waiting_days):
        logger.warning(f"Unparseable created_at {pr.created_at!r} for {pr.html_url}, keeping it")
        return True
    return waiting_days < waiting_time - 1


def get_pull_requests_without_label(
    pull_requests: Sequence[PullRequest],
    ignore_label: Optional[str],
    waiting_time: int,
    now: Optional[datetime] = None,
) -> List[PullRequest]:
    """
    Filter out pull requests that should not be reminded about.

    Removes pull requests carrying ``ignore_label``, drafts, and pull
    requests whose waiting days are not below ``waiting_time - 1``.
    Input order is preserved.

    Args:
        pull_requests: Pull requests with pending reviewers
        ignore_label: Exact label name to skip (empty or None skips nothing)
        waiting_time: Waiting time threshold in days
        now: Reference time (default: current UTC time)

    Returns:
        Pull requests waiting for a review
    """
    without_label = [
        pr for pr in pull_requests
        if not ignore_label or ignore_label not in pr.label_names
    ]
    return [
        pr for pr in without_label
        if not pr.draft and _is_old_enough(pr, waiting_time, now)
    ]


def get_pull_requests_reviewers_count(pull_requests: Sequence[PullRequest]) -> int:
    """Total number of requested user reviewers (teams are not counted)."""
    return sum(len(pr.requested_reviewers) for pr in pull_requests)
