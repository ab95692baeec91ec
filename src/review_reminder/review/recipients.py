"""
Recipient Expansion

Flattens pull requests into one Recipient per pending reviewer and team.
"""

from typing import List, Sequence

from ..models.pull_request import PullRequest
from ..models.reminder import Recipient


def create_recipients(pull_requests: Sequence[PullRequest]) -> List[Recipient]:
    """
    Create one Recipient per requested reviewer login, then per team slug.

    Pull request order is kept and nothing is deduplicated, so the same
    login can appear once for each pull request it is requested on.
    """
    recipients: List[Recipient] = []
    for pr in pull_requests:
        for user in pr.requested_reviewers:
            recipients.append(Recipient(url=pr.html_url, title=pr.title, login=user.login))
        for team in pr.requested_teams:
            recipients.append(Recipient(url=pr.html_url, title=pr.title, login=team.slug))
    return recipients
