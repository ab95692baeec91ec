"""
Data Models

Pull request payloads, reminder recipients and identity mapping.
"""

from .pull_request import PullRequest, Label, User, Team
from .reminder import Recipient, Provider
from .identity import IdentityMap

__all__ = [
    "PullRequest",
    "Label",
    "User",
    "Team",
    "Recipient",
    "Provider",
    "IdentityMap",
]
