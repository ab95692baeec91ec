"""
Review Selection

This module decides which pull requests are waiting for a review
and who should be reminded about them.
"""

from .filters import (
    get_number_of_waiting_days,
    get_pull_requests_to_review,
    get_pull_requests_without_label,
    get_pull_requests_reviewers_count,
)
from .recipients import create_recipients

__all__ = [
    'get_number_of_waiting_days',
    'get_pull_requests_to_review',
    'get_pull_requests_without_label',
    'get_pull_requests_reviewers_count',
    'create_recipients',
]
