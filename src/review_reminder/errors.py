"""
Error Types

Exceptions raised by the review reminder package.
"""

from typing import Dict, Optional


class ReviewReminderError(Exception):
    """Base class for every error surfaced to the invoking host."""


class ConfigError(ReviewReminderError):
    """Invalid or incomplete configuration"""


class UnsupportedProviderError(ReviewReminderError):
    """Provider tag is neither slack nor msteams"""
    def __init__(self, provider: object):
        super().__init__(f"Unsupported provider: {provider!r}")
        self.provider = provider


class TransportError(ReviewReminderError):
    """HTTP request to an external service failed"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data
