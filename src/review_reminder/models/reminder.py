"""
Reminder Data Models

Recipients of a reminder and the chat providers it can be sent to.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import UnsupportedProviderError


class Provider(str, Enum):
    """Destination chat service"""
    SLACK = "slack"
    MSTEAMS = "msteams"

    @classmethod
    def parse(cls, value: Union[str, "Provider"]) -> "Provider":
        """
        Resolve a provider tag.

        Raises:
            UnsupportedProviderError: For any tag other than slack or msteams
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedProviderError(value) from None


@dataclass(frozen=True)
class Recipient:
    """One pending reviewer (user login or team slug) of one pull request"""
    url: str
    title: str
    login: str
