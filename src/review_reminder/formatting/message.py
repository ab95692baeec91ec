"""
Reminder Message Formatter

Renders recipients into the provider specific markdown text,
one line per recipient.
"""

import logging
from typing import Sequence, Union

from ..models.identity import IdentityMap
from ..models.reminder import Provider, Recipient


logger = logging.getLogger(__name__)

SLACK_LINE = 'Hey {mention}, the PR "{title}" is waiting for your review: {url}\n'
# Two trailing spaces force a line break in the Teams markdown renderer
TEAMS_LINE = 'Hey {mention}, the PR "{title}" is waiting for your review: [{url}]({url})  \n'


def slack_mention(recipient: Recipient, identity_map: IdentityMap) -> str:
    provider_id = identity_map.provider_id(recipient.login)
    return f"<@{provider_id}>" if provider_id else f"@{recipient.login}"


def teams_mention(recipient: Recipient, identity_map: IdentityMap) -> str:
    # The Teams tag carries the login; the ID travels in the mention entity
    if identity_map.provider_id(recipient.login):
        return f"<at>{recipient.login}</at>"
    return f"@{recipient.login}"


def format_line(recipient: Recipient, identity_map: IdentityMap, provider: Provider) -> str:
    """Render the reminder line for a single recipient."""
    if provider is Provider.SLACK:
        mention = slack_mention(recipient, identity_map)
        return SLACK_LINE.format(mention=mention, title=recipient.title, url=recipient.url)
    mention = teams_mention(recipient, identity_map)
    return TEAMS_LINE.format(mention=mention, title=recipient.title, url=recipient.url)


def pretty_message(
    recipients: Sequence[Recipient],
    identity_map: IdentityMap,
    provider: Union[str, Provider],
) -> str:
    """
    Create the reminder text for all recipients.

    Args:
        recipients: Recipients to mention, in output order
        identity_map: GitHub username to chat ID mapping
        provider: "slack" or "msteams"

    Returns:
        Concatenated reminder lines

    Raises:
        UnsupportedProviderError: For any other provider tag
    """
    provider = Provider.parse(provider)
    message = "".join(format_line(r, identity_map, provider) for r in recipients)
    logger.debug(f"Formatted {len(recipients)} reminder lines for {provider.value}")
    return message
