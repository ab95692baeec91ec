"""
Webhook Envelopes

Wraps a formatted reminder into the webhook payload expected by
Slack incoming webhooks and Microsoft Teams adaptive cards.
"""

from typing import Any, Dict, List, Sequence, Union

from ..models.identity import IdentityMap
from ..models.reminder import Provider, Recipient


SLACK_USERNAME = "Pull Request reviews reminder"

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.0"


def format_slack_message(channel: str, message: str) -> Dict[str, Any]:
    """Slack incoming webhook body."""
    return {
        "channel": channel,
        "username": SLACK_USERNAME,
        "text": message,
    }


def get_teams_mentions(identity_map: IdentityMap, recipients: Sequence[Recipient]) -> List[Dict[str, Any]]:
    """
    Create one Teams mention entity per recipient.

    The ``id`` key is left out for logins without a mapped ID.
    """
    mentions = []
    for recipient in recipients:
        mentioned = {"name": recipient.login}
        provider_id = identity_map.get(recipient.login)
        if provider_id is not None:
            mentioned = {"id": provider_id, "name": recipient.login}
        mentions.append({
            "type": "mention",
            "text": f"<at>{recipient.login}</at>",
            "mentioned": mentioned,
        })
    return mentions


def format_teams_message(message: str, mentions: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Teams webhook body holding a full-width adaptive card."""
    return {
        "type": "message",
        "attachments": [
            {
                "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                "content": {
                    "type": "AdaptiveCard",
                    "body": [
                        {
                            "type": "TextBlock",
                            "text": message,
                            "wrap": True,
                        },
                    ],
                    "$schema": ADAPTIVE_CARD_SCHEMA,
                    "version": ADAPTIVE_CARD_VERSION,
                    "msteams": {
                        "width": "Full",
                        "entities": mentions,
                    },
                },
            },
        ],
    }


def build_envelope(
    provider: Union[str, Provider],
    channel: str,
    message: str,
    recipients: Sequence[Recipient],
    identity_map: IdentityMap,
) -> Dict[str, Any]:
    """
    Select and build the payload for a provider.

    Raises:
        UnsupportedProviderError: For any provider other than slack or msteams
    """
    provider = Provider.parse(provider)
    if provider is Provider.SLACK:
        return format_slack_message(channel, message)
    mentions = get_teams_mentions(identity_map, recipients)
    return format_teams_message(message, mentions)
