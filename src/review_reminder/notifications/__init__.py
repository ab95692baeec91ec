"""
Notifications

This module delivers reminder payloads to chat webhooks.
"""

from .webhook import WebhookClient, WebhookError

__all__ = ['WebhookClient', 'WebhookError']
