"""
GitHub Integration Layer

This module provides GitHub API access for listing open pull requests.
"""

from .client import GitHubClient, GitHubAPIError

__all__ = ['GitHubClient', 'GitHubAPIError']
