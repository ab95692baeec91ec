"""
GitHub API Client

Handles GitHub API authentication and the single open pull request
listing the reminder needs.
"""

import logging
from typing import Dict, List, Optional

import requests
from pydantic import ValidationError

from ..errors import TransportError
from ..models.pull_request import PullRequest


logger = logging.getLogger(__name__)


class GitHubAPIError(TransportError):
    """GitHub API related errors"""


class GitHubClient:
    """
    GitHub REST API client.

    One request per call: no pagination, no retries and no rate limit
    bookkeeping. Any failure is raised as GitHubAPIError.
    """

    def __init__(self, token: Optional[str], base_url: str = "https://api.github.com", timeout: float = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (the Actions GITHUB_TOKEN is enough)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Request timeout in seconds
        """
        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication headers."""
        session = requests.Session()

        session.headers.update({
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'PR-Review-Reminder/1.0'
        })
        if self.token:
            session.headers['Authorization'] = f'token {self.token}'

        return session

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For transport and API errors
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}") from e

        if not response.ok:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def list_open_pull_requests(self, repository: str) -> List[PullRequest]:
        """
        Get the open pull requests of a repository.

        Args:
            repository: Repository in "owner/repo" form

        Returns:
            Pull requests of the first result page

        Raises:
            GitHubAPIError: For transport errors and unreadable listings
        """
        logger.info(f"Fetching open pull requests for {repository}")

        response = self._make_request('GET', f'/repos/{repository}/pulls')

        try:
            records: List[Dict] = response.json() or []
            return [PullRequest.from_api(record) for record in records]
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Unreadable pull request listing: {e}")
            raise GitHubAPIError(
                f"Unreadable pull request listing: {str(e)}",
                status_code=response.status_code
            ) from e
