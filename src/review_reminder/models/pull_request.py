"""
Pull Request Data Models

GitHub pull request payload models. Only the attributes the reminder
consumes are declared; every other key of the REST record is ignored.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class Label(BaseModel):
    """Pull request label"""
    name: str


class User(BaseModel):
    """Requested reviewer (GitHub user)"""
    login: str


class Team(BaseModel):
    """Requested reviewer team"""
    slug: str


class PullRequest(BaseModel):
    """Open pull request as returned by GET /repos/{owner}/{repo}/pulls"""
    title: str = ""
    html_url: str = ""
    created_at: Optional[str] = None
    draft: bool = False
    labels: List[Label] = Field(default_factory=list)
    requested_reviewers: List[User] = Field(default_factory=list)
    requested_teams: List[Team] = Field(default_factory=list)

    @field_validator('created_at', mode='before')
    @classmethod
    def normalize_created_at(cls, v):
        if isinstance(v, datetime):
            if v.tzinfo is None:
                v = v.replace(tzinfo=timezone.utc)
            return v.isoformat()
        # Unreadable values are kept as missing; the waiting days become NaN
        if not isinstance(v, str):
            return None
        return v

    @field_validator('draft', mode='before')
    @classmethod
    def default_draft(cls, v):
        return False if v is None else v

    @field_validator('labels', 'requested_reviewers', 'requested_teams', mode='before')
    @classmethod
    def default_empty(cls, v):
        return [] if v is None else v

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PullRequest":
        """Build a PullRequest from a GitHub REST record."""
        return cls.model_validate(data)

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels]

    @property
    def has_pending_reviewers(self) -> bool:
        """True when at least one user or team review is still requested"""
        return bool(self.requested_reviewers) or bool(self.requested_teams)
