"""GitHub public profile models.

GitHubUser mirrors the public fields of ``GET /users/{username}``; the roast
prompt only consumes the five-field ProfileSummary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Count = Annotated[int, Field(ge=0, strict=True)]


class GitHubUser(BaseModel):
    """Public GitHub user record. Every field is optional; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    login: Optional[str] = None
    id: Optional[int] = None
    node_id: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    type: Optional[str] = None
    site_admin: Optional[bool] = None

    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    hireable: Optional[bool] = None
    bio: Optional[str] = None
    twitter_username: Optional[str] = None

    public_repos: Optional[int] = None
    public_gists: Optional[int] = None
    followers: Optional[int] = None
    following: Optional[int] = None

    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProfileSummary(BaseModel):
    """The subset of a profile embedded in the roast prompt."""

    model_config = ConfigDict(extra="ignore")

    public_repos: Count
    followers: Count
    following: Count
    created_at: str  # kept verbatim, e.g. "2020-01-01T00:00:00Z"
    bio: Optional[str] = None

    @field_validator("created_at")
    @classmethod
    def _created_at_is_iso8601(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("created_at must not be empty")
        try:
            datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError(f"created_at is not ISO-8601: {value!r}") from exc
        return value
