"""Pydantic models."""

from roaster.models.error import ErrorDetail
from roaster.models.profile import GitHubUser, ProfileSummary
from roaster.models.roast import (
    RoastErrorKind,
    RoastFailure,
    RoastRequest,
    RoastResponse,
    RoastResult,
    RoastSuccess,
)

__all__ = [
    "ErrorDetail",
    "GitHubUser",
    "ProfileSummary",
    "RoastErrorKind",
    "RoastFailure",
    "RoastRequest",
    "RoastResponse",
    "RoastResult",
    "RoastSuccess",
]
