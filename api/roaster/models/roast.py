"""Roast request/response models and the orchestrator's result union."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class RoastErrorKind(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    PROFILE_NOT_FOUND = "profile_not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_UPSTREAM_RESPONSE = "malformed_upstream_response"


class RoastSuccess(BaseModel):
    ok: Literal[True] = True
    username: str
    roast: str


class RoastFailure(BaseModel):
    ok: Literal[False] = False
    kind: RoastErrorKind
    message: str


RoastResult = Union[RoastSuccess, RoastFailure]


class RoastRequest(BaseModel):
    """POST /api/roast body."""

    model_config = ConfigDict(extra="forbid")
    input: Annotated[str, Field(max_length=512, description="GitHub profile URL or username")]


class RoastResponse(BaseModel):
    """POST /api/roast 200 response."""

    model_config = ConfigDict(extra="forbid")
    username: str
    roast: str
