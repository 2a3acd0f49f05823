"""Roast orchestration: resolve input, fetch the profile, generate the roast.

Every failure comes back as a RoastFailure value; client exceptions are caught
here and nowhere else.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Protocol

from pydantic import ValidationError

from roaster.models.profile import GitHubUser, ProfileSummary
from roaster.models.roast import RoastErrorKind, RoastFailure, RoastResult, RoastSuccess
from roaster.services.gemini_client import GeminiError, GeminiResponseError
from roaster.services.github_client import GitHubNotFoundError, GitHubResponseError, GitHubUnavailableError
from roaster.services.prompt_service import build_roast_prompt
from roaster.services.username_resolver import resolve_username

logger = logging.getLogger(__name__)

MESSAGES: dict[RoastErrorKind, str] = {
    RoastErrorKind.INVALID_IDENTIFIER: "Invalid GitHub URL or username",
    RoastErrorKind.PROFILE_NOT_FOUND: "GitHub profile not found",
    RoastErrorKind.UPSTREAM_UNAVAILABLE: "Upstream service unavailable, please try again later",
    RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE: "Upstream service returned an unexpected response",
}


class ProfileProvider(Protocol):
    def get_user(self, username: str) -> dict[str, Any]: ...


class TextGenerator(Protocol):
    def generate(self, prompt: str, model: Optional[str] = None) -> str: ...


def _failure(kind: RoastErrorKind, username: Optional[str] = None, reason: str = "") -> RoastFailure:
    logger.warning("roast_failed kind=%s username=%s reason=%s", kind.value, username or "-", reason or "-")
    return RoastFailure(kind=kind, message=MESSAGES[kind])


def _login(payload: Any) -> Optional[str]:
    """Canonical login from the profile; fields outside ProfileSummary never fail a roast."""
    try:
        return GitHubUser.model_validate({"login": payload.get("login")}).login or None
    except (AttributeError, ValidationError):
        return None


class RoastService:
    """Stateless orchestrator; safe to share across requests."""

    def __init__(self, profiles: ProfileProvider, generator: TextGenerator) -> None:
        self._profiles = profiles
        self._generator = generator

    def roast(self, raw_input: Optional[str]) -> RoastResult:
        started = time.perf_counter()
        username = resolve_username(raw_input)
        if username is None:
            return _failure(RoastErrorKind.INVALID_IDENTIFIER, reason="unresolvable input")

        try:
            payload = self._profiles.get_user(username)
        except GitHubNotFoundError as exc:
            return _failure(RoastErrorKind.PROFILE_NOT_FOUND, username, str(exc))
        except GitHubUnavailableError as exc:
            return _failure(RoastErrorKind.UPSTREAM_UNAVAILABLE, username, str(exc))
        except GitHubResponseError as exc:
            return _failure(RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE, username, str(exc))
        except Exception as exc:
            # any other provider failure is still an upstream failure
            return _failure(RoastErrorKind.UPSTREAM_UNAVAILABLE, username, exc.__class__.__name__)

        try:
            summary = ProfileSummary.model_validate(payload)
        except ValidationError as exc:
            return _failure(
                RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE,
                username,
                f"profile fields invalid: {exc.error_count()} error(s)",
            )

        prompt = build_roast_prompt(summary)

        try:
            text = self._generator.generate(prompt)
        except GeminiResponseError as exc:
            return _failure(RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE, username, str(exc))
        except GeminiError as exc:
            return _failure(RoastErrorKind.UPSTREAM_UNAVAILABLE, username, str(exc))
        except Exception as exc:
            # any other generator failure is still an upstream failure
            return _failure(RoastErrorKind.UPSTREAM_UNAVAILABLE, username, exc.__class__.__name__)

        if not isinstance(text, str) or not text.strip():
            return _failure(RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE, username, "empty generated text")

        login = _login(payload) or username
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info("roast_completed username=%s elapsed_ms=%.2f chars=%s", login, elapsed_ms, len(text))
        return RoastSuccess(username=login, roast=text)
