"""GitHub REST client for public user profiles.

Unauthenticated, one request per lookup: no token, no ETag cache and no
rate-limit sleeping. Status codes are mapped to typed errors so callers can
tell "no such user" apart from "GitHub is not answering".
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class GitHubError(RuntimeError):
    pass


class GitHubNotFoundError(GitHubError):
    pass


class GitHubUnavailableError(GitHubError):
    pass


class GitHubResponseError(GitHubError):
    pass


class GitHubClient:
    def __init__(
        self,
        base_url: str = "https://api.github.com",
        user_agent: str = "github-roaster/1.0",
        timeout: float = 20.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def _get(self, url: str) -> httpx.Response:
        try:
            with httpx.Client(timeout=self._timeout, headers=self._headers) as client:
                return client.get(url)
        except httpx.HTTPError as exc:
            raise GitHubUnavailableError(f"GitHub API unreachable for {url}: {exc.__class__.__name__}") from exc

    def get_user(self, username: str) -> dict[str, Any]:
        """GET /users/{username} and return the decoded JSON object."""
        try:
            url = f"{self._base_url}/users/{quote(username, safe='')}"
        except UnicodeEncodeError as exc:
            # no GitHub login can contain characters that do not encode to UTF-8
            raise GitHubNotFoundError(f"GitHub user not found: {username!r}") from exc
        r = self._get(url)

        if r.status_code == 404:
            raise GitHubNotFoundError(f"GitHub user not found: {username}")
        if r.status_code >= 400:
            logger.warning("github_user_lookup_failed status=%s url=%s", r.status_code, url)
            raise GitHubUnavailableError(f"GitHub API error {r.status_code} for {url}: {r.text[:200]}")

        try:
            data = r.json()
        except ValueError as exc:
            raise GitHubResponseError(f"GitHub response was not JSON (status={r.status_code})") from exc
        if not isinstance(data, dict):
            raise GitHubResponseError(f"Unexpected GitHub payload type: {type(data).__name__}")
        return data
