"""Pytest configuration and fixtures.

Upstream collaborators are replaced with small call-counting stubs so tests
never touch GitHub or Gemini.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OCTOCAT_PROFILE: dict[str, Any] = {
    "login": "octocat",
    "id": 583231,
    "public_repos": 5,
    "followers": 2,
    "following": 1,
    "created_at": "2020-01-01T00:00:00Z",
    "bio": None,
}


class StubProfiles:
    """ProfileProvider stub: returns ``payload`` or raises ``error``."""

    def __init__(self, payload: Optional[dict[str, Any]] = None, error: Optional[Exception] = None) -> None:
        self.payload = dict(OCTOCAT_PROFILE) if payload is None else payload
        self.error = error
        self.calls: list[str] = []

    def get_user(self, username: str) -> dict[str, Any]:
        self.calls.append(username)
        if self.error is not None:
            raise self.error
        return dict(self.payload)


class StubGenerator:
    """TextGenerator stub recording every prompt it receives."""

    def __init__(self, text: str = "Five repos and two followers? Bold strategy.", error: Optional[Exception] = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str, model: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def profiles() -> StubProfiles:
    return StubProfiles()


@pytest.fixture
def generator() -> StubGenerator:
    return StubGenerator()
