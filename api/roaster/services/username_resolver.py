"""Turn free-form input (profile URL or bare login) into a GitHub username."""

from __future__ import annotations

import re
from typing import Optional

# First github.com/<segment> wins; the segment ends at the next path, query or fragment delimiter.
_PROFILE_URL = re.compile(r"github\.com/([^/?#\s]*)", re.IGNORECASE)

# Dot segments would be normalized away by the HTTP client and hit the API root.
_DOT_SEGMENTS = {".", ".."}


def _usable(name: str) -> Optional[str]:
    if not name or name in _DOT_SEGMENTS:
        return None
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


def resolve_username(raw: Optional[str]) -> Optional[str]:
    """Return the account identifier, or None when the input cannot be resolved.

    >>> resolve_username("https://github.com/octocat/Hello-World")
    'octocat'
    >>> resolve_username("  octocat ")
    'octocat'
    >>> resolve_username("foo/bar") is None
    True
    """
    text = (raw or "").strip()
    if not text:
        return None

    match = _PROFILE_URL.search(text)
    if match:
        return _usable(match.group(1))

    if "/" in text:
        return None
    return _usable(text)
