"""Roast prompt template."""

from __future__ import annotations

from roaster.models.profile import ProfileSummary

NO_BIO_PLACEHOLDER = "No bio provided"

ROAST_PROMPT_TEMPLATE = """\
You are a playful roast generator with a sharp but friendly sense of humor.
Your job is to deliver clever, funny GitHub-themed roasts that feel like
a friend teasing another friend. No meanness, just fun, smart, creative jokes.

Roast this GitHub profile based on the stats below.
Make it witty, surprising, and full of personality:

- Public repos: {public_repos}
- Followers: {followers}
- Following: {following}
- Account created: {created_at}
- Bio: {bio}
"""


def build_roast_prompt(summary: ProfileSummary) -> str:
    bio = (summary.bio or "").strip() or NO_BIO_PLACEHOLDER
    return ROAST_PROMPT_TEMPLATE.format(
        public_repos=summary.public_repos,
        followers=summary.followers,
        following=summary.following,
        created_at=summary.created_at,
        bio=bio,
    )
