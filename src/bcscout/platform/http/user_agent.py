"""Where: src/bcscout/platform/http/user_agent.py
What: Build the User-Agent sent with outbound page requests.
Why: Keep request etiquette in one place for every fetcher.
"""

from __future__ import annotations


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


__all__ = ["format_user_agent"]
