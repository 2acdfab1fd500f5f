"""httpx client construction.

Standardises timeouts, headers and GitHub authentication so that every
HTTP call (examples listing, tarball downloads) behaves the same and can
be swapped for a mocked transport in tests.
"""

from __future__ import annotations

import httpx

from create_razzle_app.config import AppSettings


def github_headers(settings: AppSettings) -> dict[str, str]:
    """Return the default headers for GitHub API requests."""
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github+json",
    }
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    return headers


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an :class:`httpx.Client` with the configured defaults.

    *transport* exists for tests (``httpx.MockTransport``).
    """
    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=github_headers(settings),
        transport=transport,
    )
