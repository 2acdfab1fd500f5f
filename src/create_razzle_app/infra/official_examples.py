"""httpx backed implementation of :class:`~create_razzle_app.core.protocols.ExampleLister`.

Queries the GitHub contents API for the framework's ``examples/``
directory at the configured release branch and returns the names of the
sub-directories.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from create_razzle_app.config import AppSettings
from create_razzle_app.core.protocols import LogCallback
from create_razzle_app.exceptions import ExampleListingError
from create_razzle_app.infra.http_client import build_client

CI_EXAMPLES: tuple[str, ...] = ("basic",)
"""Fixed listing used in CI so runs stay deterministic and offline."""


class OfficialExamplesLister:
    """Concrete :class:`ExampleLister` backed by the GitHub contents API.

    Parameters
    ----------
    settings:
        Source of the listing URL.
    client_factory:
        Returns a fresh :class:`httpx.Client`; defaults to
        :func:`~create_razzle_app.infra.http_client.build_client`.
    log:
        Optional sink for status lines.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        client_factory: Callable[[], httpx.Client] | None = None,
        log: LogCallback | None = None,
    ) -> None:
        self._settings: AppSettings = settings
        self._client_factory: Callable[[], httpx.Client] = (
            client_factory or (lambda: build_client(settings))
        )
        self._log: LogCallback | None = log

    @property
    def url(self) -> str:
        return self._settings.examples_api_url

    def list(self, *, verbose: bool, is_ci: bool) -> list[str]:
        """Return official example names.

        Raises
        ------
        ExampleListingError
            On transport errors, non-2xx responses or malformed payloads.
        """
        if is_ci:
            return list(CI_EXAMPLES)

        url = self.url
        self._emit(f"Getting data from {url}:")
        payload = self._fetch(url)
        names = self.folder_names(payload)

        if verbose:
            self._emit(f"Got data from {url}:")
            self._emit(str(names))
        return names

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _fetch(self, url: str) -> Any:
        try:
            with self._client_factory() as client:
                response = client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            raise ExampleListingError(
                f"GitHub API returned {exc.response.status_code} for {url}",
                hint="Set CREATE_RAZZLE_APP_GITHUB_TOKEN if you are rate limited.",
            ) from exc
        except httpx.HTTPError as exc:
            raise ExampleListingError(
                f"Could not reach {url}: {exc}",
                hint="Check your network connection.",
            ) from exc
        except ValueError as exc:
            raise ExampleListingError(
                f"Failed to parse examples listing from {url}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Parsing (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def folder_names(payload: Any) -> list[str]:
        """Keep ``type == "dir"`` entries and return their names in order."""
        if not isinstance(payload, list):
            raise ExampleListingError(
                "Unexpected examples listing: expected a JSON array.",
            )
        return [
            str(entry["name"])
            for entry in payload
            if isinstance(entry, dict) and entry.get("type") == "dir" and "name" in entry
        ]

    def _emit(self, line: str) -> None:
        if self._log is not None:
            self._log(line)
