"""GitHub tarball strategies: ``https://github...`` and official examples.

Both download the repository tarball from the GitHub API and extract a
single directory of it into the project path.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import httpx

from create_razzle_app.config import AppSettings
from create_razzle_app.core.models import GitHubExample, OfficialExample, RetrievalRequest
from create_razzle_app.exceptions import ExampleNotFoundError
from create_razzle_app.infra.http_client import build_client
from create_razzle_app.infra.tarball import download_file, extract_tarball

_GITHUB_URL = re.compile(
    r"^https://github\.com/"
    r"(?P<owner>[^/]+)/(?P<repo>[^/#?]+?)(?:\.git)?"
    r"(?:/tree/(?P<ref>[^/]+)(?:/(?P<path>.+?))?)?/?$"
)


@dataclass(frozen=True, slots=True)
class GitHubLocation:
    """A directory inside a GitHub repository at an optional ref."""

    owner: str
    repo: str
    ref: str | None = None
    path: str | None = None


def parse_github_url(url: str) -> GitHubLocation:
    """Parse ``https://github.com/<owner>/<repo>[/tree/<ref>[/<path>]]``.

    Raises
    ------
    ExampleNotFoundError
        When *url* does not have that shape.
    """
    match = _GITHUB_URL.match(url)
    if match is None:
        raise ExampleNotFoundError(
            f"Unsupported GitHub example URL: {url}",
            hint="Use https://github.com/<owner>/<repo>/tree/<branch>/<path>",
        )
    return GitHubLocation(
        owner=match["owner"],
        repo=match["repo"],
        ref=match["ref"],
        path=match["path"],
    )


def fetch_github_directory(
    location: GitHubLocation,
    project_path: Path,
    *,
    settings: AppSettings,
    client_factory: Callable[[], httpx.Client],
) -> None:
    """Download *location*'s repository tarball and extract its directory."""
    url = settings.tarball_url(location.owner, location.repo, location.ref)
    with tempfile.TemporaryDirectory(prefix="create-razzle-app-") as tmp:
        archive = Path(tmp) / f"{location.repo}.tar.gz"
        with client_factory() as client:
            download_file(client, url, archive)
        extract_tarball(archive, project_path, subdir=location.path)


class _TarballLoader:
    def __init__(
        self,
        settings: AppSettings,
        *,
        client_factory: Callable[[], httpx.Client] | None = None,
    ) -> None:
        self._settings: AppSettings = settings
        self._client_factory: Callable[[], httpx.Client] = (
            client_factory or (lambda: build_client(settings))
        )

    def _fetch(self, location: GitHubLocation, project_path: Path) -> None:
        fetch_github_directory(
            location,
            project_path,
            settings=self._settings,
            client_factory=self._client_factory,
        )


class GitHubExampleLoader(_TarballLoader):
    """Concrete :class:`Retriever` for :class:`GitHubExample` sources."""

    def retrieve(self, request: RetrievalRequest) -> None:
        source = request.source
        if not isinstance(source, GitHubExample):
            raise TypeError(f"GitHubExampleLoader cannot handle {source!r}")
        self._fetch(parse_github_url(source.url), request.project_path)


class OfficialExampleLoader(_TarballLoader):
    """Concrete :class:`Retriever` for :class:`OfficialExample` sources.

    Extracts ``examples/<name>`` from the framework repository at the
    configured release branch.
    """

    def location_for(self, name: str) -> GitHubLocation:
        owner, repo = self._settings.repository.split("/", 1)
        return GitHubLocation(
            owner=owner,
            repo=repo,
            ref=self._settings.branch,
            path=f"examples/{name}",
        )

    def retrieve(self, request: RetrievalRequest) -> None:
        source = request.source
        if not isinstance(source, OfficialExample):
            raise TypeError(f"OfficialExampleLoader cannot handle {source!r}")
        self._fetch(self.location_for(source.name), request.project_path)
