"""Shared pytest fixtures and configuration for the create-razzle-app test suite.

Guidelines
----------
* No internet access in any test — HTTP goes through ``httpx.MockTransport``.
* git / npm / yarn are never executed; ``subprocess.run`` is mocked.
* Core tests use fake collaborators only.
"""

from __future__ import annotations

import io
import tarfile
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from create_razzle_app.config import AppSettings
from create_razzle_app.core.create_service import CreateService, RetrieverSet


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test outside CI and without user overrides."""
    monkeypatch.delenv("CI", raising=False)
    for name in (
        "CREATE_RAZZLE_APP_BRANCH",
        "CREATE_RAZZLE_APP_REPOSITORY",
        "CREATE_RAZZLE_APP_GITHUB_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)


@dataclass
class FakeLister:
    """In-memory :class:`ExampleLister` recording its calls."""

    names: Sequence[str] = ("basic", "with-typescript")
    calls: list[tuple[bool, bool]] = field(default_factory=list)

    def list(self, *, verbose: bool, is_ci: bool) -> list[str]:
        self.calls.append((verbose, is_ci))
        return list(self.names)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(branch="canary", repository="jaredpalmer/razzle")


@pytest.fixture
def retrievers() -> RetrieverSet:
    return RetrieverSet(
        template=MagicMock(),
        git=MagicMock(),
        github=MagicMock(),
        official=MagicMock(),
        npm=MagicMock(),
    )


@pytest.fixture
def lister() -> FakeLister:
    return FakeLister()


@pytest.fixture
def installer() -> MagicMock:
    return MagicMock()


@pytest.fixture
def log_lines() -> list[str]:
    return []


@pytest.fixture
def service(
    retrievers: RetrieverSet,
    lister: FakeLister,
    installer: MagicMock,
    log_lines: list[str],
    tmp_path: Path,
) -> CreateService:
    return CreateService(
        retrievers=retrievers,
        lister=lister,
        installer=installer,
        template_dir=tmp_path / "template",
        razzle_package="razzle@canary",
        razzle_dev_utils_package="razzle-dev-utils@canary",
        log=log_lines.append,
    )


def make_tarball(path: Path, files: dict[str, str], *, root: str = "package") -> Path:
    """Write a gzip tarball whose members live under *root*/."""
    with tarfile.open(path, "w:gz") as tar:
        for name, content in files.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(f"{root}/{name}")
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))
    return path


@pytest.fixture
def tarball_factory() -> object:
    return make_tarball
