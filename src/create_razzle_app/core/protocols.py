"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from create_razzle_app.core.models import RetrievalRequest

LogCallback = Callable[[str], None]
"""Sink for user-facing status lines (wired to the console by the CLI)."""


class Retriever(Protocol):
    """Contract shared by every retrieval strategy.

    All strategies are interchangeable from the orchestrator's point of
    view: same signature, same success/failure contract.
    """

    def retrieve(self, request: RetrievalRequest) -> None:
        """Place the project files at ``request.project_path``.

        Raises
        ------
        RetrievalError
            When the files cannot be fetched or copied.
        ToolNotFoundError
            When a required external command is missing.
        """
        ...  # pragma: no cover


class ExampleLister(Protocol):
    """Contract for the official-examples listing backend."""

    def list(self, *, verbose: bool, is_ci: bool) -> Sequence[str]:
        """Return the names of the official examples.

        Raises
        ------
        ExampleListingError
            When the listing endpoint cannot be queried or parsed.
        """
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for dependency installation backends."""

    def install(
        self,
        *,
        project_name: str,
        project_path: Path,
        packages: Sequence[str],
    ) -> None:
        """Install *packages* into *project_path*.

        Raises
        ------
        InstallError
            When the package manager exits unsuccessfully.
        """
        ...  # pragma: no cover
