"""Domain models for create-razzle-app.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivially derived properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# Invocation options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CreateOptions:
    """Everything a single ``create-razzle-app`` invocation needs."""

    project_name: str | None
    """Name of the directory to create, relative to :attr:`cwd`."""

    cwd: Path
    """Working directory the project is created in."""

    example: str | None = None
    """Raw ``--example`` value, or ``None`` for the default template."""

    install: bool = True
    verbose: bool = False

    @property
    def project_path(self) -> Path:
        """Absolute target directory (``cwd / project_name``)."""
        return self.cwd / (self.project_name or "")


# ---------------------------------------------------------------------------
# Example sources (closed variant set)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DefaultTemplate:
    """The template bundled with this package."""

    template_path: Path

    is_example = False

    @property
    def label(self) -> str:
        return "official default"


@dataclass(frozen=True, slots=True)
class LocalFileExample:
    """A directory on the local filesystem (``file:<path>``)."""

    path: str

    is_example = True

    @property
    def label(self) -> str:
        return f"file file:{self.path}"


@dataclass(frozen=True, slots=True)
class GitRemoteExample:
    """A git repository cloned from ``git+<url>[#<ref>]``."""

    url: str

    is_example = True

    @property
    def label(self) -> str:
        return f"git {self.url}"


@dataclass(frozen=True, slots=True)
class GitHubExample:
    """A repository (or a sub-directory of one) on github.com."""

    url: str

    is_example = True

    @property
    def label(self) -> str:
        return f"github {self.url}"


@dataclass(frozen=True, slots=True)
class OfficialExample:
    """A directory under the framework's ``examples/`` folder."""

    name: str

    is_example = True

    @property
    def label(self) -> str:
        return f"official {self.name}"


@dataclass(frozen=True, slots=True)
class NpmExample:
    """An npm package whose contents become the project."""

    spec: str

    is_example = True

    @property
    def label(self) -> str:
        return f"npm {self.spec}"


ExampleSource = Union[
    DefaultTemplate,
    LocalFileExample,
    GitRemoteExample,
    GitHubExample,
    OfficialExample,
    NpmExample,
]


# ---------------------------------------------------------------------------
# Requests / results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RetrievalRequest:
    """Minimal addressing info handed to a retrieval strategy."""

    project_name: str
    project_path: Path
    source: ExampleSource


@dataclass(frozen=True, slots=True)
class CreateResult:
    """Outcome of a successful :meth:`CreateService.create` call."""

    project_name: str
    project_path: Path
    source: ExampleSource
    packages: tuple[str, ...] | None
    """Installed packages, or ``None`` when installation was skipped."""

    @property
    def installed(self) -> bool:
        return self.packages is not None
