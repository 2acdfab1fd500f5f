"""Custom exception hierarchy for create-razzle-app.

All exceptions that cross layer boundaries must inherit from
:class:`CreateRazzleAppError`.  Raw third-party exceptions (httpx,
subprocess, tarfile, OS errors) must NEVER propagate beyond the
infrastructure layer. They are caught there and re-raised as a typed
subclass defined here, with the original chained as ``__cause__``.

Hierarchy
---------
CreateRazzleAppError
├── UserInputError
│   ├── MissingProjectNameError
│   └── ProjectExistsError
├── RetrievalError
│   ├── ExampleNotFoundError
│   └── ExampleListingError
├── InstallError
├── EnvironmentError
│   └── ToolNotFoundError
└── ConfigError
"""

from __future__ import annotations


class CreateRazzleAppError(Exception):
    """Base exception for all create-razzle-app errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class UserInputError(CreateRazzleAppError):
    """Raised when the invocation itself is invalid."""


class MissingProjectNameError(UserInputError):
    """Raised when no project directory was given."""

    def __init__(self) -> None:
        super().__init__(
            "Please specify the project directory.",
            hint=(
                "create-razzle-app <project-directory>\n"
                "For example:\n"
                "    create-razzle-app my-razzle-app"
            ),
        )


class ProjectExistsError(UserInputError):
    """Raised when the target directory already exists."""

    def __init__(self, project_name: str) -> None:
        super().__init__(
            f"A directory named {project_name} already exists.",
            hint="Choose a different project name or remove the directory.",
        )
        self.project_name: str = project_name


# --- Retrieval -------------------------------------------------------------

class RetrievalError(CreateRazzleAppError):
    """Raised when project files cannot be fetched or copied."""


class ExampleNotFoundError(RetrievalError):
    """Raised when the requested example does not exist at its source."""


class ExampleListingError(RetrievalError):
    """Raised when the official examples listing cannot be obtained."""


# --- Install ---------------------------------------------------------------

class InstallError(CreateRazzleAppError):
    """Raised when the package manager fails to install dependencies."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateRazzleAppError):
    """Raised when a required runtime dependency is not available."""


class ToolNotFoundError(EnvironmentError):
    """Raised when an external command (git, npm, yarn) is not on PATH."""


# --- Configuration ---------------------------------------------------------

class ConfigError(CreateRazzleAppError):
    """Raised when a ``CREATE_RAZZLE_APP_*`` setting has an invalid value."""
