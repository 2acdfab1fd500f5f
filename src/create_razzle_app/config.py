"""Application settings.

Centralises environment-driven configuration (pydantic-settings) so the
CLI and the infrastructure adapters read the release reference, the
upstream repository and HTTP behaviour from one typed contract.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from create_razzle_app.exceptions import ConfigError
from create_razzle_app.version import __version__

ENV_PREFIX: str = "CREATE_RAZZLE_APP_"

RELEASE_BRANCH: str = "canary"
"""Release reference baked in at build time."""

MASTER_BRANCH: str = "master"

DEFAULT_TEMPLATE_DIR: Path = Path(__file__).resolve().parent / "templates" / "default"
"""Template copied when no example is requested."""


class AppSettings(BaseSettings):
    """Typed settings read from ``CREATE_RAZZLE_APP_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    branch: str = Field(
        default=RELEASE_BRANCH,
        min_length=1,
        description="Branch or tag of the framework used for packages and examples.",
    )
    repository: str = Field(
        default="jaredpalmer/razzle",
        pattern=r"^[\w.-]+/[\w.-]+$",
        description="GitHub <owner>/<repo> hosting the official examples.",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    user_agent: str = Field(
        default=f"create-razzle-app/{__version__}",
        min_length=1,
        description="User-Agent sent with every HTTP request.",
    )
    github_token: str | None = Field(
        default=None,
        description="Optional token used to authenticate GitHub API calls.",
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def is_master(self) -> bool:
        return self.branch == MASTER_BRANCH

    @property
    def examples_api_url(self) -> str:
        """Directory-listing endpoint for the official ``examples/`` folder."""
        base = f"{self.github_api_url.rstrip('/')}/repos/{self.repository}/contents/examples"
        if self.is_master:
            return base
        return f"{base}?ref={self.branch}"

    @property
    def razzle_package(self) -> str:
        return self._versioned("razzle")

    @property
    def razzle_dev_utils_package(self) -> str:
        return self._versioned("razzle-dev-utils")

    def tarball_url(self, owner: str, repo: str, ref: str | None = None) -> str:
        """Return the GitHub API tarball URL for *owner*/*repo* at *ref*."""
        url = f"{self.github_api_url.rstrip('/')}/repos/{owner}/{repo}/tarball"
        if ref:
            url = f"{url}/{ref}"
        return url

    def _versioned(self, package: str) -> str:
        if self.is_master:
            return package
        return f"{package}@{self.branch}"


def load_settings() -> AppSettings:
    """Read :class:`AppSettings` from the environment and ``.env``.

    Raises
    ------
    ConfigError
        When a variable holds a value that fails validation.
    """
    try:
        return AppSettings()
    except ValidationError as exc:
        names = sorted({f"{ENV_PREFIX}{str(error['loc'][0]).upper()}" for error in exc.errors() if error["loc"]})
        variables = ", ".join(names) or f"{ENV_PREFIX}*"
        raise ConfigError(
            f"Invalid configuration in {variables}.",
            hint=f"Fix or unset {variables} (environment or .env file).",
        ) from exc
