"""Tests for application settings (config.py)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from create_razzle_app.config import DEFAULT_TEMPLATE_DIR, AppSettings, load_settings
from create_razzle_app.exceptions import ConfigError


class TestDefaults:
    def test_release_branch(self) -> None:
        settings = AppSettings()
        assert settings.branch == "canary"
        assert settings.repository == "jaredpalmer/razzle"

    def test_bundled_template_exists(self) -> None:
        assert (DEFAULT_TEMPLATE_DIR / "package.json").is_file()
        assert (DEFAULT_TEMPLATE_DIR / "gitignore").is_file()


class TestDerivedValues:
    def test_branch_listing_url_has_ref(self) -> None:
        settings = AppSettings(branch="canary")
        assert settings.examples_api_url == (
            "https://api.github.com/repos/jaredpalmer/razzle/contents/examples?ref=canary"
        )

    def test_master_listing_url_has_no_ref(self) -> None:
        settings = AppSettings(branch="master")
        assert settings.examples_api_url == (
            "https://api.github.com/repos/jaredpalmer/razzle/contents/examples"
        )

    def test_branch_packages_are_pinned(self) -> None:
        settings = AppSettings(branch="canary")
        assert settings.razzle_package == "razzle@canary"
        assert settings.razzle_dev_utils_package == "razzle-dev-utils@canary"

    def test_master_packages_are_bare(self) -> None:
        settings = AppSettings(branch="master")
        assert settings.razzle_package == "razzle"
        assert settings.razzle_dev_utils_package == "razzle-dev-utils"

    def test_tarball_url(self) -> None:
        settings = AppSettings()
        assert settings.tarball_url("a", "b") == "https://api.github.com/repos/a/b/tarball"
        assert settings.tarball_url("a", "b", "v1") == "https://api.github.com/repos/a/b/tarball/v1"


class TestEnvironment:
    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREATE_RAZZLE_APP_BRANCH", "master")
        monkeypatch.setenv("CREATE_RAZZLE_APP_HTTP_TIMEOUT_SECONDS", "5")
        settings = AppSettings()
        assert settings.branch == "master"
        assert settings.http_timeout_seconds == 5.0

    def test_invalid_repository(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(repository="not a repo")

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(http_timeout_seconds=0)


class TestLoadSettings:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREATE_RAZZLE_APP_BRANCH", "next")
        assert load_settings().branch == "next"

    def test_invalid_value_names_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREATE_RAZZLE_APP_HTTP_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ConfigError) as exc_info:
            load_settings()

        assert "CREATE_RAZZLE_APP_HTTP_TIMEOUT_SECONDS" in str(exc_info.value)
        assert exc_info.value.hint is not None
        assert "CREATE_RAZZLE_APP_HTTP_TIMEOUT_SECONDS" in exc_info.value.hint
        assert isinstance(exc_info.value.__cause__, ValidationError)
