"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from create_razzle_app import __version__
from create_razzle_app.cli import exit_codes
from create_razzle_app.cli.app import main
from create_razzle_app.exceptions import (
    CreateRazzleAppError,
    EnvironmentError,
    ExampleListingError,
    ExampleNotFoundError,
    InstallError,
    MissingProjectNameError,
    ProjectExistsError,
    RetrievalError,
    ToolNotFoundError,
    UserInputError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UserInputError,
            RetrievalError,
            ExampleNotFoundError,
            ExampleListingError,
            InstallError,
            EnvironmentError,
            ToolNotFoundError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CreateRazzleAppError]
    ) -> None:
        assert issubclass(exc_class, CreateRazzleAppError)

    def test_user_input_errors(self) -> None:
        assert issubclass(MissingProjectNameError, UserInputError)
        assert issubclass(ProjectExistsError, UserInputError)

    def test_retrieval_subclasses(self) -> None:
        assert issubclass(ExampleNotFoundError, RetrievalError)
        assert issubclass(ExampleListingError, RetrievalError)

    def test_hint_is_stored(self) -> None:
        err = CreateRazzleAppError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CreateRazzleAppError("boom").hint is None

    def test_missing_project_name_has_usage_hint(self) -> None:
        err = MissingProjectNameError()
        assert "project directory" in str(err)
        assert err.hint is not None
        assert "create-razzle-app my-razzle-app" in err.hint

    def test_project_exists_names_directory(self) -> None:
        err = ProjectExistsError("foo")
        assert "foo" in str(err)
        assert err.project_name == "foo"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @patch("create_razzle_app.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_info_returns_success(self, _mock_doc: object) -> None:
        assert main(["--info"]) == exit_codes.SUCCESS

    def test_no_project_name_raises(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: object,
    ) -> None:
        monkeypatch.chdir(tmp_path)  # type: ignore[arg-type]
        with pytest.raises(MissingProjectNameError):
            main([])
