"""CLI application entry point and command routing for create-razzle-app.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_razzle_app.exceptions.CreateRazzleAppError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core
  service and the infrastructure adapters.
* Process state (working directory, ``CI`` variable) is read here once
  and passed explicitly to the layers below.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from create_razzle_app.cli import exit_codes
from create_razzle_app.cli.console import console, escape
from create_razzle_app.exceptions import CreateRazzleAppError
from create_razzle_app.version import __version__

if TYPE_CHECKING:
    from create_razzle_app.config import AppSettings
    from create_razzle_app.core.create_service import CreateService

CI_ENV_VAR: str = "CI"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``create-razzle-app <project-directory> [--example X] [--no-install]``
    * ``create-razzle-app --info`` — environment diagnostics
    * ``create-razzle-app --version``
    """
    parser = argparse.ArgumentParser(
        prog="create-razzle-app",
        description="Create a new Razzle project.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "project_name",
        metavar="project-directory",
        nargs="?",
        default=None,
        help="Directory to create the project in.",
    )
    parser.add_argument(
        "--example",
        default=None,
        help=(
            "Example to bootstrap from: an official example name, "
            "file:<path>, git+<url>[#ref], a https://github.com URL "
            "or an npm package."
        ),
    )
    parser.add_argument(
        "--install",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Install dependencies after creating the project (default: yes).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print which source is used and what was fetched.",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        default=False,
        help="Print environment debug info.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def build_service(settings: AppSettings, *, is_ci: bool) -> CreateService:
    """Assemble a :class:`CreateService` from the concrete adapters."""
    from create_razzle_app.config import DEFAULT_TEMPLATE_DIR
    from create_razzle_app.core.create_service import CreateService, RetrieverSet
    from create_razzle_app.infra import (
        GitExampleLoader,
        GitHubExampleLoader,
        NodePackageInstaller,
        NpmExampleLoader,
        OfficialExampleLoader,
        OfficialExamplesLister,
        TemplateCopier,
    )

    return CreateService(
        retrievers=RetrieverSet(
            template=TemplateCopier(),
            git=GitExampleLoader(),
            github=GitHubExampleLoader(settings),
            official=OfficialExampleLoader(settings),
            npm=NpmExampleLoader(),
        ),
        lister=OfficialExamplesLister(settings, log=console.log),
        installer=NodePackageInstaller(log=console.log),
        template_dir=DEFAULT_TEMPLATE_DIR,
        razzle_package=settings.razzle_package,
        razzle_dev_utils_package=settings.razzle_dev_utils_package,
        is_ci=is_ci,
        log=console.log,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_create(args: argparse.Namespace, *, cwd: Path, is_ci: bool) -> int:
    """Create a project and print the closing message.

    Flow:
    1. Validate the project name and target directory.
    2. Load settings, then resolve and run the retrieval strategy.
    3. Install dependencies unless ``--no-install``.
    4. Print the start message.
    """
    from create_razzle_app.cli import messages
    from create_razzle_app.config import load_settings
    from create_razzle_app.core.create_service import CreateService
    from create_razzle_app.core.models import CreateOptions
    from create_razzle_app.infra.tool_detector import detect_package_manager

    opts = CreateOptions(
        project_name=args.project_name,
        cwd=cwd,
        example=args.example,
        install=args.install,
        verbose=args.verbose,
    )
    CreateService.validate(opts)
    service = build_service(load_settings(), is_ci=is_ci)

    console.print(messages.creating(opts.project_path))
    result = service.create(opts)

    console.print(
        messages.start(
            result.project_name,
            result.project_path,
            detect_package_manager(),
            installed=result.installed,
        )
    )
    return exit_codes.SUCCESS


def _handle_info() -> int:
    """Dispatch the ``--info`` diagnostics command."""
    from create_razzle_app.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-razzle-app CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CreateRazzleAppError
        Rendered by :func:`cli`; user input errors are raised before any
        retrieval or install step runs.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.info:
        return _handle_info()

    return _handle_create(
        args,
        cwd=Path.cwd(),
        is_ci=CI_ENV_VAR in os.environ,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: CreateRazzleAppError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
    cause = exc.__cause__
    if cause is not None:
        console.print(f"[dim]Caused by {type(cause).__name__}: {escape(cause)}[/dim]")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main`; every failure ends in a rendered message and a
    defined exit code rather than a raw stack trace.
    """
    try:
        code = main()
        sys.exit(code)
    except CreateRazzleAppError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
