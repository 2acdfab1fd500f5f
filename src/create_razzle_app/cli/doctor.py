"""``create-razzle-app --info`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the runtime environment can create and install a Razzle project.

This module lives in the CLI layer. It may import from ``infra`` and it
renders via Rich.  No business logic resides here.
"""

from __future__ import annotations

import platform
import sys

from create_razzle_app.cli import exit_codes
from create_razzle_app.cli.console import console
from create_razzle_app.infra.tool_detector import ToolStatus, detect_tool
from create_razzle_app.version import __version__

# Tools whose absence makes project creation impossible.
REQUIRED_TOOLS: tuple[str, ...] = ("node", "npm")
OPTIONAL_TOOLS: tuple[str, ...] = ("yarn", "git")


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(name: str, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for an external command row."""
    status_obj = detect_tool(name)
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return name, path_str, "[green]OK[/green]"
    if required:
        return name, "not found", "[red]FAIL[/red]"
    return name, "not found", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the create-razzle-app version row."""
    return "create-razzle-app", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[tuple[str, str, str]]) -> None:
    """Render the diagnostics without Rich."""
    print("\ncreate-razzle-app --info", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _missing_tools() -> list[ToolStatus]:
    statuses = [detect_tool(name) for name in REQUIRED_TOOLS + OPTIONAL_TOOLS]
    return [status for status in statuses if not status.found and status.install_commands]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all required checks pass,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        *(_tool_check(name, required=True) for name in REQUIRED_TOOLS),
        *(_tool_check(name, required=False) for name in OPTIONAL_TOOLS),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        Table = None

    if Table is not None:
        table = Table(
            title="create-razzle-app --info",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=18)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_table(checks)

    for missing in _missing_tools():
        console.print(f"[yellow]{missing.name} is not installed.[/yellow] Install using one of:")
        for cmd in missing.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
