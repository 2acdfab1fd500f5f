"""User-facing message templates (Rich markup)."""

from __future__ import annotations

from pathlib import Path

from create_razzle_app.cli.console import escape
from create_razzle_app.infra.tool_detector import YARN


def _run_command(package_manager: str, script: str) -> str:
    if package_manager == YARN:
        return f"yarn {script}"
    if script in ("start", "test"):
        return f"npm {script}"
    return f"npm run {script}"


def creating(project_path: Path) -> str:
    return f"Creating a new Razzle app in [green]{escape(project_path)}[/green]."


def start(project_name: str, project_path: Path, package_manager: str, *, installed: bool) -> str:
    """Closing message naming the project and the commands to run next."""
    lines = [
        "",
        f"[bold green]Success![/bold green] Created [cyan]{escape(project_name)}[/cyan] at {escape(project_path)}",
        "Inside that directory, you can run several commands:",
        "",
        f"  [cyan]{_run_command(package_manager, 'start')}[/cyan]",
        "    Starts the development server.",
        "",
        f"  [cyan]{_run_command(package_manager, 'build')}[/cyan]",
        "    Bundles the app into static files for production.",
        "",
        f"  [cyan]{_run_command(package_manager, 'test')}[/cyan]",
        "    Starts the test runner.",
        "",
        "We suggest that you begin by typing:",
        "",
        f"  [cyan]cd[/cyan] {escape(project_name)}",
    ]
    if not installed:
        lines.append(f"  [cyan]{package_manager} install[/cyan]")
    lines.extend((f"  [cyan]{_run_command(package_manager, 'start')}[/cyan]", ""))
    return "\n".join(lines)
