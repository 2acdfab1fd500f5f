"""Infrastructure: external command detection and install guidance.

Locates ``node``, ``npm``, ``yarn`` and ``git`` on the system PATH and
provides installation guidance when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from create_razzle_app.exceptions import ToolNotFoundError

YARN: str = "yarn"
NPM: str = "npm"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for a single command.

    Attributes
    ----------
    name : str
        The command looked up (e.g. ``"git"``).
    found : bool
        Whether the command was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system for *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present; the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands(name),
    )


def require_tool(name: str) -> Path:
    """Locate *name* or raise :class:`ToolNotFoundError`."""
    status = detect_tool(name)
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append(f"Install {name} using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise ToolNotFoundError(
            f"{name} is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


def detect_package_manager() -> str:
    """Return ``"yarn"`` when it is on PATH, else ``"npm"``."""
    if detect_tool(YARN).found:
        return YARN
    return NPM


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    if name == YARN:
        return ("npm install --global yarn", "corepack enable")

    # npm ships with node.
    package = "nodejs" if name in ("node", NPM) else name
    system = platform.system().lower()
    if system == "windows":
        winget_id = "OpenJS.NodeJS" if package == "nodejs" else "Git.Git"
        return (f"winget install {winget_id}", f"choco install {package}")
    if system == "linux":
        return (
            f"sudo apt install {package}",
            f"sudo dnf install {package}",
            f"sudo pacman -S {package}",
        )
    if system == "darwin":
        return (f"brew install {'node' if package == 'nodejs' else package}",)
    if package == "nodejs":
        return ("Please install Node.js from https://nodejs.org/",)
    return ("Please install git from https://git-scm.com/downloads",)
