"""Package-manager backed implementation of :class:`~create_razzle_app.core.protocols.PackageInstaller`.

Prefers ``yarn`` when it is available and falls back to ``npm``.  The
package manager's own output is streamed to the terminal.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from create_razzle_app.core.protocols import LogCallback
from create_razzle_app.exceptions import InstallError
from create_razzle_app.infra.tool_detector import YARN, detect_package_manager, require_tool


def build_install_command(package_manager: str, packages: Sequence[str]) -> list[str]:
    """Return the argv adding *packages* as dependencies."""
    if package_manager == YARN:
        return [YARN, "add", *packages]
    return [package_manager, "install", "--save", *packages]


class NodePackageInstaller:
    """Concrete :class:`PackageInstaller` running yarn or npm.

    Parameters
    ----------
    package_manager_factory:
        Returns ``"yarn"`` or ``"npm"``; defaults to PATH detection.
    log:
        Optional sink for status lines.
    """

    def __init__(
        self,
        *,
        package_manager_factory: Callable[[], str] = detect_package_manager,
        log: LogCallback | None = None,
    ) -> None:
        self._package_manager_factory: Callable[[], str] = package_manager_factory
        self._log: LogCallback | None = log

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
        ToolNotFoundError
            When the chosen package manager is not on PATH.
        InstallError
            When the package manager exits with a non-zero status.
        """
        package_manager = self._package_manager_factory()
        require_tool(package_manager)

        if self._log is not None:
            self._log("Installing packages. This might take a couple of minutes.")
            self._log("Installing " + ", ".join(packages) + "...")

        command = build_install_command(package_manager, packages)
        try:
            proc = subprocess.run(command, cwd=project_path, check=False)
        except OSError as exc:
            raise InstallError(
                f"Could not run {package_manager} in {project_path}: {exc}",
            ) from exc

        if proc.returncode != 0:
            raise InstallError(
                f"{package_manager} exited with status {proc.returncode} "
                f"while installing dependencies for {project_name}.",
                hint=f"Run `{' '.join(command)}` inside {project_name} to retry.",
            )
