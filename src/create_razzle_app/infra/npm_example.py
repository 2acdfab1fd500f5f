"""npm-package strategy: any example that is not a known official name.

``npm pack`` downloads the package tarball into a temporary directory;
its ``package/`` directory becomes the new project.
"""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path

from create_razzle_app.core.models import NpmExample, RetrievalRequest
from create_razzle_app.exceptions import ExampleNotFoundError, RetrievalError
from create_razzle_app.infra.tarball import extract_tarball
from create_razzle_app.infra.tool_detector import NPM, require_tool


def build_pack_command(spec: str, dest: Path) -> list[str]:
    return [NPM, "pack", spec, "--pack-destination", str(dest)]


class NpmExampleLoader:
    """Concrete :class:`Retriever` for :class:`NpmExample` sources."""

    def retrieve(self, request: RetrievalRequest) -> None:
        source = request.source
        if not isinstance(source, NpmExample):
            raise TypeError(f"NpmExampleLoader cannot handle {source!r}")

        require_tool(NPM)
        with tempfile.TemporaryDirectory(prefix="create-razzle-app-") as tmp:
            archive = self._pack(source.spec, Path(tmp))
            extract_tarball(archive, request.project_path)

    @staticmethod
    def _pack(spec: str, dest: Path) -> Path:
        proc = subprocess.run(
            build_pack_command(spec, dest),
            capture_output=True,
            text=True,
            check=False,
        )
        if proc.returncode != 0:
            msg = proc.stderr.strip() or f"npm pack failed (exit {proc.returncode})"
            if "E404" in msg:
                raise ExampleNotFoundError(
                    f"No official example or npm package named {spec}.",
                    hint="Use file:, git+ or a https://github.com URL for other sources.",
                )
            raise RetrievalError(f"Could not download {spec} from npm: {msg}")

        # npm prints the tarball file name as the last stdout line.
        lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
        if not lines:
            raise RetrievalError(f"npm pack produced no tarball for {spec}.")
        archive = dest / lines[-1]
        if not archive.is_file():
            raise RetrievalError(f"npm pack tarball missing: {archive.name}")
        return archive
