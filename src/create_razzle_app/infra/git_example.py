"""git-remote strategy: ``git+<url>[#<ref>]`` examples.

This module is the **only** place in the codebase that runs ``git``.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from create_razzle_app.core.models import GitRemoteExample, RetrievalRequest
from create_razzle_app.exceptions import RetrievalError
from create_razzle_app.infra.tool_detector import require_tool

GIT_PREFIX: str = "git+"


def parse_git_example(example: str) -> tuple[str, str | None]:
    """Split ``git+<url>[#<ref>]`` into ``(url, ref)``."""
    url = example[len(GIT_PREFIX):] if example.startswith(GIT_PREFIX) else example
    url, _, ref = url.partition("#")
    return url, ref or None


def build_clone_command(url: str, ref: str | None, dest: Path) -> list[str]:
    command = ["git", "clone", "--depth", "1"]
    if ref:
        command.extend(["--branch", ref])
    command.extend([url, str(dest)])
    return command


class GitExampleLoader:
    """Concrete :class:`Retriever` that shallow-clones a git remote.

    The clone's ``.git`` directory is removed so the new project starts
    without the example's history.
    """

    def retrieve(self, request: RetrievalRequest) -> None:
        source = request.source
        if not isinstance(source, GitRemoteExample):
            raise TypeError(f"GitExampleLoader cannot handle {source!r}")

        require_tool("git")
        url, ref = parse_git_example(source.url)
        proc = subprocess.run(
            build_clone_command(url, ref, request.project_path),
            capture_output=True,
            text=True,
            check=False,
        )
        if proc.returncode != 0:
            msg = proc.stderr.strip() or proc.stdout.strip()
            if not msg:
                msg = f"git clone failed (exit {proc.returncode})"
            raise RetrievalError(
                f"Could not clone {url}: {msg}",
                hint="Check the repository URL and the #ref suffix.",
            )

        shutil.rmtree(request.project_path / ".git", ignore_errors=True)
