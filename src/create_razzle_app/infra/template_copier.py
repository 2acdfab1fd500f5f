"""Directory-copy strategy for the bundled template and ``file:`` examples."""

from __future__ import annotations

import shutil
from pathlib import Path

from create_razzle_app.core.models import DefaultTemplate, LocalFileExample, RetrievalRequest
from create_razzle_app.exceptions import ExampleNotFoundError, RetrievalError

COPY_IGNORE: tuple[str, ...] = (".git", "node_modules")

# npm drops ``.gitignore`` from published packages, so templates ship it
# without the leading dot.
GITIGNORE_SOURCE: str = "gitignore"
GITIGNORE_TARGET: str = ".gitignore"


class TemplateCopier:
    """Concrete :class:`Retriever` for :class:`DefaultTemplate` and
    :class:`LocalFileExample` sources."""

    def retrieve(self, request: RetrievalRequest) -> None:
        source = request.source
        if isinstance(source, DefaultTemplate):
            template_path = source.template_path
        elif isinstance(source, LocalFileExample):
            template_path = Path(source.path).expanduser()
        else:
            raise TypeError(f"TemplateCopier cannot handle {source!r}")

        copy_template(template_path, request.project_path)


def copy_template(template_path: Path, project_path: Path) -> None:
    """Copy *template_path* to *project_path* and restore ``.gitignore``.

    Raises
    ------
    ExampleNotFoundError
        When *template_path* is not a directory.
    RetrievalError
        When *project_path* lies inside *template_path* or the copy fails.
    """
    if not template_path.is_dir():
        raise ExampleNotFoundError(
            f"Template directory not found: {template_path}",
            hint="file: examples must point to an existing directory.",
        )

    source_root = template_path.resolve()
    target = project_path.resolve()
    if target == source_root or source_root in target.parents:
        raise RetrievalError(
            f"Cannot copy {template_path} into itself ({project_path}).",
            hint="Create the project outside the example directory.",
        )

    try:
        shutil.copytree(
            template_path,
            project_path,
            ignore=shutil.ignore_patterns(*COPY_IGNORE),
        )
        gitignore = project_path / GITIGNORE_SOURCE
        if gitignore.is_file() and not (project_path / GITIGNORE_TARGET).exists():
            gitignore.rename(project_path / GITIGNORE_TARGET)
    except OSError as exc:
        raise RetrievalError(
            f"Could not copy {template_path} to {project_path}: {exc}",
        ) from exc
