"""Core create service — sequences validation, resolution, retrieval and install.

This is the orchestrator consumed by the CLI layer.  Every collaborator
(retrieval strategies, examples lister, installer) is injected at
construction time, keeping the core free of network, subprocess and
filesystem-writing code.

Flow
----
``Validating → Resolving → Retrieving → Installing → Done``; any step may
raise, which aborts the whole operation (no cleanup, no retry).

Guarantees
----------
* No ``print()`` — status lines go through the injected ``log`` callback.
* Only :class:`~create_razzle_app.exceptions.CreateRazzleAppError`
  subclasses escape from collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_razzle_app.core.models import (
    CreateOptions,
    CreateResult,
    DefaultTemplate,
    ExampleSource,
    GitHubExample,
    GitRemoteExample,
    LocalFileExample,
    NpmExample,
    OfficialExample,
    RetrievalRequest,
)
from create_razzle_app.core.packages import build_package_list
from create_razzle_app.core.protocols import (
    ExampleLister,
    LogCallback,
    PackageInstaller,
    Retriever,
)
from create_razzle_app.core.resolver import resolve_example_source
from create_razzle_app.exceptions import (
    CreateRazzleAppError,
    InstallError,
    MissingProjectNameError,
    ProjectExistsError,
    RetrievalError,
)


@dataclass(frozen=True, slots=True)
class RetrieverSet:
    """One retrieval strategy per :data:`ExampleSource` variant family."""

    template: Retriever
    """Handles both :class:`DefaultTemplate` and :class:`LocalFileExample`."""

    git: Retriever
    github: Retriever
    official: Retriever
    npm: Retriever


class CreateService:
    """Orchestrates a single project creation.

    Parameters
    ----------
    retrievers:
        Strategy objects satisfying :class:`Retriever`.
    lister:
        Official examples backend, queried only for bare example names.
    installer:
        Dependency installer, called only when ``opts.install`` is true.
    template_dir:
        The bundled default template.
    razzle_package, razzle_dev_utils_package:
        Framework package specs (possibly pinned to a release branch).
    is_ci:
        Whether the process runs in a continuous-integration context.
    log:
        Optional sink for status lines.
    """

    def __init__(
        self,
        *,
        retrievers: RetrieverSet,
        lister: ExampleLister,
        installer: PackageInstaller,
        template_dir: Path,
        razzle_package: str,
        razzle_dev_utils_package: str,
        is_ci: bool = False,
        log: LogCallback | None = None,
    ) -> None:
        self._retrievers: RetrieverSet = retrievers
        self._lister: ExampleLister = lister
        self._installer: PackageInstaller = installer
        self._template_dir: Path = template_dir
        self._razzle_package: str = razzle_package
        self._razzle_dev_utils_package: str = razzle_dev_utils_package
        self._is_ci: bool = is_ci
        self._log: LogCallback | None = log

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, opts: CreateOptions) -> CreateResult:
        """Create the project described by *opts*.

        Raises
        ------
        MissingProjectNameError
            If ``opts.project_name`` is empty.
        ProjectExistsError
            If ``opts.project_path`` already exists.
        RetrievalError
            If the project files cannot be placed.
        InstallError
            If dependency installation fails.
        """
        project_name = self.validate(opts)
        source = self.resolve(opts)

        if opts.verbose:
            self._emit(f"Using {source.label} example")

        request = RetrievalRequest(
            project_name=project_name,
            project_path=opts.project_path,
            source=source,
        )
        self._retrieve(request)

        if not opts.install:
            return CreateResult(
                project_name=project_name,
                project_path=opts.project_path,
                source=source,
                packages=None,
            )

        packages = build_package_list(
            source,
            razzle_package=self._razzle_package,
            razzle_dev_utils_package=self._razzle_dev_utils_package,
        )
        self._install(project_name, opts.project_path, packages)
        return CreateResult(
            project_name=project_name,
            project_path=opts.project_path,
            source=source,
            packages=packages,
        )

    @staticmethod
    def validate(opts: CreateOptions) -> str:
        """Check the preconditions and return the project name."""
        if not opts.project_name:
            raise MissingProjectNameError()
        if opts.project_path.exists():
            raise ProjectExistsError(opts.project_name)
        return opts.project_name

    def resolve(self, opts: CreateOptions) -> ExampleSource:
        """Classify ``opts.example`` into a source variant."""
        return resolve_example_source(
            opts.example,
            template_dir=self._template_dir,
            list_official_examples=lambda: self._lister.list(
                verbose=opts.verbose,
                is_ci=self._is_ci,
            ),
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def retriever_for(self, source: ExampleSource) -> Retriever:
        """Return the strategy responsible for *source*."""
        if isinstance(source, (DefaultTemplate, LocalFileExample)):
            return self._retrievers.template
        if isinstance(source, GitRemoteExample):
            return self._retrievers.git
        if isinstance(source, GitHubExample):
            return self._retrievers.github
        if isinstance(source, OfficialExample):
            return self._retrievers.official
        if isinstance(source, NpmExample):
            return self._retrievers.npm
        raise TypeError(f"Unsupported example source: {source!r}")

    # ------------------------------------------------------------------
    # Collaborator delegation (safe boundary)
    # ------------------------------------------------------------------

    def _retrieve(self, request: RetrievalRequest) -> None:
        retriever = self.retriever_for(request.source)
        try:
            retriever.retrieve(request)
        except CreateRazzleAppError:
            raise
        except Exception as exc:
            raise RetrievalError(
                f"Unexpected retrieval error: {exc}",
            ) from exc

    def _install(self, project_name: str, project_path: Path, packages: tuple[str, ...]) -> None:
        try:
            self._installer.install(
                project_name=project_name,
                project_path=project_path,
                packages=packages,
            )
        except CreateRazzleAppError:
            raise
        except Exception as exc:
            raise InstallError(
                f"Unexpected install error: {exc}",
            ) from exc

    def _emit(self, line: str) -> None:
        if self._log is not None:
            self._log(line)
