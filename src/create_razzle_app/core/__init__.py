"""Core / service layer — pure orchestration and data transformations.

Rules
-----
* No ``print()`` calls.
* No network or subprocess I/O; the only filesystem access is the
  existence check on the target directory.
* No imports from ``cli`` or ``infra``.
"""

from create_razzle_app.core.create_service import CreateService, RetrieverSet
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
from create_razzle_app.core.protocols import ExampleLister, PackageInstaller, Retriever
from create_razzle_app.core.resolver import resolve_example_source

__all__: list[str] = [
    "CreateOptions",
    "CreateResult",
    "CreateService",
    "DefaultTemplate",
    "ExampleLister",
    "ExampleSource",
    "GitHubExample",
    "GitRemoteExample",
    "LocalFileExample",
    "NpmExample",
    "OfficialExample",
    "PackageInstaller",
    "RetrievalRequest",
    "Retriever",
    "RetrieverSet",
    "build_package_list",
    "resolve_example_source",
]
