"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, git, npm/yarn and
the GitHub HTTP API.  Every raw third-party exception is caught here and
re-raised as a :class:`~create_razzle_app.exceptions.CreateRazzleAppError`
subclass.

Rules
-----
* No imports from ``cli``.
* No direct user-facing output — status lines go through an injected
  ``log`` callback.
"""

from create_razzle_app.infra.git_example import GitExampleLoader
from create_razzle_app.infra.github_example import GitHubExampleLoader, OfficialExampleLoader
from create_razzle_app.infra.installer import NodePackageInstaller
from create_razzle_app.infra.npm_example import NpmExampleLoader
from create_razzle_app.infra.official_examples import OfficialExamplesLister
from create_razzle_app.infra.template_copier import TemplateCopier
from create_razzle_app.infra.tool_detector import ToolStatus, detect_tool, require_tool

__all__: list[str] = [
    "GitExampleLoader",
    "GitHubExampleLoader",
    "NodePackageInstaller",
    "NpmExampleLoader",
    "OfficialExampleLoader",
    "OfficialExamplesLister",
    "TemplateCopier",
    "ToolStatus",
    "detect_tool",
    "require_tool",
]
