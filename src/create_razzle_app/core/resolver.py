"""Example-source resolution.

Classifies the raw ``--example`` string into exactly one
:data:`~create_razzle_app.core.models.ExampleSource` variant using
ordered pattern checks; the first match wins.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path

from create_razzle_app.core.models import (
    DefaultTemplate,
    ExampleSource,
    GitHubExample,
    GitRemoteExample,
    LocalFileExample,
    NpmExample,
    OfficialExample,
)

_GITHUB_PATTERN = re.compile(r"^https://github")
_GIT_PATTERN = re.compile(r"^git\+")
_FILE_PATTERN = re.compile(r"^file:")

FILE_PREFIX_LENGTH: int = len("file:")


def resolve_example_source(
    example: str | None,
    *,
    template_dir: Path,
    list_official_examples: Callable[[], Sequence[str]],
) -> ExampleSource:
    """Select the retrieval strategy for *example*.

    Parameters
    ----------
    example:
        Raw identifier, or ``None``/empty for the bundled template.
    template_dir:
        Location of the bundled default template.
    list_official_examples:
        Called only when no prefix rule matches; returns the official
        example names.
    """
    if not example:
        return DefaultTemplate(template_path=template_dir)
    if _GITHUB_PATTERN.match(example):
        return GitHubExample(url=example)
    if _GIT_PATTERN.match(example):
        return GitRemoteExample(url=example)
    if _FILE_PATTERN.match(example):
        return LocalFileExample(path=example[FILE_PREFIX_LENGTH:])

    if example in list_official_examples():
        return OfficialExample(name=example)
    return NpmExample(spec=example)
