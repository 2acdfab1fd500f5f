"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0
"""Project created (or ``--info`` completed) without error."""

GENERAL_ERROR: int = 1
"""A known CreateRazzleAppError was caught and its message displayed.

Covers invalid input (missing project name, existing directory) as well
as retrieval, install and missing-tool failures.
"""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
