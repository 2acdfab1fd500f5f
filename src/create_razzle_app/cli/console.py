"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed; output then degrades to plain
``print`` on stderr with markup stripped.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from create_razzle_app.exceptions import EnvironmentError

_MARKUP = re.compile(r"(?<!\\)\[/?[a-z][a-z0-9 _.#=-]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def strip_markup(text: str) -> str:
	"""Remove Rich markup tags such as ``[bold]`` from *text*."""
	return _MARKUP.sub("", text).replace("\\[", "[")


def escape(text: object) -> str:
	"""Escape *text* so Rich prints square brackets in it literally."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return str(text)
	return rich_escape(str(text))


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(
				*(strip_markup(obj) if isinstance(obj, str) else obj for obj in objects),
				file=sys.stderr,
			)
			return
		rich_console.print(*objects)

	def log(self, line: str) -> None:
		"""Print a status line verbatim (no markup interpretation)."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(line, file=sys.stderr)
			return
		rich_console.print(line, markup=False)


console = _ConsoleProxy()
