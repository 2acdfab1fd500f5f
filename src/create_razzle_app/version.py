"""Single source of truth for the create-razzle-app version."""

from __future__ import annotations

__version__: str = "4.2.18"
