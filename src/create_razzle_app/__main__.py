"""Allow ``python -m create_razzle_app`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m create_razzle_app`` behaves identically to the
``create-razzle-app`` console script.
"""

from __future__ import annotations

from create_razzle_app.cli.app import cli

if __name__ == "__main__":
    cli()
