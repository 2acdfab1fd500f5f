"""create-razzle-app — scaffold a new Razzle project.

Copies the bundled default template or fetches an example (official,
GitHub, git remote, local path or npm package), then installs the
project's dependencies.
"""

from create_razzle_app.version import __version__

__all__: list[str] = ["__version__"]
