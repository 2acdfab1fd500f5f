"""Package lists installed into a freshly created project."""

from __future__ import annotations

from create_razzle_app.core.models import ExampleSource

DEFAULT_RUNTIME_PACKAGES: tuple[str, ...] = ("react", "react-dom", "react-router-dom")
DEFAULT_SERVER_PACKAGES: tuple[str, ...] = ("express",)


def build_package_list(
    source: ExampleSource,
    *,
    razzle_package: str,
    razzle_dev_utils_package: str,
) -> tuple[str, ...]:
    """Return the ordered packages to install for *source*.

    Examples ship their own ``package.json`` and only need the framework
    pair; the bundled template additionally needs React, the router and
    the server runtime.
    """
    framework = (razzle_package, razzle_dev_utils_package)
    if source.is_example:
        return framework
    return DEFAULT_RUNTIME_PACKAGES + framework + DEFAULT_SERVER_PACKAGES
