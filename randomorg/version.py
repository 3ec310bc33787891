"""Read-only build and runtime metadata for diagnostics."""

from __future__ import annotations

import platform
from importlib import metadata
from typing import Final

from randomorg.client import API_INVOKE_URL
from randomorg.domain import LibraryMetadata

VERSION_PACKAGE_NAME: Final[str] = "randomorg"


def version_build_metadata() -> LibraryMetadata:
    """Return metadata describing the installed library and interpreter.

    Returns:
        LibraryMetadata: Package, interpreter and endpoint identification.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    from randomorg import __version__

    try:
        package_version = metadata.version(VERSION_PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        package_version = __version__

    return LibraryMetadata(
        package_name=VERSION_PACKAGE_NAME,
        package_version=package_version,
        python_version=platform.python_version(),
        platform_name=platform.platform(),
        api_endpoint_url=API_INVOKE_URL,
    )
