"""Typed metadata contracts shared across runtime layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LibraryMetadata:
    """Read-only build and runtime identification for diagnostics.

    Attributes:
        package_name: Distribution name.
        package_version: Installed distribution version.
        python_version: Interpreter version running the library.
        platform_name: Platform identifier of the running interpreter.
        api_endpoint_url: Default random.org invoke endpoint.
    """

    package_name: str
    package_version: str
    python_version: str
    platform_name: str
    api_endpoint_url: str
