"""General-purpose randomness sources built on the random.org client."""

from .sources import (
    FallbackRandomnessSource,
    LocalRandomnessSource,
    RandomnessSource,
    RandomOrgRandomnessSource,
)

__all__ = [
    "FallbackRandomnessSource",
    "LocalRandomnessSource",
    "RandomOrgRandomnessSource",
    "RandomnessSource",
]
