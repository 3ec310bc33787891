"""Client facade and fluent request builders."""

from .builders import (
    RequestBlobs,
    RequestDecimalFractions,
    RequestGaussians,
    RequestIntegers,
    RequestStrings,
    RequestUUIDs,
    builder_collect_data,
    builder_collect_result,
)
from .facade import API_INVOKE_URL, RandomOrgClient

__all__ = [
    "API_INVOKE_URL",
    "RandomOrgClient",
    "RequestBlobs",
    "RequestDecimalFractions",
    "RequestGaussians",
    "RequestIntegers",
    "RequestStrings",
    "RequestUUIDs",
    "builder_collect_data",
    "builder_collect_result",
]
