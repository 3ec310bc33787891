"""Closed set of random.org JSON-RPC method names."""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """Remote operations exposed by the random.org basic API.

    Each member value is the canonical wire-level method string.
    """

    GENERATE_INTEGERS = "generateIntegers"
    GENERATE_DECIMAL_FRACTIONS = "generateDecimalFractions"
    GENERATE_GAUSSIANS = "generateGaussians"
    GENERATE_STRINGS = "generateStrings"
    GENERATE_UUIDS = "generateUUIDs"
    GENERATE_BLOBS = "generateBlobs"
    GET_USAGE = "getUsage"
