"""Lazy fluent request builders for random.org generation methods.

A builder accumulates parameters through chained setters and performs the
request only on ``collect()``. Builders are single-use: after ``collect()`` any
further call raises ``RuntimeError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from randomorg.domain import DOMAIN_DEFAULT_CHARACTERS, AllowedCharacters, RandomResult

if TYPE_CHECKING:
    from .facade import RandomOrgClient

RandomValueT = TypeVar("RandomValueT")
CollectT = TypeVar("CollectT")


def builder_collect_data(result: RandomResult[RandomValueT]) -> list[RandomValueT]:
    """Convert a result into the plain list of generated values."""

    return list(result.random.data)


def builder_collect_result(result: RandomResult[RandomValueT]) -> RandomResult[RandomValueT]:
    """Return the typed result unchanged, keeping usage metadata."""

    return result


class _RandomRequestBuilder(ABC, Generic[RandomValueT]):
    """Shared single-use lifecycle for generation request builders."""

    def __init__(self, client: RandomOrgClient):
        self._client = client
        self._collected = False

    def _builder_set(self, field_name: str, value: Any) -> Any:
        self._builder_ensure_active()
        setattr(self, f"_{field_name}", value)
        return self

    def _builder_ensure_active(self) -> None:
        if self._collected:
            raise RuntimeError(f"{type(self).__name__} was already collected and cannot be reused")

    @abstractmethod
    def _builder_execute(self) -> RandomResult[RandomValueT]:
        """Call the facade method with the accumulated parameters."""

    def collect(self, into: Callable[[RandomResult[RandomValueT]], CollectT] | None = None) -> Any:
        """Perform the request and convert the result.

        Args:
            into: Optional converter from the typed result to the caller's container;
                defaults to ``builder_collect_data`` (list of values).

        Returns:
            Any: Converted result, by default ``list`` of generated values.

        Raises:
            RuntimeError: Raised when the builder was already collected.
            RandomOrgError: Raised for validation, transport, service, status or decode failures.
        """

        self._builder_ensure_active()
        self._collected = True
        result = self._builder_execute()
        converter = into if into is not None else builder_collect_data
        return converter(result)


class RequestIntegers(_RandomRequestBuilder[int]):
    """Lazy ``generateIntegers`` request; defaults min=0, max=100, limit=10, replacement=True."""

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._min = 0
        self._max = 100
        self._limit = 10
        self._replacement = True

    def min(self, value: int) -> RequestIntegers:
        return self._builder_set("min", value)

    def max(self, value: int) -> RequestIntegers:
        return self._builder_set("max", value)

    def limit(self, value: int) -> RequestIntegers:
        return self._builder_set("limit", value)

    def replacement(self, value: bool) -> RequestIntegers:
        return self._builder_set("replacement", value)

    def _builder_execute(self) -> RandomResult[int]:
        return self._client.generate_integers(self._min, self._max, self._limit, self._replacement)


class RequestDecimalFractions(_RandomRequestBuilder[float]):
    """Lazy ``generateDecimalFractions`` request; defaults limit=10, decimal_places=4."""

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._limit = 10
        self._decimal_places = 4

    def limit(self, value: int) -> RequestDecimalFractions:
        return self._builder_set("limit", value)

    def decimal_places(self, value: int) -> RequestDecimalFractions:
        return self._builder_set("decimal_places", value)

    def _builder_execute(self) -> RandomResult[float]:
        return self._client.generate_decimal_fractions(self._limit, self._decimal_places)


class RequestGaussians(_RandomRequestBuilder[float]):
    """Lazy ``generateGaussians`` request.

    Defaults describe the standard normal distribution: limit=10, mean=0,
    standard_deviation=1, significant_digits=8.
    """

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._limit = 10
        self._mean = 0.0
        self._standard_deviation = 1.0
        self._significant_digits = 8

    def limit(self, value: int) -> RequestGaussians:
        return self._builder_set("limit", value)

    def mean(self, value: float) -> RequestGaussians:
        return self._builder_set("mean", value)

    def standard_deviation(self, value: float) -> RequestGaussians:
        return self._builder_set("standard_deviation", value)

    def significant_digits(self, value: int) -> RequestGaussians:
        return self._builder_set("significant_digits", value)

    def _builder_execute(self) -> RandomResult[float]:
        return self._client.generate_gaussians(
            self._limit,
            self._mean,
            self._standard_deviation,
            self._significant_digits,
        )


class RequestStrings(_RandomRequestBuilder[str]):
    """Lazy ``generateStrings`` request; defaults limit=10, length=10, lowercase hex digits."""

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._limit = 10
        self._length = 10
        self._characters: AllowedCharacters | Iterable[str] = AllowedCharacters(DOMAIN_DEFAULT_CHARACTERS)

    def limit(self, value: int) -> RequestStrings:
        return self._builder_set("limit", value)

    def length(self, value: int) -> RequestStrings:
        return self._builder_set("length", value)

    def characters(self, value: AllowedCharacters | Iterable[str]) -> RequestStrings:
        return self._builder_set("characters", value)

    def _builder_execute(self) -> RandomResult[str]:
        return self._client.generate_strings(self._limit, self._length, self._characters)


class RequestUUIDs(_RandomRequestBuilder[str]):
    """Lazy ``generateUUIDs`` request; defaults limit=10."""

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._limit = 10

    def limit(self, value: int) -> RequestUUIDs:
        return self._builder_set("limit", value)

    def _builder_execute(self) -> RandomResult[str]:
        return self._client.generate_uuids(self._limit)


class RequestBlobs(_RandomRequestBuilder[str]):
    """Lazy ``generateBlobs`` request; defaults limit=10, size=128 bits."""

    def __init__(self, client: RandomOrgClient):
        super().__init__(client)
        self._limit = 10
        self._size = 128

    def limit(self, value: int) -> RequestBlobs:
        return self._builder_set("limit", value)

    def size(self, value: int) -> RequestBlobs:
        return self._builder_set("size", value)

    def _builder_execute(self) -> RandomResult[str]:
        return self._client.generate_blobs(self._limit, self._size)
