"""Typed request parameter contracts for every random.org method.

Each model serializes by wire alias (``apiKey``, ``n``, ``decimalPlaces`` ...)
and enforces the documented value ranges at construction time, so an
out-of-range request is rejected locally instead of costing a round trip.
Numeric fields are strict: ``True`` or ``"10"`` is not accepted as a count.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DOMAIN_ALLOWED_CHARACTERS_MAX: Final[int] = 80
DOMAIN_DEFAULT_CHARACTERS: Final[str] = "0123456789abcdef"


class AllowedCharacters:
    """Set of distinct characters that may occur in generated strings.

    Equality ignores insertion order. The wire form is the characters
    concatenated in code point order, so serialization is deterministic.

    Attributes:
        characters: Immutable set of single-character strings.
    """

    __slots__ = ("characters",)

    def __init__(self, characters: Iterable[str]):
        """Build a validated character set.

        Args:
            characters: String or iterable of single characters.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the set is empty, has more than 80 members,
                or contains an item that is not exactly one character.
        """

        try:
            unique_characters = frozenset(characters)
        except TypeError as error:
            raise ValueError(f"allowed characters must be single characters: {error}") from error
        for character in unique_characters:
            if not isinstance(character, str) or len(character) != 1:
                raise ValueError(f"allowed characters must be single characters, got {character!r}")
        if not unique_characters:
            raise ValueError("allowed characters must not be empty")
        if len(unique_characters) > DOMAIN_ALLOWED_CHARACTERS_MAX:
            raise ValueError(
                f"allowed characters must contain at most {DOMAIN_ALLOWED_CHARACTERS_MAX} characters, "
                f"got {len(unique_characters)}"
            )
        self.characters = unique_characters

    def characters_to_wire(self) -> str:
        """Return the sorted concatenation sent as ``params.characters``."""

        return "".join(sorted(self.characters))

    def __len__(self) -> int:
        return len(self.characters)

    def __iter__(self):
        return iter(sorted(self.characters))

    def __contains__(self, character: object) -> bool:
        return character in self.characters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllowedCharacters):
            return NotImplemented
        return self.characters == other.characters

    def __hash__(self) -> int:
        return hash(self.characters)

    def __repr__(self) -> str:
        return f"AllowedCharacters({self.characters_to_wire()!r})"


class ApiKeyParams(BaseModel):
    """Parameters carrying only the API key (used by ``getUsage``).

    Attributes:
        api_key: Opaque random.org API key, excluded from ``repr``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    api_key: str = Field(alias="apiKey", min_length=1, repr=False)


class GenerateIntegersParams(ApiKeyParams):
    """Parameters for ``generateIntegers``.

    Attributes:
        min: Lower range boundary, within [-1e9, 1e9].
        max: Upper range boundary, within [-1e9, 1e9].
        limit: Number of integers, within [1, 1e4].
        replacement: Whether values are picked with replacement.
    """

    min: int = Field(ge=-1_000_000_000, le=1_000_000_000, strict=True)
    max: int = Field(ge=-1_000_000_000, le=1_000_000_000, strict=True)
    limit: int = Field(alias="n", ge=1, le=10_000, strict=True)
    replacement: bool = Field(default=True, strict=True)


class GenerateDecimalFractionsParams(ApiKeyParams):
    """Parameters for ``generateDecimalFractions``."""

    limit: int = Field(alias="n", ge=1, le=10_000, strict=True)
    decimal_places: int = Field(alias="decimalPlaces", ge=1, le=20, strict=True)


class GenerateGaussiansParams(ApiKeyParams):
    """Parameters for ``generateGaussians``.

    Attributes:
        limit: Number of values, within [1, 1e4].
        mean: Distribution mean, within [-1e6, 1e6].
        standard_deviation: Distribution standard deviation, within [-1e6, 1e6].
        significant_digits: Significant digits per value, within [2, 20].
    """

    limit: int = Field(alias="n", ge=1, le=10_000, strict=True)
    mean: float = Field(ge=-1_000_000, le=1_000_000, strict=True)
    standard_deviation: float = Field(alias="standardDeviation", ge=-1_000_000, le=1_000_000, strict=True)
    significant_digits: int = Field(alias="significantDigits", ge=2, le=20, strict=True)


class GenerateStringsParams(ApiKeyParams):
    """Parameters for ``generateStrings``.

    ``characters`` accepts a string, an iterable of characters or an
    ``AllowedCharacters`` value and is normalized to the wire string.
    """

    limit: int = Field(alias="n", ge=1, le=10_000, strict=True)
    length: int = Field(ge=1, le=20, strict=True)
    characters: str

    @field_validator("characters", mode="before")
    @classmethod
    def _validate_characters(cls, value: object) -> str:
        if isinstance(value, AllowedCharacters):
            return value.characters_to_wire()
        if isinstance(value, (str, Iterable)):
            return AllowedCharacters(value).characters_to_wire()
        raise ValueError("characters must be a string or an iterable of characters")


class GenerateUUIDsParams(ApiKeyParams):
    """Parameters for ``generateUUIDs``."""

    limit: int = Field(alias="n", ge=1, le=1_000, strict=True)


class GenerateBlobsParams(ApiKeyParams):
    """Parameters for ``generateBlobs``.

    Attributes:
        limit: Number of blobs, within [1, 100].
        size: Size of each blob in bits, within [1, 1048576] and divisible by 8.
    """

    limit: int = Field(alias="n", ge=1, le=100, strict=True)
    size: int = Field(ge=1, le=1_048_576, strict=True)

    @field_validator("size")
    @classmethod
    def _validate_size_is_byte_aligned(cls, value: int) -> int:
        if value % 8 != 0:
            raise ValueError("size must be divisible by 8")
        return value
