"""Typed result contracts decoded from random.org responses."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_serializer

from .service_dates import ServiceDateTime, domain_format_service_datetime

RandomValueT = TypeVar("RandomValueT")


class ApiKeyStatus(str, Enum):
    """Lifecycle status of an API key as reported by ``getUsage``."""

    STOPPED = "stopped"
    PAUSED = "paused"
    RUNNING = "running"


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RandomData(_ResultModel, Generic[RandomValueT]):
    """Random values and the time the service completed the request.

    Attributes:
        data: Sequence of generated values.
        completion_time: Naive completion timestamp, serialized back in the service format.
    """

    data: list[RandomValueT]
    completion_time: ServiceDateTime = Field(alias="completionTime")

    @field_serializer("completion_time")
    def _serialize_completion_time(self, value: datetime) -> str:
        return domain_format_service_datetime(value)


class RandomResult(_ResultModel, Generic[RandomValueT]):
    """Result shape shared by every ``generate*`` method.

    Attributes:
        random: Generated values with completion time.
        bits_used: True random bits used to complete the request.
        bits_left: Estimated remaining bits for the API key.
        requests_left: Estimated remaining requests for the API key.
        advisory_delay: Recommended delay in milliseconds before the next request.
    """

    random: RandomData[RandomValueT]
    bits_used: NonNegativeInt = Field(alias="bitsUsed")
    bits_left: NonNegativeInt = Field(alias="bitsLeft")
    requests_left: NonNegativeInt = Field(alias="requestsLeft")
    advisory_delay: NonNegativeInt = Field(alias="advisoryDelay")


class GetUsageResult(_ResultModel):
    """Usage counters for one API key.

    Attributes:
        status: Current key status; only ``running`` keys serve requests.
        creation_time: Naive key creation timestamp.
        bits_left: Estimated remaining bits.
        requests_left: Estimated remaining requests.
        total_bits: Bits used since the key was created.
        total_requests: Requests made since the key was created.
    """

    status: ApiKeyStatus
    creation_time: ServiceDateTime = Field(alias="creationTime")
    bits_left: NonNegativeInt = Field(alias="bitsLeft")
    requests_left: NonNegativeInt = Field(alias="requestsLeft")
    total_bits: NonNegativeInt = Field(alias="totalBits")
    total_requests: NonNegativeInt = Field(alias="totalRequests")

    @field_serializer("creation_time")
    def _serialize_creation_time(self, value: datetime) -> str:
        return domain_format_service_datetime(value)


GenerateIntegersResult = RandomResult[int]
GenerateDecimalFractionsResult = RandomResult[float]
GenerateGaussiansResult = RandomResult[float]
GenerateStringsResult = RandomResult[str]
GenerateUUIDsResult = RandomResult[str]
GenerateBlobsResult = RandomResult[str]
