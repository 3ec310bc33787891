"""JSON-RPC request and response envelopes for the random.org API."""

from __future__ import annotations

from typing import Any, Final, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .methods import Method
from .params import ApiKeyParams

DOMAIN_JSON_RPC_VERSION: Final[str] = "2.0"
DOMAIN_DEFAULT_REQUEST_ID: Final[int] = 1

ParamsT = TypeVar("ParamsT", bound=ApiKeyParams)
ResultT = TypeVar("ResultT")


class Request(BaseModel, Generic[ParamsT]):
    """Outgoing JSON-RPC envelope.

    Attributes:
        json_rpc: Protocol version, always ``"2.0"``.
        method: Remote method to invoke.
        params: Method parameters, serialized by wire alias.
        id: Correlation identifier echoed back by the service.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    json_rpc: Literal["2.0"] = Field(default=DOMAIN_JSON_RPC_VERSION, alias="jsonrpc")
    method: Method
    params: ParamsT
    id: int = DOMAIN_DEFAULT_REQUEST_ID

    def request_to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready request body.

        Returns:
            dict[str, Any]: Mapping with exactly ``jsonrpc``, ``method``, ``params`` and ``id``.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.model_dump(mode="json", by_alias=True)


class Response(BaseModel, Generic[ResultT]):
    """Successful JSON-RPC envelope decoded from a transport body.

    The ``id`` is preserved exactly as received; matching it against the
    originating request is left to the caller.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    json_rpc: str = Field(alias="jsonrpc")
    result: ResultT
    id: int


class ResponseError(BaseModel):
    """Service-reported error object.

    Attributes:
        code: Numeric error code identifying the error type.
        message: Human-readable English message.
        data: Optional values the service supplies to build localized messages.
    """

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    data: Any | None = None


class ErrorEnvelope(BaseModel):
    """Failed JSON-RPC envelope carrying a ``ResponseError``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    json_rpc: str | None = Field(default=None, alias="jsonrpc")
    error: ResponseError
    id: int | None = None


def domain_build_request(method: Method, params: ParamsT) -> Request[ParamsT]:
    """Wrap method parameters in a protocol ``2.0`` envelope with id ``1``.

    Args:
        method: Remote method tag.
        params: Validated method parameters.

    Returns:
        Request[ParamsT]: Immutable request envelope.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return Request[type(params)](method=method, params=params, id=DOMAIN_DEFAULT_REQUEST_ID)
