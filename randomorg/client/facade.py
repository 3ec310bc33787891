"""random.org client facade: one method per remote operation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Final, TypeVar

from pydantic import ValidationError

from randomorg.adapters import (
    HttpxTransportAdapter,
    RandomOrgDecodeError,
    RandomOrgInvalidParameterError,
    RandomOrgServiceError,
    RandomOrgStatusError,
    TransportPort,
    TransportResponse,
)
from randomorg.domain import (
    AllowedCharacters,
    ApiKeyParams,
    ErrorEnvelope,
    GenerateBlobsParams,
    GenerateBlobsResult,
    GenerateDecimalFractionsParams,
    GenerateDecimalFractionsResult,
    GenerateGaussiansParams,
    GenerateGaussiansResult,
    GenerateIntegersParams,
    GenerateIntegersResult,
    GenerateStringsParams,
    GenerateStringsResult,
    GenerateUUIDsParams,
    GenerateUUIDsResult,
    GetUsageResult,
    Method,
    Response,
    domain_build_request,
)

from .builders import (
    RequestBlobs,
    RequestDecimalFractions,
    RequestGaussians,
    RequestIntegers,
    RequestStrings,
    RequestUUIDs,
)

logger = logging.getLogger(__name__)

API_INVOKE_URL: Final[str] = "https://api.random.org/json-rpc/2/invoke"

ParamsT = TypeVar("ParamsT", bound=ApiKeyParams)
ResultT = TypeVar("ResultT")


class RandomOrgClient:
    """Typed client for the random.org JSON-RPC basic API.

    The client holds no mutable state beyond its transport and is safe to share
    between threads. The service, however, correlates concurrent calls by the
    request ``id`` and this client always sends ``1``; concurrent calls made with
    the same API key may be rejected or misattributed by the service.

    Usage::

        with RandomOrgClient("API KEY") as client:
            result = client.generate_integers(-100, 100, 15, True)
            values = client.request_integers().min(0).max(6).limit(5).collect()
    """

    def __init__(
        self,
        api_key: str,
        transport: TransportPort | None = None,
        endpoint_url: str = API_INVOKE_URL,
        close_transport: bool = False,
    ):
        """Initialize the client.

        Args:
            api_key: random.org API key embedded in every request.
            transport: Optional transport; an ``HttpxTransportAdapter`` is created when omitted.
            endpoint_url: JSON-RPC invoke endpoint.
            close_transport: Close an injected transport on ``close()``; created transports are always closed.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the API key or endpoint is blank.
        """

        normalized_api_key = api_key.strip()
        normalized_endpoint_url = endpoint_url.strip()
        if not normalized_api_key:
            raise ValueError("api_key must not be blank")
        if not normalized_endpoint_url:
            raise ValueError("endpoint_url must not be blank")

        self._api_key = normalized_api_key
        self._endpoint_url = normalized_endpoint_url
        self._owns_transport = transport is None or close_transport
        self._transport: TransportPort = transport if transport is not None else HttpxTransportAdapter()

    def __repr__(self) -> str:
        return f"RandomOrgClient(endpoint_url={self._endpoint_url!r})"

    def __enter__(self) -> RandomOrgClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport when this client created it."""

        if self._owns_transport:
            self._transport.transport_close()

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def request_integers(self) -> RequestIntegers:
        """Create a lazy integers request builder."""

        return RequestIntegers(self)

    def request_decimal_fractions(self) -> RequestDecimalFractions:
        """Create a lazy decimal fractions request builder."""

        return RequestDecimalFractions(self)

    def request_gaussians(self) -> RequestGaussians:
        """Create a lazy gaussians request builder."""

        return RequestGaussians(self)

    def request_strings(self) -> RequestStrings:
        """Create a lazy strings request builder."""

        return RequestStrings(self)

    def request_uuids(self) -> RequestUUIDs:
        """Create a lazy UUIDs request builder."""

        return RequestUUIDs(self)

    def request_blobs(self) -> RequestBlobs:
        """Create a lazy blobs request builder."""

        return RequestBlobs(self)

    def generate_integers(self, min: int, max: int, limit: int, replacement: bool) -> GenerateIntegersResult:
        """Generate true random integers within a user-defined range.

        Args:
            min: Lower boundary, within [-1e9, 1e9].
            max: Upper boundary, within [-1e9, 1e9].
            limit: Number of integers, within [1, 1e4].
            replacement: Pick with replacement (duplicates allowed) when True.

        Returns:
            GenerateIntegersResult: Random integers with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(
            GenerateIntegersParams,
            min=min,
            max=max,
            limit=limit,
            replacement=replacement,
        )
        return self.client_invoke(Method.GENERATE_INTEGERS, params, GenerateIntegersResult).result

    def generate_decimal_fractions(self, limit: int, decimal_places: int) -> GenerateDecimalFractionsResult:
        """Generate decimal fractions uniformly distributed across [0, 1].

        Args:
            limit: Number of values, within [1, 1e4].
            decimal_places: Decimal places per value, within [1, 20].

        Returns:
            GenerateDecimalFractionsResult: Random fractions with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(
            GenerateDecimalFractionsParams,
            limit=limit,
            decimal_places=decimal_places,
        )
        return self.client_invoke(Method.GENERATE_DECIMAL_FRACTIONS, params, GenerateDecimalFractionsResult).result

    def generate_gaussians(
        self,
        limit: int,
        mean: float,
        standard_deviation: float,
        significant_digits: int,
    ) -> GenerateGaussiansResult:
        """Generate values from a Gaussian (normal) distribution.

        Args:
            limit: Number of values, within [1, 1e4].
            mean: Distribution mean, within [-1e6, 1e6].
            standard_deviation: Standard deviation, within [-1e6, 1e6].
            significant_digits: Significant digits, within [2, 20].

        Returns:
            GenerateGaussiansResult: Random values with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(
            GenerateGaussiansParams,
            limit=limit,
            mean=mean,
            standard_deviation=standard_deviation,
            significant_digits=significant_digits,
        )
        return self.client_invoke(Method.GENERATE_GAUSSIANS, params, GenerateGaussiansResult).result

    def generate_strings(
        self,
        limit: int,
        length: int,
        characters: AllowedCharacters | Iterable[str],
    ) -> GenerateStringsResult:
        """Generate random strings over an allowed alphabet.

        Args:
            limit: Number of strings, within [1, 1e4].
            length: Length of each string, within [1, 20].
            characters: Allowed alphabet, 1 to 80 distinct characters.

        Returns:
            GenerateStringsResult: Random strings with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(
            GenerateStringsParams,
            limit=limit,
            length=length,
            characters=characters,
        )
        return self.client_invoke(Method.GENERATE_STRINGS, params, GenerateStringsResult).result

    def generate_uuids(self, limit: int) -> GenerateUUIDsResult:
        """Generate version 4 UUIDs (RFC 4122 section 4.4).

        Args:
            limit: Number of UUIDs, within [1, 1e3].

        Returns:
            GenerateUUIDsResult: UUID strings with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(GenerateUUIDsParams, limit=limit)
        return self.client_invoke(Method.GENERATE_UUIDS, params, GenerateUUIDsResult).result

    def generate_blobs(self, limit: int, size: int) -> GenerateBlobsResult:
        """Generate binary large objects of random data.

        Args:
            limit: Number of blobs, within [1, 100].
            size: Size of each blob in bits, within [1, 1048576] and divisible by 8.

        Returns:
            GenerateBlobsResult: Base64-encoded blobs with usage metadata.

        Raises:
            RandomOrgInvalidParameterError: Raised before sending when a value is out of range.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(GenerateBlobsParams, limit=limit, size=size)
        return self.client_invoke(Method.GENERATE_BLOBS, params, GenerateBlobsResult).result

    def get_usage(self) -> GetUsageResult:
        """Return usage counters for the configured API key.

        Returns:
            GetUsageResult: Key status and remaining allowances.

        Raises:
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        params = self._client_build_params(ApiKeyParams)
        return self.client_invoke(Method.GET_USAGE, params, GetUsageResult).result

    def client_invoke(self, method: Method, params: ParamsT, result_type: type[ResultT]) -> Response[ResultT]:
        """Send one request envelope and decode the matching response envelope.

        Args:
            method: Remote method tag.
            params: Validated parameters for the method.
            result_type: Expected result model, e.g. ``RandomResult[int]``.

        Returns:
            Response[ResultT]: Decoded response envelope.

        Raises:
            RandomOrgTransportError: Raised when the HTTP exchange could not complete.
            RandomOrgServiceError: Raised when the service reported an error object.
            RandomOrgStatusError: Raised for other non-success HTTP statuses.
            RandomOrgDecodeError: Raised when a success body does not match ``result_type``.
        """

        request = domain_build_request(method, params)
        logger.debug("random.org request method=%s id=%d", method.value, request.id)
        transport_response = self._transport.transport_post_json(self._endpoint_url, request.request_to_payload())
        logger.debug("random.org response method=%s status=%d", method.value, transport_response.status_code)
        return self._client_decode_response(transport_response, result_type)

    def _client_build_params(self, params_type: type[ParamsT], **values: Any) -> ParamsT:
        """Build parameters with the API key, mapping range violations to a typed error.

        Args:
            params_type: Parameter model for the method.
            values: Field values by Python field name.

        Returns:
            ParamsT: Validated parameter model.

        Raises:
            RandomOrgInvalidParameterError: Raised when any value violates its constraint.
        """

        try:
            return params_type(api_key=self._api_key, **values)
        except ValidationError as error:
            first_error = error.errors()[0]
            location = first_error.get("loc") or (params_type.__name__,)
            parameter = str(location[0])
            field_info = params_type.model_fields.get(parameter)
            if field_info is not None and field_info.alias:
                parameter = field_info.alias
            value = "<redacted>" if parameter == "apiKey" else first_error.get("input")
            raise RandomOrgInvalidParameterError(
                parameter=parameter,
                value=value,
                detail=str(first_error.get("msg", "invalid value")),
            ) from error

    def _client_decode_response(
        self,
        transport_response: TransportResponse,
        result_type: type[ResultT],
    ) -> Response[ResultT]:
        """Map one raw transport response onto a result or a typed error.

        Args:
            transport_response: Raw status and body.
            result_type: Expected result model.

        Returns:
            Response[ResultT]: Decoded response envelope.

        Raises:
            RandomOrgServiceError: Raised when the body carries a service error object.
            RandomOrgStatusError: Raised for non-success statuses without an error object.
            RandomOrgDecodeError: Raised when a success body does not match the result shape.
        """

        body_text = transport_response.transport_body_text()
        status_code = transport_response.status_code

        if not transport_response.transport_is_success():
            error_envelope = self._client_try_decode_error(transport_response.body)
            if error_envelope is not None:
                raise RandomOrgServiceError(status_code=status_code, error=error_envelope.error)
            raise RandomOrgStatusError(status_code=status_code, body=body_text)

        try:
            return Response[result_type].model_validate_json(transport_response.body)
        except ValidationError as error:
            error_envelope = self._client_try_decode_error(transport_response.body)
            if error_envelope is not None:
                raise RandomOrgServiceError(status_code=status_code, error=error_envelope.error) from error
            raise RandomOrgDecodeError(detail=str(error), body=body_text) from error

    def _client_try_decode_error(self, body: bytes) -> ErrorEnvelope | None:
        """Best-effort decode of a service error envelope.

        Args:
            body: Raw response body.

        Returns:
            ErrorEnvelope | None: Decoded envelope, or None when the body has another shape.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        try:
            return ErrorEnvelope.model_validate_json(body)
        except ValidationError:
            return None
