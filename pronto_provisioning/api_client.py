"""HTTP client for the Pronto provisioning API with status and error mapping."""

from __future__ import annotations

import http.client
import logging
from typing import Callable, TypeVar
from urllib import error, request

from pydantic import BaseModel, ValidationError

from contracts.v2.schemas import ErrorResponse, IssuerDataResponse, PassesResponse

from .configuration import ProntoConfiguration
from .errors import InvalidResponseError, NetworkError, ServerError
from .mappers import issuer_data_from_contract, passes_from_contract
from .models import IssuerDataResult, Pass, TagIdAttribute
from .request_builder import ApiRequest, build_issuer_data_request, build_passes_request

logger = logging.getLogger(__name__)

ContractT = TypeVar("ContractT", bound=BaseModel)


class ProntoAPIClient:
    """Sends one request per call; no retries, no caching."""

    def __init__(self, configuration: ProntoConfiguration):
        self.configuration = configuration

    def fetch_issuer_data(
        self,
        tag_id: str | int,
        id_attribute: TagIdAttribute | str = TagIdAttribute.REFERENCE_ID,
    ) -> IssuerDataResult:
        """Call ``POST /api/v2/in_app_provisioning/issuer_data``."""
        contract = self._call(
            lambda: build_issuer_data_request(self.configuration, tag_id, id_attribute),
            IssuerDataResponse,
        )
        return issuer_data_from_contract(contract)

    def fetch_passes(self, user_id: str | int) -> list[Pass]:
        """Call ``GET /api/v2/users/{user_id}/passes``."""
        contract = self._call(
            lambda: build_passes_request(self.configuration, user_id),
            PassesResponse,
        )
        return passes_from_contract(contract)

    def _call(
        self,
        build: Callable[[], ApiRequest],
        contract_type: type[ContractT],
    ) -> ContractT:
        try:
            api_request = build()
        except (ValueError, TypeError, ValidationError) as e:
            raise InvalidResponseError() from e

        status, raw = self._send(api_request)

        if not 200 <= status <= 299:
            message = self._parse_error_message(raw)
            logger.warning(
                "Pronto API %s %s returned %d: %s",
                api_request.method, api_request.url, status, message,
            )
            raise ServerError(status, message)

        try:
            return contract_type.model_validate_json(raw)
        except ValidationError as e:
            logger.debug("Undecodable %s body: %s", contract_type.__name__, e)
            raise InvalidResponseError() from None

    def _send(self, api_request: ApiRequest) -> tuple[int, bytes]:
        """Send the request and return ``(status, body)`` for any HTTP status."""
        logger.debug("Sending %s %s", api_request.method, api_request.url)
        try:
            with request.urlopen(api_request.to_urllib(), timeout=api_request.timeout) as resp:
                return self._status_of(resp), resp.read()
        except error.HTTPError as e:
            return e.code, self._read_http_error_body(e)
        except (error.URLError, OSError, http.client.HTTPException, ValueError) as e:
            # ValueError: socket rejected the timeout (e.g. negative) or the URL
            logger.warning("Pronto API %s %s failed: %s", api_request.method, api_request.url, e)
            raise NetworkError(e) from e

    @staticmethod
    def _status_of(resp) -> int:
        status = getattr(resp, "status", None)
        if status is None:
            status = resp.getcode()
        return int(status)

    @staticmethod
    def _read_http_error_body(exc: error.HTTPError) -> bytes:
        if exc.fp is None:
            return b""
        try:
            return exc.read()
        except (OSError, http.client.HTTPException):
            return b""

    @staticmethod
    def _parse_error_message(raw: bytes) -> str | None:
        """Return ``error`` or ``message`` from an error body, if decodable."""
        if not raw:
            return None
        try:
            return ErrorResponse.model_validate_json(raw).surfaced_message()
        except ValidationError:
            return None
