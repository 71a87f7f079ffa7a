# src/curconv/adapters/providers/exchangerate_api.py
"""
exchangerate-api.com v6 Provider

This module implements the client for the three v6 endpoints used by the CLI:

- ``GET {base}/{key}/latest/{base_currency}``
- ``GET {base}/{key}/pair/{from}/{to}``
- ``GET {base}/{key}/pair/{from}/{to}/{amount}``

The API key is loaded from the credential store before every request.
Non-success responses are classified into ServiceError kinds; network
failures and malformed success bodies raise TransportError. Nothing is
retried or cached.

Files that USE this module:
- curconv.app (builds the provider)
- tests.test_providers (unit tests)
- tests.test_integration (live tests)

Files that this module USES:
- curconv.adapters.providers.base (ExchangeRateProvider interface)
- curconv.adapters.providers.schemas (response decoding)
- curconv.config (settings for API configuration)
- curconv.domain.errors (error taxonomy)
- curconv.shared.number_format (amount path segment)
"""
import logging
from typing import Optional, Protocol, Type, TypeVar

import requests
from pydantic import ValidationError

from curconv.adapters.providers.base import ExchangeRateProvider
from curconv.adapters.providers.schemas import (
    ConversionResponse,
    ErrorEnvelope,
    MultiRateResponse,
    PairRateResponse,
)
from curconv.config import settings
from curconv.domain.errors import (
    ResponseDecodeError,
    ServiceError,
    ServiceErrorKind,
    TransportError,
)
from curconv.domain.models import ConversionResult, RatePair, RateSet
from curconv.shared.number_format import compact
from curconv.shared.validators import mask_api_key

log = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", MultiRateResponse, PairRateResponse, ConversionResponse)


class CredentialSource(Protocol):
    def load(self) -> str:
        ...


def format_amount(amount: float) -> str:
    """
    Render an amount as a URL path segment.

    Starts from the shortest round-trip representation of the float and
    writes it positionally, so no significant digit is dropped and no
    exponent appears (0.00025 -> "0.00025", 3.262352345433245e11 ->
    "326235234543.3245", 1e-07 -> "0.0000001"). Integral amounts carry no
    fractional part (100.0 -> "100").
    """
    return compact(amount)


def classify_error(resp: requests.Response) -> ServiceError:
    """
    Turn a non-success response into a ServiceError.

    An unreadable or schema-violating body is UNKNOWN_ERROR, as is any
    ``error-type`` outside the known set.
    """
    try:
        envelope = ErrorEnvelope.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        log.warning("Unreadable error body (HTTP %d): %s", resp.status_code, e)
        return ServiceError(ServiceErrorKind.UNKNOWN_ERROR)

    kind = ServiceErrorKind.from_error_type(envelope.error_type)
    log.warning(
        "exchangerate-api error (HTTP %d): error-type=%s -> %s",
        resp.status_code, envelope.error_type, kind.name,
    )
    return ServiceError(kind, envelope.error_type)


class ExchangeRateApiProvider(ExchangeRateProvider):
    """
    Client for the exchangerate-api.com v6 endpoints.

    Every public call loads the API key, issues exactly one GET, and either
    returns a domain model or raises.
    """

    def __init__(
        self,
        credential_store: CredentialSource,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize exchangerate-api provider.

        Args:
            credential_store: Object whose load() returns the current API key
            base_url: Optional custom API URL (defaults to settings.api_base_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.credential_store = credential_store
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_all_rates(self, base_currency: str) -> RateSet:
        """
        Get all exchange rates for a base currency.

        Returns:
            RateSet with every currency the service reports

        Raises:
            CredentialStoreError: If the API key cannot be loaded
            ServiceError: If the service rejects the request
            TransportError: On network failure or a malformed success body
        """
        payload = self._get(MultiRateResponse, "latest", base_currency)
        return payload.to_domain()

    def fetch_rate(self, from_code: str, to_code: str) -> RatePair:
        """
        Get the exchange rate between two currencies.

        Raises:
            CredentialStoreError: If the API key cannot be loaded
            ServiceError: If the service rejects the request
            TransportError: On network failure or a malformed success body
        """
        payload = self._get(PairRateResponse, "pair", from_code, to_code)
        return payload.to_domain()

    def convert(self, from_code: str, to_code: str, amount: float) -> ConversionResult:
        """
        Convert an amount from one currency to another.

        Raises:
            CredentialStoreError: If the API key cannot be loaded
            ServiceError: If the service rejects the request
            TransportError: On network failure or a malformed success body
        """
        payload = self._get(
            ConversionResponse, "pair", from_code, to_code, format_amount(amount)
        )
        return payload.to_domain()

    def _url(self, api_key: str, *segments: str) -> str:
        return "/".join([self.base_url, api_key, *segments])

    def _get(self, schema: Type[SchemaT], *segments: str) -> SchemaT:
        """Load the key, GET the endpoint, and decode the body into ``schema``."""
        api_key = self.credential_store.load()
        url = self._url(api_key, *segments)
        safe_url = self._url(mask_api_key(api_key), *segments)

        try:
            log.info("GET %s", safe_url)
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.error("exchangerate-api timeout after %d seconds", self.timeout)
            raise TransportError(f"exchangerate-api timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            # Exception text may contain the full URL
            log.error("exchangerate-api request failed: %s", type(e).__name__)
            raise TransportError(f"exchangerate-api request failed: {type(e).__name__}") from e

        if not 200 <= resp.status_code < 300:
            raise classify_error(resp)

        try:
            data = resp.json()
        except ValueError as e:
            log.error("exchangerate-api returned invalid JSON: %s", e)
            raise ResponseDecodeError(f"exchangerate-api returned invalid JSON: {e}") from e

        try:
            payload = schema.model_validate(data)
        except ValidationError as e:
            log.error("exchangerate-api unexpected schema for %s: %s", schema.__name__, e)
            raise ResponseDecodeError(
                f"exchangerate-api response does not match {schema.__name__}: "
                f"{e.error_count()} error(s)"
            ) from e

        log.debug("exchangerate-api %s decoded for %s", schema.__name__, safe_url)
        return payload
