# src/devises/adapters/providers/currencylayer.py
"""
Currencylayer API Provider for Live Exchange Rates

This module implements a client for currencylayer-style "live" endpoints.
It parses the wire response with pydantic and maps transport failures to
ProviderUnavailableError. An unsuccessful but well-formed response is
returned as-is so the repository can decide what it means.

Files that USE this module:
- devises.app (builds the provider from settings)
- devises.application.currency_repository (consumes ExchangeResponse)
- tests.test_providers (unit tests)

Files that this module USES:
- devises.adapters.providers.base (ExchangeProvider interface)
- devises.config (settings for API configuration)
- devises.domain.errors (ProviderUnavailableError)
- devises.shared.validators (normalize_currency_codes)
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from devises.adapters.providers.base import ExchangeProvider
from devises.config import settings
from devises.domain.errors import ProviderUnavailableError
from devises.shared.validators import normalize_currency_codes

log = logging.getLogger(__name__)


class ExchangeApiError(BaseModel):
    """Error object returned by the API when success is false."""
    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = None
    type: Optional[str] = None
    info: Optional[str] = None


class ExchangeResponse(BaseModel):
    """
    Live exchange response as sent on the wire.

    The API names the rate mapping "quotes"; it is exposed as ``rates``.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    success: bool
    rates: Dict[str, float] = Field(default_factory=dict, alias="quotes")
    source: Optional[str] = None
    timestamp: Optional[int] = None
    error: Optional[ExchangeApiError] = None


class CurrencyLayerProvider(ExchangeProvider):
    def __init__(
        self,
        access_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the live exchange API provider.

        Args:
            access_key: Optional API access key (defaults to settings.exchange_api_key)
            base_url: Optional live endpoint URL (defaults to settings.live_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)

        Raises:
            ValueError: If the access key is missing or empty
        """
        self.access_key = access_key or settings.exchange_api_key
        if not self.access_key:
            raise ValueError("Exchange API access key not configured (EXCHANGE_API_KEY).")
        self.url = base_url or settings.live_url
        self.timeout = timeout or settings.http_timeout_seconds

    def _redact(self, error: Exception) -> str:
        """Render an error without the access key requests puts in the URL."""
        return str(error).replace(self.access_key, "***")

    def request_exchange(self, codes: str) -> ExchangeResponse:
        """
        Fetch live rates for the given currencies.

        Args:
            codes: Comma-separated currency codes (e.g. "USD,EUR")

        Returns:
            Parsed ExchangeResponse; ``success`` may be False

        Raises:
            ValueError: If codes is empty or malformed
            ProviderUnavailableError: On network, HTTP, JSON or schema errors
        """
        currencies = normalize_currency_codes(codes)
        params = {"access_key": self.access_key, "currencies": currencies, "format": 1}

        try:
            log.info("Fetching live rates for %s", currencies)
            resp = requests.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Exchange API timeout after %d seconds", self.timeout)
            raise ProviderUnavailableError(f"Exchange API timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            log.error("Exchange API HTTP error %s: %s", status, self._redact(e))
            raise ProviderUnavailableError(f"Exchange API HTTP error {status}") from e
        except requests.exceptions.RequestException as e:
            reason = self._redact(e)
            log.warning("Exchange API request failed (network/connection error): %s", reason)
            raise ProviderUnavailableError(f"Exchange API request failed: {reason}") from e

        try:
            data = resp.json()
        except ValueError as e:
            log.error("Exchange API returned invalid JSON: %s", e)
            raise ProviderUnavailableError(f"Exchange API returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            log.error("Exchange API returned non-dict JSON: %s", type(data).__name__)
            raise ProviderUnavailableError("Exchange API returned non-dict JSON")

        try:
            response = ExchangeResponse.model_validate(data)
        except ValidationError as e:
            log.error("Exchange API unexpected schema: %s", data)
            raise ProviderUnavailableError(f"Exchange API schema error: {e}") from e

        if response.success:
            log.info("Received %d quotes (source=%s)", len(response.rates), response.source)
        else:
            log.warning("Exchange API reported failure: %s", response.error)
        return response
