# src/devises/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the ExchangeProvider contract.
"""

from devises.adapters.providers.base import ExchangeProvider
from devises.adapters.providers.currencylayer import (
    CurrencyLayerProvider,
    ExchangeApiError,
    ExchangeResponse,
)

__all__ = [
    "ExchangeProvider",
    "CurrencyLayerProvider",
    "ExchangeApiError",
    "ExchangeResponse",
]
