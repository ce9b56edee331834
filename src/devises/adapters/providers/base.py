# src/devises/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for all exchange rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- devises.adapters.providers.currencylayer (CurrencyLayerProvider implements ExchangeProvider)
- devises.application.currency_repository (consumes the ExchangeProvider contract)

Files that this module USES:
- None (pure interface definition)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devises.adapters.providers.currencylayer import ExchangeResponse


class ExchangeProvider(ABC):
    @abstractmethod
    def request_exchange(self, codes: str) -> "ExchangeResponse":
        """Return the raw exchange response for a comma-separated list of currency codes."""
        raise NotImplementedError
