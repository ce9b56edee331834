# src/devises/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currencies offered for conversion
- Exchange rates available for a set of currencies

Files that USE this module:
- devises.application.currency_repository (builds models from store and API records)
- devises.adapters.formatting.formatter (renders models as text)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from types import MappingProxyType  # Read-only view over a dict
from typing import Mapping  # Type hints for mappings


@dataclass(frozen=True)
class Currency:
    """
    A currency offered for conversion.

    Attributes:
        code: Currency code (e.g. "USD")
        name: Display name (e.g. "United States Dollar")
    """
    code: str
    name: str


@dataclass(frozen=True)
class AvailableExchange:
    """
    Exchange rates for a requested set of currencies.

    Attributes:
        rates: Mapping of currency code (or quote pair) to rate, relative to the
               API source currency
    """
    rates: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvailableExchange):
            return NotImplemented
        return dict(self.rates) == dict(other.rates)

    def __hash__(self) -> int:
        return hash(frozenset(self.rates.items()))
