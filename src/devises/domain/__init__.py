# src/devises/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from devises.domain.models import AvailableExchange, Currency
from devises.domain.errors import (
    DomainError,
    ProviderUnavailableError,
    RemoteExchangeError,
    SeedPopulationError,
)

__all__ = [
    "Currency",
    "AvailableExchange",
    "DomainError",
    "ProviderUnavailableError",
    "RemoteExchangeError",
    "SeedPopulationError",
]
