# src/devises/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from devises.application.currency_repository import CurrencyRepository, SeedState

__all__ = [
    "CurrencyRepository",
    "SeedState",
]
