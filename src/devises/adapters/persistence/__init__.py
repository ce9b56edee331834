# src/devises/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for persisting data:
- The CurrencyStore contract and its SQLite implementation
- The bundled reference currency dataset
"""

from devises.adapters.persistence.base import CurrencyRecord, CurrencyStore
from devises.adapters.persistence.seed_data import load_reference_currencies
from devises.adapters.persistence.sqlite_store import SQLiteCurrencyStore

__all__ = [
    "CurrencyRecord",
    "CurrencyStore",
    "SQLiteCurrencyStore",
    "load_reference_currencies",
]
