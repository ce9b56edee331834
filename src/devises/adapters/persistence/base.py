# src/devises/adapters/persistence/base.py
"""
Base Store Interface for the Local Currency Store

This module defines the persisted currency record and the abstract base class
every local currency store must implement.

Files that USE this module:
- devises.adapters.persistence.sqlite_store (SQLiteCurrencyStore implements CurrencyStore)
- devises.adapters.persistence.seed_data (builds CurrencyRecord rows)
- devises.application.currency_repository (consumes the CurrencyStore contract)

Files that this module USES:
- None (pure interface definition)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class CurrencyRecord:
    """
    A currency row as persisted by the store.

    Attributes:
        code: Currency code
        name: Currency display name
        id: Storage identity, None until the row has been written
    """
    code: str
    name: str
    id: Optional[int] = None


class CurrencyStore(ABC):
    @abstractmethod
    def row_count(self) -> int:
        """Return the number of stored currency rows."""
        raise NotImplementedError

    @abstractmethod
    def all_rows(self) -> List[CurrencyRecord]:
        """Return every stored row in store order."""
        raise NotImplementedError

    @abstractmethod
    def insert_all(self, records: Sequence[CurrencyRecord]) -> None:
        """Insert all records in one operation; either all rows are written or none."""
        raise NotImplementedError
