# src/devises/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors.
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class SeedPopulationError(DomainError):
    """Raised when the reference dataset could not be written to the local store."""
    pass


class ProviderUnavailableError(DomainError):
    """Raised when the exchange provider could not produce a response."""
    pass


class RemoteExchangeError(DomainError):
    """
    Raised when the exchange API answers with an unsuccessful response.

    Attributes:
        code: Error code reported by the API, if any
        info: Human readable detail reported by the API, if any
    """

    MESSAGE = "CurrencyRepository -> on Error occurred"

    def __init__(self, code: Optional[int] = None, info: Optional[str] = None):
        super().__init__(self.MESSAGE)
        self.code = code
        self.info = info
