# src/devises/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from devises.shared.validators import (
    normalize_currency_codes,
    validate_access_key,
    validate_currency_codes,
)

__all__ = [
    "normalize_currency_codes",
    "validate_access_key",
    "validate_currency_codes",
]
