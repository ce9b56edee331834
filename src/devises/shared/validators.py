# src/devises/shared/validators.py
"""
Input Validation Utilities - Configuration and Request Validation

This module validates the API access key and the comma-separated currency
code lists passed to the exchange API.

Files that USE this module:
- devises.config.settings (uses validate_access_key in Settings field validators)
- devises.adapters.providers.currencylayer (normalizes currency code lists)
- devises.app (validates the rates command argument)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import List

_CODE_RE = re.compile(r"^[A-Za-z]{3}$")
_ACCESS_KEY_RE = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


def _split_codes(codes: str) -> List[str]:
    return [part.strip() for part in codes.split(",")]


def validate_currency_codes(codes: str) -> bool:
    """
    Validate a comma-separated list of three-letter currency codes.

    Args:
        codes: Codes to validate (e.g. "USD,EUR,GBP")

    Returns:
        True if valid, False otherwise
    """
    if not codes or not codes.strip():
        return False
    return all(_CODE_RE.match(part) for part in _split_codes(codes))


def normalize_currency_codes(codes: str) -> str:
    """
    Normalize a currency code list to upper case without whitespace.

    Args:
        codes: Codes to normalize (e.g. " usd, eur")

    Returns:
        Normalized list (e.g. "USD,EUR")

    Raises:
        ValueError: If the list is empty or contains an invalid code
    """
    if not validate_currency_codes(codes):
        raise ValueError(f"Invalid currency code list: {codes!r}")
    return ",".join(part.upper() for part in _split_codes(codes))


def validate_access_key(key: str) -> bool:
    """
    Validate API access key format.

    An empty key is accepted so the application can start without one;
    the provider refuses to run without it.

    Args:
        key: Access key to validate

    Returns:
        True if valid or empty, False otherwise
    """
    if not key:
        return True
    return bool(_ACCESS_KEY_RE.match(key))
