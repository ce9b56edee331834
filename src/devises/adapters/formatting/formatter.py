# src/devises/adapters/formatting/formatter.py
"""
Output Formatter - Text Formatting and Presentation

This module renders currencies and exchange rates as plain text for the
command line entry point.

Files that USE this module:
- devises.app (prints command results)
- tests.test_formatter (unit tests)

Files that this module USES:
- devises.domain.models (Currency, AvailableExchange)
"""
from __future__ import annotations

from typing import Sequence

from devises.domain.models import AvailableExchange, Currency


def format_currency_list(currencies: Sequence[Currency]) -> str:
    """
    Format currencies one per line as "CODE  Name".

    Args:
        currencies: Currencies to format, in display order

    Returns:
        Formatted text, or a notice when the list is empty
    """
    if not currencies:
        return "No currencies available"
    width = max(len(currency.code) for currency in currencies)
    return "\n".join(f"{currency.code.ljust(width)}  {currency.name}" for currency in currencies)


def format_exchange(exchange: AvailableExchange, decimals: int = 4) -> str:
    """
    Format exchange rates one per line as "CODE = rate".

    Args:
        exchange: Rates to format (kept in API order)
        decimals: Number of decimal places (default: 4)

    Returns:
        Formatted text, or a notice when there are no rates
    """
    if not exchange.rates:
        return "No rates available"
    width = max(len(code) for code in exchange.rates)
    return "\n".join(
        f"{code.ljust(width)} = {rate:.{decimals}f}" for code, rate in exchange.rates.items()
    )
