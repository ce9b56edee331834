# src/devises/adapters/formatting/__init__.py
"""
Formatting Adapters - Output Formatting

This package contains plain-text formatters for the command line.
"""

from devises.adapters.formatting.formatter import format_currency_list, format_exchange

__all__ = ["format_currency_list", "format_exchange"]
