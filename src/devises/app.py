# src/devises/app.py
"""
Application Entry Point - Wiring and Command Line Interface

This module serves as the composition root for Devises.
It wires the store, the provider and the repository, and exposes the
``devises`` command.

Files that USE this module:
- pyproject.toml (``devises`` console script)
- tests.test_app (unit tests)

Files that this module USES:
- devises.shared.logging_conf (configure_from_settings for logging configuration)
- devises.config (settings for configuration management)
- devises.application.currency_repository (CurrencyRepository)
- devises.adapters.persistence.sqlite_store (SQLiteCurrencyStore)
- devises.adapters.providers.currencylayer (CurrencyLayerProvider)
- devises.adapters.formatting.formatter (text output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import asyncio  # Run the repository coroutines
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import List, Optional  # Type hints

from devises.shared.logging_conf import configure_from_settings  # Configure logging with file rotation
from devises.shared.validators import validate_currency_codes  # Check the rates argument early
from devises.config import settings  # Application settings
from devises.application.currency_repository import CurrencyRepository  # Data access orchestration
from devises.adapters.persistence.sqlite_store import SQLiteCurrencyStore  # Local currency store
from devises.adapters.providers.base import ExchangeProvider  # Provider contract
from devises.adapters.providers.currencylayer import CurrencyLayerProvider, ExchangeResponse  # Live exchange API client
from devises.adapters.formatting.formatter import format_currency_list, format_exchange  # Text output
from devises.domain.errors import ProviderUnavailableError, RemoteExchangeError  # Expected failures

log = logging.getLogger(__name__)

_repository: Optional[CurrencyRepository] = None


def get_repository() -> CurrencyRepository:
    """
    Return the process-wide repository, building it on first use.

    The provider is built lazily by the ``rates`` command path, so listing
    currencies works without an API key.
    """
    global _repository
    if _repository is None:
        store = SQLiteCurrencyStore(settings.database_path)
        _repository = CurrencyRepository(store=store, provider=_LazyProvider())
    return _repository


class _LazyProvider(ExchangeProvider):
    """Defers access key validation until the first request."""

    def __init__(self):
        self._delegate: Optional[CurrencyLayerProvider] = None

    def request_exchange(self, codes: str) -> ExchangeResponse:
        if self._delegate is None:
            self._delegate = CurrencyLayerProvider()
        return self._delegate.request_exchange(codes)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="devises", description="Currency list and live exchange rates")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("currencies", help="list the available currencies")
    rates = sub.add_parser("rates", help="fetch live rates for comma-separated currency codes")
    rates.add_argument("codes", help="e.g. USD,EUR,GBP")
    rates.add_argument("--decimals", type=int, default=4, help="decimal places (default: 4)")
    return parser


async def run_command(args: argparse.Namespace, repository: CurrencyRepository) -> int:
    """
    Execute a parsed command against the repository.

    Returns:
        Process exit code
    """
    await repository.initialize()

    if args.command == "currencies":
        currencies = await repository.get_currency_list()
        print(format_currency_list(currencies))
        return 0

    try:
        exchange = await repository.get_available_exchange(args.codes)
    except RemoteExchangeError as e:
        log.error("%s (code=%s, info=%s)", e, e.code, e.info)
        return 1
    except ProviderUnavailableError as e:
        log.error("Exchange provider unavailable: %s", e)
        return 1
    print(format_exchange(exchange, decimals=args.decimals))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parse arguments, set up logging and run the requested command.

    Exits with status 1 when the exchange request fails.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "rates" and not validate_currency_codes(args.codes):
        parser.error(f"invalid currency code list: {args.codes!r}")

    configure_from_settings(settings)

    try:
        code = asyncio.run(run_command(args, get_repository()))
    except ValueError as e:
        # Missing access key
        log.error("Configuration error: %s", e)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
