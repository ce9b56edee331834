# src/devises/application/currency_repository.py
"""
Currency Repository - Orchestration of the Local Store and the Exchange API

This module contains the repository the presentation layer talks to. It
seeds the local store once from the reference dataset, reads the currency
list from the store and fetches live rates from the exchange provider,
turning persisted and wire records into domain objects.

Blocking store and provider calls run in an executor; their results are
delivered on the event loop that awaits them.

Files that USE this module:
- devises.app (composition root builds one repository per process)
- tests.test_currency_repository (unit tests)

Files that this module USES:
- devises.adapters.persistence.base (CurrencyStore contract, CurrencyRecord)
- devises.adapters.persistence.seed_data (reference dataset)
- devises.adapters.providers.base (ExchangeProvider contract)
- devises.domain.models (Currency, AvailableExchange)
- devises.domain.errors (RemoteExchangeError, SeedPopulationError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import asyncio  # Event loop, executor dispatch and initialization lock
import logging  # Seeding and request logging
from concurrent.futures import Executor  # Optional injected worker pool
from enum import Enum  # Seed state machine
from functools import partial  # Bind arguments for executor calls
from typing import Callable, List, Optional, Sequence, TypeVar  # Type hints

from devises.adapters.persistence.base import CurrencyRecord, CurrencyStore
from devises.adapters.persistence.seed_data import load_reference_currencies
from devises.adapters.providers.base import ExchangeProvider
from devises.adapters.providers.currencylayer import ExchangeResponse
from devises.domain.errors import RemoteExchangeError, SeedPopulationError
from devises.domain.models import AvailableExchange, Currency

log = logging.getLogger(__name__)

T = TypeVar("T")


class SeedState(str, Enum):
    """Progress of the one-time seeding of the local store."""
    NOT_CHECKED = "not_checked"
    CHECKING = "checking"
    POPULATING = "populating"
    POPULATED = "populated"
    ALREADY_POPULATED = "already_populated"
    FAILED = "failed"


class CurrencyRepository:
    """
    Data access for the currency list and live exchange rates.

    Call ``await initialize()`` once after construction; reads await it as
    well, so no read observes the store before the seed decision is made.
    """

    def __init__(
        self,
        store: CurrencyStore,
        provider: ExchangeProvider,
        reference_loader: Callable[[], Sequence[CurrencyRecord]] = load_reference_currencies,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize the repository.

        Args:
            store: Local currency store
            provider: Remote exchange provider
            reference_loader: Returns the records used to seed an empty store
            executor: Optional worker pool for blocking calls (defaults to the
                      event loop's default executor)
        """
        self.store = store
        self.provider = provider
        self.reference_loader = reference_loader
        self.executor = executor
        self.seed_error: Optional[SeedPopulationError] = None
        self._seed_state = SeedState.NOT_CHECKED
        self._init_lock = asyncio.Lock()
        self._pending_write: Optional[asyncio.Future] = None

    @property
    def seed_state(self) -> SeedState:
        return self._seed_state

    async def _run(self, func: Callable[..., T], *args) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, partial(func, *args))

    async def initialize(self) -> None:
        """
        Seed the local store if it is empty.

        Runs once; later or concurrent calls wait for the first run and
        return without repeating it. A failed insert is logged and not
        retried. Errors from the row count query propagate and leave the
        repository unchecked so a later call can try again.
        Cancelling the caller while the seed rows are being written does not
        stop the write; the next call waits for it to finish.
        """
        async with self._init_lock:
            if self._pending_write is not None:
                await asyncio.wait([self._pending_write])
                return
            if self._seed_state is not SeedState.NOT_CHECKED:
                return

            self._seed_state = SeedState.CHECKING
            try:
                total = await self._run(self.store.row_count)
            except BaseException:
                self._seed_state = SeedState.NOT_CHECKED
                raise

            if total != 0:
                log.info("Currency store has already been populated (%d rows)", total)
                self._seed_state = SeedState.ALREADY_POPULATED
                return

            self._seed_state = SeedState.POPULATING
            await self._populate()

    async def _populate(self) -> None:
        try:
            records = list(self.reference_loader())
        except Exception as e:
            self._seed_failed(e)
            return

        loop = asyncio.get_running_loop()
        write = loop.run_in_executor(self.executor, partial(self.store.insert_all, records))
        write.add_done_callback(partial(self._settle_write, len(records)))
        self._pending_write = write
        # wait() leaves the write running if this task is cancelled
        await asyncio.wait([write])

    def _settle_write(self, total: int, write: asyncio.Future) -> None:
        self._pending_write = None
        if write.cancelled():
            self._seed_failed(asyncio.CancelledError("seed write cancelled"))
        elif write.exception() is not None:
            self._seed_failed(write.exception())
        else:
            log.info("Currency store has been populated with %d currencies", total)
            self._seed_state = SeedState.POPULATED

    def _seed_failed(self, error: BaseException) -> None:
        log.error("Currency store has not been populated: %s", error, exc_info=error)
        self.seed_error = SeedPopulationError(str(error))
        self._seed_state = SeedState.FAILED

    async def get_currency_list(self) -> List[Currency]:
        """
        Read every currency from the local store.

        Returns:
            Currencies in store order
        """
        await self.initialize()
        rows = await self._run(self.store.all_rows)
        return self._to_currencies(rows)

    async def get_available_exchange(self, currency_codes: str) -> AvailableExchange:
        """
        Fetch live rates for a comma-separated list of currency codes.

        Args:
            currency_codes: Codes in the format the provider expects (e.g. "USD,EUR")

        Returns:
            AvailableExchange holding the rates exactly as received

        Raises:
            RemoteExchangeError: If the API reports an unsuccessful response
        """
        response = await self._run(self.provider.request_exchange, currency_codes)
        if not response.success:
            code = response.error.code if response.error else None
            info = response.error.info if response.error else None
            log.error("Exchange request for %s failed (code=%s, info=%s)", currency_codes, code, info)
            raise RemoteExchangeError(code=code, info=info)
        return self._to_exchange(response)

    @staticmethod
    def _to_currencies(rows: Sequence[CurrencyRecord]) -> List[Currency]:
        return [Currency(code=row.code, name=row.name) for row in rows]

    @staticmethod
    def _to_exchange(response: ExchangeResponse) -> AvailableExchange:
        return AvailableExchange(rates=response.rates)
