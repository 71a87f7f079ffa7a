# src/curconv/application/rates_service.py
"""
Rates Service - Async Facade over the Exchange Rate Provider

The provider performs blocking HTTP calls. This service runs each call on
a daemon worker thread and awaits its result, so the command loop only
suspends while a request is in flight and an interrupt never waits for
the request to finish. It adds no caching, retries or error handling:
every exception from the provider reaches the caller unchanged.

Files that USE this module:
- curconv.application.commands (CommandDispatcher awaits these methods)
- curconv.app (wires the provider into the service)
- tests.test_rates_service (unit tests)

Files that this module USES:
- curconv.adapters.providers.base (ExchangeRateProvider interface)
- curconv.domain.models (return types)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import asyncio  # Bridge between worker threads and the event loop
import logging
import threading  # Daemon worker per provider call
from functools import partial  # Bind provider call arguments
from typing import Callable, TypeVar

from curconv.adapters.providers.base import ExchangeRateProvider
from curconv.domain.models import ConversionResult, RatePair, RateSet

log = logging.getLogger(__name__)

T = TypeVar("T")


def _set_result(future: asyncio.Future, result) -> None:
    if not future.done():
        future.set_result(result)


def _set_exception(future: asyncio.Future, error: BaseException) -> None:
    if not future.done():
        future.set_exception(error)


class RatesService:
    """High-level service used by the command dispatcher."""

    def __init__(self, provider: ExchangeRateProvider):
        """
        Initialize rates service with a provider.

        Args:
            provider: ExchangeRateProvider instance (typically ExchangeRateApiProvider)
        """
        self.provider = provider

    async def _run(self, call: Callable[[], T]) -> T:
        """
        Run ``call`` on a daemon thread and await its outcome.

        The thread is never joined: if the awaiting task is cancelled the
        result is dropped and the thread cannot delay process exit.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def worker() -> None:
            try:
                result = call()
            except Exception as e:
                outcome = (_set_exception, e)
            else:
                outcome = (_set_result, result)
            try:
                loop.call_soon_threadsafe(outcome[0], future, outcome[1])
            except RuntimeError:
                # Loop already closed after an interrupt
                log.debug("Dropping provider result after event loop shutdown")

        threading.Thread(target=worker, name="provider-call", daemon=True).start()
        return await future

    async def all_rates(self, base_currency: str) -> RateSet:
        """Get every rate relative to ``base_currency``."""
        log.debug("Requesting all rates for %s", base_currency)
        return await self._run(partial(self.provider.fetch_all_rates, base_currency))

    async def rate(self, from_code: str, to_code: str) -> RatePair:
        """Get the rate from ``from_code`` to ``to_code``."""
        log.debug("Requesting rate %s -> %s", from_code, to_code)
        return await self._run(partial(self.provider.fetch_rate, from_code, to_code))

    async def convert(self, from_code: str, to_code: str, amount: float) -> ConversionResult:
        """Convert ``amount`` from ``from_code`` to ``to_code``."""
        log.debug("Requesting conversion of %s %s -> %s", amount, from_code, to_code)
        return await self._run(partial(self.provider.convert, from_code, to_code, amount))
