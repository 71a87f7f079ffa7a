# src/curconv/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for exchange rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- curconv.adapters.providers.exchangerate_api (ExchangeRateApiProvider implements ExchangeRateProvider)
- curconv.application.rates_service (wraps an ExchangeRateProvider)

Files that this module USES:
- curconv.domain.models (return types)
"""
from abc import ABC, abstractmethod

from curconv.domain.models import ConversionResult, RatePair, RateSet


class ExchangeRateProvider(ABC):
    @abstractmethod
    def fetch_all_rates(self, base_currency: str) -> RateSet:
        """Return every rate relative to ``base_currency``."""
        raise NotImplementedError

    @abstractmethod
    def fetch_rate(self, from_code: str, to_code: str) -> RatePair:
        """Return the rate from ``from_code`` to ``to_code``."""
        raise NotImplementedError

    @abstractmethod
    def convert(self, from_code: str, to_code: str, amount: float) -> ConversionResult:
        """Convert ``amount`` of ``from_code`` into ``to_code``."""
        raise NotImplementedError
