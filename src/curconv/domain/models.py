# src/curconv/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the payloads returned by the exchange rate client:
- Freshness timestamps attached to every response
- Full rate tables for a base currency
- Single currency pair rates
- Amount conversions

Files that USE this module:
- curconv.adapters.providers.* (providers build these from API responses)
- curconv.adapters.formatting.formatter (renders them for the terminal)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from typing import Dict  # Type hints for mappings


@dataclass(frozen=True)
class Freshness:
    """
    Update window reported by the remote service.

    Values are copied verbatim from the response and never recomputed.

    Attributes:
        last_update_unix: Last data refresh (epoch seconds)
        last_update_utc: Last data refresh as sent by the service
        next_update_unix: Next scheduled refresh (epoch seconds)
        next_update_utc: Next scheduled refresh as sent by the service
    """
    last_update_unix: int
    last_update_utc: str
    next_update_unix: int
    next_update_utc: str


@dataclass(frozen=True)
class RateSet:
    """
    Every known rate relative to one base currency.

    Attributes:
        base_code: Base currency code (e.g. "USD")
        rates: Mapping of currency code to rate; keys are whatever the service sends
        freshness: Update window of this data
    """
    base_code: str
    freshness: Freshness
    rates: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RatePair:
    """Rate between two currencies (units of target per 1 base)."""
    base_code: str
    target_code: str
    rate: float
    freshness: Freshness


@dataclass(frozen=True)
class ConversionResult:
    """
    Amount converted from base to target currency.

    Attributes:
        base_code: Currency converted from
        target_code: Currency converted to
        rate: Rate the service applied
        result: Converted amount in the target currency
        freshness: Update window of the rate used
    """
    base_code: str
    target_code: str
    rate: float
    result: float
    freshness: Freshness
