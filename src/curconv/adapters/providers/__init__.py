# src/curconv/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains the client for the exchangerate-api.com v6 service.
Providers implement the ExchangeRateProvider interface.
"""

from curconv.adapters.providers.base import ExchangeRateProvider
from curconv.adapters.providers.exchangerate_api import ExchangeRateApiProvider

__all__ = [
    "ExchangeRateProvider",
    "ExchangeRateApiProvider",
]
