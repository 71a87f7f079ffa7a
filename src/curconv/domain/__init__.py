# src/curconv/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from curconv.domain.models import (
    ConversionResult,
    Freshness,
    RatePair,
    RateSet,
)
from curconv.domain.errors import (
    ConfigDirectoryError,
    ConfigParseError,
    ConfigReadError,
    ConfigRemoveError,
    ConfigWriteError,
    CredentialNotFoundError,
    CredentialStoreError,
    DomainError,
    ResponseDecodeError,
    ServiceError,
    ServiceErrorKind,
    TransportError,
)

__all__ = [
    "Freshness",
    "RateSet",
    "RatePair",
    "ConversionResult",
    "DomainError",
    "CredentialStoreError",
    "CredentialNotFoundError",
    "ConfigReadError",
    "ConfigWriteError",
    "ConfigRemoveError",
    "ConfigParseError",
    "ConfigDirectoryError",
    "TransportError",
    "ResponseDecodeError",
    "ServiceError",
    "ServiceErrorKind",
]
