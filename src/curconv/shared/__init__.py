# src/curconv/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from curconv.shared.validators import mask_api_key, parse_amount, validate_api_key

__all__ = [
    "parse_amount",
    "validate_api_key",
    "mask_api_key",
]
