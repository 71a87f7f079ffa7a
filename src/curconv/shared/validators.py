# src/curconv/shared/validators.py
"""
Input Validation Utilities

Validates user-supplied command arguments before they reach the client.
Currency codes are not validated here; the remote service decides which
codes it supports.

Files that USE this module:
- curconv.application.commands (amount parsing, key validation)

Files that this module USES:
- None (pure utility functions)
"""
import math
from typing import Optional


def parse_amount(value: str) -> Optional[float]:
    """
    Parse an amount argument.

    Args:
        value: Raw token typed by the user

    Returns:
        The amount as float, or None if it is not a finite number
    """
    if not value:
        return None

    try:
        amount = float(value)
    except ValueError:
        return None

    if not math.isfinite(amount):
        return None
    return amount


def validate_api_key(api_key: str) -> bool:
    """
    Validate API key format.

    The key becomes a URL path segment, so it must be non-empty and
    contain no whitespace or slashes.

    Args:
        api_key: API key to validate

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return not any(ch.isspace() or ch == "/" for ch in api_key)


def mask_api_key(api_key: str) -> str:
    """Return the key with all but its last four characters hidden."""
    if len(api_key) <= 4:
        return "*" * len(api_key)
    return "*" * (len(api_key) - 4) + api_key[-4:]
