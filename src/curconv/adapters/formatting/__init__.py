# src/curconv/adapters/formatting/__init__.py
"""
Formatting Adapters - Terminal Output

This package renders domain payloads as plain text.
"""

from curconv.adapters.formatting.formatter import (
    format_conversion,
    format_freshness,
    format_help,
    format_number,
    format_rate_pair,
    format_rate_set,
)

__all__ = [
    "format_help",
    "format_number",
    "format_freshness",
    "format_rate_set",
    "format_rate_pair",
    "format_conversion",
]
