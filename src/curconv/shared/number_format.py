# src/curconv/shared/number_format.py
"""
Number Rendering

Floats are rendered from their shortest round-trip representation and
written positionally, so no significant digit is lost and no exponent
appears.

Files that USE this module:
- curconv.adapters.providers.exchangerate_api (amount path segment)
- curconv.adapters.formatting.formatter (terminal output)
"""
from decimal import Decimal


def positional(value: float) -> str:
    """
    Write ``value`` without exponent notation.

    >>> positional(0.00025)
    '0.00025'
    >>> positional(326235234543.3245)
    '326235234543.3245'
    >>> positional(1e-07)
    '0.0000001'
    """
    return format(Decimal(repr(float(value))), "f")


def compact(value: float) -> str:
    """
    Write ``value`` positionally, dropping the ".0" of integral values.

    >>> compact(100.0)
    '100'
    >>> compact(0.00025)
    '0.00025'
    """
    text = positional(value)
    if text.endswith(".0"):
        return text[:-2]
    return text
