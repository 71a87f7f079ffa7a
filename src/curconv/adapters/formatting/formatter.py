# src/curconv/adapters/formatting/formatter.py
"""
Output Formatter - Text Formatting and Presentation

This module renders command results and the help screen as plain text
for the terminal.

Files that USE this module:
- curconv.application.commands (all formatter functions for command output)
- tests.test_formatter (unit tests)

Files that this module USES:
- curconv.domain.models (payloads to render)
- curconv.shared.number_format (compact float rendering)
"""
from __future__ import annotations

from typing import List

from curconv.domain.models import ConversionResult, Freshness, RatePair, RateSet
from curconv.shared.number_format import compact

HELP_LINES = [
    "==== Help ====",
    "Available commands:",
    "help - Get a list of commands",
    "all [BASE_CURRENCY] - Get all exchange rates for base currency (default is {default_base})",
    "rate [CURRENCY_1] [CURRENCY_2] - Get the exchange rate between two currencies",
    "convert [CURRENCY_FROM] [CURRENCY_TO] [AMOUNT] - Convert an amount from one currency to another",
    "key [view/set/remove] [API_KEY] - View, set, or remove the API key",
    "exit - Exit the program",
    "==============",
]


def format_number(value: float) -> str:
    """
    Format a float for display.

    Integral values drop their trailing ".0"; everything else keeps its
    shortest exact representation without exponent notation.
    """
    return compact(value)


def format_help(default_base: str = "USD") -> str:
    return "\n".join(line.format(default_base=default_base) for line in HELP_LINES)


def format_freshness(freshness: Freshness) -> str:
    """
    Format the update window reported with a result.

    Args:
        freshness: Timestamps copied from the API response

    Returns:
        Two lines with the last and next update times
    """
    return (
        f"Last updated: {freshness.last_update_utc}\n"
        f"Next update: {freshness.next_update_utc}"
    )


def format_rate_set(rate_set: RateSet) -> str:
    """
    Format a full rate table, one currency per line, sorted by code.

    Args:
        rate_set: Rates relative to rate_set.base_code

    Returns:
        Header line followed by "CODE: rate" lines
    """
    lines: List[str] = [f"Exchange rates for {rate_set.base_code}:"]
    for code in sorted(rate_set.rates):
        lines.append(f"{code}: {format_number(rate_set.rates[code])}")
    return "\n".join(lines)


def format_rate_pair(pair: RatePair) -> str:
    return (
        f"Exchange rate from {pair.base_code} to {pair.target_code}: "
        f"{format_number(pair.rate)}"
    )


def format_conversion(amount: float, conversion: ConversionResult) -> str:
    """
    Format a conversion result.

    Args:
        amount: Amount the user asked to convert
        conversion: Result returned by the service

    Returns:
        Result line followed by the rate used
    """
    return (
        f"{format_number(amount)} {conversion.base_code} is equal to "
        f"{format_number(conversion.result)} {conversion.target_code}.\n"
        f"Exchange rate used: {format_number(conversion.rate)}"
    )
