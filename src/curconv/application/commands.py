# src/curconv/application/commands.py
"""
Command Dispatcher - Maps Typed Commands to Operations

This module turns a command token plus arguments into a call on the rates
service or the credential store and prints the outcome. It is the only
place where client and store errors become user-facing text.

Commands:
- help
- all | rates | list [BASE]
- rate FROM TO
- convert FROM TO AMOUNT
- key view | key set KEY | key remove
- exit

Files that USE this module:
- curconv.adapters.cli.input_loop (forwards parsed lines)
- curconv.app (builds the dispatcher)
- tests.test_commands (unit tests)

Files that this module USES:
- curconv.application.rates_service (RatesService for API calls)
- curconv.adapters.persistence.credential_store (key view/set/remove)
- curconv.adapters.formatting.formatter (output rendering)
- curconv.shared.validators (amount and key validation)
- curconv.config (default base currency)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from curconv.adapters.formatting.formatter import (
    format_conversion,
    format_freshness,
    format_help,
    format_number,
    format_rate_pair,
    format_rate_set,
)
from curconv.adapters.persistence.credential_store import CredentialStore
from curconv.application.rates_service import RatesService
from curconv.config import settings
from curconv.domain.errors import CredentialStoreError, ServiceError, TransportError
from curconv.shared.validators import parse_amount, validate_api_key

logger = logging.getLogger(__name__)

RequestFailure = (CredentialStoreError, ServiceError, TransportError)


class Command(Enum):
    HELP = "help"
    GET_ALL_RATES = "all"
    GET_RATE = "rate"
    CONVERT = "convert"
    KEY = "key"
    EXIT = "exit"


COMMAND_ALIASES = {
    "help": Command.HELP,
    "all": Command.GET_ALL_RATES,
    "rates": Command.GET_ALL_RATES,
    "list": Command.GET_ALL_RATES,
    "rate": Command.GET_RATE,
    "convert": Command.CONVERT,
    "key": Command.KEY,
    "exit": Command.EXIT,
}


def match_command(token: str) -> Optional[Command]:
    """Return the command for ``token``, or None if it is not recognized."""
    return COMMAND_ALIASES.get(token)


class CommandDispatcher:
    """Execute one command at a time and print its outcome."""

    def __init__(
        self,
        service: RatesService,
        store: CredentialStore,
        out: Callable[[str], None] = print,
        default_base: Optional[str] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            service: RatesService used for all API calls
            store: CredentialStore used by the key command
            out: Callable receiving each block of output text (defaults to print)
            default_base: Base currency for `all` without arguments
                (defaults to settings.default_base_currency)
        """
        self.service = service
        self.store = store
        self.out = out
        self.default_base = default_base or settings.default_base_currency

    async def dispatch(self, token: str, args: Sequence[str] = ()) -> bool:
        """
        Run a single command.

        Args:
            token: First word of the input line
            args: Remaining words

        Returns:
            False when the program should exit, True otherwise
        """
        command = match_command(token)
        logger.debug("Dispatching %r -> %s with %d arg(s)", token, command, len(args))

        if command is None:
            self.out("Command not recognized. Type help for a list of commands.")
        elif command is Command.HELP:
            self.out(format_help(self.default_base))
        elif command is Command.GET_ALL_RATES:
            await self._all_rates(args)
        elif command is Command.GET_RATE:
            await self._rate(args)
        elif command is Command.CONVERT:
            await self._convert(args)
        elif command is Command.KEY:
            self._key(args)
        elif command is Command.EXIT:
            self.out("Exiting the program...")
            return False
        return True

    async def _all_rates(self, args: Sequence[str]) -> None:
        if args:
            base_currency = args[0]
        else:
            base_currency = self.default_base
            self.out(
                f"Base currency not provided. Using {base_currency} as the base currency."
            )

        self.out(f"Getting all exchange rates for {base_currency}...")
        try:
            rate_set = await self.service.all_rates(base_currency)
        except RequestFailure as e:
            self.out(f"Error getting exchange rates: {e}")
            return

        self.out(format_rate_set(rate_set))
        self.out(format_freshness(rate_set.freshness))

    async def _rate(self, args: Sequence[str]) -> None:
        if len(args) != 2:
            self.out("Please provide two currencies to get the exchange rate between.")
            self.out("[Example: rate USD EUR]")
            return

        from_code, to_code = args
        self.out(f"Getting the exchange rate between {from_code} and {to_code}...")
        try:
            pair = await self.service.rate(from_code, to_code)
        except RequestFailure as e:
            self.out(f"Error getting exchange rate: {e}")
            return

        self.out(format_rate_pair(pair))
        self.out(format_freshness(pair.freshness))

    async def _convert(self, args: Sequence[str]) -> None:
        if len(args) < 3:
            self.out(
                "Please provide a currency to convert from, a currency to convert to, "
                "and an amount to convert."
            )
            self.out("[Example: convert USD EUR 100]")
            return

        from_code, to_code, raw_amount = args[0], args[1], args[2]
        amount = parse_amount(raw_amount)
        if amount is None:
            self.out("Invalid amount provided. Please provide a valid number.")
            return

        self.out(f"Converting {format_number(amount)} {from_code} to {to_code}...")
        try:
            conversion = await self.service.convert(from_code, to_code, amount)
        except RequestFailure as e:
            self.out(f"Error converting currency: {e}")
            return

        self.out(format_conversion(amount, conversion))
        self.out(format_freshness(conversion.freshness))

    def _key(self, args: Sequence[str]) -> None:
        if not args:
            self.out("Please provide a command to view, set, or remove the API key.")
            self.out("[Example: key view]")
            return

        action = args[0]
        if action == "view":
            try:
                self.out(f"API key: {self.store.load()}")
            except CredentialStoreError as e:
                self.out(f"Error reading API key: {e}")
        elif action == "set":
            if len(args) < 2:
                self.out("Please provide an API key to set.")
                self.out("[Example: key set YOUR_API_KEY]")
                return
            api_key = args[1]
            if not validate_api_key(api_key):
                self.out("Invalid API key format.")
                return
            try:
                self.store.save(api_key)
            except CredentialStoreError as e:
                self.out(f"Error setting API key: {e}")
                return
            self.out("API key set.")
        elif action == "remove":
            try:
                self.store.remove()
            except CredentialStoreError as e:
                self.out(f"Error removing API key: {e}")
                return
            self.out("API key removed.")
        else:
            self.out(
                "Command not recognized. Please provide a command to view, set, "
                "or remove the API key."
            )
            self.out("[Example: key view]")
