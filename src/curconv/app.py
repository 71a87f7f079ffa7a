# src/curconv/app.py
"""
Application Entry Point - Wiring and Startup

This module serves as the composition root for the curconv CLI.
It wires all dependencies, starts the command loop, and stops as soon as
either the loop finishes or an interrupt (Ctrl+C) arrives.

Files that USE this module:
- curconv.__main__ (python -m curconv)
- the `curconv` console script

Files that this module USES:
- curconv.shared.logging_conf (setup_logging for logging configuration)
- curconv.config (settings for configuration management)
- curconv.adapters.persistence.credential_store (CredentialStore)
- curconv.adapters.providers.exchangerate_api (ExchangeRateApiProvider)
- curconv.application.rates_service (RatesService)
- curconv.application.commands (CommandDispatcher)
- curconv.adapters.cli.input_loop (command_loop, stdin_lines)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import asyncio  # Event loop, tasks and signal handling
import logging  # Standard library for logging messages and errors
import signal  # SIGINT constant for the interrupt task
import sys  # System-specific parameters and functions for exit codes
from typing import AsyncIterator, Optional

from curconv.shared.logging_conf import setup_logging  # Configure logging with file rotation
from curconv.config import settings  # Pydantic settings
from curconv.adapters.persistence.credential_store import CredentialStore  # API key storage
from curconv.adapters.providers.exchangerate_api import ExchangeRateApiProvider  # HTTP client
from curconv.application.rates_service import RatesService  # Async facade over the provider
from curconv.application.commands import CommandDispatcher  # Command routing and output
from curconv.adapters.cli.input_loop import command_loop, stdin_lines  # Line reader

logger = logging.getLogger(__name__)

BANNER = (
    "Welcome to the Currency Converter!\n"
    "This program uses www.exchangerate-api.com to get the latest exchange rates.\n"
    "Type help for a list of commands."
)


def build_dispatcher(store: Optional[CredentialStore] = None) -> CommandDispatcher:
    """
    Wire store, provider, service and dispatcher.

    Args:
        store: Optional credential store (defaults to one built from settings)

    Returns:
        Ready-to-use CommandDispatcher printing to stdout
    """
    store = store or CredentialStore()
    provider = ExchangeRateApiProvider(credential_store=store)
    service = RatesService(provider)
    return CommandDispatcher(service=service, store=store)


async def wait_for_interrupt() -> None:
    """Return when SIGINT is received."""
    loop = asyncio.get_running_loop()
    interrupted = asyncio.Event()
    try:
        loop.add_signal_handler(signal.SIGINT, interrupted.set)
    except (NotImplementedError, RuntimeError):
        # No loop signal support (e.g. Windows); KeyboardInterrupt handles Ctrl+C
        await asyncio.Future()
        return
    try:
        await interrupted.wait()
    finally:
        loop.remove_signal_handler(signal.SIGINT)


async def run(
    dispatcher: CommandDispatcher,
    lines: Optional[AsyncIterator[str]] = None,
) -> bool:
    """
    Run the command loop alongside the interrupt watcher.

    Args:
        dispatcher: Dispatcher that executes commands
        lines: Optional line source (defaults to standard input)

    Returns:
        True if stopped by an interrupt, False if the loop ended on its own
    """
    loop_task = asyncio.create_task(
        command_loop(dispatcher, lines if lines is not None else stdin_lines()),
        name="command-loop",
    )
    interrupt_task = asyncio.create_task(wait_for_interrupt(), name="interrupt")

    done, pending = await asyncio.wait(
        {loop_task, interrupt_task}, return_when=asyncio.FIRST_COMPLETED
    )
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)

    if loop_task in done:
        # Re-raise anything command_loop did not handle itself
        loop_task.result()
        return False
    return True


def main() -> None:
    """
    Initialize and start the interactive CLI.

    This function:
    1. Sets up logging from settings
    2. Wires the credential store, provider, service and dispatcher
    3. Prints the banner and runs until exit, end of input, or Ctrl+C
    """
    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger.info("Using API base URL %s", settings.api_base_url)

    dispatcher = build_dispatcher()
    print(BANNER)

    try:
        interrupted = asyncio.run(run(dispatcher))
    except KeyboardInterrupt:
        interrupted = True

    if interrupted:
        print("Exiting the program...")
    logger.info("Stopped (interrupted=%s)", interrupted)
    sys.exit(0)


if __name__ == "__main__":
    main()
