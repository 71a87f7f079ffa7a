# src/curconv/application/__init__.py
"""
Application Layer - Use Cases

This package contains the async rates service and the command dispatcher.
"""

from curconv.application.commands import Command, CommandDispatcher, match_command
from curconv.application.rates_service import RatesService

__all__ = [
    "Command",
    "CommandDispatcher",
    "RatesService",
    "match_command",
]
