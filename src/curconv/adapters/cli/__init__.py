# src/curconv/adapters/cli/__init__.py
"""
CLI Adapters - Interactive Terminal Input

This package contains the line reader that drives the command dispatcher.
"""

from curconv.adapters.cli.input_loop import command_loop, split_line, stdin_lines

__all__ = [
    "command_loop",
    "split_line",
    "stdin_lines",
]
