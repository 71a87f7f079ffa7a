# src/curconv/adapters/cli/input_loop.py
"""
Input Loop - Line-oriented Command Reader

Reads lines, splits them into a command token and arguments, and forwards
them to the CommandDispatcher until input ends or the dispatcher asks to
stop.

Standard input is read by a daemon thread that hands lines to the event
loop through an asyncio.Queue, so a blocked read never keeps the process
alive after an interrupt.

Files that USE this module:
- curconv.app (runs command_loop over stdin_lines)
- tests.test_input_loop (unit tests)

Files that this module USES:
- curconv.application.commands (CommandDispatcher)
"""
from __future__ import annotations

import asyncio
import logging
import sys
import threading
from typing import AsyncIterator, List, Optional, TextIO, Tuple

from curconv.application.commands import CommandDispatcher

logger = logging.getLogger(__name__)


def split_line(line: str) -> Optional[Tuple[str, List[str]]]:
    """
    Split an input line into command token and arguments.

    Returns:
        (token, args), or None for a blank line
    """
    parts = line.split()
    if not parts:
        return None
    return parts[0], parts[1:]


async def stdin_lines(stream: Optional[TextIO] = None) -> AsyncIterator[str]:
    """
    Yield lines from ``stream`` (defaults to sys.stdin) until end of input.

    Args:
        stream: Text stream to read from
    """
    stream = stream or sys.stdin
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def reader() -> None:
        try:
            for raw in stream:
                loop.call_soon_threadsafe(queue.put_nowait, raw)
        except (OSError, ValueError) as e:
            logger.error("Failed to read input: %s", e)
        finally:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, None)
            except RuntimeError:
                # Loop already closed during shutdown
                pass

    threading.Thread(target=reader, name="stdin-reader", daemon=True).start()

    while True:
        line = await queue.get()
        if line is None:
            return
        yield line


async def command_loop(dispatcher: CommandDispatcher, lines: AsyncIterator[str]) -> None:
    """
    Forward every non-blank line to the dispatcher.

    Returns when ``lines`` is exhausted or a command asks to exit.
    """
    async for line in lines:
        parsed = split_line(line)
        if parsed is None:
            continue

        token, args = parsed
        try:
            keep_running = await dispatcher.dispatch(token, args)
        except Exception:
            logger.exception("Command %r failed", token)
            dispatcher.out("Unexpected error. See the log for details.")
            continue

        if not keep_running:
            return

    logger.info("End of input reached")
