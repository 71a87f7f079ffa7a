# tests/test_input_loop.py
"""
Input Loop Tests - Unit Tests for Line Parsing and the Command Loop

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- curconv.adapters.cli.input_loop (split_line, command_loop, stdin_lines)
- unittest.mock (AsyncMock dispatcher)
- pytest-asyncio (coroutine tests)
"""
import io

import pytest  # Testing framework for writing and running tests

from unittest.mock import AsyncMock, Mock  # Mock dispatcher

from curconv.adapters.cli.input_loop import command_loop, split_line, stdin_lines


async def feed(*lines):
    for line in lines:
        yield line


def make_dispatcher(results=None):
    dispatcher = Mock()
    dispatcher.dispatch = AsyncMock(return_value=True)
    if results is not None:
        dispatcher.dispatch.side_effect = results
    dispatcher.out = Mock()
    return dispatcher


class TestSplitLine:
    def test_command_and_args(self):
        assert split_line("convert USD EUR 100\n") == ("convert", ["USD", "EUR", "100"])

    def test_collapses_whitespace(self):
        assert split_line("  rate\tUSD    EUR  ") == ("rate", ["USD", "EUR"])

    def test_no_args(self):
        assert split_line("help\n") == ("help", [])

    def test_blank(self):
        assert split_line("") is None
        assert split_line("   \n") is None


class TestCommandLoop:
    @pytest.mark.asyncio
    async def test_forwards_lines_and_skips_blanks(self):
        dispatcher = make_dispatcher()

        await command_loop(dispatcher, feed("help\n", "\n", "rate USD EUR\n"))

        assert [c.args for c in dispatcher.dispatch.await_args_list] == [
            ("help", []),
            ("rate", ["USD", "EUR"]),
        ]

    @pytest.mark.asyncio
    async def test_stops_when_dispatcher_says_so(self):
        dispatcher = make_dispatcher([True, False, True])

        await command_loop(dispatcher, feed("help\n", "exit\n", "help\n"))

        assert dispatcher.dispatch.await_count == 2

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_loop_alive(self):
        dispatcher = make_dispatcher([RuntimeError("bug"), True])

        await command_loop(dispatcher, feed("all\n", "help\n"))

        assert dispatcher.dispatch.await_count == 2
        dispatcher.out.assert_called_once_with("Unexpected error. See the log for details.")


class TestStdinLines:
    @pytest.mark.asyncio
    async def test_reads_until_eof(self):
        stream = io.StringIO("help\nrate USD EUR\n")

        lines = [line async for line in stdin_lines(stream)]

        assert lines == ["help\n", "rate USD EUR\n"]

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        lines = [line async for line in stdin_lines(io.StringIO(""))]
        assert lines == []
