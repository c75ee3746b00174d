import asyncio
from contextlib import contextmanager

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from git_assistant.terminal import Key, TerminalKeyReader, normalize_key


class RecordingInput:
    """Stand-in for a terminal input that logs raw-mode and attach scopes."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.events = []
        self.closed = False

    @contextmanager
    def raw_mode(self):
        self.events.append("raw")
        try:
            yield
        finally:
            self.events.append("cooked")

    @contextmanager
    def attach(self, callback):
        self.events.append("attach")
        if self.keys:
            asyncio.get_running_loop().call_soon(callback)
        try:
            yield
        finally:
            self.events.append("detach")

    def read_keys(self):
        keys, self.keys = self.keys, []
        return [KeyPress(key) for key in keys]

    def flush_keys(self):
        return []


def test_normalize_key():
    assert normalize_key(Keys.Up) == Key.UP
    assert normalize_key(Keys.Down) == Key.DOWN
    assert normalize_key(Keys.Enter) == Key.RETURN
    assert normalize_key(Keys.ControlJ) == Key.RETURN
    assert normalize_key(Keys.ControlC) == Key.INTERRUPT
    assert normalize_key("q") == Key.OTHER
    assert normalize_key(Keys.Left) == Key.OTHER


def test_reader_delivers_keys_in_order():
    async def read_all(reader, count):
        return [await reader.read_key() for _ in range(count)]

    with create_pipe_input() as pipe:
        pipe.send_text("\x1b[B\x1b[A\rx\x03")
        reader = TerminalKeyReader(input=pipe)
        keys = asyncio.run(read_all(reader, 5))

    assert keys == [Key.DOWN, Key.UP, Key.RETURN, Key.OTHER, Key.INTERRUPT]


def test_closed_stdin_reads_as_interrupt():
    with create_pipe_input() as pipe:
        pipe.close()
        reader = TerminalKeyReader(input=pipe)
        key = asyncio.run(asyncio.wait_for(reader.read_key(), 2.0))

    assert key == Key.INTERRUPT


def test_lone_escape_is_delivered():
    with create_pipe_input() as pipe:
        pipe.send_text("\x1b")
        reader = TerminalKeyReader(input=pipe)
        key = asyncio.run(asyncio.wait_for(reader.read_key(), 2.0))

    assert key == Key.OTHER


def test_raw_mode_released_after_key():
    terminal = RecordingInput([Keys.ControlC])
    key = asyncio.run(TerminalKeyReader(input=terminal).read_key())
    assert key == Key.INTERRUPT
    assert terminal.events == ["raw", "attach", "detach", "cooked"]


def test_raw_mode_released_when_read_is_cancelled():
    terminal = RecordingInput()
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(asyncio.wait_for(TerminalKeyReader(input=terminal).read_key(), 0.2))
    assert terminal.events == ["raw", "attach", "detach", "cooked"]


def test_buffered_keys_skip_raw_mode():
    terminal = RecordingInput([Keys.Down, Keys.Up])
    reader = TerminalKeyReader(input=terminal)

    async def read_two():
        return [await reader.read_key(), await reader.read_key()]

    assert asyncio.run(read_two()) == [Key.DOWN, Key.UP]
    assert terminal.events.count("raw") == 1
    assert terminal.events[-1] == "cooked"
