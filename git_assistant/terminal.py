"""Terminal input for the menu loop: raw key presses and a line prompt."""

import asyncio
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, TextIO, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import DummyHistory
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from . import config
from .console import STYLE


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    RETURN = "return"
    INTERRUPT = "interrupt"
    OTHER = "other"


_KEY_MAP = {
    Keys.Up: Key.UP,
    Keys.Down: Key.DOWN,
    Keys.ControlM: Key.RETURN,
    Keys.ControlJ: Key.RETURN,
    Keys.ControlC: Key.INTERRUPT,
}

# Terminal replies and mouse reports that are not user key presses
_IGNORED_KEYS = {Keys.CPRResponse, Keys.Vt100MouseEvent, Keys.Ignore}


def normalize_key(key: Union[Keys, str]) -> Key:
    return _KEY_MAP.get(key, Key.OTHER)


class TerminalKeyReader:
    """Reads one key press at a time with the terminal in raw mode.

    Raw mode is held only while waiting for a key, so command output and the
    commit prompt run with the terminal in its normal state.
    """

    def __init__(self, stdin: Optional[TextIO] = None, input: Optional[Input] = None):
        self._input = input or create_input(stdin=stdin)
        self._pending: Deque[KeyPress] = deque()

    async def read_key(self) -> Key:
        """Return the next key; a closed stdin reads as an interrupt."""
        while not self._pending:
            if self._input.closed:
                return Key.INTERRUPT
            await self._wait_for_keys()
        return normalize_key(self._pending.popleft().key)

    async def _wait_for_keys(self) -> None:
        loop = asyncio.get_running_loop()
        ready = loop.create_future()
        flush_handle: Optional[asyncio.TimerHandle] = None

        def deliver(key_presses: List[KeyPress]) -> None:
            for key_press in key_presses:
                if key_press.key not in _IGNORED_KEYS:
                    self._pending.append(key_press)
            if (self._pending or self._input.closed) and not ready.done():
                ready.set_result(None)

        def flush() -> None:
            # The parser holds a lone Esc until more input or a flush arrives.
            deliver(self._input.flush_keys())

        def schedule_flush() -> None:
            nonlocal flush_handle
            if flush_handle is not None:
                flush_handle.cancel()
            flush_handle = loop.call_later(config.ESCAPE_FLUSH_TIMEOUT, flush)

        def keys_ready() -> None:
            deliver(self._input.read_keys())
            if not ready.done():
                schedule_flush()

        with self._input.raw_mode(), self._input.attach(keys_ready):
            schedule_flush()
            try:
                await ready
            finally:
                if flush_handle is not None:
                    flush_handle.cancel()


class TerminalLinePrompt:
    """Reads one line of free text, e.g. a commit message."""

    def __init__(self) -> None:
        self._session: Optional[PromptSession] = None

    async def ask(self, message: str) -> str:
        if self._session is None:
            # Commit messages are not kept between prompts.
            self._session = PromptSession(history=DummyHistory())
        return await self._session.prompt_async(FormattedText([("class:warning", message)]), style=STYLE)
