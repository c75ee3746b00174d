"""Input loop that binds key presses to menu navigation and actions."""

import logging
from enum import Enum
from pathlib import Path
from typing import Awaitable, NoReturn, Optional, Protocol

from . import actions, config
from .console import Console
from .menu import MenuAction, MenuState, move_down, move_up, render
from .terminal import Key

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    MENU = "menu"
    PROMPT = "prompt"


class KeyReader(Protocol):
    def read_key(self) -> Awaitable[Key]:
        ...


class LinePrompt(Protocol):
    def ask(self, message: str) -> Awaitable[str]:
        ...


class InputLoop:
    """Owns the menu state and dispatches one input event at a time.

    In MENU mode key presses move the selection or run the selected action.
    While the commit action collects its message the loop is in PROMPT mode
    and no key presses are read until the line has been submitted.
    """

    def __init__(
        self,
        keys: KeyReader,
        prompt: LinePrompt,
        console: Console,
        cwd: Optional[Path] = None,
        state: Optional[MenuState] = None,
    ):
        self.keys = keys
        self.prompt = prompt
        self.console = console
        self.cwd = cwd
        self.state = state or MenuState()
        self.mode = Mode.MENU

    async def run(self) -> NoReturn:
        render(self.state, self.console)
        while True:
            key = await self.keys.read_key()
            await self.handle_key(key)

    async def handle_key(self, key: Key) -> None:
        if key == Key.INTERRUPT:
            self.quit()
        if key == Key.UP:
            self.state = move_up(self.state)
        elif key == Key.DOWN:
            self.state = move_down(self.state)
        elif key == Key.RETURN:
            await self.invoke(self.state.selected)
        else:
            return
        render(self.state, self.console)

    async def invoke(self, action: MenuAction) -> None:
        logger.debug("selected %s", action.name)
        try:
            if action == MenuAction.STATUS:
                actions.check_status(self.console, cwd=self.cwd)
            elif action == MenuAction.ADD:
                actions.add_changes(self.console, cwd=self.cwd)
            elif action == MenuAction.COMMIT:
                await self.commit()
            elif action == MenuAction.PUSH:
                actions.push_changes(self.console, cwd=self.cwd)
            elif action == MenuAction.EXIT:
                actions.exit_assistant(self.console)
        except KeyboardInterrupt:
            self.quit()
        await self.pause()

    async def commit(self) -> None:
        self.mode = Mode.PROMPT
        try:
            await actions.commit_changes(self.console, self.prompt.ask, cwd=self.cwd)
        except (KeyboardInterrupt, EOFError):
            self.quit()
        finally:
            self.mode = Mode.MENU

    async def pause(self) -> None:
        self.console.warning(f"\n{config.CONTINUE_PROMPT}")
        if await self.keys.read_key() == Key.INTERRUPT:
            self.quit()

    def quit(self) -> NoReturn:
        self.console.success("\nExiting Git Assistant. Goodbye!")
        raise SystemExit(0)
