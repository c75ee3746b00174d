from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from . import config
from .console import Console


class MenuAction(str, Enum):
    STATUS = "Check repository status"
    ADD = "Add changes"
    COMMIT = "Commit changes"
    PUSH = "Push to master branch"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


MENU_OPTIONS: Tuple[MenuAction, ...] = (
    MenuAction.STATUS,
    MenuAction.ADD,
    MenuAction.COMMIT,
    MenuAction.PUSH,
    MenuAction.EXIT,
)


@dataclass(frozen=True)
class MenuState:
    options: Tuple[MenuAction, ...] = MENU_OPTIONS
    selected_index: int = 0

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("Menu needs at least one option")
        if not 0 <= self.selected_index < len(self.options):
            raise ValueError(
                f"Selected index {self.selected_index} outside 0..{len(self.options) - 1}"
            )

    @property
    def selected(self) -> MenuAction:
        return self.options[self.selected_index]


def move_up(state: MenuState) -> MenuState:
    index = (state.selected_index - 1) % len(state.options)
    return MenuState(options=state.options, selected_index=index)


def move_down(state: MenuState) -> MenuState:
    index = (state.selected_index + 1) % len(state.options)
    return MenuState(options=state.options, selected_index=index)


def render(state: MenuState, console: Console) -> None:
    """Clear the screen and draw the title followed by every option."""
    console.clear()
    console.title(f"{config.APP_TITLE}\n")
    for index, action in enumerate(state.options):
        console.option(action.label, selected=index == state.selected_index)
