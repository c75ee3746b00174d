"""Colored terminal output built on prompt_toolkit formatted text."""

from typing import Optional, TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.application.current import get_app_session
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.styles import Style

STYLE = Style.from_dict(
    {
        "title": "bold ansigreen",
        "selected": "bg:ansiyellow ansiblack",
        "info": "ansiblue",
        "success": "ansigreen",
        "warning": "ansiyellow",
        "error": "ansired",
    }
)


class Console:
    """Writes styled lines to a terminal (or to ``file`` when given)."""

    def __init__(self, file: Optional[TextIO] = None):
        self._output: Optional[Output] = create_output(stdout=file) if file is not None else None

    @property
    def output(self) -> Output:
        return self._output or get_app_session().output

    def write(self, *fragments: tuple[str, str]) -> None:
        print_formatted_text(FormattedText(list(fragments)), style=STYLE, output=self.output)

    def clear(self) -> None:
        output = self.output
        output.erase_screen()
        output.cursor_goto(0, 0)
        output.flush()

    def plain(self, text: str) -> None:
        self.write(("", text))

    def title(self, text: str) -> None:
        self.write(("class:title", text))

    def info(self, text: str) -> None:
        self.write(("class:info", text))

    def success(self, text: str) -> None:
        self.write(("class:success", text))

    def warning(self, text: str) -> None:
        self.write(("class:warning", text))

    def error(self, text: str, detail: Optional[str] = None) -> None:
        if detail:
            self.write(("class:error", text), ("", f" {detail}"))
        else:
            self.write(("class:error", text))

    def option(self, label: str, selected: bool) -> None:
        if selected:
            self.write(("class:selected", f"> {label}"))
        else:
            self.plain(f"  {label}")
