import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from . import __version__
from .console import Console
from .loop import InputLoop
from .terminal import TerminalKeyReader, TerminalLinePrompt


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; each -v lowers the threshold one step, down to DEBUG."""
    levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    level = levels[min(max(verbosity, 0), len(levels) - 1)]
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-assistant",
        description="Keyboard-driven menu for status, add, commit and push in the current repository",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log git invocations to stderr (repeat for more detail)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not sys.stdin.isatty():
        raise SystemExit("git-assistant needs an interactive terminal on stdin.")

    loop = InputLoop(keys=TerminalKeyReader(), prompt=TerminalLinePrompt(), console=Console())
    try:
        asyncio.run(loop.run())
    except KeyboardInterrupt:
        # SIGINT while a git command runs outside raw mode
        raise SystemExit(0)


if __name__ == "__main__":
    main()
