"""Handlers behind the menu entries.

Each handler drives exactly one git invocation and reports the outcome on
the console. Fatal conditions raise ``SystemExit``; git failures of the
add/commit/push handlers are printed and control returns to the caller.
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, NoReturn, Optional

from . import config
from .adapters import git_adapter
from .adapters.git_adapter import CommandResult
from .console import Console

logger = logging.getLogger(__name__)

AskLine = Callable[[str], Awaitable[str]]


def check_status(console: Console, cwd: Optional[Path] = None) -> CommandResult:
    root = cwd if cwd is not None else Path.cwd()
    console.info("\nChecking repository status...")
    console.plain(f"Current directory: {root}")
    if not git_adapter.has_repo_marker(root):
        console.error("No Git repository found in the current directory.")
        console.warning("Exiting Git Assistant...")
        raise SystemExit(1)

    console.info("Git repository found. Checking status...")
    result = git_adapter.status(cwd=root)
    if not result.succeeded:
        console.error("Failed to check repository status:", result.error_message)
        console.warning("Exiting Git Assistant...")
        raise SystemExit(1)
    console.success(result.output)
    return result


def add_changes(console: Console, cwd: Optional[Path] = None) -> CommandResult:
    console.info("\nAdding all changes to staging...")
    result = git_adapter.stage_all(cwd=cwd)
    if result.succeeded:
        console.success("All changes added to staging.")
    else:
        console.error("Failed to add changes:", result.error_message)
    return result


async def read_commit_message(console: Console, ask: AskLine) -> str:
    while True:
        message = await ask(config.COMMIT_PROMPT)
        if message.strip():
            return message
        logger.debug("rejected empty commit message")
        console.error("Commit message cannot be empty.")


async def commit_changes(console: Console, ask: AskLine, cwd: Optional[Path] = None) -> CommandResult:
    message = await read_commit_message(console, ask)
    result = git_adapter.commit(message, cwd=cwd)
    if result.succeeded:
        console.success(result.output or "Changes committed successfully.")
    else:
        console.error("Failed to commit changes:", result.error_message)
    return result


def push_changes(console: Console, cwd: Optional[Path] = None) -> CommandResult:
    console.info(f"\nPushing changes to the {config.PUSH_BRANCH} branch...")
    result = git_adapter.push(branch=config.PUSH_BRANCH, cwd=cwd)
    if result.succeeded:
        console.success(result.output or f"Changes pushed to the {config.PUSH_BRANCH} branch.")
    else:
        console.error("Failed to push changes:", result.error_message)
    return result


def exit_assistant(console: Console) -> NoReturn:
    console.success("Goodbye!")
    raise SystemExit(0)
