import logging
import signal
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .. import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    output: str
    succeeded: bool
    error_message: Optional[str] = None


def run_git(args: list[str], cwd: Optional[Path] = None) -> CommandResult:
    """Run git with ``args`` and wait for it to exit.

    Arguments are handed to the process as a list, so user text such as a
    commit message is never parsed by a shell.
    """
    cmd = [config.GIT_EXECUTABLE] + args
    logger.debug("running %s in %s", cmd, cwd or Path.cwd())
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as exc:
        logger.debug("could not start %s: %s", cmd[0], exc)
        return CommandResult(output="", succeeded=False, error_message=str(exc))

    logger.debug("%s exited with status %d", cmd, result.returncode)
    if result.returncode == -signal.SIGINT:
        # Ctrl-C reached git through the terminal; surface it as our interrupt
        raise KeyboardInterrupt
    output = (result.stdout or "").strip()
    if result.returncode != 0:
        # git reports some refusals (e.g. "nothing to commit") on stdout
        message = (result.stderr or "").strip() or output or (
            f"git {' '.join(args)} exited with status {result.returncode}"
        )
        return CommandResult(output=output, succeeded=False, error_message=message)
    return CommandResult(output=output, succeeded=True)


def has_repo_marker(cwd: Optional[Path] = None) -> bool:
    root = cwd if cwd is not None else Path.cwd()
    return (root / config.REPO_MARKER_DIR).exists()


def status(cwd: Optional[Path] = None) -> CommandResult:
    return run_git(["status"], cwd=cwd)


def stage_all(cwd: Optional[Path] = None) -> CommandResult:
    return run_git(["add", "."], cwd=cwd)


def commit(message: str, cwd: Optional[Path] = None) -> CommandResult:
    return run_git(["commit", "-m", message], cwd=cwd)


def push(branch: str = config.PUSH_BRANCH, cwd: Optional[Path] = None) -> CommandResult:
    return run_git(["push", config.DEFAULT_REMOTE, branch], cwd=cwd)
