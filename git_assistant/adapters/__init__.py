"""Adapters for the external tools Git Assistant drives (e.g., git)."""

from .git_adapter import (  # noqa: F401
    CommandResult,
    commit,
    has_repo_marker,
    push,
    run_git,
    stage_all,
    status,
)
