"""
Git Assistant: a keyboard-driven terminal menu over everyday git operations.

The package wraps four fixed git invocations (status, stage-all, commit and
push) behind an arrow-key menu for the repository in the current directory.
"""

__version__ = "0.1.0"

__all__ = ["config", "__version__"]
