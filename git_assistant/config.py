import os

# Name of the directory that marks a repository root
REPO_MARKER_DIR = ".git"

# Git settings
GIT_EXECUTABLE_ENV = "GIT_ASSISTANT_GIT"
GIT_EXECUTABLE = os.environ.get(GIT_EXECUTABLE_ENV, "git")
DEFAULT_REMOTE = "origin"
PUSH_BRANCH = "master"

# Terminal
APP_TITLE = "Git Assistant"
COMMIT_PROMPT = "Enter commit message: "
CONTINUE_PROMPT = "Press any key to continue..."
# Seconds to wait before a lone Esc is delivered instead of held as the
# start of an escape sequence
ESCAPE_FLUSH_TIMEOUT = 0.5
