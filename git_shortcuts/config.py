"""Configuration constants and settings for git-shortcuts."""

import os

__version__ = "0.1.0"

GIT_EXECUTABLE = os.environ.get("GSK_GIT_EXECUTABLE", "git")

DEFAULT_REMOTE = os.environ.get("GSK_REMOTE", "origin")

# Phrases `git status` prints on its second line when the branch matches its
# upstream. Older git releases hyphenate the wording.
UP_TO_DATE_MARKERS = ("up to date", "up-to-date")

GITIGNORE_NAME = ".gitignore"
