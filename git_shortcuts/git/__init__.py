"""Git utilities package."""

from .backend import GitBackend, author_pattern
from .core import execute, run
from .history import commit_if_staged, purge_path, save_changes
from .ignore import add_ignore_patterns, read_ignore_patterns
from .status import is_up_to_date_text, parse_ahead_behind

__all__ = [
    "execute",
    "run",
    "GitBackend",
    "author_pattern",
    "is_up_to_date_text",
    "parse_ahead_behind",
    "commit_if_staged",
    "save_changes",
    "purge_path",
    "read_ignore_patterns",
    "add_ignore_patterns",
]
