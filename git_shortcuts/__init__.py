"""git-shortcuts: short commands for common git sequences."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import __version__
from .errors import (  # noqa: F401
    BackendError,
    BackendUnavailable,
    GitShortcutsError,
    SyncAbort,
    SyncCancelled,
)
from .git import (  # noqa: F401
    GitBackend,
    add_ignore_patterns,
    author_pattern,
    commit_if_staged,
    execute,
    is_up_to_date_text,
    parse_ahead_behind,
    purge_path,
    read_ignore_patterns,
    run,
    save_changes,
)
from .models import (  # noqa: F401
    AuthorStatRecord,
    CommandResult,
    SyncAbortReason,
    SyncAttemptResult,
)
from .stats import changes_by_author, parse_numstat  # noqa: F401
from .sync import BranchSyncOrchestrator, synchronize, try_merge_remote  # noqa: F401
from .ui import format_stats_table  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Errors
    "GitShortcutsError",
    "BackendError",
    "BackendUnavailable",
    "SyncAbort",
    "SyncCancelled",
    # Models
    "SyncAttemptResult",
    "SyncAbortReason",
    "AuthorStatRecord",
    "CommandResult",
    # Git
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
    # Sync / stats
    "try_merge_remote",
    "BranchSyncOrchestrator",
    "synchronize",
    "parse_numstat",
    "changes_by_author",
    # UI
    "format_stats_table",
]
