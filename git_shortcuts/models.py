"""Value types shared by the sync and stats commands."""

import enum
from dataclasses import dataclass, field


class SyncAttemptResult(enum.Enum):
    UP_TO_DATE = "up-to-date"
    MERGED_CLEANLY = "merged-cleanly"
    CONFLICT_DETECTED = "conflict-detected"


class SyncAbortReason(enum.Enum):
    CONFLICT_ON_CURRENT_BRANCH = "conflict-on-current-branch"
    CONFLICT_ON_TARGET_BRANCH = "conflict-on-target-branch"


@dataclass
class AuthorStatRecord:
    author: str
    lines_added: int = 0
    lines_deleted: int = 0

    @property
    def lines_total(self):
        return self.lines_added + self.lines_deleted


@dataclass
class CommandResult:
    args: list = field(default_factory=list)
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self):
        return self.returncode == 0
