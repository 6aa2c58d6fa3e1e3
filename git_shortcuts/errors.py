"""Exceptions raised by git-shortcuts."""


class GitShortcutsError(RuntimeError):
    """Base class for every error the tool raises on purpose."""


class BackendError(GitShortcutsError):
    """A git command exited with a non-zero status."""

    def __init__(self, args, returncode, stdout="", stderr=""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        detail = self.stderr.strip() or self.stdout.strip()
        message = f"Command failed ({returncode}): {' '.join(self.args_list)}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class BackendUnavailable(BackendError):
    """The git executable could not be started at all."""

    def __init__(self, args, reason=""):
        super().__init__(args, 127, stderr=reason or f"Command not found: {args[0]}")


class SyncAbort(GitShortcutsError):
    """Synchronization stopped because a merge left unresolved conflicts."""

    def __init__(self, reason, branch, conflicts=None):
        self.reason = reason
        self.branch = branch
        self.conflicts = list(conflicts or [])
        super().__init__(f"{reason.value}: conflicts on '{branch}' must be resolved manually")


class SyncCancelled(GitShortcutsError):
    """The caller asked to stop; raised between steps, never mid-command."""

    def __init__(self, step):
        self.step = step
        super().__init__(f"Synchronization cancelled before: {step}")
