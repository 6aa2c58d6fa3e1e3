"""Two-way branch synchronization with abort-on-conflict semantics."""

import click

from .errors import BackendError, SyncAbort, SyncCancelled
from .git.history import commit_if_staged
from .git.status import is_up_to_date_text
from .models import SyncAbortReason, SyncAttemptResult


def try_merge_remote(backend, branch):
    """
    Bring the checked-out `branch` up to date with its remote counterpart.

    The upstream comparison (ahead/behind counts) is used when the backend can
    answer it; otherwise the second line of the status text is matched. A branch
    without an upstream has nothing to pull and counts as up to date.
    """
    backend.fetch_remote_tracking_info()

    counts = backend.ahead_behind()
    if counts is not None:
        up_to_date = counts == (0, 0)
    elif not backend.has_upstream():
        click.echo(f"'{branch}' has no upstream yet; nothing to pull.")
        return SyncAttemptResult.UP_TO_DATE
    else:
        up_to_date = is_up_to_date_text(backend.status_short())

    if up_to_date:
        click.echo(f"'{branch}' is up to date with its remote.")
        return SyncAttemptResult.UP_TO_DATE

    click.secho(f"Pending merge detected on '{branch}'; pulling.", fg="yellow", err=True)
    result = backend.pull()

    conflicts = backend.list_conflicted_files()
    if conflicts:
        click.secho(f"Conflicts detected on '{branch}':", fg="red", err=True)
        for path in conflicts:
            click.secho(f"  - {path}", fg="red", err=True)
        return SyncAttemptResult.CONFLICT_DETECTED

    if not result.ok:
        raise BackendError(result.args, result.returncode, result.stdout, result.stderr)

    return SyncAttemptResult.MERGED_CLEANLY


class BranchSyncOrchestrator:
    """
    Merge the current branch and a target branch into each other and push both.

    Every step mutates the shared working directory, so steps run strictly in
    order. A set `cancel_event` stops the run before the next step starts.
    """

    def __init__(self, backend, cancel_event=None):
        self.backend = backend
        self.cancel_event = cancel_event

    def _step(self, description):
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise SyncCancelled(description)
        click.echo(f"-> {description}")

    def synchronize(self, target_branch, commit_message=None):
        if commit_message is not None and not commit_message.strip():
            raise ValueError("Commit message must not be blank")
        backend = self.backend

        self._step("resolve current branch")
        current = backend.current_branch_name()

        if commit_message is not None:
            self._step(f"commit pending changes on '{current}'")
            backend.stage_all()
            commit_if_staged(backend, commit_message.strip())

        self._step(f"update '{current}' from remote")
        if try_merge_remote(backend, current) is SyncAttemptResult.CONFLICT_DETECTED:
            raise SyncAbort(
                SyncAbortReason.CONFLICT_ON_CURRENT_BRANCH,
                current,
                backend.list_conflicted_files(),
            )

        self._step(f"checkout '{target_branch}'")
        backend.checkout(target_branch)

        self._step(f"update '{target_branch}' from remote")
        if try_merge_remote(backend, target_branch) is SyncAttemptResult.CONFLICT_DETECTED:
            raise SyncAbort(
                SyncAbortReason.CONFLICT_ON_TARGET_BRANCH,
                target_branch,
                backend.list_conflicted_files(),
            )

        self._step(f"merge '{current}' into '{target_branch}'")
        backend.merge(current, no_fast_forward=True)

        self._step(f"push '{target_branch}'")
        backend.push(target_branch)

        self._step(f"checkout '{current}'")
        backend.checkout(current)

        self._step(f"merge '{target_branch}' into '{current}'")
        backend.merge(target_branch, no_fast_forward=True)

        self._step(f"push '{current}'")
        backend.push(current)

        click.secho(f"'{current}' and '{target_branch}' are in sync.", fg="green", bold=True)


def synchronize(backend, target_branch, commit_message=None, cancel_event=None):
    """Convenience wrapper around BranchSyncOrchestrator.synchronize."""
    BranchSyncOrchestrator(backend, cancel_event=cancel_event).synchronize(
        target_branch, commit_message
    )
