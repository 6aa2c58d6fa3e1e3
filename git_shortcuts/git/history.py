"""Commit, push and history-rewrite helpers."""

import click


def commit_if_staged(backend, message):
    """
    Commit whatever is staged with `message`.

    Returns True when a commit was created. An empty index is a no-op rather
    than an error.
    """
    if not backend.has_staged_changes():
        click.secho("Nothing to commit; skipping commit.", fg="yellow", err=True)
        return False
    backend.commit(message)
    return True


def save_changes(backend, message, push=True):
    """
    Stage every working-tree change, commit it and push the current branch.

    Returns True when a commit was created.
    """
    if not isinstance(message, str) or not message.strip():
        raise ValueError("Commit message is required")

    backend.stage_all()
    committed = commit_if_staged(backend, message.strip())
    if push:
        backend.push(backend.current_branch_name())
    return committed


def purge_path(backend, path):
    """
    Remove `path` from every commit on every ref.

    A single filter-branch pass rewrites history; the backup refs and reflog
    entries it leaves behind are then dropped so the old objects can be pruned.
    """
    if not path or not path.strip():
        raise ValueError("A path to purge is required")

    backend.remove_path_from_history(path)
    backend.refresh_refs()
