"""CLI commands and entry point."""

import signal
import sys
import threading

import click

from .config import __version__
from .errors import GitShortcutsError, SyncAbort
from .git import add_ignore_patterns, purge_path, read_ignore_patterns, save_changes
from .stats import changes_by_author
from .sync import BranchSyncOrchestrator
from .ui import format_stats_table


def _backend(ctx):
    # Resolved through the package so tests can swap in a fake backend.
    import git_shortcuts as gs

    return gs.GitBackend(cwd=ctx.obj.get("repo"))


def _fail(exc):
    click.secho(f"Error: {exc}", fg="red", err=True)
    sys.exit(1)


class _StopSignals:
    """Set an event on SIGINT/SIGTERM while active; restore handlers on exit."""

    def __init__(self, event, on_signal=None):
        self.event = event
        self.on_signal = on_signal
        self._previous = {}

    def _handle(self, signum, frame):
        if not self.event.is_set():
            self.event.set()
            if self.on_signal:
                self.on_signal()

    def __enter__(self):
        for sig_name in ("SIGINT", "SIGTERM", "SIGQUIT"):
            sig = getattr(signal, sig_name, None)
            if sig is not None:
                self._previous[sig] = signal.signal(sig, self._handle)
        return self

    def __exit__(self, exc_type, exc, tb):
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)
        return False


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-C",
    "--repo",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Run as if started in this directory",
)
@click.pass_context
def cli(ctx, repo):
    """git-shortcuts: short commands for common git sequences."""
    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo


@cli.command()
@click.argument("target_branch")
@click.option("-m", "--message", default=None, help="Commit pending changes first with this message")
@click.pass_context
def sync(ctx, target_branch, message):
    """Merge the current branch and TARGET_BRANCH both ways and push both."""
    backend = _backend(ctx)
    cancel_event = threading.Event()

    def _announce():
        click.secho("\nStopping after the current step...", fg="yellow", err=True)

    try:
        with _StopSignals(cancel_event, on_signal=_announce):
            BranchSyncOrchestrator(backend, cancel_event=cancel_event).synchronize(
                target_branch, message
            )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--message")
    except SyncAbort as exc:
        click.secho(f"Sync aborted: {exc}", fg="red", err=True)
        click.echo("Resolve the conflicts, commit, then run sync again.", err=True)
        sys.exit(1)
    except GitShortcutsError as exc:
        _fail(exc)


@cli.command()
@click.option("--author", default=None, help="Only report this exact author name")
@click.option("--all-branches", is_flag=True, help="Count commits on every branch, not just HEAD")
@click.pass_context
def stats(ctx, author, all_branches):
    """Show lines added and deleted per author, largest first."""
    backend = _backend(ctx)
    try:
        records = changes_by_author(backend, author=author, all_branches=all_branches)
    except GitShortcutsError as exc:
        _fail(exc)

    if not records:
        click.echo("No commits found")
        return
    click.echo(format_stats_table(records))


@cli.command()
@click.argument("message")
@click.option("--no-push", is_flag=True, help="Commit without pushing")
@click.pass_context
def save(ctx, message, no_push):
    """Stage everything, commit with MESSAGE and push."""
    backend = _backend(ctx)
    try:
        committed = save_changes(backend, message, push=not no_push)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="MESSAGE")
    except GitShortcutsError as exc:
        _fail(exc)

    if committed:
        click.secho(f"✔ Committed: {message.strip()}", fg="green", bold=True)
    if not no_push:
        click.echo("Pushed.")


@cli.command()
@click.argument("patterns", nargs=-1)
@click.option("--list", "list_only", is_flag=True, help="List the current ignore patterns")
@click.option("--untrack", is_flag=True, help="Also stop tracking files matching the new patterns")
@click.pass_context
def ignore(ctx, patterns, list_only, untrack):
    """Add PATTERNS to the repository's .gitignore."""
    backend = _backend(ctx)
    try:
        root = backend.repo_root()
    except GitShortcutsError as exc:
        _fail(exc)

    if list_only:
        current = read_ignore_patterns(root)
        click.echo("\n".join(current) if current else "(none)")
        return

    if not patterns:
        raise click.UsageError("Provide at least one PATTERN or use --list.")

    try:
        added = add_ignore_patterns(root, patterns)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="PATTERNS")

    if not added:
        click.echo("All patterns already ignored")
        return
    click.echo(f"Added: {', '.join(added)}")

    if untrack:
        try:
            backend.untrack(added)
        except GitShortcutsError as exc:
            _fail(exc)
        click.echo("Stopped tracking matching files; commit to record it.")


@cli.command()
@click.argument("path")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def purge(ctx, path, yes):
    """Remove PATH from every commit on every branch."""
    if not yes:
        click.confirm(f"Rewrite all history to remove '{path}'?", abort=True)
    backend = _backend(ctx)
    try:
        purge_path(backend, path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="PATH")
    except GitShortcutsError as exc:
        _fail(exc)

    click.secho(f"'{path}' removed from history.", fg="green", bold=True)
    click.echo("Remember to push with --force-with-lease to update remote history.")


@cli.command()
@click.pass_context
def status(ctx):
    """Show staged and unstaged changes and the upstream distance."""
    backend = _backend(ctx)
    try:
        staged = backend.staged_files()
        unstaged = backend.unstaged_files()
        counts = backend.ahead_behind()
    except GitShortcutsError as exc:
        _fail(exc)

    click.echo("Staged:")
    click.echo("\n".join(staged) or "(none)")
    click.echo("\nUnstaged:")
    click.echo("\n".join(unstaged) or "(none)")
    click.echo("\nUpstream:")
    if counts is None:
        click.echo("(no upstream)")
    else:
        ahead, behind = counts
        click.echo(f"ahead {ahead}, behind {behind}")


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
