"""Git command-line backend used by the sync, stats and helper commands."""

import re
import shlex
from pathlib import Path

from ..config import DEFAULT_REMOTE, GIT_EXECUTABLE
from .core import execute, run
from .status import parse_ahead_behind

# Characters with a meaning in POSIX extended regular expressions.
_ERE_SPECIAL_RE = re.compile(r"([\\.\[\]()*+?{}|^$])")

# Messages of `git status` are matched as text, so pin them to English.
_C_LOCALE = {"LC_ALL": "C", "LANGUAGE": "C"}


def author_pattern(name):
    """Build an anchored `--author` pattern that only matches `name` exactly."""
    return "^" + _ERE_SPECIAL_RE.sub(r"\\\1", name) + " <"


class GitBackend:
    """Runs git subcommands inside one working directory."""

    def __init__(self, cwd=None, git=GIT_EXECUTABLE, remote=DEFAULT_REMOTE):
        self.cwd = str(cwd) if cwd is not None else None
        self.git = git
        self.remote = remote

    def _run(self, *args, env_vars=None):
        return run([self.git, *args], cwd=self.cwd, env_vars=env_vars)

    def _execute(self, *args, env_vars=None):
        return execute([self.git, *args], cwd=self.cwd, env_vars=env_vars)

    # Queries

    def repo_root(self):
        return Path(self._run("rev-parse", "--show-toplevel"))

    def current_branch_name(self):
        return self._run("rev-parse", "--abbrev-ref", "HEAD")

    def status_short(self):
        """`git status` without untracked-file details."""
        return self._run("status", "-uno", env_vars=_C_LOCALE)

    def ahead_behind(self):
        """
        Return (ahead, behind) against the upstream, or None without one.
        """
        result = self._execute("rev-list", "--left-right", "--count", "HEAD...@{u}")
        if not result.ok:
            return None
        return parse_ahead_behind(result.stdout)

    def has_staged_changes(self):
        # `diff --quiet` exits 1 when there are differences.
        result = self._execute("diff", "--cached", "--quiet")
        if result.returncode not in (0, 1):
            # Unborn branch: anything in the index counts as a change.
            return bool(self._run("ls-files", "--cached"))
        return result.returncode == 1

    def staged_files(self):
        out = self._run("diff", "--cached", "--name-only")
        return [f for f in out.splitlines() if f.strip()]

    def unstaged_files(self):
        out = self._run("diff", "--name-only")
        return [f for f in out.splitlines() if f.strip()]

    def list_conflicted_files(self):
        out = self._run("diff", "--name-only", "--diff-filter=U")
        return [f for f in out.splitlines() if f.strip()]

    def has_upstream(self):
        return self._execute("rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}").ok

    def has_history(self, all_branches=False):
        """Check whether HEAD (or, with `all_branches`, any ref) names a commit."""
        if self._execute("rev-parse", "--verify", "-q", "HEAD").ok:
            return True
        if all_branches:
            return bool(self._run("for-each-ref", "--count=1", "--format=%(refname)"))
        return False

    # Author names are compared raw on both sides; `--author` would otherwise
    # see mailmapped identities while `%an` prints the recorded ones.

    def log_authors(self, all_branches=False):
        if not self.has_history(all_branches):
            return []
        args = ["log", "--no-mailmap", "--format=%an"]
        if all_branches:
            args.append("--all")
        out = self._run(*args)
        return list(dict.fromkeys(name for name in out.splitlines() if name.strip()))

    def log_numstat_by_author(self, author, all_branches=False):
        if not self.has_history(all_branches):
            return ""
        args = [
            "log",
            "--no-mailmap",
            "--extended-regexp",
            f"--author={author_pattern(author)}",
            "--pretty=tformat:",
            "--numstat",
        ]
        if all_branches:
            args.append("--all")
        return self._run(*args)

    # Mutations

    def stage_all(self):
        self._run("add", "-A")

    def commit(self, message):
        self._run("commit", "-m", message)

    def push(self, branch=None):
        if branch:
            self._run("push", "-u", self.remote, branch)
        else:
            self._run("push")

    def fetch_remote_tracking_info(self):
        self._run("fetch", self.remote)

    def pull(self):
        """Fetch and merge the upstream; the exit status is left to the caller."""
        return self._execute("pull", "--no-rebase", "--no-edit")

    def checkout(self, branch):
        self._run("checkout", branch)

    def merge(self, branch, no_fast_forward=True):
        args = ["merge", "--no-edit"]
        if no_fast_forward:
            args.append("--no-ff")
        args.append(branch)
        self._run(*args)

    def untrack(self, paths):
        if paths:
            self._run("rm", "-r", "--cached", "--ignore-unmatch", "--", *paths)

    def remove_path_from_history(self, path):
        index_filter = f"git rm -r --cached --ignore-unmatch -- {shlex.quote(path)}"
        self._run(
            "filter-branch",
            "--force",
            "--index-filter",
            index_filter,
            "--prune-empty",
            "--tag-name-filter",
            "cat",
            "--",
            "--all",
            env_vars={"FILTER_BRANCH_SQUELCH_WARNING": "1"},
        )

    def refresh_refs(self):
        """Drop the backup refs and reflog entries that keep rewritten objects alive."""
        refs = self._run("for-each-ref", "--format=%(refname)", "refs/original/")
        for ref in refs.splitlines():
            if ref.strip():
                self._run("update-ref", "-d", ref.strip())
        self._run("reflog", "expire", "--expire=now", "--all")
        self._run("gc", "--prune=now", "--quiet")
