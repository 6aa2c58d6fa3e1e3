import subprocess
from pathlib import Path

import pytest

from git_shortcuts.errors import BackendError
from git_shortcuts.models import CommandResult

UP_TO_DATE_STATUS = "On branch {branch}\nYour branch is up to date with 'origin/{branch}'.\n"


def _git_in(cwd):
    def git(cmd):
        subprocess.check_call(
            f"git -C {cwd} {cmd}",
            shell=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    return git


def _configure(git):
    git('config user.email "test@example.com"')
    git('config user.name "Test User"')
    git("config commit.gpgsign false")


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git = _git_in(repo)
    git("init -q")
    git("symbolic-ref HEAD refs/heads/main")
    _configure(git)
    return repo, git


@pytest.fixture
def cloned_repo(tmp_path, write_file):
    """
    A bare remote with `main` and `feature`, a seed clone that pushes to it and a
    working clone checked out on `feature`.
    """
    remote = tmp_path / "remote.git"
    seed = tmp_path / "seed"
    work = tmp_path / "work"
    seed.mkdir()

    _git_in(tmp_path)(f"init -q --bare {remote}")
    _git_in(remote)("symbolic-ref HEAD refs/heads/main")

    seed_git = _git_in(seed)
    seed_git("init -q")
    seed_git("symbolic-ref HEAD refs/heads/main")
    _configure(seed_git)
    write_file(seed, "file.txt", "base\n")
    seed_git("add file.txt")
    seed_git('commit -q -m "initial"')
    seed_git(f"remote add origin {remote}")
    seed_git("push -q -u origin main")
    seed_git("checkout -q -b feature")
    seed_git("push -q -u origin feature")

    _git_in(tmp_path)(f"clone -q {remote} {work}")
    work_git = _git_in(work)
    _configure(work_git)
    work_git("checkout -q feature")
    return work, work_git, seed, seed_git


def git_output(repo, *args):
    return subprocess.check_output(["git", "-C", str(repo), *args], text=True).strip()


@pytest.fixture
def git_out():
    return git_output


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


class FakeBackend:
    """Records every call; answers per checked-out branch."""

    cwd = None

    def __init__(
        self,
        branch="feature",
        ahead_behind=None,
        status=None,
        conflicts=None,
        pull_returncode=0,
        staged=True,
        authors=(),
        numstat=None,
        fail_on=(),
        no_upstream=(),
        on_call=None,
    ):
        self.branch = branch
        self._ahead_behind = ahead_behind or {}
        self._status = status or {}
        self._conflicts = conflicts or {}
        self._pulled = set()
        self.pull_returncode = pull_returncode
        self.staged = staged
        self.authors = list(authors)
        self.numstat = numstat or {}
        self.fail_on = set(fail_on)
        self.no_upstream = set(no_upstream)
        self.on_call = on_call
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if self.on_call:
            self.on_call(name, *args)
        if name in self.fail_on:
            raise BackendError(["git", name, *map(str, args)], 1, stderr=f"{name} failed")

    def calls_named(self, *names):
        return [c for c in self.calls if c[0] in names]

    def current_branch_name(self):
        self._record("current_branch_name")
        return self.branch

    def stage_all(self):
        self._record("stage_all")

    def has_staged_changes(self):
        self._record("has_staged_changes")
        return self.staged

    def commit(self, message):
        self._record("commit", message)

    def push(self, branch=None):
        self._record("push", branch)

    def fetch_remote_tracking_info(self):
        self._record("fetch")

    def ahead_behind(self):
        self._record("ahead_behind")
        return self._ahead_behind.get(self.branch)

    def status_short(self):
        self._record("status_short")
        return self._status.get(self.branch, UP_TO_DATE_STATUS.format(branch=self.branch))

    def pull(self):
        self._record("pull")
        self._pulled.add(self.branch)
        stderr = "pull failed" if self.pull_returncode else ""
        return CommandResult(["git", "pull"], self.pull_returncode, "", stderr)

    def list_conflicted_files(self):
        self._record("list_conflicted_files")
        if self.branch not in self._pulled:
            return []
        return list(self._conflicts.get(self.branch, []))

    def checkout(self, branch):
        self._record("checkout", branch)
        self.branch = branch

    def merge(self, branch, no_fast_forward=True):
        self._record("merge", branch, no_fast_forward)

    def log_authors(self, all_branches=False):
        self._record("log_authors", all_branches)
        return list(self.authors)

    def log_numstat_by_author(self, author, all_branches=False):
        self._record("log_numstat_by_author", author, all_branches)
        return self.numstat.get(author, "")

    def has_upstream(self):
        self._record("has_upstream")
        return self.branch not in self.no_upstream


@pytest.fixture
def fake_backend():
    return FakeBackend
