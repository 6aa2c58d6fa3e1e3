"""Core subprocess wrappers for the git executable."""

import os
import shlex
import subprocess

from ..errors import BackendError, BackendUnavailable
from ..models import CommandResult


def execute(cmd, cwd=None, env_vars=None):
    """
    Run a command and return a CommandResult without raising on failure.

    Accepts either a string (split using shlex) or an argv list. No shell is
    involved, so paths containing characters like '(' and ')' are passed
    through untouched.
    """
    args = list(cmd) if isinstance(cmd, (list, tuple)) else shlex.split(cmd)
    env = os.environ.copy()
    if env_vars:
        env.update(env_vars)

    try:
        proc = subprocess.run(
            args,
            cwd=cwd,
            env=env,
            stdin=subprocess.DEVNULL,
            capture_output=True,
        )
    except FileNotFoundError as exc:
        raise BackendUnavailable(args, str(exc)) from exc
    except PermissionError as exc:
        raise BackendUnavailable(args, str(exc)) from exc

    return CommandResult(
        args=args,
        returncode=proc.returncode,
        stdout=proc.stdout.decode("utf-8", errors="ignore"),
        stderr=proc.stderr.decode("utf-8", errors="ignore"),
    )


def run(cmd, cwd=None, env_vars=None):
    """Run a command and return its stripped stdout; raise BackendError on failure."""
    result = execute(cmd, cwd=cwd, env_vars=env_vars)
    if not result.ok:
        raise BackendError(result.args, result.returncode, result.stdout, result.stderr)
    return result.stdout.strip()
