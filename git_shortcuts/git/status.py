"""Parsing helpers for `git status` and `git rev-list --count` output."""

from ..config import UP_TO_DATE_MARKERS


def is_up_to_date_text(status_text):
    """
    Check whether `git status` text reports the branch as up to date.

    Only the second line is inspected; that is where git writes the
    "Your branch is up to date with 'origin/x'." sentence. The check depends on
    git's C-locale wording and is only used when no upstream comparison is
    available.
    """
    lines = (status_text or "").splitlines()
    if len(lines) < 2:
        return False
    second = lines[1].lower()
    return any(marker in second for marker in UP_TO_DATE_MARKERS)


def parse_ahead_behind(text):
    """
    Parse `git rev-list --left-right --count HEAD...@{u}` output.

    Returns (ahead, behind), or None if the text is not two integers.
    """
    fields = (text or "").split()
    if len(fields) != 2:
        return None
    try:
        ahead, behind = int(fields[0]), int(fields[1])
    except ValueError:
        return None
    return ahead, behind
