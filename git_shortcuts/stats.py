"""Lines added and deleted per commit author."""

from .models import AuthorStatRecord


def parse_numstat(text):
    """
    Sum `git log --numstat` output into (added, deleted).

    Lines whose first two fields are not non-negative integers are skipped:
    binary files report "-\t-\tpath" and commit separators are blank.
    """
    added = deleted = 0
    for line in (text or "").splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        try:
            a, d = int(fields[0], 10), int(fields[1], 10)
        except ValueError:
            continue
        if a < 0 or d < 0:
            continue
        added += a
        deleted += d
    return added, deleted


def changes_by_author(backend, author=None, all_branches=False):
    """
    Compute per-author line totals, largest first.

    With `author` only that exact name is queried; otherwise every distinct
    author in the history is. Authors without matching commits get a zero
    record. Ties keep the order in which authors were encountered.
    """
    authors = [author] if author else backend.log_authors(all_branches=all_branches)

    records = []
    for name in authors:
        added, deleted = parse_numstat(backend.log_numstat_by_author(name, all_branches))
        records.append(AuthorStatRecord(author=name, lines_added=added, lines_deleted=deleted))

    return sorted(records, key=lambda r: r.lines_total, reverse=True)
