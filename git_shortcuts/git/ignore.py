"""Ignore-file management."""

from pathlib import Path

from ..config import GITIGNORE_NAME


def read_ignore_patterns(root):
    """Return the active patterns of the repository's top-level ignore file."""
    path = Path(root) / GITIGNORE_NAME
    if not path.exists():
        return []
    patterns = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def add_ignore_patterns(root, patterns):
    """
    Append patterns to the ignore file, skipping ones already present.

    Returns the patterns that were actually added, in the order given.
    """
    cleaned = []
    for pattern in patterns:
        if not isinstance(pattern, str) or not pattern.strip():
            raise ValueError("Ignore patterns must be non-empty strings")
        cleaned.append(pattern.strip())

    existing = set(read_ignore_patterns(root))
    added = []
    for pattern in cleaned:
        if pattern in existing or pattern in added:
            continue
        added.append(pattern)

    if not added:
        return []

    path = Path(root) / GITIGNORE_NAME
    current = path.read_text(encoding="utf-8") if path.exists() else ""
    if current and not current.endswith("\n"):
        current += "\n"
    path.write_text(current + "\n".join(added) + "\n", encoding="utf-8")
    return added
