"""Clean-up applied when an entry editor is cancelled: a freshly added blank entry is dropped."""

from __future__ import annotations

from composerkit.forms import Authors
from composerkit.tree import FixedTreeModel


def discard_rejected_author(authors: Authors, row: int) -> bool:
    """After a cancelled author edit, drop the last row if the edited row is blank.

    Returns whether a row was removed. Raises IndexError for a row that does not exist.
    """
    values = authors.rows[row]
    if any(value.strip() for value in values):
        return False
    authors.rows.pop()
    return True


def discard_rejected_entry(entries: list[str], text: str) -> bool:
    """After a cancelled dependency edit, drop the last entry if the edited text is empty."""
    if text or not entries:
        return False
    entries.pop()
    return True


def discard_rejected_tree_entry(model: FixedTreeModel, text: str) -> bool:
    """After a cancelled tree edit, drop the last root if the edited text is blank."""
    if text.strip() or not model.roots:
        return False
    model.roots.pop()
    return True