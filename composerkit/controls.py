"""Actions behind the add, edit and remove controls, and the project path check."""

from __future__ import annotations

import os
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from composerkit.tree import FixedTreeModel, TreeNode

MANIFEST_NAME = "composer.json"
NOT_WRITABLE_MESSAGE = "Path is not writeable"
MANIFEST_EXISTS_MESSAGE = "Directory already has composer.json"

Confirm = Callable[[str], bool]


@dataclass(frozen=True)
class PathStatus:
    """Outcome of checking a directory chosen for a new project."""

    path: str
    accepted: bool
    message: str = ""


def check_project_path(path: str | os.PathLike[str]) -> PathStatus:
    """Check that a new manifest can be written to the directory.

    The directory must be writable and must not already hold a manifest.
    Raises ValueError for an empty path.
    """
    text = os.fspath(path)
    if not text:
        raise ValueError("no path selected")
    directory = Path(text)
    if not (directory.exists() and os.access(directory, os.W_OK)):
        return PathStatus(text, False, NOT_WRITABLE_MESSAGE)
    if (directory / MANIFEST_NAME).exists():
        return PathStatus(text, False, MANIFEST_EXISTS_MESSAGE)
    return PathStatus(text, True, "")


def _question(label: str) -> str:
    return f"Do you want remove {label}?"


def _label(item: Any) -> str:
    if isinstance(item, (list, tuple)):
        return str(item[0]) if item else ""
    return str(item)


def remove_row(rows: MutableSequence[Any], index: int, confirm: Confirm) -> Any | None:
    """Remove one row after the user confirms.

    ``confirm`` receives the question and answers it. The label asked about is
    the row's first column. Returns the removed row, or None when the index
    does not point at a row or the user declined.
    """
    if not 0 <= index < len(rows):
        return None
    if not confirm(_question(_label(rows[index]))):
        return None
    return rows.pop(index)


def remove_tree_entry(
    model: FixedTreeModel,
    root_index: int,
    child_index: int | None,
    confirm: Confirm,
) -> TreeNode | None:
    """Remove a child entry of a tree after the user confirms.

    Roots themselves are never removed directly; a root left without entries
    goes with its last one. Returns the removed entry, or None when nothing
    was removed.
    """
    if child_index is None or not 0 <= root_index < len(model.roots):
        return None
    root = model.roots[root_index]
    if not 0 <= child_index < len(root.children):
        return None
    if not confirm(_question(root.children[child_index].text)):
        return None
    return model.remove_child(root_index, child_index)


def add_tree_entry(model: FixedTreeModel) -> TreeNode:
    """Append a blank root holding one blank entry, ready to be edited; return the root."""
    root = model.add_root("")
    root.add_child("")
    return root