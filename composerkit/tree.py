"""Two-level tree of labelled entries, used by the autoload, repository and script sections."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A labelled node holding an ordered list of child nodes."""

    text: str = ""
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, text: str = "") -> TreeNode:
        """Append a new child with the given text and return it."""
        child = TreeNode(text)
        self.children.append(child)
        return child

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.children)


@dataclass
class FixedTreeModel:
    """Ordered root nodes (a type or event) each holding child entries (paths, urls, handlers)."""

    header: str = ""
    roots: list[TreeNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.roots)

    def __getitem__(self, index: int) -> TreeNode:
        return self.roots[index]

    def add_root(self, text: str = "") -> TreeNode:
        """Append a new root with the given text and return it."""
        root = TreeNode(text)
        self.roots.append(root)
        return root

    def merge_duplicates(self) -> None:
        """Fold roots sharing a label into the first one, keeping child order."""
        first_by_text: dict[str, TreeNode] = {}
        kept: list[TreeNode] = []
        for root in self.roots:
            first = first_by_text.get(root.text)
            if first is None:
                first_by_text[root.text] = root
                kept.append(root)
            else:
                first.children.extend(root.children)
        self.roots[:] = kept

    def remove_child(self, root_index: int, child_index: int) -> TreeNode:
        """Remove one child entry; a root left without children is removed too.

        Returns the removed child. Raises IndexError for a position that does not exist.
        """
        root = self.roots[root_index]
        removed = root.children.pop(child_index)
        if not root.children:
            del self.roots[root_index]
        return removed