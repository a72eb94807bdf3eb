import pytest

from composerkit.delegates import (
    discard_rejected_author,
    discard_rejected_entry,
    discard_rejected_tree_entry,
)
from composerkit.forms import Authors
from composerkit.tree import FixedTreeModel


def test_blank_author_row_is_dropped():
    authors = Authors()
    authors.add_row("Jane", "Developer", "jane@example.com", "")
    authors.add_row(" ", "", "", "")
    assert discard_rejected_author(authors, 1) is True
    assert authors.rows == [["Jane", "Developer", "jane@example.com", ""]]


def test_filled_author_row_is_kept():
    authors = Authors()
    authors.add_row("Jane")
    assert discard_rejected_author(authors, 0) is False
    assert len(authors) == 1


def test_missing_author_row_raises():
    with pytest.raises(IndexError):
        discard_rejected_author(Authors(), 0)


def test_empty_dependency_entry_is_dropped():
    entries = ["vendor/name@version", ""]
    assert discard_rejected_entry(entries, "") is True
    assert entries == ["vendor/name@version"]


def test_non_empty_dependency_entry_is_kept():
    entries = ["vendor/name@version"]
    assert discard_rejected_entry(entries, "vendor/name@version") is False
    assert entries == ["vendor/name@version"]


def test_dependency_whitespace_is_not_empty():
    entries = [" "]
    assert discard_rejected_entry(entries, " ") is False
    assert entries == [" "]


def test_empty_dependency_list_is_untouched():
    entries: list[str] = []
    assert discard_rejected_entry(entries, "") is False
    assert entries == []


def test_blank_tree_entry_drops_last_root():
    model = FixedTreeModel()
    model.add_root("psr-4").add_child("App: src/")
    model.add_root("").add_child("  ")
    assert discard_rejected_tree_entry(model, "  ") is True
    assert [root.text for root in model] == ["psr-4"]


def test_filled_tree_entry_is_kept():
    model = FixedTreeModel()
    model.add_root("files").add_child("helpers.php")
    assert discard_rejected_tree_entry(model, "helpers.php") is False
    assert len(model) == 1


def test_empty_tree_is_untouched():
    model = FixedTreeModel()
    assert discard_rejected_tree_entry(model, "") is False
    assert len(model) == 0