# composerkit

composerkit holds the data models and rules behind an editor for
`composer.json` manifests. It has form sections that store manifest fields as
text, a two-level tree model for grouped entries, the checks that decide
whether an edited entry may be accepted, and a small client for searching
Packagist. It needs nothing outside the standard library.

## Installation

```
pip install composerkit
```

To run the test suite:

```
pip install "composerkit[test]"
pytest
```

## Modules

### `composerkit.forms`

These are flat form sections. Each one stores its values as text.

- `General` stores the top-level fields. You address them with
  `GeneralField` (`NAME`, `VERSION`, `TYPE`, `MINIMUM_STABILITY`,
  `PREFER_STABLE`, `KEYWORDS`, `LICENSE`, `README`, `HOMEPAGE`, `TIME`,
  `DESCRIPTION`) and read or write them with `get(field)` and
  `set(field, value)`.
  - The choice fields start at `"-"`.
  - `TIME` starts at the current time in `YYYY-MM-DD hh:mm:ss` form.
  - The allowed choices are in `TYPE_CHOICES`, `STABILITY_CHOICES` and
    `PREFER_STABLE_CHOICES`.
  - `set` raises `TypeError` when the value is not a string.
- `Config` stores one text value per config option, in form order.
  - `options()` lists every option. `integer_options()`,
    `string_options()`, `boolean_options()` and `mixed_options()` list each
    kind on its own.
  - Integer options start at `"-1"`. Options listed in `CHOICES` start at
    `"-"`. All other options start empty.
  - Read and write values with `config["vendor-dir"]`. Assigning to an
    unknown option raises `KeyError`, and assigning a non-string value
    raises `TypeError`.
- `Authors` is a table of `[name, role, email, homepage]` rows. Add a row
  with `add_row(...)`. The columns are numbered by `AuthorField`.
- `Support` stores the support channels. You address them with
  `SupportField` (`EMAIL`, `ISSUES`, `FORUM`, `WIKI`, `IRC`, `SOURCE`,
  `DOCS`, `CHAT`) and use `get` and `set` the same way as `General`.
- `FormVisitor` is an abstract base class with eight methods:
  `visit_general`, `visit_dependencies`, `visit_autoload`,
  `visit_repositories`, `visit_scripts`, `visit_config`, `visit_authors` and
  `visit_support`. Each section's `accept(visitor)` calls the matching
  method.

### `composerkit.tree`

`FixedTreeModel` is an ordered list of root `TreeNode`s. Each root is a type
or an event, and its children are paths, urls or handlers.

- `add_root(text)` adds a root, and `TreeNode.add_child(text)` adds a child
  to a node.
- `merge_duplicates()` folds roots with the same text into the first of
  them. Children keep their order.
- `remove_child(root_index, child_index)` removes one child. If that leaves
  the root without children, the root is removed as well.

```python
from composerkit.tree import FixedTreeModel

model = FixedTreeModel(header="autoload")
model.add_root("psr-4").add_child("App\\: src/")
model.add_root("psr-4").add_child("Tests\\: tests/")
model.merge_duplicates()
assert [child.text for child in model[0]] == ["App\\: src/", "Tests\\: tests/"]
```

### `composerkit.validators`

These functions decide whether an edited entry may be accepted:

- `is_valid_author(name, role, email, homepage)`: at least one field is
  non-blank.
- `is_valid_autoloader(autoload_type, path)`: a type is chosen, that is, it
  is not `"-"`. `psr-0` and `psr-4` need `namespace:path`; see
  `is_complex_autoload_type`. Other types need any non-empty path.
- `is_valid_dependency(text)`: the text has the form `vendor/name@version`.
- `is_valid_repository(repository_type, url)` and
  `is_valid_script(event, handler)`: a choice is made and the text is not
  blank.

### `composerkit.delegates`

These functions clean up after the user cancels an editor. They drop the
freshly added blank entry:

- `discard_rejected_author(authors, row)`
- `discard_rejected_entry(entries, text)`
- `discard_rejected_tree_entry(model, text)`

Each one returns whether it removed an entry.

### `composerkit.controls`

- `check_project_path(path)` returns a `PathStatus` with the fields `path`,
  `accepted` and `message`.
  - The directory is rejected when it is not writable.
  - It is also rejected when it already holds a `composer.json`.
  - An empty path raises `ValueError`.
- `remove_row(rows, index, confirm)` and
  `remove_tree_entry(model, root_index, child_index, confirm)` remove an
  entry, but only after confirmation.
  - `confirm` is a callable. It receives a question of the form
    `"Do you want remove <label>?"` and returns a bool.
  - Both return the removed entry, or `None` when nothing was removed.
  - Roots of a tree are never removed directly.
- `add_tree_entry(model)` appends a blank root that holds one blank child,
  and returns the root.

### `composerkit.packagist`

- `PackagistClient(base_url=..., fetch=None)` talks to the Packagist
  registry. By default it uses `urllib`. You can pass any `fetch(url) -> bytes`
  callable instead.
  - `search(name, limit)` returns a list of `PackageResult`. Each result
    lists its versions in sorted order. A package whose details cannot be
    fetched is skipped.
  - `statistics(name)` returns `{"downloads": ..., "favers": ...}`. It
    returns `None` when the reply is not JSON.
  - A failed request raises `PackagistError`.
- `PackageResult.from_json(data)` builds a result and selects the last
  listed version.
  - `full_name()` gives the dependency entry, `vendor/name@version`.
  - `details_url()` gives the package's registry page.
- `SearchResults` is the list shown under a search box.
  - `clear(search_started)` empties the list and sets whether a search is
    in progress.
  - `show(results)` replaces the listed packages with new results.
  - `take(index)` removes one listed package and returns it.
- `should_search(text)` is true once at least three characters have been
  typed.

## What this package does not do

- **No file reading or writing:** composerkit does not load a
  `composer.json` into the form sections, and it does not build or write one
  from them. `FormVisitor` only defines the interface for that work, and no
  concrete visitor is included.
- **No section classes** exist for dependencies, autoload, repositories or
  scripts. Use `FixedTreeModel` and plain lists for that data.
- **No user interface:** there are no windows, widgets or command-line
  tools. The package only provides the models and rules that a front end
  would use.