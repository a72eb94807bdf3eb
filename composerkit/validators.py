"""Checks that decide whether an edited entry may be accepted."""

from __future__ import annotations

import re

_UNSET = "-"
_COMPLEX_AUTOLOAD_TYPES = frozenset({"psr-0", "psr-4"})
_NAMESPACE_PATH = re.compile(r".+:.+", re.DOTALL)
_DEPENDENCY = re.compile(r".+/.+@.+", re.DOTALL)


def is_valid_author(name: str, role: str, email: str, homepage: str) -> bool:
    """An author is acceptable when at least one of its fields holds text."""
    return any(value.strip() for value in (name, role, email, homepage))


def is_complex_autoload_type(autoload_type: str) -> bool:
    """PSR types map a namespace to a path, written as "Namespace: path"."""
    return autoload_type in _COMPLEX_AUTOLOAD_TYPES


def is_valid_autoloader(autoload_type: str, path: str) -> bool:
    """A type must be chosen; PSR types need "namespace:path", others any non-empty path."""
    if autoload_type == _UNSET:
        return False
    path = path.strip()
    if is_complex_autoload_type(autoload_type):
        return _NAMESPACE_PATH.fullmatch(path) is not None
    return bool(path)


def is_valid_dependency(text: str) -> bool:
    """A dependency is written as "vendor/name@version"."""
    return _DEPENDENCY.fullmatch(text.strip()) is not None


def is_valid_repository(repository_type: str, url: str) -> bool:
    """A repository needs a chosen type and a non-empty url."""
    return repository_type != _UNSET and bool(url.strip())


def is_valid_script(event: str, handler: str) -> bool:
    """A script needs a chosen event and a non-empty handler."""
    return event != _UNSET and bool(handler.strip())