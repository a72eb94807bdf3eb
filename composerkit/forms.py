"""Flat sections of a package form: general data, config, authors and support."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import IntEnum
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class FormVisitor(ABC):
    """Operation applied to every section of a package form."""

    @abstractmethod
    def visit_general(self, form: Any) -> None: ...

    @abstractmethod
    def visit_dependencies(self, form: Any) -> None: ...

    @abstractmethod
    def visit_autoload(self, form: Any) -> None: ...

    @abstractmethod
    def visit_repositories(self, form: Any) -> None: ...

    @abstractmethod
    def visit_scripts(self, form: Any) -> None: ...

    @abstractmethod
    def visit_config(self, form: Any) -> None: ...

    @abstractmethod
    def visit_authors(self, form: Any) -> None: ...

    @abstractmethod
    def visit_support(self, form: Any) -> None: ...


class GeneralField(IntEnum):
    NAME = 0
    VERSION = 1
    TYPE = 2
    MINIMUM_STABILITY = 3
    PREFER_STABLE = 4
    KEYWORDS = 5
    LICENSE = 6
    README = 7
    HOMEPAGE = 8
    TIME = 9
    DESCRIPTION = 10


class General:
    """Name, version, type and the other top-level package fields, kept as text."""

    TYPE_CHOICES = ("-", "library", "project", "metapackage", "composer-plugin")
    STABILITY_CHOICES = ("-", "dev", "alpha", "beta", "RC", "stable")
    PREFER_STABLE_CHOICES = ("-", "true", "false")

    def __init__(self) -> None:
        self._values = {f: "" for f in GeneralField}
        self._values[GeneralField.TYPE] = self.TYPE_CHOICES[0]
        self._values[GeneralField.MINIMUM_STABILITY] = self.STABILITY_CHOICES[0]
        self._values[GeneralField.PREFER_STABLE] = self.PREFER_STABLE_CHOICES[0]
        self._values[GeneralField.TIME] = datetime.now().strftime(TIME_FORMAT)

    def accept(self, visitor: FormVisitor) -> None:
        visitor.visit_general(self)

    def get(self, field: GeneralField | int) -> str:
        return self._values[GeneralField(field)]

    def set(self, field: GeneralField | int, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"field value must be text, not {type(value).__name__}")
        self._values[GeneralField(field)] = value


_INTEGER_OPTIONS = ("process-timeout", "cache-files-ttl")
_STRING_OPTIONS = (
    "cafile", "capath", "vendor-dir", "bin-dir", "data-dir", "cache-dir", "cache-files-dir",
    "cache-repo-dir", "cache-vcs-dir", "archive-dir", "archive-format", "cache-files-maxsize",
    "autoloader-suffix", "bin-compat", "preferred-install",
)
_BOOLEAN_OPTIONS = (
    "disable-tls", "secure-http", "optimize-autoloader", "sort-packages", "classmap-authoritative",
    "apcu-autoloader", "notify-on-install", "prepend-autoloader", "htaccess-protect", "use-include-path",
)
_MIXED_OPTIONS = ("store-auths", "discard-changes")

_BOOL_CHOICES = ("-", "true", "false")


class Config:
    """Values of the config section, one text value per option in form order."""

    CHOICES: dict[str, tuple[str, ...]] = {
        "bin-compat": ("-", "full", "auto"),
        "preferred-install": ("-", "source", "dist", "auto"),
        **{option: _BOOL_CHOICES for option in _BOOLEAN_OPTIONS},
        "store-auths": ("-", "true", "false", "prompt"),
        "discard-changes": ("-", "true", "false", "stash"),
    }
    DIRECTORY_OPTIONS = (
        "capath", "vendor-dir", "bin-dir", "data-dir", "cache-dir", "cache-files-dir",
        "cache-repo-dir", "cache-vcs-dir", "archive-dir",
    )
    FILE_OPTIONS = ("cafile",)

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        for option in self.options():
            if option in _INTEGER_OPTIONS:
                self.values[option] = "-1"
            elif option in self.CHOICES:
                self.values[option] = self.CHOICES[option][0]
            else:
                self.values[option] = ""

    def accept(self, visitor: FormVisitor) -> None:
        visitor.visit_config(self)

    def options(self) -> list[str]:
        """All option names in form order."""
        return [*_INTEGER_OPTIONS, *_STRING_OPTIONS, *_BOOLEAN_OPTIONS, *_MIXED_OPTIONS]

    def integer_options(self) -> list[str]:
        return list(_INTEGER_OPTIONS)

    def string_options(self) -> list[str]:
        return list(_STRING_OPTIONS)

    def boolean_options(self) -> list[str]:
        return list(_BOOLEAN_OPTIONS)

    def mixed_options(self) -> list[str]:
        return list(_MIXED_OPTIONS)

    def __getitem__(self, option: str) -> str:
        return self.values[option]

    def __setitem__(self, option: str, value: str) -> None:
        if option not in self.values:
            raise KeyError(option)
        if not isinstance(value, str):
            raise TypeError(f"option value must be text, not {type(value).__name__}")
        self.values[option] = value


class AuthorField(IntEnum):
    NAME = 0
    ROLE = 1
    EMAIL = 2
    HOMEPAGE = 3


class Authors:
    """Table of authors; each row holds name, role, email and homepage."""

    HEADERS = ("Name", "Role", "Email", "Homepage")

    def __init__(self) -> None:
        self.rows: list[list[str]] = []

    def accept(self, visitor: FormVisitor) -> None:
        visitor.visit_authors(self)

    def add_row(self, name: str = "", role: str = "", email: str = "", homepage: str = "") -> list[str]:
        """Append an author row and return it."""
        row = [name, role, email, homepage]
        self.rows.append(row)
        return row

    def __len__(self) -> int:
        return len(self.rows)


class SupportField(IntEnum):
    EMAIL = 0
    ISSUES = 1
    FORUM = 2
    WIKI = 3
    IRC = 4
    SOURCE = 5
    DOCS = 6
    CHAT = 7


class Support:
    """Support channels of the package, kept as text."""

    LABELS = ("Email:", "Issues:", "Forum:", "Wiki:", "Irc:", "Source:", "Docs:", "Chat:")

    def __init__(self) -> None:
        self._values = {f: "" for f in SupportField}

    def accept(self, visitor: FormVisitor) -> None:
        visitor.visit_support(self)

    def get(self, field: SupportField | int) -> str:
        return self._values[SupportField(field)]

    def set(self, field: SupportField | int, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"field value must be text, not {type(value).__name__}")
        self._values[SupportField(field)] = value