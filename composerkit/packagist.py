"""Searching the package registry and holding the search results shown to the user."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

PACKAGIST_URL = "https://packagist.org"
MIN_SEARCH_LENGTH = 3

Fetch = Callable[[str], bytes]


class PackagistError(Exception):
    """A request to the registry failed."""


def should_search(text: str) -> bool:
    """A search starts once more than two characters have been typed."""
    return len(text) >= MIN_SEARCH_LENGTH


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_object(data: bytes) -> dict[str, Any]:
    try:
        document = json.loads(data)
    except (ValueError, UnicodeDecodeError):
        return {}
    return document if isinstance(document, dict) else {}


@dataclass
class PackageResult:
    """One package found by a search, with the version chosen for adding."""

    name: str
    description: str = ""
    versions: list[str] = field(default_factory=list)
    downloads: int = 0
    favers: int = 0
    version: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PackageResult:
        """Build a result from a search entry; the last listed version is selected."""
        raw_versions = data.get("versions") or []
        versions = [str(v) for v in raw_versions] if isinstance(raw_versions, list) else []
        return cls(
            name=_to_str(data.get("name")),
            description=_to_str(data.get("description")),
            versions=versions,
            downloads=_to_int(data.get("downloads")),
            favers=_to_int(data.get("favers")),
            version=versions[-1] if versions else "",
        )

    def full_name(self) -> str:
        """The dependency entry for this package, "vendor/name@version"."""
        return f"{self.name}@{self.version}"

    def details_url(self) -> str:
        """Address of the package's page in the registry."""
        return f"{PACKAGIST_URL}/packages/{self.name}"


def _urlopen_fetch(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=30) as response:
        return response.read()


class PackagistClient:
    """Synchronous client of the registry's search and package endpoints."""

    def __init__(self, base_url: str = PACKAGIST_URL, fetch: Fetch | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._fetch = fetch or _urlopen_fetch

    def _get(self, url: str) -> bytes:
        try:
            return self._fetch(url)
        except (urllib.error.URLError, OSError) as error:
            raise PackagistError(f"request to {url} failed: {error}") from error

    def _package_url(self, name: str) -> str:
        return f"{self.base_url}/packages/{quote(name, safe='/')}.json"

    def search(self, name: str, limit: int) -> list[PackageResult]:
        """Find up to ``limit`` packages matching ``name``, each with its known versions.

        Versions are listed in sorted order. Packages whose details cannot be
        fetched are left out. Raises PackagistError if the search itself fails.
        """
        query = urlencode({"per_page": limit, "q": name})
        document = _as_object(self._get(f"{self.base_url}/search.json?{query}"))
        packages = document.get("results")
        results: list[PackageResult] = []
        for entry in packages if isinstance(packages, list) else []:
            root = entry if isinstance(entry, dict) else {}
            package_name = _to_str(root.get("name"))
            try:
                details = _as_object(self._get(self._package_url(package_name)))
            except PackagistError:
                continue
            package = details.get("package")
            versions = package.get("versions") if isinstance(package, dict) else None
            results.append(
                PackageResult.from_json(
                    {
                        "name": root.get("name"),
                        "description": root.get("description"),
                        "downloads": root.get("downloads"),
                        "favers": root.get("favers"),
                        "versions": sorted(versions) if isinstance(versions, dict) else [],
                    }
                )
            )
        return results

    def statistics(self, name: str) -> dict[str, Any] | None:
        """Total downloads and favers of one package.

        Returns None when the reply is not a JSON document. Raises
        PackagistError if the request fails.
        """
        try:
            document = json.loads(self._get(self._package_url(name)))
        except (ValueError, UnicodeDecodeError):
            return None
        if not isinstance(document, (dict, list)):
            return None
        package = document.get("package") if isinstance(document, dict) else None
        package = package if isinstance(package, dict) else {}
        downloads = package.get("downloads")
        total = downloads.get("total") if isinstance(downloads, dict) else None
        return {"downloads": total, "favers": package.get("favers")}


@dataclass
class SearchResults:
    """Packages listed under a search box, and whether a search is in progress."""

    searching: bool = False
    packages: list[PackageResult] = field(default_factory=list)

    def clear(self, search_started: bool) -> None:
        """Drop every listed package and show or hide the searching notice."""
        self.searching = search_started
        self.packages.clear()

    def show(self, results: Iterable[PackageResult | Mapping[str, Any]]) -> list[PackageResult]:
        """Replace the listed packages with new results and return them."""
        self.clear(False)
        self.packages.extend(
            r if isinstance(r, PackageResult) else PackageResult.from_json(r) for r in results
        )
        return self.packages

    def take(self, index: int) -> PackageResult:
        """Remove a listed package, as when it is added to the dependencies, and return it."""
        return self.packages.pop(index)