import json
from urllib.parse import parse_qs, urlsplit

import pytest

from composerkit.packagist import (
    PACKAGIST_URL,
    PackageResult,
    PackagistClient,
    PackagistError,
    SearchResults,
    should_search,
)

BASE = "http://registry.test"


class FakeRegistry:
    def __init__(self, search=None, packages=None, failing=()):
        self.search = search
        self.packages = packages or {}
        self.failing = set(failing)
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        parts = urlsplit(url)
        if parts.path == "/search.json":
            if "search" in self.failing:
                raise OSError("down")
            return json.dumps(self.search).encode()
        name = parts.path[len("/packages/"):-len(".json")]
        if name in self.failing:
            raise OSError("down")
        body = self.packages.get(name)
        return body if isinstance(body, bytes) else json.dumps(body).encode()


def test_should_search_needs_more_than_two_characters():
    assert should_search("mon") is True
    assert should_search("mo") is False
    assert should_search("") is False


def test_from_json_selects_last_version():
    data = {
        "name": "vendor/pkg",
        "description": "A package",
        "versions": ["1.0.0", "2.0.0"],
        "downloads": 10,
        "favers": 3,
    }
    result = PackageResult.from_json(data)
    assert result.version == "2.0.0"
    assert result.full_name() == "vendor/pkg@2.0.0"
    assert (result.downloads, result.favers) == (10, 3)
    assert result.description == "A package"


def test_from_json_defaults_for_missing_fields():
    result = PackageResult.from_json({"name": "vendor/pkg"})
    assert result.versions == []
    assert result.downloads == 0
    assert result.full_name() == "vendor/pkg@"


def test_details_url_points_at_package_page():
    result = PackageResult(name="vendor/pkg")
    assert result.details_url() == PACKAGIST_URL + "/packages/vendor/pkg"


def test_search_collects_versions_sorted():
    registry = FakeRegistry(
        search={"results": [{"name": "vendor/pkg", "description": "d", "downloads": 5, "favers": 2}]},
        packages={"vendor/pkg": {"package": {"versions": {"dev-main": {}, "1.0.0": {}, "2.0.0": {}}}}},
    )
    client = PackagistClient(BASE, fetch=registry)
    results = client.search("pkg", 15)
    assert [r.name for r in results] == ["vendor/pkg"]
    assert results[0].versions == ["1.0.0", "2.0.0", "dev-main"]
    assert results[0].version == "dev-main"
    assert (results[0].downloads, results[0].favers) == (5, 2)
    query = parse_qs(urlsplit(registry.urls[0]).query)
    assert query == {"per_page": ["15"], "q": ["pkg"]}


def test_search_skips_packages_whose_details_fail():
    registry = FakeRegistry(
        search={"results": [{"name": "vendor/a"}, {"name": "vendor/b"}]},
        packages={"vendor/b": {"package": {"versions": {"1.0": {}}}}},
        failing={"vendor/a"},
    )
    results = PackagistClient(BASE, fetch=registry).search("vendor", 5)
    assert [r.name for r in results] == ["vendor/b"]


def test_search_failure_raises():
    registry = FakeRegistry(failing={"search"})
    with pytest.raises(PackagistError):
        PackagistClient(BASE, fetch=registry).search("pkg", 5)


def test_search_with_invalid_document_finds_nothing():
    registry = FakeRegistry(search="not an object")
    assert PackagistClient(BASE, fetch=registry).search("pkg", 5) == []


def test_statistics_reads_totals():
    registry = FakeRegistry(
        packages={"vendor/pkg": {"package": {"downloads": {"total": 42}, "favers": 7}}},
    )
    stats = PackagistClient(BASE, fetch=registry).statistics("vendor/pkg")
    assert stats == {"downloads": 42, "favers": 7}


def test_statistics_returns_none_for_invalid_json():
    registry = FakeRegistry(packages={"vendor/pkg": b"<html>"})
    assert PackagistClient(BASE, fetch=registry).statistics("vendor/pkg") is None


def test_statistics_failure_raises():
    registry = FakeRegistry(failing={"vendor/pkg"})
    with pytest.raises(PackagistError):
        PackagistClient(BASE, fetch=registry).statistics("vendor/pkg")


def test_search_results_show_and_take():
    results = SearchResults(searching=True)
    shown = results.show([
        {"name": "vendor/a", "versions": ["1.0"]},
        PackageResult(name="vendor/b", versions=["2.0"], version="2.0"),
    ])
    assert results.searching is False
    assert [p.name for p in shown] == ["vendor/a", "vendor/b"]
    taken = results.take(0)
    assert taken.full_name() == "vendor/a@1.0"
    assert [p.name for p in results.packages] == ["vendor/b"]


def test_search_results_clear_sets_notice():
    results = SearchResults()
    results.show([{"name": "vendor/a"}])
    results.clear(True)
    assert results.searching is True
    assert results.packages == []


def test_take_missing_index_raises():
    with pytest.raises(IndexError):
        SearchResults().take(0)