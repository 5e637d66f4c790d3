"""Tests for the fetch-once catalog cache."""

import pytest

from conftest import CATALOG, StubTransport
from letscrate.adapters.letscrate_api import LetsCrateApi
from letscrate.core.errors import RemoteFailure
from letscrate.core.services.catalog_cache import CatalogCache, is_failure


class TestCatalogCache:
    def test_second_call_does_not_refetch(self, api: LetsCrateApi, transport: StubTransport) -> None:
        cache = CatalogCache(api.list_files)
        first = cache.get_catalog()
        second = cache.get_catalog()
        assert first is second
        assert transport.paths() == ["files/list.json"]

    def test_parses_crates_and_files(self) -> None:
        cache = CatalogCache(lambda: CATALOG)
        catalog = cache.get_catalog()
        assert [c.name for c in catalog.crates] == ["Photos", "Documents", "Archive2021", "Archive2022"]
        assert [f.id for f in catalog.all_files()] == ["00101", "00102", "00201", "00202"]

    def test_missing_or_null_files_mean_empty_crate(self) -> None:
        catalog = CatalogCache(lambda: CATALOG).get_catalog()
        assert catalog.crates[2].files == []
        assert catalog.crates[3].files == []

    def test_numeric_ids_become_strings(self) -> None:
        cache = CatalogCache(lambda: {"crates": [{"id": 12345, "name": "n", "short_code": "x"}]})
        assert cache.get_catalog().crates[0].id == "12345"

    def test_failure_is_not_memoized(self) -> None:
        responses = [
            {"status": "failure", "message": "Service unavailable"},
            CATALOG,
        ]
        calls = []

        def fetch() -> dict:
            calls.append(1)
            return responses[len(calls) - 1]

        cache = CatalogCache(fetch)
        with pytest.raises(RemoteFailure, match="Service unavailable"):
            cache.get_catalog()
        assert not cache.loaded

        assert len(cache.get_catalog().crates) == 4
        assert len(calls) == 2
        assert cache.loaded

    def test_malformed_catalog_raises_remote_failure(self) -> None:
        cache = CatalogCache(lambda: {"crates": [{"name": "no id"}]})
        with pytest.raises(RemoteFailure):
            cache.get_catalog()


class TestIsFailure:
    def test_failure_marker_in_any_value(self) -> None:
        assert is_failure({"status": "failure"})
        assert is_failure({"result": "failure", "message": "x"})

    def test_success_and_empty(self) -> None:
        assert not is_failure({"status": "success"})
        assert not is_failure({})
        assert not is_failure([])
