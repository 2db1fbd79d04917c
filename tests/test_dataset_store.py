"""Unit tests for the in-memory dataset store."""
import threading

import pytest

from sheetmatch.dataset_store import DatasetNotFoundError, DatasetStore
from sheetmatch.models import TabularDataset


def dataset(name):
    return TabularDataset.from_lists(name, ["h"], [["v"]])


class TestDatasetStore:
    """Tests for DatasetStore."""

    def test_put_and_get(self):
        store = DatasetStore()
        store.put(dataset("a"))

        assert store.get("a").name == "a"
        assert "a" in store
        assert len(store) == 1

    def test_put_replaces_same_name(self):
        store = DatasetStore()
        store.put(dataset("a"))
        replacement = TabularDataset.from_lists("a", ["other"])
        store.put(replacement)

        assert store.get("a") is replacement
        assert len(store) == 1

    def test_get_missing_raises(self):
        store = DatasetStore()
        with pytest.raises(DatasetNotFoundError) as exc_info:
            store.get("missing")

        assert exc_info.value.names == ["missing"]
        assert "missing" in str(exc_info.value)

    def test_not_found_is_a_key_error(self):
        with pytest.raises(KeyError):
            DatasetStore().get("missing")

    def test_replace_all_clears_previous_datasets(self):
        store = DatasetStore()
        store.put(dataset("old"))

        names = store.replace_all([dataset("b"), dataset("a")])

        assert names == ["a", "b"]
        assert "old" not in store
        assert store.names() == ["a", "b"]

    def test_snapshot_returns_both_datasets(self, store, people, customers):
        assert store.snapshot("people", "customers") == (people, customers)

    def test_snapshot_same_name_twice(self, store, people):
        assert store.snapshot("people", "people") == (people, people)

    def test_snapshot_reports_every_missing_name(self, store):
        with pytest.raises(DatasetNotFoundError) as exc_info:
            store.snapshot("nope", "customers")
        assert exc_info.value.names == ["nope"]

        with pytest.raises(DatasetNotFoundError) as exc_info:
            store.snapshot("x", "y")
        assert exc_info.value.names == ["x", "y"]

    def test_snapshot_is_stable_after_replacement(self, store, people):
        first, _ = store.snapshot("people", "customers")
        store.put(TabularDataset.from_lists("people", ["changed"]))

        assert first is people
        assert first.headers == ("Name", "City")

    def test_clear(self, store):
        store.clear()
        assert len(store) == 0
        assert store.names() == []

    def test_concurrent_puts(self):
        store = DatasetStore()
        threads = [threading.Thread(target=store.put, args=(dataset(f"d{i}"),)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 16
