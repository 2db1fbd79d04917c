"""Shared fixtures for the sheetmatch test suite."""
import pytest

from sheetmatch.dataset_store import DatasetStore
from sheetmatch.models import TabularDataset


@pytest.fixture
def people():
    """Dataset A: names and cities, with one ragged and one blank row."""
    return TabularDataset.from_lists(
        "people",
        ["Name", "City"],
        [
            ["Jon Smith", "Boston"],
            ["Alice", "Denver"],
            ["Bob"],
            ["", "Austin"],
        ],
    )


@pytest.fixture
def customers():
    """Dataset B: full names and home towns."""
    return TabularDataset.from_lists(
        "customers",
        ["Full Name", "Home Town"],
        [
            ["John Smith", "boston"],
            ["alice", "Dallas"],
            ["ALICE ", ""],
            ["Carol", "Austin"],
        ],
    )


@pytest.fixture
def store(people, customers):
    """Store preloaded with both datasets."""
    store = DatasetStore()
    store.replace_all([people, customers])
    return store


@pytest.fixture
def write_file(tmp_path):
    """Write text content to a file under tmp_path and return its path."""
    def _write(name, content, encoding="utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path
    return _write
