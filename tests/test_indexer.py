"""Unit tests for the exact-match column index."""
from sheetmatch.indexer import ExactMatchIndex
from sheetmatch.models import TabularDataset


class TestExactMatchIndex:
    """Tests for ExactMatchIndex.from_column and lookup."""

    def test_groups_row_numbers_by_normalized_key(self, customers):
        index = ExactMatchIndex.from_column(customers, 0)

        assert index.lookup("john smith") == [2]
        assert index.lookup("alice") == [3, 4]
        assert index.lookup("carol") == [5]
        assert len(index) == 3

    def test_blank_keys_are_excluded(self, customers):
        index = ExactMatchIndex.from_column(customers, 1)

        assert index.lookup("") == []
        assert "" not in index
        assert len(index) == 3

    def test_missing_key_returns_empty_list(self, customers):
        index = ExactMatchIndex.from_column(customers, 0)
        assert index.lookup("nobody") == []
        assert "nobody" not in index

    def test_ragged_rows_are_skipped(self):
        dataset = TabularDataset.from_lists("t", ["a", "b"], [["x"], [], ["y", "Z"]])
        index = ExactMatchIndex.from_column(dataset, 1)

        assert index.lookup("z") == [4]
        assert len(index) == 1

    def test_column_beyond_every_row_gives_empty_index(self):
        dataset = TabularDataset.from_lists("t", ["a", "b", "c"], [["x"], ["y"]])
        assert len(ExactMatchIndex.from_column(dataset, 2)) == 0
