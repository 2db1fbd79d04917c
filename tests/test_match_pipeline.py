"""Unit tests for running match requests against the store."""
import pytest

from sheetmatch.dataset_store import DatasetNotFoundError
from sheetmatch.match_pipeline import MatchPipeline
from sheetmatch.models import MatchRequest


class TestMatchPipeline:
    """Tests for MatchPipeline.run."""

    def test_runs_exact_match(self, store):
        result = MatchPipeline(store).run(MatchRequest("people", "customers", use_fuzzy=False))

        assert result.comparisons == 4
        assert len(result.groups) == 2
        assert result.total_matches == 4

    def test_runs_fuzzy_match(self, store):
        result = MatchPipeline(store).run(
            MatchRequest("people", "customers", use_fuzzy=True, fuzzy_threshold=20)
        )

        assert result.total_matches == 5
        assert result.groups[0].fuzzy_count == 1

    def test_missing_dataset_raises_before_matching(self, store):
        with pytest.raises(DatasetNotFoundError):
            MatchPipeline(store).run(MatchRequest("people", "missing"))

    def test_result_to_dict(self, store):
        result = MatchPipeline(store).run(MatchRequest("people", "customers"))
        data = result.to_dict()

        assert data["sheet1"] == "people"
        assert data["total_matches"] == 4
        assert data["groups"][0]["tab1"] == "people"
        assert data["groups"][0]["matches"][0] == {
            "originalRow1": 3,
            "originalRow2": 3,
            "val1": "Alice",
            "val2": "alice",
            "isFuzzy": False,
        }

    def test_dataset_against_itself(self, store):
        result = MatchPipeline(store).run(MatchRequest("customers", "customers"))

        # "alice" rows 3 and 4 match each other and themselves
        full_names = result.groups[0]
        assert (full_names.column1, full_names.column2) == (0, 0)
        assert len(full_names) == 1 + 4 + 1
