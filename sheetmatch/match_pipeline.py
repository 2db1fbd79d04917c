"""
Match pipeline orchestrator.
Resolves a match request against the dataset store and runs the engine.
"""

import logging

from .dataset_store import DatasetStore
from .matcher import ColumnPairMatcher
from .models import MatchRequest, MatchResult

logger = logging.getLogger(__name__)


class MatchPipeline:
    """Runs match requests against stored datasets."""

    def __init__(self, store: DatasetStore):
        """
        Initialize match pipeline.

        Args:
            store: DatasetStore holding the loaded datasets
        """
        self.store = store

    def run(self, request: MatchRequest) -> MatchResult:
        """
        Execute the all-to-all column comparison for a request.

        Args:
            request: MatchRequest naming the two datasets

        Returns:
            MatchResult with ordered match groups

        Raises:
            DatasetNotFoundError: If either dataset is not loaded
        """
        logger.info(
            f"Handling matching request: '{request.sheet1}' vs '{request.sheet2}'. "
            f"Fuzzy: {request.use_fuzzy} (Threshold: {request.fuzzy_threshold})"
        )
        dataset_a, dataset_b = self.store.snapshot(request.sheet1, request.sheet2)

        matcher = ColumnPairMatcher(
            use_fuzzy=request.use_fuzzy,
            threshold=request.fuzzy_threshold,
        )
        groups = matcher.match(dataset_a, dataset_b)

        return MatchResult(
            request=request,
            groups=groups,
            comparisons=matcher.comparisons,
        )
