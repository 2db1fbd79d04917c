"""
Column pair matching engine.
Compares every column of one dataset against every column of another.
"""

import logging
from typing import List, Optional, Set, Tuple

from .indexer import ExactMatchIndex
from .models import (
    DEFAULT_FUZZY_THRESHOLD,
    MatchGroup,
    MatchRecord,
    TabularDataset,
    original_row_number,
)
from .normalizer import Normalizer
from .reconciler import Reconciler

logger = logging.getLogger(__name__)


class ColumnPairMatcher:
    """Finds exact and fuzzy cell matches for each (column A, column B) pair."""

    def __init__(self, use_fuzzy: bool = False, threshold: int = DEFAULT_FUZZY_THRESHOLD):
        """
        Initialize matcher.

        Args:
            use_fuzzy: Run the fuzzy pass after the exact lookup
            threshold: Fuzzy threshold as a percentage (0-100)
        """
        self.use_fuzzy = use_fuzzy
        self.threshold = threshold
        self.comparisons = 0

    def match(self, dataset_a: TabularDataset, dataset_b: TabularDataset) -> List[MatchGroup]:
        """
        Compare all column pairs of two datasets.

        Args:
            dataset_a: First dataset
            dataset_b: Second dataset

        Returns:
            Non-empty match groups, in (column A, column B) order
        """
        logger.debug(
            f"Matching '{dataset_a.name}' vs '{dataset_b.name}'. "
            f"Fuzzy: {self.use_fuzzy} (Threshold: {self.threshold})"
        )
        groups = []
        self.comparisons = 0

        for column_a in range(dataset_a.column_count):
            for column_b in range(dataset_b.column_count):
                self.comparisons += 1
                group = self.match_columns(dataset_a, dataset_b, column_a, column_b)
                if group is not None:
                    groups.append(group)

        logger.info(
            f"Matching complete. Ran {self.comparisons} column pair comparisons, "
            f"found {len(groups)} match groups."
        )
        return groups

    def match_columns(self, dataset_a: TabularDataset, dataset_b: TabularDataset,
                      column_a: int, column_b: int) -> Optional[MatchGroup]:
        """
        Compare one column of A against one column of B.

        Returns:
            MatchGroup, or None if no rows matched
        """
        index = ExactMatchIndex.from_column(dataset_b, column_b)
        keys_b = self._column_keys(dataset_b, column_b) if self.use_fuzzy else []

        matches: List[MatchRecord] = []
        matched_pairs: Set[Tuple[int, int]] = set()

        for row_index_a in range(dataset_a.row_count):
            val1 = dataset_a.cell(row_index_a, column_a)
            if val1 is None:
                continue
            key1 = Normalizer.standard_key(val1)
            row1 = original_row_number(row_index_a)

            for row2 in index.lookup(key1):
                if (row1, row2) in matched_pairs:
                    continue
                val2 = dataset_b.row_by_number(row2)[column_b]
                matches.append(MatchRecord(row1, row2, val1, val2, is_fuzzy=False))
                matched_pairs.add((row1, row2))

            # Blank cells never match, not even each other
            if not self.use_fuzzy or Normalizer.is_blank(key1):
                continue

            for row_index_b, key2 in enumerate(keys_b):
                row2 = original_row_number(row_index_b)
                if (row1, row2) in matched_pairs:
                    continue
                if key2 is None or Normalizer.is_blank(key2):
                    continue
                if Reconciler.keys_match(key1, key2, self.threshold):
                    val2 = dataset_b.cell(row_index_b, column_b)
                    matches.append(MatchRecord(row1, row2, val1, val2, is_fuzzy=True))
                    matched_pairs.add((row1, row2))

        if not matches:
            return None

        return MatchGroup(
            tab1=dataset_a.name,
            tab2=dataset_b.name,
            header1=dataset_a.headers[column_a],
            header2=dataset_b.headers[column_b],
            column1=column_a,
            column2=column_b,
            matches=tuple(matches),
        )

    @staticmethod
    def _column_keys(dataset: TabularDataset, column_index: int) -> List[Optional[str]]:
        """Normalized keys of one column, None where the row is too short."""
        keys = []
        for row_index in range(dataset.row_count):
            value = dataset.cell(row_index, column_index)
            keys.append(None if value is None else Normalizer.standard_key(value))
        return keys
