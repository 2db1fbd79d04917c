"""
Exact-match lookup over one column of a dataset.
"""

import logging
from typing import Dict, List

from .models import TabularDataset, original_row_number
from .normalizer import Normalizer

logger = logging.getLogger(__name__)


class ExactMatchIndex:
    """Maps normalized keys to the row numbers that hold them."""

    def __init__(self, positions: Dict[str, List[int]]):
        self._positions = positions

    @classmethod
    def from_column(cls, dataset: TabularDataset, column_index: int) -> 'ExactMatchIndex':
        """
        Index one column of a dataset.

        Args:
            dataset: Dataset to index
            column_index: Zero-based column to read

        Returns:
            Index of normalized key -> original row numbers, in row order.
            Blank keys and rows too short for the column are left out.
        """
        positions: Dict[str, List[int]] = {}

        for row_index, row in enumerate(dataset.rows):
            if column_index >= len(row):
                continue
            key = Normalizer.standard_key(row[column_index])
            if Normalizer.is_blank(key):
                continue
            positions.setdefault(key, []).append(original_row_number(row_index))

        logger.debug(f"Indexed column {column_index} of '{dataset.name}': {len(positions)} distinct keys")
        return cls(positions)

    def lookup(self, key: str) -> List[int]:
        """Return every row number sharing the key (empty for blank keys)."""
        if Normalizer.is_blank(key):
            return []
        return self._positions.get(key, [])

    def __contains__(self, key: str) -> bool:
        return bool(self.lookup(key))

    def __len__(self) -> int:
        return len(self._positions)
