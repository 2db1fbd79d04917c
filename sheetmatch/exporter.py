"""
Base exporter interface and common functionality.
Abstract base for all format-specific match exporters.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Collection, Dict, List, Optional, Sequence

from .models import MatchGroup, TabularDataset

logger = logging.getLogger(__name__)


class Exporter(ABC):
    """Abstract base exporter class."""

    extension = ''

    def __init__(self, output_dir: Path):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for export files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @abstractmethod
    def export(self, groups: List[MatchGroup], dataset_a: TabularDataset,
               dataset_b: TabularDataset, filename: str, **options) -> Optional[Path]:
        """
        Export match groups to file.

        Args:
            groups: Match groups to write
            dataset_a: Dataset the groups' first rows come from
            dataset_b: Dataset the groups' second rows come from
            filename: Output filename
            **options: Format-specific options

        Returns:
            Path to exported file, or None if nothing was written
        """
        pass

    @staticmethod
    def _keep(values: Sequence[Any], ignored: Collection[int]) -> List[Any]:
        """Drop values at ignored positions."""
        return [v for i, v in enumerate(values) if i not in ignored]

    def build_header(self, dataset_a: TabularDataset, dataset_b: TabularDataset,
                     ignore_a: Collection[int] = (), ignore_b: Collection[int] = ()) -> List[str]:
        """Header of the combined export table."""
        return [
            'Row1',
            *self._keep(dataset_a.headers, ignore_a),
            'Row2',
            *self._keep(dataset_b.headers, ignore_b),
            'Match_Col1',
            'Match_Col2',
            'Match_Type',
        ]

    def build_rows(self, group: MatchGroup, dataset_a: TabularDataset,
                   dataset_b: TabularDataset, ignore_a: Collection[int] = (),
                   ignore_b: Collection[int] = ()) -> List[List[Any]]:
        """
        Join the matched rows of both datasets, one output row per match record.

        Ragged source rows contribute only the cells they have.
        """
        rows = []
        for record in group.matches:
            row_a = dataset_a.row_by_number(record.original_row1)
            row_b = dataset_b.row_by_number(record.original_row2)
            rows.append([
                record.original_row1,
                *self._keep(row_a, ignore_a),
                record.original_row2,
                *self._keep(row_b, ignore_b),
                group.header1,
                group.header2,
                record.match_type,
            ])
        return rows

    def build_table(self, groups: List[MatchGroup], dataset_a: TabularDataset,
                    dataset_b: TabularDataset, ignore_a: Collection[int] = (),
                    ignore_b: Collection[int] = ()) -> List[List[Any]]:
        """Header plus the rows of every group, or [] when there are no rows."""
        body = []
        for group in groups:
            body.extend(self.build_rows(group, dataset_a, dataset_b, ignore_a, ignore_b))
        if not body:
            return []
        return [self.build_header(dataset_a, dataset_b, ignore_a, ignore_b), *body]

    def _log_export(self, filename: str, record_count: int):
        """Log export completion."""
        logger.info(f"Exported {record_count} match rows to {filename}")


class ExportStats:
    """Export operation statistics."""

    def __init__(self):
        self.total_records = 0
        self.exact_records = 0
        self.fuzzy_records = 0
        self.export_count = 0
        self.start_time = datetime.now()

    def add_export(self, groups: List[MatchGroup]):
        """Record export statistics."""
        for group in groups:
            self.total_records += len(group)
            self.exact_records += group.exact_count
            self.fuzzy_records += group.fuzzy_count
        self.export_count += 1

    def get_duration(self) -> float:
        """Get duration in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_records': self.total_records,
            'exact_records': self.exact_records,
            'fuzzy_records': self.fuzzy_records,
            'export_count': self.export_count,
            'duration_seconds': self.get_duration(),
        }
