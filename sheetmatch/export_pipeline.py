"""
Export pipeline orchestrator.
Coordinates all exporters and manages export operations.
"""

import logging
from pathlib import Path
from typing import Any, Collection, Dict, List, Optional

from .csv_exporter import CSVExporter
from .dataset_store import DatasetStore
from .excel_exporter import ExcelExporter
from .exporter import ExportStats
from .json_exporter import JSONExporter
from .models import MatchGroup, MatchResult, TabularDataset
from .utils import safe_filename

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Orchestrates export operations across all formats."""

    EXPORTERS = {
        'excel': ExcelExporter,
        'csv': CSVExporter,
        'json': JSONExporter,
    }

    ALL_MATCHES_STEM = 'EDM_All_Matches_Combined'
    ALL_MATCHES_SHEET = 'All Matches Combined'
    GROUP_SHEET = 'Results'

    def __init__(self, output_dir: Path):
        """
        Initialize export pipeline.

        Args:
            output_dir: Base output directory
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.stats = ExportStats()

    def _exporter_class(self, format: str):
        if format not in self.EXPORTERS:
            raise ValueError(f"Unsupported export format: {format}")
        return self.EXPORTERS[format]

    def export_groups(self, groups: List[MatchGroup], dataset_a: TabularDataset,
                      dataset_b: TabularDataset, format: str, filename: str,
                      **options) -> Optional[Path]:
        """
        Export match groups in specified format.

        Args:
            groups: Match groups to export
            dataset_a: First dataset
            dataset_b: Second dataset
            format: Export format ('excel', 'csv', 'json')
            filename: Output filename
            **options: Format-specific options

        Returns:
            Path to exported file, or None if there was nothing to export
        """
        exporter = self._exporter_class(format)(self.output_dir)

        logger.info(f"Exporting {len(groups)} match groups to {format.upper()}: {filename}")

        export_path = exporter.export(groups, dataset_a, dataset_b, filename, **options)
        if export_path is not None:
            self.stats.add_export(groups)
        return export_path

    def export_all(self, groups: List[MatchGroup], dataset_a: TabularDataset,
                   dataset_b: TabularDataset, format: str = 'excel',
                   filename: Optional[str] = None, ignore_a: Collection[int] = (),
                   ignore_b: Collection[int] = ()) -> Optional[Path]:
        """Export every group into one combined table."""
        if not groups:
            logger.warning("No matches found to export.")
            return None

        exporter_class = self._exporter_class(format)
        filename = filename or f"{self.ALL_MATCHES_STEM}.{exporter_class.extension}"
        return self.export_groups(
            groups, dataset_a, dataset_b, format, filename,
            ignore_a=ignore_a, ignore_b=ignore_b,
            sheet_name=self.ALL_MATCHES_SHEET,
        )

    def export_group(self, groups: List[MatchGroup], group_index: int,
                     dataset_a: TabularDataset, dataset_b: TabularDataset,
                     format: str = 'excel', filename: Optional[str] = None,
                     ignore_a: Collection[int] = (),
                     ignore_b: Collection[int] = ()) -> Optional[Path]:
        """
        Export a single match group.

        Raises:
            IndexError: If group_index is out of range
        """
        if not 0 <= group_index < len(groups):
            raise IndexError(f"Match group {group_index} out of range (0-{len(groups) - 1})")

        exporter_class = self._exporter_class(format)

        group = groups[group_index]
        if filename is None:
            stem = safe_filename(f"Match_Group_Export_{group.header1}-{group.header2}")
            filename = f"{stem}.{exporter_class.extension}"

        return self.export_groups(
            [group], dataset_a, dataset_b, format, filename,
            ignore_a=ignore_a, ignore_b=ignore_b,
            sheet_name=self.GROUP_SHEET,
        )

    def export_result(self, result: MatchResult, store: DatasetStore,
                      format: str = 'excel', group_index: Optional[int] = None,
                      **options) -> Optional[Path]:
        """
        Export a match result, reading its datasets from the store.

        Args:
            result: MatchResult from MatchPipeline.run
            store: Store holding the result's datasets
            format: Export format
            group_index: Export only this group (None = all groups)
            **options: filename, ignore_a, ignore_b
        """
        dataset_a, dataset_b = store.snapshot(result.request.sheet1, result.request.sheet2)
        if group_index is None:
            return self.export_all(result.groups, dataset_a, dataset_b, format, **options)
        return self.export_group(result.groups, group_index, dataset_a, dataset_b, format, **options)

    def get_export_stats(self) -> Dict[str, Any]:
        """Get export statistics."""
        return self.stats.to_dict()
