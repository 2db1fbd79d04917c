"""
CSV exporter for combined match rows.
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional

from .exporter import Exporter
from .models import MatchGroup, TabularDataset

logger = logging.getLogger(__name__)


class CSVExporter(Exporter):
    """Export match groups to CSV format."""

    extension = 'csv'

    def export(self, groups: List[MatchGroup], dataset_a: TabularDataset,
               dataset_b: TabularDataset, filename: str, **options) -> Optional[Path]:
        """
        Export match groups to CSV.

        Args:
            groups: Match groups to write
            dataset_a: First dataset
            dataset_b: Second dataset
            filename: Output filename
            **options:
                - ignore_a: Column indices of dataset A to leave out
                - ignore_b: Column indices of dataset B to leave out
                - delimiter: Field delimiter (default ',')

        Returns:
            Path to exported CSV file, or None if there were no rows
        """
        ignore_a = options.get('ignore_a', ())
        ignore_b = options.get('ignore_b', ())
        delimiter = options.get('delimiter', ',')

        table = self.build_table(groups, dataset_a, dataset_b, ignore_a, ignore_b)
        if len(table) <= 1:
            logger.warning("No rows selected for export after filtering.")
            return None

        output_path = self.output_dir / filename

        try:
            with open(output_path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f, delimiter=delimiter)
                writer.writerows(table)

            self._log_export(filename, len(table) - 1)
            return output_path

        except Exception as e:
            logger.error(f"Error exporting CSV: {e}")
            raise
