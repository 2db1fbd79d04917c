"""
JSON exporter for match groups.
Writes groups in the same shape the match endpoint returns.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from .exporter import Exporter
from .models import MatchGroup, TabularDataset

logger = logging.getLogger(__name__)


class JSONExporter(Exporter):
    """Export match groups to JSON format."""

    extension = 'json'

    def export(self, groups: List[MatchGroup], dataset_a: TabularDataset,
               dataset_b: TabularDataset, filename: str, **options) -> Optional[Path]:
        """
        Export match groups to JSON.

        Args:
            groups: Match groups to write
            dataset_a: First dataset (unused, groups carry their own names)
            dataset_b: Second dataset (unused)
            filename: Output filename
            **options:
                - pretty: Pretty print JSON
                - indent: Indentation level (default: 2)

        Returns:
            Path to exported JSON file, or None if there were no groups
        """
        pretty = options.get('pretty', True)
        indent = options.get('indent', 2) if pretty else None

        if not groups:
            logger.warning("No match groups to export.")
            return None

        output_path = self.output_dir / filename

        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump([g.to_dict() for g in groups], f, indent=indent, ensure_ascii=False)

            self._log_export(filename, sum(len(g) for g in groups))
            return output_path

        except Exception as e:
            logger.error(f"Error exporting JSON: {e}")
            raise
