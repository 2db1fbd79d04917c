"""
Excel exporter for combined match rows.
Supports header styling, column widths, and a frozen header row.
"""

import logging
from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .exporter import Exporter
from .models import MatchGroup, TabularDataset

logger = logging.getLogger(__name__)


class ExcelExporter(Exporter):
    """Export match groups to Excel format."""

    extension = 'xlsx'

    def export(self, groups: List[MatchGroup], dataset_a: TabularDataset,
               dataset_b: TabularDataset, filename: str, **options) -> Optional[Path]:
        """
        Export match groups to Excel.

        Args:
            groups: Match groups to write
            dataset_a: First dataset
            dataset_b: Second dataset
            filename: Output filename
            **options:
                - ignore_a: Column indices of dataset A to leave out
                - ignore_b: Column indices of dataset B to leave out
                - sheet_name: Worksheet title (default 'Results')
                - auto_format: Style header and set column widths
                - freeze_header: Freeze header row

        Returns:
            Path to exported Excel file, or None if there were no rows
        """
        ignore_a = options.get('ignore_a', ())
        ignore_b = options.get('ignore_b', ())
        sheet_name = options.get('sheet_name', 'Results')
        auto_format = options.get('auto_format', True)
        freeze_header = options.get('freeze_header', True)

        table = self.build_table(groups, dataset_a, dataset_b, ignore_a, ignore_b)
        if len(table) <= 1:
            logger.warning("No rows selected for export after filtering.")
            return None

        output_path = self.output_dir / filename

        try:
            workbook = Workbook()
            ws = workbook.active
            ws.title = sheet_name
            for values in table:
                ws.append(values)

            if auto_format:
                self._format_sheet(ws, table[0])
            if freeze_header:
                ws.freeze_panes = 'A2'

            workbook.save(output_path)
            self._log_export(filename, len(table) - 1)
            return output_path

        except Exception as e:
            logger.error(f"Error exporting Excel: {e}")
            raise

    @staticmethod
    def _format_sheet(ws, header: List[str]):
        header_fill = PatternFill(start_color="366092", end_color="366092",
                                  fill_type="solid")
        header_font = Font(bold=True, color="FFFFFF")

        for cell in ws[1]:
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = Alignment(horizontal="center", vertical="center")

        for idx, name in enumerate(header, 1):
            col_letter = get_column_letter(idx)
            ws.column_dimensions[col_letter].width = max(8, min(30, len(str(name)) + 2))
