"""
CSV/TSV file parser.
Loads a delimited text file into a TabularDataset, keeping ragged rows.
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .models import TabularDataset

logger = logging.getLogger(__name__)


class EmptyDatasetError(ValueError):
    """Raised when a file has no header row to build a dataset from."""


class CSVParser:
    """Parse CSV/TSV files into datasets."""

    EXTENSION_DELIMITERS = {
        '.csv': ',',
        '.tsv': '\t',
        '.tab': '\t',
    }

    def __init__(self, delimiter: Optional[str] = None, encoding: str = 'utf-8'):
        """
        Initialize CSV parser.

        Args:
            delimiter: Field delimiter (None = decide from extension or first line)
            encoding: File encoding
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def parse(self, file_path: Path, name: Optional[str] = None) -> TabularDataset:
        """
        Parse a delimited file. The first line is the header row.

        Args:
            file_path: Path to CSV/TSV file
            name: Dataset name (default: file stem)

        Returns:
            TabularDataset with trailing empty cells dropped from each row

        Raises:
            FileNotFoundError: If the file does not exist
            EmptyDatasetError: If the file has no header row
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info(f"Parsing CSV: {file_path.name}")
        try:
            return self._parse(file_path, name or file_path.stem, self.encoding)
        except UnicodeDecodeError:
            logger.warning(f"{self.encoding} decode failed for {file_path.name}, trying latin-1")
            return self._parse(file_path, name or file_path.stem, 'latin-1')

    def _parse(self, file_path: Path, name: str, encoding: str) -> TabularDataset:
        delimiter = self.detect_delimiter(file_path, encoding)
        width = self._max_width(file_path, delimiter, encoding)
        if width == 0:
            raise EmptyDatasetError(f"No header row in {file_path.name}")

        # Explicit column names keep over-long rows intact; short rows are padded with NaN
        frame = pd.read_csv(
            file_path,
            sep=delimiter,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding=encoding,
            engine='python',
        )
        records = [self._trim_row(values) for values in frame.itertuples(index=False, name=None)]
        # Blank lines inside the file stay as empty rows so row numbers match source lines
        while records and not records[-1]:
            records.pop()
        if not records:
            raise EmptyDatasetError(f"No header row in {file_path.name}")

        dataset = TabularDataset.from_lists(name, records[0], records[1:])
        logger.debug(
            f"Parsed dataset '{name}' with {dataset.row_count} data rows "
            f"and {dataset.column_count} columns."
        )
        return dataset

    def detect_delimiter(self, file_path: Path, encoding: str = 'utf-8') -> str:
        """Pick the delimiter from settings, extension, or the first line."""
        if self.delimiter:
            return self.delimiter

        ext = Path(file_path).suffix.lower()
        if ext in self.EXTENSION_DELIMITERS:
            return self.EXTENSION_DELIMITERS[ext]

        with open(file_path, 'r', encoding=encoding, newline='') as f:
            first_line = f.readline()
        return '\t' if '\t' in first_line else ','

    @staticmethod
    def _max_width(file_path: Path, delimiter: str, encoding: str) -> int:
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            return max((len(row) for row in csv.reader(f, delimiter=delimiter)), default=0)

    @staticmethod
    def _trim_row(values) -> List[str]:
        """Drop padding and trailing empty cells so short rows stay short."""
        cells = ['' if pd.isna(v) else str(v) for v in values]
        while cells and cells[-1] == '':
            cells.pop()
        return cells
