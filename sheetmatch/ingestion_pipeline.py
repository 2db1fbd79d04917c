"""
Ingestion pipeline orchestrator.
Parses input files and loads them into the dataset store.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .csv_parser import CSVParser, EmptyDatasetError
from .dataset_store import DatasetStore

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Loads a set of files into the store, replacing what was there."""

    def __init__(self, store: DatasetStore, parser: Optional[CSVParser] = None):
        """
        Initialize ingestion pipeline.

        Args:
            store: DatasetStore to fill
            parser: CSVParser instance (default: comma/tab sniffing, utf-8)
        """
        self.store = store
        self.parser = parser or CSVParser()

    def load_files(self, file_paths: Iterable[Path]) -> List[str]:
        """
        Parse files and replace the store contents with them.

        Empty files are skipped with a warning.

        Args:
            file_paths: Paths of the files to load

        Returns:
            Sorted names of the stored datasets

        Raises:
            FileNotFoundError: If any path does not exist
            ValueError: If two files would load under the same dataset name
        """
        datasets = []
        sources = {}
        for file_path in file_paths:
            file_path = Path(file_path)
            if not file_path.exists():
                logger.error(f"Input file not found: {file_path}")
                raise FileNotFoundError(f"File not found: {file_path}")

            try:
                dataset = self.parser.parse(file_path)
            except EmptyDatasetError as e:
                logger.warning(f"Skipping empty file: {file_path.name} ({e})")
                continue

            if dataset.name in sources:
                logger.error(f"Duplicate dataset name '{dataset.name}': {sources[dataset.name]} and {file_path}")
                raise ValueError(
                    f"Dataset name '{dataset.name}' is used by both {sources[dataset.name]} and {file_path}"
                )
            sources[dataset.name] = file_path
            datasets.append(dataset)

        names = self.store.replace_all(datasets)
        logger.info(f"File processing complete. {len(names)} datasets stored.")
        return names
