"""
In-memory dataset store.
Holds loaded datasets for the lifetime of the process and hands out
stable snapshots to the matching engine.
"""

import logging
import threading
from typing import Dict, Iterable, List, Tuple

from .models import TabularDataset

logger = logging.getLogger(__name__)


class DatasetNotFoundError(KeyError):
    """Raised when a requested dataset name is not in the store."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(f"Dataset(s) not found in store: {', '.join(self.names)}")

    def __str__(self) -> str:
        return self.args[0]


class DatasetStore:
    """Thread-safe name -> dataset map."""

    def __init__(self):
        self._datasets: Dict[str, TabularDataset] = {}
        self._lock = threading.RLock()

    def put(self, dataset: TabularDataset) -> None:
        """Add or replace a dataset under its own name."""
        with self._lock:
            self._datasets[dataset.name] = dataset
        logger.debug(
            f"Stored dataset '{dataset.name}' with {dataset.row_count} data rows "
            f"and {dataset.column_count} columns."
        )

    def replace_all(self, datasets: Iterable[TabularDataset]) -> List[str]:
        """
        Clear the store and load a new set of datasets.

        Args:
            datasets: Datasets to store

        Returns:
            Sorted names of the stored datasets
        """
        with self._lock:
            self._datasets.clear()
            logger.debug("In-memory data store cleared.")
            for dataset in datasets:
                self._datasets[dataset.name] = dataset
            return sorted(self._datasets)

    def get(self, name: str) -> TabularDataset:
        """
        Get a dataset by name.

        Raises:
            DatasetNotFoundError: If no dataset has this name
        """
        with self._lock:
            dataset = self._datasets.get(name)
        if dataset is None:
            logger.warning(f"Data request failed. Dataset not found: {name}")
            raise DatasetNotFoundError([name])
        return dataset

    def snapshot(self, name1: str, name2: str) -> Tuple[TabularDataset, TabularDataset]:
        """
        Read two datasets under a single lock acquisition.

        Raises:
            DatasetNotFoundError: If either name is missing
        """
        with self._lock:
            first = self._datasets.get(name1)
            second = self._datasets.get(name2)

        missing = [n for n, d in ((name1, first), (name2, second)) if d is None]
        if missing:
            logger.error(f"One or both datasets not found: {name1}, {name2}")
            raise DatasetNotFoundError(missing)
        return first, second

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._datasets)

    def clear(self) -> None:
        with self._lock:
            self._datasets.clear()

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._datasets

    def __len__(self) -> int:
        with self._lock:
            return len(self._datasets)
