"""
Sheet matching package.
Finds exact and fuzzy correspondences between the columns of two datasets.
"""

__version__ = "0.1.0"
__author__ = "Automation Team"

from .models import (
    TabularDataset,
    MatchRecord,
    MatchGroup,
    MatchRequest,
    MatchResult,
    original_row_number,
    storage_row_index,
)
from .normalizer import Normalizer
from .reconciler import Reconciler
from .indexer import ExactMatchIndex
from .matcher import ColumnPairMatcher
from .dataset_store import DatasetStore, DatasetNotFoundError
from .match_pipeline import MatchPipeline
from .config_loader import ConfigLoader, MatcherConfig
from .logging_setup import setup_logging

__all__ = [
    'TabularDataset',
    'MatchRecord',
    'MatchGroup',
    'MatchRequest',
    'MatchResult',
    'original_row_number',
    'storage_row_index',
    'Normalizer',
    'Reconciler',
    'ExactMatchIndex',
    'ColumnPairMatcher',
    'DatasetStore',
    'DatasetNotFoundError',
    'MatchPipeline',
    'ConfigLoader',
    'MatcherConfig',
    'setup_logging',
]
