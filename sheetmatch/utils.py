"""
Utility functions for argument parsing, file naming, and display.
"""

import logging
import re
from typing import List, Optional


logger = logging.getLogger(__name__)


def parse_index_list(value: Optional[str]) -> List[int]:
    """
    Parse a comma-separated list of zero-based column indices.

    Args:
        value: String such as "0,2, 5" (None or blank = no indices)

    Returns:
        Sorted, de-duplicated indices

    Raises:
        ValueError: If an entry is not a non-negative integer
    """
    if value is None or not value.strip():
        return []

    indices = set()
    for part in value.split(','):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            raise ValueError(f"Invalid column index: {part!r}")
        indices.add(int(part))
    return sorted(indices)


def clamp_threshold(threshold: int) -> int:
    """Clamp a fuzzy threshold into 0-100, warning when it was out of range."""
    value = int(threshold)
    clamped = max(0, min(100, value))
    if clamped != value:
        logger.warning(f"Fuzzy threshold {threshold} out of range, clamped to {clamped}")
    return clamped


def safe_filename(name: str) -> str:
    """Replace characters that are unsafe in file names."""
    cleaned = re.sub(r'[\\/:*?"<>|\s]+', '_', name).strip('._')
    return cleaned or 'export'


def truncate_string(s: str, max_length: int = 100) -> str:
    """Truncate string for logging/display."""
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + "..."
