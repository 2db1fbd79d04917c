"""
Cell value normalization.
Produces the canonical comparison key used by exact and fuzzy matching.
"""

from typing import Optional


class Normalizer:
    """Normalize raw cell values to comparison keys."""

    @staticmethod
    def standard_key(value: Optional[str]) -> str:
        """
        Build a case-insensitive, trimmed key for a cell value.

        Args:
            value: Raw cell value (None is treated as an empty cell)

        Returns:
            Lowercased value with surrounding whitespace removed
        """
        if value is None:
            return ''
        return value.lower().strip()

    @staticmethod
    def is_blank(key: str) -> bool:
        """Blank keys never take part in matching."""
        return key == ''
