"""
Approximate string comparison.
Levenshtein distance and the threshold rule deciding fuzzy matches.
"""

import logging
from typing import Optional

from .normalizer import Normalizer

logger = logging.getLogger(__name__)


class Reconciler:
    """Decides whether two cell values are close enough to match."""

    @staticmethod
    def levenshtein_distance(s1: str, s2: str) -> int:
        """
        Compute the Levenshtein (edit) distance between two strings.

        Only the previous and current rows of the distance matrix are kept,
        so extra memory is linear in len(s2).

        Args:
            s1: First string
            s2: Second string

        Returns:
            Minimum number of single-character insertions, deletions,
            or substitutions turning s1 into s2
        """
        if s1 == s2:
            return 0
        if not s1:
            return len(s2)
        if not s2:
            return len(s1)

        previous = list(range(len(s2) + 1))
        current = [0] * (len(s2) + 1)

        for i in range(1, len(s1) + 1):
            current[0] = i
            c1 = s1[i - 1]
            for j in range(1, len(s2) + 1):
                cost = 0 if c1 == s2[j - 1] else 1
                current[j] = min(
                    current[j - 1] + 1,     # insertion
                    previous[j] + 1,        # deletion
                    previous[j - 1] + cost, # substitution
                )
            previous, current = current, previous

        return previous[len(s2)]

    @staticmethod
    def fuzzy_match(value1: Optional[str], value2: Optional[str], threshold: int) -> bool:
        """
        Fuzzy string matching on normalized keys.

        Args:
            value1: First raw value
            value2: Second raw value
            threshold: Allowed distance as a percentage (0-100) of the longer key

        Returns:
            True if distance * 100 <= max_len * threshold
        """
        key1 = Normalizer.standard_key(value1)
        key2 = Normalizer.standard_key(value2)
        return Reconciler.keys_match(key1, key2, threshold)

    @staticmethod
    def keys_match(key1: str, key2: str, threshold: int) -> bool:
        """Same rule as fuzzy_match, for keys that are already normalized."""
        if key1 == key2:
            return True
        if Normalizer.is_blank(key1) or Normalizer.is_blank(key2):
            return False

        len1, len2 = len(key1), len(key2)
        max_len = max(len1, len2)
        if max_len == 0:
            return True

        # Distance is never below the length difference
        if abs(len1 - len2) * 100 > max_len * threshold:
            return False

        distance = Reconciler.levenshtein_distance(key1, key2)
        return distance * 100 <= max_len * threshold
