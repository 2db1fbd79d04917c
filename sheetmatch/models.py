"""
Data models for the column matching engine.
Defines datasets, match requests, and match results using dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple


# Data row 0 is line 2 of the source file: one header line, 1-based numbering.
HEADER_ROW_OFFSET = 2

DEFAULT_FUZZY_THRESHOLD = 80


def original_row_number(row_index: int) -> int:
    """Convert a zero-based data row index to the row number reported to users."""
    return row_index + HEADER_ROW_OFFSET


def storage_row_index(row_number: int) -> int:
    """Convert a reported row number back to its zero-based data row index."""
    return row_number - HEADER_ROW_OFFSET


@dataclass(frozen=True)
class TabularDataset:
    """A named table: ordered headers plus ordered, possibly ragged, rows."""
    name: str
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()

    @classmethod
    def from_lists(cls, name: str, headers: Iterable[str],
                   rows: Iterable[Sequence[str]] = ()) -> 'TabularDataset':
        """Build a dataset from plain lists, freezing every row."""
        return cls(
            name=name,
            headers=tuple(headers),
            rows=tuple(tuple(row) for row in rows),
        )

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cell(self, row_index: int, column_index: int) -> Optional[str]:
        """Return a cell value, or None when the row is too short to have it."""
        row = self.rows[row_index]
        if column_index >= len(row):
            return None
        return row[column_index]

    def row_by_number(self, row_number: int) -> Tuple[str, ...]:
        """Return the row for a reported (header-offset) row number."""
        return self.rows[storage_row_index(row_number)]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'headers': list(self.headers),
            'rows': [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class MatchRecord:
    """One correspondence between a cell of dataset A and a cell of dataset B."""
    original_row1: int
    original_row2: int
    val1: str
    val2: str
    is_fuzzy: bool = False

    @property
    def match_type(self) -> str:
        return 'Fuzzy' if self.is_fuzzy else 'Exact'

    def to_dict(self) -> dict:
        return {
            'originalRow1': self.original_row1,
            'originalRow2': self.original_row2,
            'val1': self.val1,
            'val2': self.val2,
            'isFuzzy': self.is_fuzzy,
        }


@dataclass(frozen=True)
class MatchGroup:
    """All match records found for one (column A, column B) pair."""
    tab1: str
    tab2: str
    header1: str
    header2: str
    column1: int
    column2: int
    matches: Tuple[MatchRecord, ...] = ()

    @property
    def exact_count(self) -> int:
        return sum(1 for m in self.matches if not m.is_fuzzy)

    @property
    def fuzzy_count(self) -> int:
        return sum(1 for m in self.matches if m.is_fuzzy)

    def __len__(self) -> int:
        return len(self.matches)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'tab1': self.tab1,
            'tab2': self.tab2,
            'header1': self.header1,
            'header2': self.header2,
            'matches': [m.to_dict() for m in self.matches],
        }


@dataclass
class MatchRequest:
    """Parameters of a single comparison between two stored datasets."""
    sheet1: str
    sheet2: str
    use_fuzzy: bool = False
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchRequest':
        """Build a request from wire (camelCase) or snake_case keys."""
        use_fuzzy = data.get('useFuzzy', data.get('use_fuzzy', False))
        threshold = data.get('fuzzyThreshold', data.get('fuzzy_threshold', DEFAULT_FUZZY_THRESHOLD))
        return cls(
            sheet1=data['sheet1'],
            sheet2=data['sheet2'],
            use_fuzzy=bool(use_fuzzy),
            fuzzy_threshold=int(threshold),
        )


@dataclass
class MatchResult:
    """Outcome of running a match request."""
    request: MatchRequest
    groups: list[MatchGroup] = field(default_factory=list)
    comparisons: int = 0

    @property
    def total_matches(self) -> int:
        return sum(len(g) for g in self.groups)

    def to_dict(self) -> dict:
        return {
            'sheet1': self.request.sheet1,
            'sheet2': self.request.sheet2,
            'comparisons': self.comparisons,
            'total_matches': self.total_matches,
            'groups': [g.to_dict() for g in self.groups],
        }
