"""Map grid rows onto specification entries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .spec import RowEntry, SpecialWindow, Specification


@dataclass(frozen=True)
class RowMatch:
    """A declared row: the entry it belongs to and its sub-category slot."""

    entry_index: int
    entry: RowEntry
    local_index: int

    @property
    def category(self) -> str:
        return self.entry.row.category

    @property
    def sub_category(self) -> str:
        return self.entry.row.sub_category(self.local_index)

    @property
    def special(self) -> Optional[SpecialWindow]:
        return self.entry.special


@dataclass(frozen=True)
class OverflowRow:
    """A grid row below everything the specification declares."""

    ordinal: int


ResolvedRow = Union[RowMatch, OverflowRow]


def resolve_row(row: int, spec: Specification) -> ResolvedRow:
    """Resolve grid ``row`` (0 = top) against ``spec``.

    Rows past ``spec.declared_row_count`` are overflow rows numbered from 0.
    """

    declared = spec.declared_row_count
    if row >= declared:
        return OverflowRow(row - declared)

    start = 0
    for idx, entry in enumerate(spec.entries):
        span = entry.row.row_span
        if row < start + span:
            return RowMatch(idx, entry, row - start)
        start += span
    # Unreachable while declared_row_count is the sum of the spans.
    return OverflowRow(row - declared)


__all__ = ["OverflowRow", "ResolvedRow", "RowMatch", "resolve_row"]
