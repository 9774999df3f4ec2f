"""Decide how each column of a row is named."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .rows import OverflowRow, ResolvedRow


class FrameKind(Enum):
    OVERFLOW = "overflow"
    SPECIAL = "special"
    NORMAL = "normal"


@dataclass(frozen=True)
class Classification:
    kind: FrameKind
    local_index: int


def classify_column(row: ResolvedRow, counter: int) -> Classification:
    """Classify the column at running ``counter`` within ``row``.

    Columns before a special window keep their absolute index; columns after
    it restart at 0 from the window's end.
    """

    if isinstance(row, OverflowRow):
        return Classification(FrameKind.OVERFLOW, counter)

    window = row.special
    if window is None:
        return Classification(FrameKind.NORMAL, counter)
    if window.contains(counter):
        return Classification(FrameKind.SPECIAL, counter - window.start_index)
    if counter >= window.end_index:
        return Classification(FrameKind.NORMAL, counter - window.end_index)
    return Classification(FrameKind.NORMAL, counter)


__all__ = ["Classification", "FrameKind", "classify_column"]
