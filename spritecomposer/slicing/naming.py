"""Frame name synthesis."""
from __future__ import annotations

from .classify import Classification, FrameKind
from .rows import ResolvedRow


def _join(category: str, sub_category: str) -> str:
    return f"{category}_{sub_category}" if sub_category else category


def synthesize_name(classification: Classification, row: ResolvedRow, sheet_name: str, counter: int) -> str:
    """Return the frame name for one classified column.

    * overflow: ``{sheet}_{ordinal}_{counter}``
    * special:  ``{category}[_{sub}]`` plus ``_{index}`` unless the window is one frame wide
    * normal:   ``{category}[_{sub}]_{index}``
    """

    if classification.kind is FrameKind.OVERFLOW:
        return f"{sheet_name}_{row.ordinal}_{counter}"

    if classification.kind is FrameKind.SPECIAL:
        window = row.special
        base = _join(window.category, window.sub_category(row.local_index))
        if window.size == 1:
            return base
        return f"{base}_{classification.local_index}"

    return f"{_join(row.category, row.sub_category)}_{classification.local_index}"


__all__ = ["synthesize_name"]
