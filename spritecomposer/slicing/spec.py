"""Row naming specification consumed by the grid slicer.

A specification is an ordered list of rows.  Each row names one animation
(``Walk``) and optionally the directions it is drawn in (``Down``, ``Up``...);
every direction occupies its own grid row on the sheet.  A row may also carry
a *special window*: a run of columns that belongs to another animation, such
as a single idle frame drawn in front of a walk cycle.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class SliceConfigurationError(ValueError):
    """Raised when a slice cannot start: bad cell size, missing inputs."""


@dataclass(frozen=True)
class RowSpec:
    category: str
    sub_categories: Tuple[str, ...] = ()

    @property
    def row_span(self) -> int:
        return max(1, len(self.sub_categories))

    def sub_category(self, index: int) -> str:
        if 0 <= index < len(self.sub_categories):
            return self.sub_categories[index]
        return ""


@dataclass(frozen=True)
class SpecialWindow:
    category: str
    sub_categories: Tuple[str, ...] = ()
    start_index: int = 0
    size: int = 0

    @property
    def end_index(self) -> int:
        return self.start_index + self.size

    def contains(self, column: int) -> bool:
        return self.start_index <= column < self.end_index

    def sub_category(self, index: int) -> str:
        if 0 <= index < len(self.sub_categories):
            return self.sub_categories[index]
        return ""


@dataclass(frozen=True)
class RowEntry:
    row: RowSpec
    special: Optional[SpecialWindow] = None


@dataclass(frozen=True)
class Specification:
    entries: Tuple[RowEntry, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *entries: RowEntry | RowSpec) -> "Specification":
        """Build a specification, wrapping bare ``RowSpec`` values."""

        wrapped = [e if isinstance(e, RowEntry) else RowEntry(e) for e in entries]
        return cls(tuple(wrapped))

    @cached_property
    def declared_row_count(self) -> int:
        return sum(entry.row.row_span for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def _as_names(value: Any, where: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Iterable):
        logger.warning("%s: sub_categories should be a list, got %r; ignoring", where, value)
        return ()
    return tuple("" if item is None else str(item) for item in value)


def _non_negative(value: Any, key: str, where: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("%s: %s=%r is not an integer; using 0", where, key, value)
        return 0
    if number < 0:
        logger.warning("%s: %s=%d is negative; clamped to 0", where, key, number)
        return 0
    return number


def _special_from_dict(payload: Any, where: str) -> Optional[SpecialWindow]:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        logger.warning("%s: special window must be an object; ignoring", where)
        return None
    return SpecialWindow(
        category=str(payload.get("category") or ""),
        sub_categories=_as_names(payload.get("sub_categories"), where),
        start_index=_non_negative(payload.get("start_index", 0), "start_index", where),
        size=_non_negative(payload.get("size", 0), "size", where),
    )


def specification_from_dict(payload: Mapping[str, Any] | Sequence[Any]) -> Specification:
    """Build a :class:`Specification` from decoded JSON.

    Accepts either ``{"rows": [...]}`` or the bare list.  Malformed rows are
    repaired and logged rather than rejected.
    """

    if isinstance(payload, Mapping):
        raw_rows = payload.get("rows", [])
    elif isinstance(payload, list):
        raw_rows = payload
    else:
        raise SliceConfigurationError("specification must be an object or a list of rows")
    if not isinstance(raw_rows, list):
        raise SliceConfigurationError("specification 'rows' must be a list")

    entries: List[RowEntry] = []
    for idx, raw in enumerate(raw_rows):
        where = f"row {idx}"
        if not isinstance(raw, Mapping):
            logger.warning("%s: expected an object, got %r; using an empty row", where, raw)
            raw = {}
        category = raw.get("category")
        if not category:
            logger.warning("%s: missing category", where)
        row = RowSpec(str(category or ""), _as_names(raw.get("sub_categories"), where))
        entries.append(RowEntry(row, _special_from_dict(raw.get("special"), where)))
    return Specification(tuple(entries))


def specification_to_dict(spec: Specification) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    for entry in spec:
        item: Dict[str, Any] = {
            "category": entry.row.category,
            "sub_categories": list(entry.row.sub_categories),
        }
        if entry.special is not None:
            item["special"] = {
                "category": entry.special.category,
                "sub_categories": list(entry.special.sub_categories),
                "start_index": entry.special.start_index,
                "size": entry.special.size,
            }
        rows.append(item)
    return {"rows": rows}


def load_specification(path: str) -> Specification:
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8-sig") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise SliceConfigurationError(f"{path}: invalid JSON ({exc})") from exc
    return specification_from_dict(payload)


__all__ = [
    "RowEntry",
    "RowSpec",
    "SliceConfigurationError",
    "SpecialWindow",
    "Specification",
    "load_specification",
    "specification_from_dict",
    "specification_to_dict",
]
