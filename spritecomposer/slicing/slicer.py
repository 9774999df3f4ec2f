"""Slice a sprite sheet into named frame rectangles."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image

from .classify import classify_column
from .grid import GridLayout, Rect, compute_grid
from .naming import synthesize_name
from .rows import OverflowRow, ResolvedRow, resolve_row
from .spec import SliceConfigurationError, Specification, specification_to_dict
from .transparency import Sheet, is_rect_transparent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    name: str
    rect: Rect
    row: int
    column: int


@dataclass(frozen=True)
class SliceResult:
    sheet_name: str
    layout: GridLayout
    frames: Tuple[Frame, ...]
    row_counters: Tuple[int, ...]
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def names(self) -> List[str]:
        return [frame.name for frame in self.frames]

    def as_dict(self) -> Dict[str, object]:
        return {
            "sheet": self.sheet_name,
            "cell_width": self.layout.cell_width,
            "cell_height": self.layout.cell_height,
            "rows": self.layout.total_rows,
            "columns": self.layout.total_cols,
            "bottom_padding": self.layout.bottom_padding,
            "frames": [
                {"name": f.name, "row": f.row, "column": f.column, "rect": f.rect.as_dict()}
                for f in self.frames
            ],
            "warnings": list(self.warnings),
        }


def _row_warnings(row_index: int, row: ResolvedRow, layout: GridLayout) -> List[str]:
    if isinstance(row, OverflowRow) or row.special is None:
        return []
    found: List[str] = []
    window = row.special
    if window.end_index > layout.total_cols:
        found.append(
            f"row {row_index} ({row.category}): special window {window.start_index}+{window.size} "
            f"extends past the sheet's {layout.total_cols} columns"
        )
    if window.sub_categories and row.local_index >= len(window.sub_categories):
        found.append(
            f"row {row_index} ({row.category}): special '{window.category}' has no sub-category "
            f"at index {row.local_index}; naming it without one"
        )
    return found


def slice_sheet(
    sheet: Optional[Sheet],
    spec: Optional[Specification],
    cell_width: int,
    cell_height: int,
) -> SliceResult:
    """Partition ``sheet`` into cells and name every non-transparent one.

    Rows run top to bottom, columns left to right.  Transparent cells are
    left out but still advance the column counter, so the indices of the
    frames around them do not shift.
    """

    if sheet is None:
        raise SliceConfigurationError("no sprite sheet given")
    if spec is None:
        raise SliceConfigurationError("no row specification given")
    layout = compute_grid(sheet.width, sheet.height, cell_width, cell_height)

    warnings: List[str] = []
    if spec.declared_row_count > layout.total_rows:
        warnings.append(
            f"specification declares {spec.declared_row_count} rows but the sheet only has "
            f"{layout.total_rows}"
        )

    frames: List[Frame] = []
    counters: List[int] = []
    for row_index in range(layout.total_rows):
        resolved = resolve_row(row_index, spec)
        warnings.extend(_row_warnings(row_index, resolved, layout))

        counter = 0
        for col in range(layout.total_cols):
            rect = layout.cell_rect(row_index, col)
            current = counter
            counter += 1
            if is_rect_transparent(sheet, rect):
                continue
            classification = classify_column(resolved, current)
            name = synthesize_name(classification, resolved, sheet.name, current)
            frames.append(Frame(name, rect, row_index, col))
        counters.append(counter)

    seen: Dict[str, Frame] = {}
    for frame in frames:
        first = seen.setdefault(frame.name, frame)
        if first is not frame:
            warnings.append(
                f"duplicate frame name '{frame.name}' at row {frame.row} column {frame.column} "
                f"(first used at row {first.row} column {first.column})"
            )

    for message in warnings:
        logger.warning("%s: %s", sheet.name, message)
    logger.info(
        "Sliced %s into %d frames (%dx%d grid, bottom padding %d)",
        sheet.name,
        len(frames),
        layout.total_cols,
        layout.total_rows,
        layout.bottom_padding,
    )
    return SliceResult(sheet.name, layout, tuple(frames), tuple(counters), tuple(warnings))


def slice_image(path: str, spec: Specification, cell_width: int, cell_height: int) -> SliceResult:
    return slice_sheet(Sheet.open(path), spec, cell_width, cell_height)


def write_mapping(result: SliceResult, path: str, spec: Optional[Specification] = None) -> str:
    """Write ``result`` as JSON to ``path`` and return the path."""

    payload = result.as_dict()
    if spec is not None:
        payload["specification"] = specification_to_dict(spec)
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    return path


def frame_file_stem(name: str) -> str:
    """Turn a frame name into a file name that stays inside its folder."""

    stem = name
    for sep in {os.sep, os.altsep, "/", "\\"}:
        if sep:
            stem = stem.replace(sep, "_")
    if stem in ("", ".", ".."):
        stem = "frame"
    return stem


def export_frames(image: Image.Image, frames: Sequence[Frame], outdir: str) -> List[str]:
    """Crop every frame out of ``image`` and save it as ``{name}.png``.

    Names that are not usable as file names have their path separators
    replaced.  A name already written in this export gets a ``_r{row}c{col}``
    suffix so no frame overwrites another.
    """

    os.makedirs(outdir, exist_ok=True)
    rgba = image.convert("RGBA")
    used = set()
    paths: List[str] = []
    for frame in frames:
        stem = frame_file_stem(frame.name)
        if stem != frame.name:
            logger.warning("Frame name %r saved as %r", frame.name, stem)
        if stem in used:
            renamed = f"{stem}_r{frame.row}c{frame.column}"
            logger.warning("Frame name %r already exported; saving row %d column %d as %r",
                           frame.name, frame.row, frame.column, renamed)
            stem = renamed
        used.add(stem)
        out_path = os.path.join(outdir, f"{stem}.png")
        rgba.crop(frame.rect.to_box(rgba.height)).save(out_path)
        paths.append(out_path)
    return paths


__all__ = [
    "Frame",
    "SliceResult",
    "export_frames",
    "frame_file_stem",
    "slice_image",
    "slice_sheet",
    "write_mapping",
]
