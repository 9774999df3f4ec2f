from .classify import Classification, FrameKind, classify_column
from .grid import GridLayout, Rect, compute_grid
from .naming import synthesize_name
from .rows import OverflowRow, RowMatch, resolve_row
from .slicer import Frame, SliceResult, export_frames, frame_file_stem, slice_image, slice_sheet, write_mapping
from .spec import (
    RowEntry,
    RowSpec,
    SliceConfigurationError,
    SpecialWindow,
    Specification,
    load_specification,
    specification_from_dict,
)
from .transparency import Sheet, is_rect_transparent

__all__ = [
    "Classification",
    "Frame",
    "FrameKind",
    "GridLayout",
    "OverflowRow",
    "Rect",
    "RowEntry",
    "RowMatch",
    "RowSpec",
    "Sheet",
    "SliceConfigurationError",
    "SliceResult",
    "SpecialWindow",
    "Specification",
    "classify_column",
    "compute_grid",
    "export_frames",
    "frame_file_stem",
    "is_rect_transparent",
    "load_specification",
    "resolve_row",
    "slice_image",
    "slice_sheet",
    "specification_from_dict",
    "synthesize_name",
    "write_mapping",
]
