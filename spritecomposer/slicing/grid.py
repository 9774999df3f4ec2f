"""Grid geometry for fixed-size cells on a sprite sheet."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .spec import SliceConfigurationError


@dataclass(frozen=True)
class Rect:
    """Integer rectangle with a bottom-up ``y`` (0 is the bottom pixel row)."""

    x: int
    y: int
    width: int
    height: int

    def to_box(self, sheet_height: int) -> Tuple[int, int, int, int]:
        """Return the Pillow ``(left, upper, right, lower)`` box for this rect."""

        upper = sheet_height - self.y - self.height
        return (self.x, upper, self.x + self.width, upper + self.height)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class GridLayout:
    sheet_width: int
    sheet_height: int
    cell_width: int
    cell_height: int
    total_rows: int
    total_cols: int
    bottom_padding: int

    def cell_rect(self, row: int, col: int) -> Rect:
        # Grid row 0 is the top of the sheet; pixel rows count from the bottom.
        y = self.bottom_padding + (self.total_rows - 1 - row) * self.cell_height
        return Rect(col * self.cell_width, y, self.cell_width, self.cell_height)


def compute_grid(sheet_width: int, sheet_height: int, cell_width: int, cell_height: int) -> GridLayout:
    if cell_width <= 0 or cell_height <= 0:
        raise SliceConfigurationError(
            f"cell size must be positive, got {cell_width}x{cell_height}"
        )
    if sheet_width < 0 or sheet_height < 0:
        raise SliceConfigurationError(
            f"sheet size must not be negative, got {sheet_width}x{sheet_height}"
        )
    return GridLayout(
        sheet_width=sheet_width,
        sheet_height=sheet_height,
        cell_width=cell_width,
        cell_height=cell_height,
        total_rows=sheet_height // cell_height,
        total_cols=sheet_width // cell_width,
        bottom_padding=sheet_height % cell_height,
    )


__all__ = ["GridLayout", "Rect", "compute_grid"]
