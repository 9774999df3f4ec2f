"""Read-only alpha access to a sprite sheet."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

from .grid import Rect


@dataclass(frozen=True, eq=False)
class Sheet:
    """A sprite sheet reduced to what the slicer reads: its name and alpha.

    ``alpha`` is indexed ``[y, x]`` top-down, the way Pillow and numpy lay
    out image data.
    """

    name: str
    alpha: np.ndarray

    def __post_init__(self) -> None:
        alpha = np.array(self.alpha)
        if alpha.ndim != 2:
            raise ValueError(f"alpha must be 2-D, got shape {alpha.shape}")
        alpha.setflags(write=False)
        object.__setattr__(self, "alpha", alpha)

    @property
    def width(self) -> int:
        return int(self.alpha.shape[1])

    @property
    def height(self) -> int:
        return int(self.alpha.shape[0])

    @classmethod
    def from_image(cls, image: Image.Image, name: str) -> "Sheet":
        rgba = image.convert("RGBA")
        return cls(name, np.asarray(rgba.getchannel("A")))

    @classmethod
    def open_with_image(cls, path: str) -> Tuple["Sheet", Image.Image]:
        """Load ``path`` and return the sheet together with its RGBA image."""

        if not os.path.isfile(path):
            raise FileNotFoundError(path)
        name = os.path.splitext(os.path.basename(path))[0]
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
        return cls.from_image(rgba, name), rgba

    @classmethod
    def open(cls, path: str) -> "Sheet":
        return cls.open_with_image(path)[0]


def is_rect_transparent(sheet: Sheet, rect: Rect) -> bool:
    """Return ``True`` when every pixel of ``rect`` has zero alpha."""

    left, upper, right, lower = rect.to_box(sheet.height)
    region = sheet.alpha[max(0, upper):lower, max(0, left):right]
    return not np.any(region)


__all__ = ["Sheet", "is_rect_transparent"]
