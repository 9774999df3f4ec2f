from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Tuple

import numpy as np
import pytest

from spritecomposer import config, logging_config
from spritecomposer.slicing import Sheet


def build_alpha(
    rows: int,
    cols: int,
    cell: Tuple[int, int] = (4, 4),
    *,
    transparent: Iterable[Tuple[int, int]] = (),
    bottom_padding: int = 0,
) -> np.ndarray:
    """Alpha plane of a sheet whose cells are opaque except ``transparent``.

    Cells are addressed ``(row, col)`` with row 0 at the top.  Padding rows
    are added below the grid and left transparent.
    """

    cell_w, cell_h = cell
    alpha = np.zeros((rows * cell_h + bottom_padding, cols * cell_w), dtype=np.uint8)
    skipped = set(transparent)
    for r in range(rows):
        for c in range(cols):
            if (r, c) in skipped:
                continue
            alpha[r * cell_h:(r + 1) * cell_h, c * cell_w:(c + 1) * cell_w] = 255
    return alpha


@pytest.fixture
def make_sheet():
    def _make(rows, cols, cell=(4, 4), *, transparent=(), bottom_padding=0, name="hero"):
        return Sheet(name, build_alpha(rows, cols, cell, transparent=transparent, bottom_padding=bottom_padding))

    return _make


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point config and logs at ``tmp_path`` and undo any logging setup."""

    home = tmp_path / "home"
    monkeypatch.setattr(config, "HOME_DIR", home)
    monkeypatch.setattr(config, "CONFIG_PATH", home / "config.json")
    monkeypatch.setattr(config, "LOGS_DIR", home / "logs")
    monkeypatch.setattr(logging_config.configure_logging, "_configured", False, raising=False)

    root = logging.getLogger()
    saved_level = root.level
    yield home
    # Only drop the handlers configure_logging installs; pytest manages its own.
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
