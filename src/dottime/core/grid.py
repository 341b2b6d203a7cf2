"""Dot grid layout per view mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

T = TypeVar("T")

# Horizontal padding on each side of the grid, in points
GRID_PADDING = 32.0
# Gap between dots as a fraction of dot size
GAP_RATIO = 0.5
DEFAULT_SCREEN_WIDTH = 390.0

# view mode -> (columns, subtracted from the per-column width)
_COLUMN_CONFIG: dict[str, tuple[int, float]] = {
    "month": (7, 8.0),  # days of the week
    "year": (16, 5.0),
    "life": (10, 8.0),  # decades
}
_FALLBACK_COLUMNS = 7
_FALLBACK_DOT_SIZE = 12.0


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Sizing of the dot grid.

    Attributes:
        columns: Dots per row.
        dot_size: Dot diameter in points.
        gap: Space between dots in points.
        scrollable: Whether the grid is expected to overflow vertically.
    """

    columns: int
    dot_size: float
    gap: float
    scrollable: bool


def grid_layout(view_mode: str, screen_width: float = DEFAULT_SCREEN_WIDTH) -> GridLayout:
    """Compute the grid layout for a view mode on a screen of given width."""
    grid_width = screen_width - GRID_PADDING * 2
    if view_mode in _COLUMN_CONFIG:
        columns, shrink = _COLUMN_CONFIG[view_mode]
        dot_size = max(1.0, grid_width / columns - shrink)
    else:
        columns, dot_size = _FALLBACK_COLUMNS, _FALLBACK_DOT_SIZE
    return GridLayout(
        columns=columns,
        dot_size=dot_size,
        gap=dot_size * GAP_RATIO,
        scrollable=view_mode == "year",
    )


def n_rows(n_cells: int, columns: int) -> int:
    """Number of rows needed to hold ``n_cells``."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    return -(-n_cells // columns)


def chunk_rows(cells: Sequence[T], columns: int) -> list[list[T]]:
    """Split cells into consecutive rows of at most ``columns`` items."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    return [list(cells[i : i + columns]) for i in range(0, len(cells), columns)]


def cell_positions(
    n_cells: int, columns: int
) -> tuple[NDArray[np.integer[Any]], NDArray[np.integer[Any]]]:
    """Column and row of every cell, row-major with row 0 at the top.

    Returns:
        ``(cols, rows)`` arrays of length ``n_cells``.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    idx = np.arange(n_cells)
    return idx % columns, idx // columns
