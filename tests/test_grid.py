"""Tests for dot grid layout."""

from __future__ import annotations

import numpy as np
import pytest

from dottime.core.grid import GAP_RATIO, cell_positions, chunk_rows, grid_layout, n_rows


class TestGridLayout:
    def test_month(self) -> None:
        layout = grid_layout("month", 390.0)
        assert layout.columns == 7
        assert layout.dot_size == pytest.approx((390 - 64) / 7 - 8)
        assert not layout.scrollable

    def test_year_scrolls(self) -> None:
        layout = grid_layout("year", 390.0)
        assert layout.columns == 16
        assert layout.dot_size == pytest.approx((390 - 64) / 16 - 5)
        assert layout.scrollable

    def test_life(self) -> None:
        layout = grid_layout("life", 390.0)
        assert layout.columns == 10
        assert layout.dot_size == pytest.approx((390 - 64) / 10 - 8)

    def test_unknown_mode(self) -> None:
        layout = grid_layout("decade")
        assert layout.columns == 7
        assert layout.dot_size == 12.0

    def test_gap_ratio(self) -> None:
        layout = grid_layout("month")
        assert layout.gap == pytest.approx(layout.dot_size * GAP_RATIO)

    def test_tiny_screen_keeps_positive_dots(self) -> None:
        assert grid_layout("month", 70.0).dot_size == 1.0


class TestRows:
    def test_n_rows(self) -> None:
        assert n_rows(31, 7) == 5
        assert n_rows(28, 7) == 4
        assert n_rows(0, 7) == 0
        assert n_rows(366, 16) == 23

    def test_chunk_rows(self) -> None:
        rows = chunk_rows(list(range(10)), 4)
        assert rows == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]

    def test_chunk_rows_rejects_zero_columns(self) -> None:
        with pytest.raises(ValueError):
            chunk_rows([1, 2], 0)


class TestCellPositions:
    def test_row_major(self) -> None:
        cols, rows = cell_positions(9, 4)
        np.testing.assert_array_equal(cols, [0, 1, 2, 3, 0, 1, 2, 3, 0])
        np.testing.assert_array_equal(rows, [0, 0, 0, 0, 1, 1, 1, 1, 2])

    def test_empty(self) -> None:
        cols, rows = cell_positions(0, 7)
        assert cols.size == 0
        assert rows.size == 0
