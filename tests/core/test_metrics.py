"""Tests for grid metrics."""

import numpy as np
import pytest

from ribbongrid.core.metrics import (
    COLOR_CODES,
    GridMetrics,
    collect_cycle_metrics,
    collect_metrics,
    color_counts,
    grid_to_array,
    numbers_to_array,
)
from ribbongrid.core.pattern import ColorClass, generate_pattern


class TestArrays:
    """Test cases for grid array conversion."""

    def test_grid_to_array(self):
        """Test color code array for the 5x5 grid."""
        codes = grid_to_array(generate_pattern(5, 5, 0))

        assert codes.shape == (5, 5)
        assert codes.dtype == np.int8
        assert np.all(codes[0] == COLOR_CODES[ColorClass.GREEN])
        assert np.all(codes[-1] == COLOR_CODES[ColorClass.GREEN])
        assert codes[2].tolist() == [3, 2, 2, 2, 0]

    def test_numbers_to_array(self):
        """Test number array is row-major 1..N."""
        numbers = numbers_to_array(generate_pattern(6, 7))

        assert numbers.shape == (6, 7)
        assert np.array_equal(numbers.ravel(), np.arange(1, 43))


class TestColorCounts:
    """Test cases for color_counts."""

    def test_5x5_counts(self):
        """Test per-color counts for the 5x5 grid."""
        counts = color_counts(generate_pattern(5, 5, 0))
        assert counts == {"black": 1, "green": 10, "red": 9, "blue": 5}

    def test_counts_sum_to_total(self):
        """Test that counts cover every cell."""
        counts = color_counts(generate_pattern(20, 10, 4))
        assert sum(counts.values()) == 200
        assert counts["green"] == 20


class TestGridMetrics:
    """Test cases for metrics collection."""

    def test_collect_metrics(self):
        """Test metrics for a single grid."""
        metrics = collect_metrics(generate_pattern(5, 5, 0), phase=0)

        assert metrics.rows == 5
        assert metrics.cols == 5
        assert metrics.phase == 0
        assert metrics.counts["black"] == 1
        assert metrics.ribbon_coverage == pytest.approx(14 / 15)

    def test_to_dict(self):
        """Test conversion to a plain dictionary."""
        metrics = GridMetrics(rows=5, cols=6, phase=2, counts={"red": 1})
        assert metrics.to_dict() == {
            "rows": 5,
            "cols": 6,
            "phase": 2,
            "counts": {"red": 1},
            "ribbon_coverage": 0.0,
        }

    def test_collect_cycle_metrics(self):
        """Test one full animation cycle is summarized."""
        cycle = collect_cycle_metrics(8, 6)

        assert len(cycle) == 7
        assert [m.phase for m in cycle] == list(range(7))
        assert all(m.counts["green"] == 12 for m in cycle)
        assert all(0.0 <= m.ribbon_coverage <= 1.0 for m in cycle)

    def test_collect_cycle_metrics_sanitizes(self):
        """Test that cycle metrics clamp dimensions."""
        cycle = collect_cycle_metrics(1, "x")
        assert len(cycle) == 6
        assert cycle[0].rows == 5
        assert cycle[0].cols == 5
