"""Grid statistics backed by numpy arrays."""

from typing import Dict, List, Any
from dataclasses import dataclass, field, asdict
import numpy as np

from .pattern import ColorClass, Grid, generate_pattern, sanitize_dimension

COLOR_CODES: Dict[ColorClass, int] = {
    ColorClass.BLACK: 0,
    ColorClass.GREEN: 1,
    ColorClass.RED: 2,
    ColorClass.BLUE: 3,
}


def grid_to_array(grid: Grid) -> np.ndarray:
    """Convert a grid to a (rows, cols) array of color codes.

    Args:
        grid: Generated grid

    Returns:
        int8 array using COLOR_CODES
    """
    return np.array([[COLOR_CODES[cell.color] for cell in row] for row in grid], dtype=np.int8)


def numbers_to_array(grid: Grid) -> np.ndarray:
    """Convert a grid to a (rows, cols) array of cell numbers."""
    return np.array([[cell.number for cell in row] for row in grid], dtype=np.int64)


def color_counts(grid: Grid) -> Dict[str, int]:
    """Count cells per color tag.

    Args:
        grid: Generated grid

    Returns:
        Dictionary with every color tag as a key
    """
    codes = grid_to_array(grid)
    return {color.value: int(np.sum(codes == code)) for color, code in COLOR_CODES.items()}


@dataclass
class GridMetrics:
    """Summary statistics for one generated grid."""

    rows: int
    cols: int
    phase: int = 0
    counts: Dict[str, int] = field(default_factory=dict)
    ribbon_coverage: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary."""
        return asdict(self)


def collect_metrics(grid: Grid, phase: int = 0) -> GridMetrics:
    """Compute metrics for a grid.

    Ribbon coverage is the share of interior (non-border) cells that are
    red or blue, accents included.

    Args:
        grid: Generated grid
        phase: Phase the grid was generated with

    Returns:
        GridMetrics instance
    """
    codes = grid_to_array(grid)
    rows, cols = codes.shape

    interior = codes[1:-1]
    highlighted = np.isin(interior, [COLOR_CODES[ColorClass.RED], COLOR_CODES[ColorClass.BLUE]])
    coverage = float(np.mean(highlighted)) if interior.size else 0.0

    return GridMetrics(
        rows=int(rows),
        cols=int(cols),
        phase=phase,
        counts=color_counts(grid),
        ribbon_coverage=coverage,
    )


def collect_cycle_metrics(rows: Any, cols: Any) -> List[GridMetrics]:
    """Compute metrics for every phase of one animation cycle.

    Args:
        rows: Number of rows
        cols: Number of columns

    Returns:
        One GridMetrics per phase in [0, cols + 1)
    """
    rows = sanitize_dimension(rows)
    cols = sanitize_dimension(cols)
    period = max(1, cols + 1)

    return [collect_metrics(generate_pattern(rows, cols, phase), phase) for phase in range(period)]
