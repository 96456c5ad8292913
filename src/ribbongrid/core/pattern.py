"""Ribbon pattern generation for numbered color grids."""

from typing import Any, List, Tuple
from dataclasses import dataclass
from enum import Enum
import math

MIN_DIMENSION = 5
ACCENT_MODULUS = 13


class ColorClass(Enum):
    """Color tag assigned to a grid cell."""

    GREEN = "green"
    RED = "red"
    BLUE = "blue"
    BLACK = "black"


@dataclass(frozen=True)
class Cell:
    """A single numbered cell of a generated grid."""

    number: int
    color: ColorClass


Grid = List[List[Cell]]


def sanitize_dimension(value: Any) -> int:
    """Coerce a row or column count to an integer of at least 5.

    The value is floored, then clamped. Anything that cannot be read as a
    finite number (None, garbage strings, NaN, infinity) becomes the minimum.

    Args:
        value: Requested dimension, typically an int or numeric text

    Returns:
        Sanitized dimension
    """
    if isinstance(value, int):
        return max(MIN_DIMENSION, value)

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return MIN_DIMENSION

    if not math.isfinite(number):
        return MIN_DIMENSION

    return max(MIN_DIMENSION, math.floor(number))


def neighbor_indices(index: int, cols: int) -> Tuple[int, int, int, int, int]:
    """Get the indices used to thicken a ribbon around a cell.

    No bounds filtering is applied: indices may be zero, negative, beyond
    the grid, or wrap into the adjacent row at the left and right edges.

    Args:
        index: 1-based cell index
        cols: Number of columns

    Returns:
        Tuple of (index, index - 1, index + 1, index - cols, index + cols)
    """
    return (index, index - 1, index + 1, index - cols, index + cols)


def ribbon_hit(index: Any, modulus: int, offset: Any) -> bool:
    """Check whether an index lies on a ribbon.

    Args:
        index: 1-based cell index
        modulus: Ribbon period along the linear index
        offset: Phase shift applied to the index

    Returns:
        True if (index - 1 + offset) is divisible by modulus
    """
    return (index - 1 + offset) % modulus == 0


def _classify(index: int, cols: int, phase: Any) -> ColorClass:
    """Pick the color of a non-border cell."""
    primary_mod = cols + 1
    secondary_mod = max(cols - 1, 1)

    neighbors = neighbor_indices(index, cols)

    # A NaN or infinite phase lies on neither ribbon
    if not (isinstance(phase, float) and not math.isfinite(phase)):
        # Floor division keeps huge integer phases exact
        secondary_offset = phase // 2

        if any(ribbon_hit(n, primary_mod, phase) for n in neighbors):
            return ColorClass.RED
        if any(ribbon_hit(n, secondary_mod, secondary_offset) for n in neighbors):
            return ColorClass.BLUE

    # Accent blips
    if (index + index // cols) % ACCENT_MODULUS == 0:
        return ColorClass.BLUE

    return ColorClass.BLACK


def generate_pattern(rows: Any, cols: Any, phase: Any = 0) -> Grid:
    """Generate the ribbon grid for the given dimensions and animation phase.

    Top and bottom rows are green. Every other cell is red when it touches
    the primary ribbon, blue when it touches the secondary ribbon or lands on
    an accent position, and black otherwise. Red wins where the ribbons
    overlap.

    Rows and cols are floored and clamped to at least 5. The phase is used
    as given; keeping it a non-negative integer is up to the caller.

    Args:
        rows: Number of rows
        cols: Number of columns
        phase: Animation step shifting the ribbons

    Returns:
        Freshly built list of rows, each a list of Cell in column order
    """
    rows = sanitize_dimension(rows)
    cols = sanitize_dimension(cols)
    if phase is None:
        phase = 0

    grid: Grid = []
    for r in range(rows):
        row = []
        for c in range(cols):
            index = r * cols + c + 1

            if r == 0 or r == rows - 1:
                color = ColorClass.GREEN
            else:
                color = _classify(index, cols, phase)

            row.append(Cell(index, color))
        grid.append(row)

    return grid
