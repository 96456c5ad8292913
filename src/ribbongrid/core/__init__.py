"""Core pattern generation logic."""

from .pattern import Cell, ColorClass, generate_pattern, sanitize_dimension
from .driver import AnimationDriver
from .metrics import GridMetrics, collect_metrics, collect_cycle_metrics, color_counts

__all__ = [
    "Cell",
    "ColorClass",
    "generate_pattern",
    "sanitize_dimension",
    "AnimationDriver",
    "GridMetrics",
    "collect_metrics",
    "collect_cycle_metrics",
    "color_counts",
]
