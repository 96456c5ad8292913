#!/usr/bin/env python3
"""
Example usage of the ribbongrid package.
"""

from ribbongrid import generate_pattern
from ribbongrid.core.metrics import collect_cycle_metrics
from ribbongrid.frontends.cli import format_grid


def main():
    """Demonstrate programmatic usage of the ribbongrid package."""
    rows, cols = 12, 8

    # Show the first three phases of the animation
    for phase in range(3):
        grid = generate_pattern(rows, cols, phase)
        print(f"Phase {phase}:")
        print(format_grid(grid, "text"))
        print()

    # Summarize one full cycle
    print("Cycle statistics:")
    for metrics in collect_cycle_metrics(rows, cols):
        print(f"  phase {metrics.phase}: {metrics.counts} coverage {metrics.ribbon_coverage:.1%}")


if __name__ == "__main__":
    main()
