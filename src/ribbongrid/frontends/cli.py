"""Command-line interface for ribbon grid rendering."""

import argparse
import sys
import time
import json
from typing import Any, Callable, Dict, List, Optional

from ..core.driver import AnimationDriver, DEFAULT_ROWS, DEFAULT_COLS, TICK_INTERVAL_MS
from ..core.metrics import GridMetrics, collect_metrics
from ..core.pattern import ColorClass, Grid, sanitize_dimension

# Background colors for each tag, with a contrasting foreground
ANSI_STYLES: Dict[ColorClass, str] = {
    ColorClass.GREEN: "\033[42;30m",
    ColorClass.RED: "\033[41;97m",
    ColorClass.BLUE: "\033[44;97m",
    ColorClass.BLACK: "\033[40;97m",
}
ANSI_RESET = "\033[0m"

TEXT_TAGS: Dict[ColorClass, str] = {
    ColorClass.GREEN: "G",
    ColorClass.RED: "R",
    ColorClass.BLUE: "B",
    ColorClass.BLACK: ".",
}

OUTPUT_FORMATS = ("ansi", "text", "json")


def grid_to_json(grid: Grid) -> List[List[Dict[str, Any]]]:
    """Convert a grid to JSON-serializable rows of cell objects."""
    return [[{"number": cell.number, "color": cell.color.value} for cell in row] for row in grid]


def format_grid(grid: Grid, style: str = "ansi") -> str:
    """Format a grid for terminal output.

    Args:
        grid: Grid to format
        style: One of 'ansi', 'text' or 'json'

    Returns:
        Formatted grid string

    Raises:
        ValueError: If style is unknown
    """
    if style == "json":
        return json.dumps(grid_to_json(grid))

    if style not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {style}")

    width = len(str(grid[-1][-1].number)) if grid and grid[-1] else 1

    lines = []
    for row in grid:
        if style == "ansi":
            parts = [f"{ANSI_STYLES[cell.color]} {cell.number:>{width}} {ANSI_RESET}" for cell in row]
            lines.append("".join(parts))
        else:
            parts = [f"{TEXT_TAGS[cell.color]}{cell.number:>{width}}" for cell in row]
            lines.append(" ".join(parts))

    return "\n".join(lines)


def format_metrics(metrics: GridMetrics) -> str:
    """Format grid metrics as a one-line summary."""
    counts = ", ".join(f"{tag}: {count}" for tag, count in metrics.counts.items())
    return (
        f"{metrics.rows}x{metrics.cols} phase {metrics.phase} - {counts} "
        f"(ribbon coverage {metrics.ribbon_coverage:.1%})"
    )


class CLIRibbonGrid:
    """Command-line interface for rendering ribbon grid frames."""

    def __init__(self, output: Optional[Callable[[str], None]] = None) -> None:
        """Initialize CLI interface.

        Args:
            output: Function receiving each block of text (defaults to print)
        """
        self.output = output or print
        self.last_grid: Optional[Grid] = None

    def _on_frame(self, grid: Grid) -> None:
        self.last_grid = grid

    def render(
        self,
        rows: Any = DEFAULT_ROWS,
        cols: Any = DEFAULT_COLS,
        phase: int = 0,
        frames: int = 1,
        interval_ms: int = TICK_INTERVAL_MS,
        style: str = "ansi",
        show_stats: bool = False,
        sleep: bool = True,
        verbose: bool = False,
    ) -> List[GridMetrics]:
        """Render one or more animation frames.

        Args:
            rows: Number of rows
            cols: Number of columns
            phase: Starting phase
            frames: Number of frames to render
            interval_ms: Delay between frames
            style: Output format
            show_stats: Print per-frame metrics
            sleep: Wait interval_ms between frames
            verbose: Print progress updates

        Returns:
            Metrics for every rendered frame
        """
        # The CLI drives frames itself, so the timer hooks are never used
        driver = AnimationDriver(
            schedule=lambda delay, callback: None,
            cancel=lambda handle: None,
            on_frame=self._on_frame,
            rows=rows,
            cols=cols,
            interval_ms=interval_ms,
            phase=phase,
        )

        if verbose and style != "json":
            self.output(
                f"Rendering {frames} frame(s) of {driver.rows}x{driver.cols} grid "
                f"(phase period: {driver.period}, interval: {interval_ms}ms)"
            )

        results = []
        json_frames = []
        for i, grid in enumerate(driver.frames(frames)):
            if i > 0 and sleep and interval_ms > 0:
                time.sleep(interval_ms / 1000.0)

            metrics = collect_metrics(grid, driver.phase)
            results.append(metrics)

            if style == "json":
                frame: Any = grid_to_json(grid)
                if show_stats:
                    frame = {"grid": frame, "metrics": metrics.to_dict()}
                json_frames.append(frame)
                continue

            if frames > 1:
                self.output(f"\nFrame {i + 1}/{frames} (phase {driver.phase}):")
            self.output(format_grid(grid, style))
            if show_stats:
                self.output(format_metrics(metrics))

        if style == "json":
            payload = json_frames[0] if len(json_frames) == 1 else json_frames
            self.output(json.dumps(payload))

        return results


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Render numbered ribbon grids in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render the default 20x10 grid
  ribbongrid-cli

  # Render a 12x8 grid at phase 3 as plain text
  ribbongrid-cli -r 12 -c 8 --phase 3 --format text

  # Animate 11 frames (one full cycle for 10 columns)
  ribbongrid-cli --frames 11 --interval 600

  # Dump a frame with color counts as JSON
  ribbongrid-cli --format json --stats
        """,
    )

    parser.add_argument(
        "-r", "--rows", type=sanitize_dimension, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})"
    )
    parser.add_argument(
        "-c", "--cols", type=sanitize_dimension, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})"
    )
    parser.add_argument("-p", "--phase", type=int, default=0, help="Starting animation phase (default: 0)")
    parser.add_argument("-f", "--frames", type=int, default=1, help="Number of frames to render (default: 1)")
    parser.add_argument(
        "--interval",
        type=int,
        default=TICK_INTERVAL_MS,
        help=f"Milliseconds between frames (default: {TICK_INTERVAL_MS})",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="ansi",
        help="Output format (default: ansi)",
    )
    parser.add_argument("--stats", action="store_true", help="Show color counts for each frame")
    parser.add_argument("--no-sleep", action="store_true", help="Render frames without waiting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress information")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.frames <= 0:
        errors.append("Frames must be positive")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.phase < 0:
        errors.append("Phase must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    cli = CLIRibbonGrid()

    try:
        cli.render(
            rows=args.rows,
            cols=args.cols,
            phase=args.phase,
            frames=args.frames,
            interval_ms=args.interval,
            style=args.format,
            show_stats=args.stats,
            sleep=not args.no_sleep,
            verbose=args.verbose,
        )
        return 0

    except KeyboardInterrupt:
        print("\nAnimation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
