"""Phase-cycling animation driver for ribbon grids."""

from typing import Any, Callable, Iterator, Optional

from .pattern import Grid, MIN_DIMENSION, generate_pattern, sanitize_dimension

DEFAULT_ROWS = 20
DEFAULT_COLS = 10
TICK_INTERVAL_MS = 600

__all__ = [
    "AnimationDriver",
    "DEFAULT_ROWS",
    "DEFAULT_COLS",
    "MIN_DIMENSION",
    "TICK_INTERVAL_MS",
]


class AnimationDriver:
    """Advances the animation phase on a repeating timer.

    The timer itself is supplied by the host as a ``schedule(delay_ms,
    callback) -> handle`` and ``cancel(handle)`` pair, so a Tkinter root's
    ``after``/``after_cancel`` plug in directly. Every recomputed grid is
    handed to ``on_frame``.
    """

    def __init__(
        self,
        schedule: Callable[[int, Callable[[], None]], Any],
        cancel: Callable[[Any], None],
        on_frame: Optional[Callable[[Grid], None]] = None,
        rows: Any = DEFAULT_ROWS,
        cols: Any = DEFAULT_COLS,
        interval_ms: int = TICK_INTERVAL_MS,
        phase: int = 0,
    ) -> None:
        """Initialize the driver in the stopped state.

        Args:
            schedule: Function scheduling a callback after a delay in milliseconds
            cancel: Function cancelling a handle returned by schedule
            on_frame: Callback receiving each recomputed grid
            rows: Initial number of rows
            cols: Initial number of columns
            interval_ms: Delay between ticks
            phase: Starting phase, reduced into the current period
        """
        self._schedule = schedule
        self._cancel = cancel
        self.on_frame = on_frame
        self.interval_ms = interval_ms

        self._rows = sanitize_dimension(rows)
        self._cols = sanitize_dimension(cols)
        self._phase = phase % self.period
        self._running = False
        self._handle: Optional[Any] = None
        self._ticks = 0

    @property
    def rows(self) -> int:
        """Current number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Current number of columns."""
        return self._cols

    @property
    def phase(self) -> int:
        """Current animation phase."""
        return self._phase

    @property
    def running(self) -> bool:
        """Whether the timer is active."""
        return self._running

    @property
    def ticks(self) -> int:
        """Number of ticks processed since creation."""
        return self._ticks

    @property
    def period(self) -> int:
        """Number of distinct phases before the animation repeats."""
        return max(1, self._cols + 1)

    def start(self) -> None:
        """Start ticking. Does nothing if already running."""
        if self._running:
            return

        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        """Stop ticking, leaving the last grid in place."""
        self._running = False
        if self._handle is not None:
            self._cancel(self._handle)
            self._handle = None

    def tick(self) -> None:
        """Advance one phase step and recompute the grid."""
        self._handle = None
        if not self._running:
            # Stale callback delivered after stop()
            return

        self._advance()
        self.refresh()
        self._schedule_next()

    def set_dimensions(self, rows: Any, cols: Any) -> Grid:
        """Change the grid size and recompute.

        Args:
            rows: Requested number of rows
            cols: Requested number of columns

        Returns:
            Grid for the new dimensions
        """
        self._rows = sanitize_dimension(rows)
        self._cols = sanitize_dimension(cols)
        self._phase %= self.period
        return self.refresh()

    def reset(self) -> Grid:
        """Restore the default 20x10 grid at phase 0."""
        self._rows = DEFAULT_ROWS
        self._cols = DEFAULT_COLS
        self._phase = 0
        return self.refresh()

    def refresh(self) -> Grid:
        """Recompute the grid for the current state and publish it."""
        grid = generate_pattern(self._rows, self._cols, self._phase)
        if self.on_frame is not None:
            self.on_frame(grid)
        return grid

    def frames(self, count: int) -> Iterator[Grid]:
        """Yield successive grids without using the timer.

        The first grid is for the current phase; the phase advances between
        frames and is left on the last yielded frame.

        Args:
            count: Number of frames to produce

        Yields:
            One grid per frame
        """
        for i in range(count):
            if i > 0:
                self._advance()
            yield self.refresh()

    def _advance(self) -> None:
        """Move to the next phase."""
        self._phase = (self._phase + 1) % self.period
        self._ticks += 1

    def _schedule_next(self) -> None:
        """Schedule the next tick."""
        self._handle = self._schedule(self.interval_ms, self.tick)
