"""Tkinter GUI frontend for ribbon grids."""

import tkinter as tk
from typing import Any, Dict, List, Optional

from ..core.driver import AnimationDriver, DEFAULT_ROWS, DEFAULT_COLS, MIN_DIMENSION
from ..core.metrics import color_counts
from ..core.pattern import ColorClass, Grid, sanitize_dimension

CELL_COLORS: Dict[ColorClass, str] = {
    ColorClass.GREEN: "#2E8B57",
    ColorClass.RED: "#D62828",
    ColorClass.BLUE: "#1D4ED8",
    ColorClass.BLACK: "#111111",
}


def parse_dimension_entry(text: str, previous: int) -> int:
    """Parse a rows/cols field, keeping the previous value on bad input.

    Args:
        text: Raw entry text
        previous: Value to keep if the text is blank or not numeric

    Returns:
        Sanitized dimension
    """
    text = text.strip()
    if not text:
        return previous

    try:
        float(text)
    except ValueError:
        return previous

    return sanitize_dimension(text)


class TkinterRibbonGridGUI:
    """Tkinter-based grid view with start/stop animation controls."""

    def __init__(self, master: tk.Tk) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
        """
        self.master = master
        self.master.title("Ribbon Grid")
        self.master.configure(bg="#333333")

        # Display parameters
        self.cell_size = 34
        self.font = ("Arial", 9)

        # Canvas objects, one (rectangle, text) pair per cell
        self.cell_objects: List[List[Any]] = []
        self.current_grid: Optional[Grid] = None

        self.driver = AnimationDriver(
            schedule=self.master.after,
            cancel=self.master.after_cancel,
            on_frame=self.render_grid,
            rows=DEFAULT_ROWS,
            cols=DEFAULT_COLS,
        )

        self.setup_ui()
        self.driver.refresh()

    @property
    def running(self) -> bool:
        """Whether the animation is running."""
        return self.driver.running

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg="#333333")
        control_frame.pack(pady=5)

        self._create_dimension_inputs(control_frame)
        self._create_control_buttons(control_frame)

        self.status_label = tk.Label(
            self.master,
            text="",
            bg="#333333",
            fg="white",
            font=self.font,
            anchor="w",
        )
        self.status_label.pack(fill=tk.X, padx=5)

        self._create_canvas(self.master)

    def _create_dimension_inputs(self, parent: tk.Frame) -> None:
        """Create the rows and cols spinboxes."""
        self.rows_var = tk.StringVar(value=str(DEFAULT_ROWS))
        self.cols_var = tk.StringVar(value=str(DEFAULT_COLS))

        for label, var in (("Rows:", self.rows_var), ("Cols:", self.cols_var)):
            tk.Label(parent, text=label, bg="#333333", fg="white", font=self.font).pack(side=tk.LEFT)
            spinbox = tk.Spinbox(
                parent,
                from_=MIN_DIMENSION,
                to=999,
                width=5,
                textvariable=var,
                command=self.apply_dimensions,
            )
            spinbox.bind("<Return>", lambda event: self.apply_dimensions())
            spinbox.bind("<FocusOut>", lambda event: self.apply_dimensions())
            spinbox.pack(side=tk.LEFT, padx=(2, 8))

    def _create_control_buttons(self, parent: tk.Frame) -> None:
        """Create the start, stop and reset buttons."""
        self.start_btn = tk.Button(
            parent,
            text="Start",
            command=self.start,
            bg="#228B22",
            fg="white",
            font=self.font,
        )
        self.start_btn.pack(side=tk.LEFT, padx=3)

        self.stop_btn = tk.Button(
            parent,
            text="Stop",
            command=self.stop,
            bg="#555555",
            fg="white",
            font=self.font,
        )
        self.stop_btn.pack(side=tk.LEFT, padx=3)

        self.reset_btn = tk.Button(
            parent,
            text=f"Reset to {DEFAULT_ROWS}×{DEFAULT_COLS}",
            command=self.reset,
            bg="#444444",
            fg="white",
            font=self.font,
        )
        self.reset_btn.pack(side=tk.LEFT, padx=3)

    def _create_canvas(self, parent: tk.Misc) -> None:
        """Create the grid canvas."""
        self.canvas = tk.Canvas(
            parent,
            bg="black",
            highlightthickness=1,
            highlightbackground="white",
        )
        self.canvas.pack(padx=5, pady=5)

    def start(self) -> None:
        """Start the animation."""
        self.driver.start()
        self.update_status()

    def stop(self) -> None:
        """Stop the animation, keeping the current grid on screen."""
        self.driver.stop()
        self.update_status()

    def reset(self) -> None:
        """Restore the default grid size and phase."""
        self.rows_var.set(str(DEFAULT_ROWS))
        self.cols_var.set(str(DEFAULT_COLS))
        self.driver.reset()

    def apply_dimensions(self) -> None:
        """Apply the rows/cols entries to the grid."""
        rows = parse_dimension_entry(self.rows_var.get(), self.driver.rows)
        cols = parse_dimension_entry(self.cols_var.get(), self.driver.cols)

        # Write back the sanitized values
        self.rows_var.set(str(rows))
        self.cols_var.set(str(cols))

        if (rows, cols) != (self.driver.rows, self.driver.cols):
            self.driver.set_dimensions(rows, cols)

    def render_grid(self, grid: Grid) -> None:
        """Draw a grid, rebuilding canvas items only when the shape changes."""
        rows = len(grid)
        cols = len(grid[0]) if grid else 0

        if len(self.cell_objects) != rows or (self.cell_objects and len(self.cell_objects[0]) != cols):
            self._rebuild_canvas(rows, cols)

        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                rect, text = self.cell_objects[r][c]
                self.canvas.itemconfig(rect, fill=CELL_COLORS[cell.color])
                self.canvas.itemconfig(text, text=str(cell.number))

        self.current_grid = grid
        self.update_status()

    def _rebuild_canvas(self, rows: int, cols: int) -> None:
        """Recreate all canvas items for a new grid shape."""
        self.canvas.delete("all")
        self.canvas.config(width=cols * self.cell_size, height=rows * self.cell_size)

        self.cell_objects = []
        for r in range(rows):
            row_objects = []
            for c in range(cols):
                x1 = c * self.cell_size
                y1 = r * self.cell_size
                rect = self.canvas.create_rectangle(
                    x1, y1, x1 + self.cell_size, y1 + self.cell_size, outline="#333333"
                )
                text = self.canvas.create_text(
                    x1 + self.cell_size // 2,
                    y1 + self.cell_size // 2,
                    fill="white",
                    font=self.font,
                )
                row_objects.append((rect, text))
            self.cell_objects.append(row_objects)

    def update_status(self) -> None:
        """Update the status line."""
        counts = color_counts(self.current_grid) if self.current_grid else {}
        summary = "  ".join(f"{tag}: {count}" for tag, count in counts.items())
        state = "Running" if self.driver.running else "Stopped"
        self.status_label.config(
            text=f"{state} | {self.driver.rows}x{self.driver.cols} | "
            f"Phase {self.driver.phase}/{self.driver.period} | {summary}"
        )


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    root = tk.Tk()
    root.resizable(False, False)

    # Check for test mode
    import sys

    test_mode = "--test" in sys.argv

    app = TkinterRibbonGridGUI(root)

    if test_mode:
        print("Running in test mode...")
        app.start()

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.driver.ticks} ticks, phase {app.driver.phase}.")
            app.stop()
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
