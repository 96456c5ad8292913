"""Tests for the Tkinter GUI frontend."""

import pytest

tk = pytest.importorskip("tkinter")

from ribbongrid.core.pattern import ColorClass, generate_pattern  # noqa: E402
from ribbongrid.frontends.tkinter_gui import (  # noqa: E402
    CELL_COLORS,
    TkinterRibbonGridGUI,
    parse_dimension_entry,
)


class TestParseDimensionEntry:
    """Test cases for rows/cols entry parsing."""

    def test_valid_entry(self):
        """Test numeric entries are sanitized."""
        assert parse_dimension_entry("12", 20) == 12
        assert parse_dimension_entry(" 8.7 ", 20) == 8
        assert parse_dimension_entry("2", 20) == 5

    def test_invalid_entry_keeps_previous(self):
        """Test blank or garbage entries keep the previous value."""
        assert parse_dimension_entry("", 20) == 20
        assert parse_dimension_entry("   ", 9) == 9
        assert parse_dimension_entry("abc", 7) == 7


class TestTkinterRibbonGridGUI:
    """Test cases for the Tkinter GUI."""

    @pytest.fixture
    def root(self):
        """Create a root Tkinter window for testing."""
        try:
            root = tk.Tk()
        except tk.TclError:
            pytest.skip("No display available")
        root.withdraw()  # Hide the window during tests
        yield root
        root.destroy()

    @pytest.fixture
    def gui(self, root):
        """Create a GUI instance for testing."""
        return TkinterRibbonGridGUI(root)

    def test_initialization(self, gui):
        """Test GUI initialization."""
        assert gui.driver.rows == 20
        assert gui.driver.cols == 10
        assert gui.running is False
        assert gui.current_grid == generate_pattern(20, 10, 0)
        assert len(gui.cell_objects) == 20
        assert all(len(row) == 10 for row in gui.cell_objects)

    def test_cells_drawn(self, gui):
        """Test that canvas items show the cell numbers and colors."""
        rect, text = gui.cell_objects[0][0]
        assert gui.canvas.itemcget(text, "text") == "1"
        assert gui.canvas.itemcget(rect, "fill") == CELL_COLORS[ColorClass.GREEN]

        rect, text = gui.cell_objects[19][9]
        assert gui.canvas.itemcget(text, "text") == "200"

    def test_start_stop(self, gui):
        """Test starting and stopping the animation."""
        gui.start()
        assert gui.running is True
        assert "Running" in gui.status_label["text"]

        gui.stop()
        assert gui.running is False
        assert "Stopped" in gui.status_label["text"]

    def test_tick_updates_grid(self, gui):
        """Test that a driver tick redraws the next phase."""
        gui.start()
        gui.driver.tick()

        assert gui.driver.phase == 1
        assert gui.current_grid == generate_pattern(20, 10, 1)
        gui.stop()

    def test_stop_keeps_grid(self, gui):
        """Test that stopping leaves the last grid displayed."""
        gui.start()
        gui.driver.tick()
        gui.stop()

        assert gui.current_grid == generate_pattern(20, 10, 1)

    def test_apply_dimensions(self, gui):
        """Test applying edited dimensions."""
        gui.rows_var.set("7")
        gui.cols_var.set("3")
        gui.apply_dimensions()

        assert gui.driver.rows == 7
        assert gui.driver.cols == 5
        assert gui.cols_var.get() == "5"
        assert len(gui.cell_objects) == 7
        assert gui.current_grid == generate_pattern(7, 5, 0)

    def test_apply_invalid_dimensions(self, gui):
        """Test that garbage entries fall back to the current size."""
        gui.rows_var.set("many")
        gui.apply_dimensions()

        assert gui.driver.rows == 20
        assert gui.rows_var.get() == "20"

    def test_reset(self, gui):
        """Test reset restores 20x10 at phase 0."""
        gui.rows_var.set("6")
        gui.cols_var.set("6")
        gui.apply_dimensions()
        gui.start()
        gui.driver.tick()

        gui.reset()

        assert gui.driver.rows == 20
        assert gui.driver.cols == 10
        assert gui.driver.phase == 0
        assert gui.rows_var.get() == "20"
        assert gui.current_grid == generate_pattern(20, 10, 0)
        gui.stop()
