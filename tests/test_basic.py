"""Basic tests for ribbongrid package."""

from ribbongrid import AnimationDriver, Cell, ColorClass, generate_pattern


def test_grid_creation():
    """Test basic grid generation."""
    grid = generate_pattern(20, 10)
    assert len(grid) == 20
    assert len(grid[0]) == 10
    assert grid[0][0] == Cell(1, ColorClass.GREEN)
    assert grid[-1][-1].number == 200


def test_driver_creation():
    """Test basic driver creation."""
    driver = AnimationDriver(schedule=lambda delay, callback: None, cancel=lambda handle: None)
    assert driver.phase == 0
    assert driver.running is False


def test_package_version():
    """Test the package exposes a version."""
    import ribbongrid

    assert ribbongrid.__version__ == "0.1.0"


def test_frontends_exports():
    """Test the frontends package exposes the CLI without the Tkinter GUI."""
    import ribbongrid.frontends as frontends

    assert frontends.__all__ == ["CLIRibbonGrid"]
    assert not hasattr(frontends, "TkinterRibbonGridGUI")
