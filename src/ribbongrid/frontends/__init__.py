"""Frontend interfaces for ribbon grids.

The Tkinter GUI lives in ``ribbongrid.frontends.tkinter_gui`` and is not
imported here, so the CLI works on interpreters built without tkinter.
"""

from .cli import CLIRibbonGrid

__all__ = ["CLIRibbonGrid"]
