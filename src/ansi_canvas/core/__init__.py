"""Core data structures for canvas representation."""

from ansi_canvas.core.cell import Cell
from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.color import Color

__all__ = ["Cell", "Canvas", "Color"]
