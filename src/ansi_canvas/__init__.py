"""
ansi-canvas: import ANSI art, text and libcaca dumps into character canvases

Quick Start:
    >>> import ansi_canvas
    >>> canvas = ansi_canvas.load("artwork.ans")
    >>> canvas.width, canvas.height
    (80, 25)
    >>> canvas.row_text(0)

Features:
    - ANSI/ECMA-48 escape streams with CP437 characters (cursor movement,
      save/restore, erase, 16-color SGR)
    - Native libcaca canvas dumps
    - Plain text
    - Format autodetection
"""

__version__ = "0.1.0"

# Core types
from ansi_canvas.core.cell import Cell
from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.color import Color

# Errors
from ansi_canvas.errors import (
    CanvasAllocationError,
    CanvasImportError,
    EmptyInputError,
    MalformedHeaderError,
    UnsupportedFormatError,
)

# Import
from ansi_canvas.io.reader import detect_format, get_import_list, import_canvas, load

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "Color",
    # Errors
    "CanvasImportError",
    "EmptyInputError",
    "UnsupportedFormatError",
    "MalformedHeaderError",
    "CanvasAllocationError",
    # Import
    "import_canvas",
    "get_import_list",
    "detect_format",
    "load",
]
