"""Buffer and file import."""

from ansi_canvas.io.reader import detect_format, get_import_list, import_canvas, load

__all__ = ["detect_format", "get_import_list", "import_canvas", "load"]
