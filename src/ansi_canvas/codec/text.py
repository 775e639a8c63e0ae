"""Plain text import."""

from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.color import Color


def decode_text(data: bytes) -> Canvas:
    """
    Decode raw text, one byte per cell.

    Lines break on LF and CR is dropped. The canvas is as wide as the
    longest line and as tall as the last line holding a character, and
    never smaller than 1x1. Bytes are stored as their own codepoints,
    without code page translation.
    """
    lines = bytes(data).replace(b"\r", b"").split(b"\n")
    width = max(1, max(len(line) for line in lines))
    height = 1
    for y, line in enumerate(lines):
        if line:
            height = y + 1

    canvas = Canvas(width=width, height=height)
    canvas.set_color(Color.DEFAULT, Color.TRANSPARENT)

    for y, line in enumerate(lines[:height]):
        for x, byte in enumerate(line):
            canvas.put_char(x, y, byte)

    return canvas
