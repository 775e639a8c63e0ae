"""Decoders for the supported import formats."""

from ansi_canvas.codec.ansi_parser import AnsiParser, decode_ansi
from ansi_canvas.codec.cp437 import cp437_codepoint, cp437_to_unicode
from ansi_canvas.codec.native import decode_caca
from ansi_canvas.codec.text import decode_text

__all__ = [
    "AnsiParser",
    "cp437_codepoint",
    "cp437_to_unicode",
    "decode_ansi",
    "decode_caca",
    "decode_text",
]
