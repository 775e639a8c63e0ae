"""ANSI escape sequence parser with virtual terminal emulation."""

import logging

from ansi_canvas.codec.cp437 import cp437_codepoint
from ansi_canvas.codec.params import parse_parameters
from ansi_canvas.codec.sgr import ColorState, apply_sgr
from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.constants import ESC, SAUCE_MARKER

logger = logging.getLogger(__name__)

LBRACKET = 0x5B
CR = 0x0D
LF = 0x0A
SUB = 0x1A  # DOS end-of-file


class AnsiParser:
    """
    Stateful ANSI parser that processes raw bytes into a Canvas.

    Simulates a virtual terminal to interpret cursor movements, color codes
    and erase commands. The canvas starts at width x height and only grows
    downwards: a character written below the last row extends the canvas,
    while the width stays fixed and long lines wrap.

    Malformed, truncated and unknown sequences are ignored rather than
    reported, since real-world ANSI art is full of them.
    """

    def __init__(self, width: int = 80, height: int = 25):
        self.canvas = Canvas(width=width, height=height)

        # Terminal state
        self.cursor_x = 0
        self.cursor_y = 0
        self.colors = ColorState()

        # Saved cursor position (single slot)
        self.saved_x = 0
        self.saved_y = 0

        self.finished = False
        self._apply_colors()

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def feed(self, data: bytes) -> None:
        """
        Process a complete CP437 byte stream into the canvas.

        Escape sequences are not carried over between calls, and nothing is
        processed once a SAUCE trailer has been seen.
        """
        if self.finished:
            return

        size = len(data)
        i = 0
        while i < size:
            byte = data[i]

            if byte == SUB and data.startswith(SAUCE_MARKER, i):
                # Everything from here on is SAUCE metadata
                logger.debug("SAUCE trailer at offset %d, stopping", i)
                self.finished = True
                return

            if byte == CR:
                i += 1
                continue

            if byte == LF:
                self.cursor_x = 0
                self.cursor_y += 1
                i += 1
                continue

            if byte == ESC and i + 1 < size and data[i + 1] == LBRACKET:
                i = self._process_csi(data, i + 2)
                continue

            self._put_char(cp437_codepoint(byte))
            i += 1

    def _process_csi(self, data: bytes, start: int) -> int:
        """Handle the CSI sequence starting at ``start``; return the next offset."""
        params, consumed = parse_parameters(data, start)
        end = start + consumed

        if end >= len(data):
            # Truncated sequence, no final byte
            return end

        self._handle_csi(params, chr(data[end]))
        return end + 1

    def _put_char(self, codepoint: int) -> None:
        """Put a character at current cursor position."""
        # Handle wrap
        if self.cursor_x >= self.width:
            self.cursor_x = 0
            self.cursor_y += 1

        if self.cursor_y >= self.height:
            logger.debug("Growing canvas to %d rows", self.cursor_y + 1)
            self.canvas.resize(self.width, self.cursor_y + 1)

        self.canvas.put_char(self.cursor_x, self.cursor_y, codepoint)
        self.cursor_x += 1

    def _handle_csi(self, params: list[int], command: str) -> None:
        """Handle a CSI escape sequence."""
        argc = len(params)

        if command == 'm':
            self._handle_sgr(params)
        elif command == 'H' or command == 'f':
            # Cursor position, 1-based, not clamped
            if argc == 0:
                self.cursor_x = 0
                self.cursor_y = 0
            elif argc == 1:
                self.cursor_y = params[0] - 1
                self.cursor_x = 0
            else:
                self.cursor_y = params[0] - 1
                self.cursor_x = params[1] - 1
        elif command == 'A':
            # Cursor up
            n = params[0] if argc else 1
            self.cursor_y = max(0, self.cursor_y - n)
        elif command == 'B':
            # Cursor down
            n = params[0] if argc else 1
            self.cursor_y += n
        elif command == 'C':
            # Cursor forward
            n = params[0] if argc else 1
            self.cursor_x += n
        elif command == 'D':
            # Cursor back
            n = params[0] if argc else 1
            self.cursor_x = max(0, self.cursor_x - n)
        elif command == 's':
            # Save cursor position
            self.saved_x = self.cursor_x
            self.saved_y = self.cursor_y
        elif command == 'u':
            # Restore cursor position
            self.cursor_x = self.saved_x
            self.cursor_y = self.saved_y
        elif command == 'J':
            # Only "erase entire display" is honoured, as a cursor home
            if argc and params[0] == 2:
                self.cursor_x = 0
                self.cursor_y = 0
        elif command == 'K':
            self._erase_line()

    def _handle_sgr(self, params: list[int]) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        if not params:
            params = [0]

        for code in params:
            self.colors = apply_sgr(code, self.colors)

        self._apply_colors()

    def _apply_colors(self) -> None:
        fg, bg = self.colors.effective_colors()
        self.canvas.set_color(fg, bg)

    def _erase_line(self) -> None:
        """Blank from the cursor to the right edge and park the cursor there."""
        for x in range(max(self.cursor_x, 0), self.width):
            self.canvas.put_char(x, self.cursor_y, ' ')
        self.cursor_x = self.width

    def get_canvas(self) -> Canvas:
        """Get the resulting canvas."""
        return self.canvas


def decode_ansi(data: bytes, width: int = 80, height: int = 25) -> Canvas:
    """Decode an ANSI byte stream into a new canvas."""
    parser = AnsiParser(width=width, height=height)
    parser.feed(data)
    return parser.get_canvas()
