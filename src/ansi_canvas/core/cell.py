"""Cell - atomic unit of the canvas."""

from dataclasses import dataclass

from ansi_canvas.core.color import DEFAULT_ATTR, attr_bg, attr_fg, attr_style

BLANK = 0x20


@dataclass(slots=True)
class Cell:
    """
    A single character cell.

    Holds a 32-bit character codepoint and the packed color attribute it
    is drawn with. Codepoints come straight from the input, so they are
    not guaranteed to be valid Unicode (see ``text``).
    """
    char: int = BLANK
    attr: int = DEFAULT_ATTR

    @property
    def fg(self) -> int:
        """Foreground color number."""
        return attr_fg(self.attr)

    @property
    def bg(self) -> int:
        """Background color number."""
        return attr_bg(self.attr)

    @property
    def style(self) -> int:
        """Style bits (see ``Style``)."""
        return attr_style(self.attr)

    @property
    def text(self) -> str:
        """The character as a string, U+FFFD if it is not a Unicode scalar."""
        if 0 <= self.char <= 0x10FFFF and not 0xD800 <= self.char <= 0xDFFF:
            return chr(self.char)
        return '�'

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, attr=self.attr)

    def is_default(self) -> bool:
        """Check if this cell is a blank with the default attribute."""
        return self.char == BLANK and self.attr == DEFAULT_ATTR
