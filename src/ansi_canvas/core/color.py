"""Canvas colors and packed cell attributes."""

from enum import IntEnum


class Color(IntEnum):
    """
    Canvas color numbers.

    The first 16 entries follow the PC text-mode ordering, so adding
    BRIGHT_OFFSET to one of the eight base colors gives its bright variant.
    DEFAULT and TRANSPARENT are special values that leave the choice of
    actual color to whatever displays the canvas.
    """
    BLACK = 0x00
    BLUE = 0x01
    GREEN = 0x02
    CYAN = 0x03
    RED = 0x04
    MAGENTA = 0x05
    BROWN = 0x06
    LIGHTGRAY = 0x07
    DARKGRAY = 0x08
    LIGHTBLUE = 0x09
    LIGHTGREEN = 0x0A
    LIGHTCYAN = 0x0B
    LIGHTRED = 0x0C
    LIGHTMAGENTA = 0x0D
    YELLOW = 0x0E
    WHITE = 0x0F
    DEFAULT = 0x10
    TRANSPARENT = 0x20


BRIGHT_OFFSET = 8

# ANSI color numbers (SGR 30-37 / 40-47) to canvas colors
ANSI_PALETTE: tuple[Color, ...] = (
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.BROWN,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.LIGHTGRAY,
)

# Attribute layout: bits 0-3 style, 4-17 foreground, 18-31 background
STYLE_MASK = 0xF
COLOR_MASK = 0x3FFF
FG_SHIFT = 4
BG_SHIFT = 18


class Style(IntEnum):
    """
    Style bits stored in the low nibble of an attribute.

    The ANSI and text decoders never set them; they only arrive verbatim
    in native dumps.
    """
    BOLD = 0x01
    ITALICS = 0x02
    UNDERLINE = 0x04
    BLINK = 0x08


def pack_attr(fg: int, bg: int, style: int = 0) -> int:
    """Pack a foreground/background pair and style bits into an attribute."""
    return (
        ((bg & COLOR_MASK) << BG_SHIFT)
        | ((fg & COLOR_MASK) << FG_SHIFT)
        | (style & STYLE_MASK)
    )


def attr_fg(attr: int) -> int:
    """Foreground color of a packed attribute."""
    return (attr >> FG_SHIFT) & COLOR_MASK


def attr_bg(attr: int) -> int:
    """Background color of a packed attribute."""
    return (attr >> BG_SHIFT) & COLOR_MASK


def attr_style(attr: int) -> int:
    """Style bits of a packed attribute."""
    return attr & STYLE_MASK


DEFAULT_ATTR = pack_attr(Color.DEFAULT, Color.TRANSPARENT)
