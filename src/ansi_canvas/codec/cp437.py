"""CP437 (IBM PC) character set conversion."""

from ansi_canvas.core.constants import CP437_TO_UNICODE

# Codepoint for every byte value
CP437_CODEPOINTS: tuple[int, ...] = tuple(ord(c) for c in CP437_TO_UNICODE)


def cp437_codepoint(byte: int) -> int:
    """Unicode codepoint of a single CP437 byte."""
    return CP437_CODEPOINTS[byte]


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to Unicode string."""
    return ''.join(CP437_TO_UNICODE[b] for b in data)
