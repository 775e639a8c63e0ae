"""Import buffers and files into canvases."""

import logging
from pathlib import Path
from typing import Callable

from ansi_canvas.codec.ansi_parser import decode_ansi
from ansi_canvas.codec.native import decode_caca
from ansi_canvas.codec.text import decode_text
from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.constants import CSI
from ansi_canvas.errors import EmptyInputError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# (format, description) pairs, in the order they are advertised
IMPORT_FORMATS: tuple[tuple[str, str], ...] = (
    ("", "autodetect"),
    ("text", "plain text"),
    ("caca", "native libcaca format"),
    ("ansi", "ANSI coloured text"),
)

DECODERS: dict[str, Callable[[bytes], Canvas]] = {
    "text": decode_text,
    "caca": decode_caca,
    "ansi": decode_ansi,
}


def get_import_list() -> list[tuple[str, str]]:
    """Return the supported import formats as (format, description) pairs."""
    return list(IMPORT_FORMATS)


def detect_format(data: bytes) -> str:
    """
    Guess the format of a buffer.

    Checks, in order:
    - a native dump: "CAC" followed by a fourth byte that is NOT "A".
      This mirrors libcaca's autodetection test as shipped; a real "CACA"
      dump therefore falls through to the other checks and has to be
      imported with an explicit "caca" format.
    - an ``ESC [`` pair anywhere in the buffer means ANSI;
    - anything else is plain text.
    """
    # FIXME: fourth byte test looks inverted (decode_caca wants "A")
    if len(data) >= 4 and data[0:3] == b"CAC" and data[3] != ord("A"):
        return "caca"

    if CSI in data:
        return "ansi"

    return "text"


def import_canvas(data: bytes | None, format: str | None = "") -> Canvas:
    """
    Import a memory buffer into a new canvas.

    Args:
        data: The bytes to decode
        format: "text", "caca", "ansi", or "" (or None) to autodetect.
            Matching is case-insensitive.

    Returns:
        A newly allocated Canvas owned by the caller

    Raises:
        EmptyInputError: data is None or empty
        UnsupportedFormatError: format is not one of the above
        MalformedHeaderError: a native dump failed validation
        CanvasAllocationError: the canvas would be too large
    """
    if not data:
        raise EmptyInputError()
    data = bytes(data)

    name = (format or "").lower()
    if name == "":
        name = detect_format(data)
        logger.debug("Autodetected format %r", name)
    elif name not in DECODERS:
        raise UnsupportedFormatError(format)

    logger.debug("Importing %d bytes as %r", len(data), name)
    return DECODERS[name](data)


def load(path: str | Path, format: str | None = "") -> Canvas:
    """Load a file from disk into a canvas."""
    path = Path(path)
    with open(path, 'rb') as f:
        data = f.read()
    return import_canvas(data, format)
