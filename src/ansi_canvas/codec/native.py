"""Native libcaca canvas dumps."""

import logging
import struct

from ansi_canvas.core.canvas import Canvas
from ansi_canvas.core.cell import Cell
from ansi_canvas.core.constants import (
    NATIVE_CANVAS_MAGIC,
    NATIVE_HEADER_SIZE,
    NATIVE_MAGIC,
    NATIVE_RECORD_SIZE,
)
from ansi_canvas.errors import MalformedHeaderError

logger = logging.getLogger(__name__)

RECORD = struct.Struct(">II")


def _reject(reason: str) -> MalformedHeaderError:
    logger.debug("Rejecting native canvas: %s", reason)
    return MalformedHeaderError(reason)


def decode_caca(data: bytes) -> Canvas:
    """
    Decode a native canvas dump.

    Layout (big-endian):
        0-3    "CACA"
        4-7    "CANV"
        8-11   width (u32)
        12-15  height (u32)
        16-    width * height records of u32 character, u32 attribute,
               in row-major order

    Raises:
        MalformedHeaderError: if the magic, dimensions or total length
            do not check out
    """
    if len(data) < NATIVE_HEADER_SIZE:
        raise _reject(f"need {NATIVE_HEADER_SIZE} header bytes, got {len(data)}")
    if data[0:4] != NATIVE_MAGIC:
        raise _reject(f"bad magic {bytes(data[0:4])!r}")
    if data[4:8] != NATIVE_CANVAS_MAGIC:
        raise _reject(f"bad canvas magic {bytes(data[4:8])!r}")

    width = int.from_bytes(data[8:12], 'big')
    height = int.from_bytes(data[12:16], 'big')
    if not width or not height:
        raise _reject(f"zero dimension {width}x{height}")

    expected = NATIVE_HEADER_SIZE + width * height * NATIVE_RECORD_SIZE
    if len(data) != expected:
        raise _reject(
            f"{width}x{height} canvas needs {expected} bytes, got {len(data)}"
        )

    canvas = Canvas(width=width, height=height)
    records = RECORD.iter_unpack(data[NATIVE_HEADER_SIZE:])
    for y in range(height):
        for x in range(width):
            char, attr = next(records)
            canvas[x, y] = Cell(char, attr)

    return canvas
