"""Canvas - 2D grid of character cells."""

from dataclasses import dataclass, field
from typing import Iterator

from ansi_canvas.core.cell import BLANK, Cell
from ansi_canvas.core.color import DEFAULT_ATTR, pack_attr
from ansi_canvas.errors import CanvasAllocationError

# Upper bound on width * height for any single canvas. Each cell costs
# two list slots (16 bytes), so the ceiling is about 64 MB per canvas and
# twice that while a width change copies into new lists.
MAX_CELLS = 1 << 22


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise CanvasAllocationError(f"Invalid canvas size {width}x{height}")
    if width * height > MAX_CELLS:
        raise CanvasAllocationError(
            f"Canvas size {width}x{height} exceeds {MAX_CELLS} cells"
        )


@dataclass(eq=False)
class Canvas:
    """
    A width x height grid of Cells stored row-major.

    Writes go through ``put_char``, which draws with the active attribute
    set by ``set_color`` and silently drops anything outside the grid.
    ``resize`` is the only way to change the dimensions and keeps the
    content that fits in both the old and the new bounds.
    """
    width: int = 0
    height: int = 0
    attr: int = DEFAULT_ATTR
    _chars: list[int] = field(default_factory=list, init=False, repr=False)
    _attrs: list[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate the cell buffers."""
        _check_size(self.width, self.height)
        size = self.width * self.height
        self._chars = [BLANK] * size
        self._attrs = [self.attr] * size

    def set_color(self, fg: int, bg: int) -> None:
        """Set the attribute used by subsequent writes."""
        self.attr = pack_attr(fg, bg)

    def resize(self, width: int, height: int) -> None:
        """Change the canvas size, preserving existing cells."""
        _check_size(width, height)
        if width == self.width and height == self.height:
            return

        if width == self.width:
            # Rows are contiguous, so a height change only touches the tail
            size = width * height
            if height > self.height:
                grow = size - len(self._chars)
                self._chars.extend([BLANK] * grow)
                self._attrs.extend([self.attr] * grow)
            else:
                del self._chars[size:]
                del self._attrs[size:]
            self.height = height
            return

        chars = [BLANK] * (width * height)
        attrs = [self.attr] * (width * height)
        keep = min(width, self.width)
        for y in range(min(height, self.height)):
            src = y * self.width
            dst = y * width
            chars[dst:dst + keep] = self._chars[src:src + keep]
            attrs[dst:dst + keep] = self._attrs[src:src + keep]

        self.width = width
        self.height = height
        self._chars = chars
        self._attrs = attrs

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_char(self, x: int, y: int, char: int | str) -> None:
        """Write a character with the active attribute; ignored off-canvas."""
        if not self.in_bounds(x, y):
            return
        if isinstance(char, str):
            char = ord(char)
        offset = y * self.width + x
        self._chars[offset] = char
        self._attrs[offset] = self.attr

    def _offset(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) out of bounds ({self.width}x{self.height})"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> Cell:
        """Get a copy of the cell at position (x, y)."""
        offset = self._offset(x, y)
        return Cell(self._chars[offset], self._attrs[offset])

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store a cell, keeping its own attribute."""
        offset = self._offset(x, y)
        self._chars[offset] = cell.char
        self._attrs[offset] = cell.attr

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def __eq__(self, other: object) -> bool:
        """Canvases are equal when their size and every cell match."""
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._chars == other._chars
            and self._attrs == other._attrs
        )

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        for y in range(self.height):
            start = y * self.width
            yield [
                Cell(char, attr)
                for char, attr in zip(
                    self._chars[start:start + self.width],
                    self._attrs[start:start + self.width],
                )
            ]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self.rows()):
            for x, cell in enumerate(row):
                yield x, y, cell

    def row_text(self, y: int) -> str:
        """Characters of row y as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")
        start = y * self.width
        return ''.join(
            Cell(char).text for char in self._chars[start:start + self.width]
        )
