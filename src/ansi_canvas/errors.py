"""Errors raised while importing a buffer into a canvas."""


class CanvasImportError(Exception):
    """Base class for all import failures."""


class EmptyInputError(CanvasImportError, ValueError):
    """The buffer was None or zero-length."""

    def __init__(self) -> None:
        super().__init__("Cannot import an empty buffer")


class UnsupportedFormatError(CanvasImportError, ValueError):
    """An explicit format name that no decoder handles."""

    def __init__(self, format: str):
        self.format = format
        super().__init__(f"Unsupported import format: {format!r}")


class MalformedHeaderError(CanvasImportError, ValueError):
    """A native canvas dump failed its magic, size or dimension checks."""


class CanvasAllocationError(CanvasImportError, MemoryError):
    """The canvas could not be created or grown to the requested size."""
