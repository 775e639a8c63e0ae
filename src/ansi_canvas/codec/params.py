"""CSI parameter parsing."""

# A CSI sequence ends at the first byte in 'A'..'z'
FINAL_BYTE_MIN = 0x41
FINAL_BYTE_MAX = 0x7A
SEPARATOR = 0x3B  # ';'

MAX_PARAMETERS = 64
MAX_PARAMETER_VALUE = 0xFFFFFFFF


def is_final_byte(byte: int) -> bool:
    """True if byte terminates a CSI sequence."""
    return FINAL_BYTE_MIN <= byte <= FINAL_BYTE_MAX


def parse_parameters(data: bytes, start: int = 0) -> tuple[list[int], int]:
    """
    Parse the semicolon-separated parameters of a CSI sequence.

    Scanning starts at ``start`` (the byte after ``ESC [``) and stops at the
    final byte. Each field is worth the decimal value of its leading digits,
    so an empty field or one starting with anything else counts as 0. A
    field is kept when a ';' closes it; the last field only if it is not
    empty, which keeps ``ESC[m`` (no parameters) distinct from ``ESC[;m``.

    At most MAX_PARAMETERS values are kept and each is clamped to
    MAX_PARAMETER_VALUE; extra fields are still consumed.

    Args:
        data: Raw bytes of the stream
        start: Offset of the first parameter byte

    Returns:
        Tuple of (parameters, bytes consumed before the final byte). When
        there is no final byte, every remaining byte counts as consumed.
    """
    params: list[int] = []
    value = 0
    in_digits = True
    pending = False

    i = start
    while i < len(data):
        byte = data[i]

        if is_final_byte(byte):
            if pending and len(params) < MAX_PARAMETERS:
                params.append(value)
            return params, i - start

        if byte == SEPARATOR:
            if len(params) < MAX_PARAMETERS:
                params.append(value)
            value = 0
            in_digits = True
            pending = False
        else:
            pending = True
            if in_digits and 0x30 <= byte <= 0x39:
                value = min(value * 10 + byte - 0x30, MAX_PARAMETER_VALUE)
            else:
                in_digits = False

        i += 1

    return params, len(data) - start
