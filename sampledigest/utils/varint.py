"""Unsigned variable-length integers (LEB128, low 7 bits first).

Each byte carries seven bits of the value; the high bit is set on every
byte except the last. A 64-bit value needs between 1 and 10 bytes.
"""

MAX_VARINT_LEN64 = 10


def put_uvarint(buf: bytearray, value: int) -> int:
    """Encode ``value`` into ``buf`` starting at offset 0.

    Bytes of ``buf`` after the encoding are left untouched.

    Args:
        buf: Destination buffer, must be large enough for the encoding
        value: Non-negative integer to encode

    Returns:
        Number of bytes written
    """
    if value < 0:
        raise ValueError(f"uvarint cannot encode negative value {value}")

    i = 0
    while value >= 0x80:
        buf[i] = (value & 0x7F) | 0x80
        value >>= 7
        i += 1
    buf[i] = value
    return i + 1


def uvarint(value: int) -> bytes:
    """Return the encoding of ``value`` as a standalone bytes object."""
    buf = bytearray(MAX_VARINT_LEN64)
    n = put_uvarint(buf, value)
    return bytes(buf[:n])


def read_uvarint(buf: bytes) -> tuple[int, int]:
    """Decode a uvarint from the start of ``buf``.

    Returns:
        Tuple of (value, bytes consumed)

    Raises:
        ValueError: If ``buf`` ends before the encoding terminates or the
            encoding is longer than a 64-bit value allows
    """
    value = 0
    shift = 0
    for i, byte in enumerate(buf):
        if i == MAX_VARINT_LEN64:
            break
        value |= (byte & 0x7F) << shift
        if byte < 0x80:
            return value, i + 1
        shift += 7

    if len(buf) >= MAX_VARINT_LEN64:
        raise ValueError("uvarint overflows a 64-bit integer")
    raise ValueError("buffer too short for uvarint")
