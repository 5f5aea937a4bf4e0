"""
Primitive EBML codec.

Variable-length integers (VINT) carry their own length: the position of the
first set bit in the leading octet gives the total octet count.

  Width 1: 1xxxxxxx                       (7 data bits)
  Width 2: 01xxxxxx xxxxxxxx              (14 data bits)
  Width 3: 001xxxxx xxxxxxxx xxxxxxxx     (21 data bits)
  ...up to width 8 (56 data bits).

Element sizes have the length-prefix bits masked off. Element IDs keep them.
Payload conversions work on complete, exact-length buffers only.
"""

import struct
from typing import BinaryIO

from ebmltree.ebml.errors import InvalidEncodingError, TruncatedInputError

# Widest VINT the format allows
MAX_VINT_LENGTH = 8


def leading_zero_run_length(byte: int) -> int:
    """Count the zero bits before the first set bit (0x00 counts as 8)."""
    if byte == 0:
        return 8
    count = 0
    mask = 0x80
    while not (byte & mask):
        count += 1
        mask >>= 1
    return count


def vint_length(byte: int) -> int:
    """Total octet count of a VINT whose first octet is ``byte``."""
    return min(leading_zero_run_length(byte) + 1, MAX_VINT_LENGTH)


def read_exact(stream: BinaryIO, count: int, stage: str = "element read", element_id: int | None = None) -> bytes:
    """Read exactly ``count`` bytes or raise TruncatedInputError."""
    offset = stream.tell()
    data = stream.read(count) if count else b""
    if len(data) != count:
        raise TruncatedInputError(
            f"need {count} bytes, only {len(data)} available",
            offset=offset,
            element_id=element_id,
            stage=stage,
        )
    return data


def read_vint_octets(stream: BinaryIO) -> bytes:
    """Read the raw octets of one VINT, length prefix included."""
    first = read_exact(stream, 1, stage="vint read")
    length = vint_length(first[0])
    if length == 1:
        return first
    return first + read_exact(stream, length - 1, stage="vint read")


def vint_value(octets: bytes) -> int:
    """Value of a VINT with its length-prefix bits cleared."""
    length = len(octets)
    mask = (1 << (8 - length)) - 1
    return bytes_to_uint(bytes([octets[0] & mask]) + octets[1:])


def read_vint(stream: BinaryIO) -> int:
    """Read a VINT and return its value (length-prefix bits cleared)."""
    return vint_value(read_vint_octets(stream))


def read_element_id(stream: BinaryIO) -> int:
    """Read an element ID (length-prefix bits kept)."""
    return bytes_to_uint(read_vint_octets(stream))


def is_unknown_size(octets: bytes) -> bool:
    """True if the VINT octets hold the reserved all-ones "unknown size" value."""
    return vint_value(octets) == (1 << (7 * len(octets))) - 1


def bytes_to_uint(data: bytes) -> int:
    """Big-endian unsigned integer (empty payload = 0)."""
    value = 0
    for byte in data:
        value = (value << 8) | byte
    return value


def bytes_to_int(data: bytes) -> int:
    """Big-endian two's complement integer, sign-extended from the payload width."""
    return int.from_bytes(data, "big", signed=True)


def bytes_to_float(data: bytes) -> float:
    """
    IEEE 754 big-endian float.

    Payloads longer than 4 bytes are read as 64-bit doubles, shorter ones as
    32-bit floats widened to double. An empty payload is 0.0.
    """
    if not data:
        return 0.0
    if len(data) > 8:
        raise InvalidEncodingError(f"float payload must be at most 8 bytes, got {len(data)}", stage="value decode")
    bits = bytes_to_uint(data)
    if len(data) > 4:
        return struct.unpack(">d", bits.to_bytes(8, "big"))[0]
    return struct.unpack(">f", bits.to_bytes(4, "big"))[0]


def bytes_to_utf8(data: bytes) -> str:
    """Strict UTF-8 decode; invalid sequences raise InvalidEncodingError."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f"invalid UTF-8 at byte {e.start}: {e.reason}") from e
