"""
SimpleBlock / Block framing.

A block payload starts with:
- Track number (VINT, length-prefix bits cleared)
- Relative timecode (int16, signed, big-endian)
- Flags byte (keyframe, invisible, lacing, discardable)

followed by one frame, or by a lace header and several frames. Frames are
returned as raw codec bytes; nothing is decompressed here.
"""

import io
from dataclasses import dataclass

from ebmltree.ebml.codec import bytes_to_int, read_exact, read_vint, read_vint_octets, vint_value
from ebmltree.ebml.errors import InvalidEncodingError

LACING_NONE = 0
LACING_XIPH = 1
LACING_FIXED = 2
LACING_EBML = 3


@dataclass(frozen=True)
class Block:
    """Header fields and frames of one SimpleBlock or Block."""

    track_number: int
    timecode: int  # Relative to the Cluster timestamp, in timestamp ticks
    flags: int
    frames: tuple[bytes, ...]
    simple: bool = True  # False for a Block inside a BlockGroup

    @property
    def lacing(self) -> int:
        return (self.flags >> 1) & 0x03

    @property
    def is_keyframe(self) -> bool:
        # Only SimpleBlock carries the keyframe bit; Block uses ReferenceBlock instead
        return self.simple and bool(self.flags & 0x80)

    @property
    def is_invisible(self) -> bool:
        return bool(self.flags & 0x08)

    @property
    def is_discardable(self) -> bool:
        return self.simple and bool(self.flags & 0x01)


def _read_xiph_size(stream) -> int:
    # Sum of 255s plus a final byte below 255
    size = 0
    while True:
        value = read_exact(stream, 1, stage="block read")[0]
        size += value
        if value < 255:
            return size


def _read_ebml_lace_sizes(stream, count: int) -> list[int]:
    # First size is a plain VINT, the following ones are signed deltas
    sizes = [read_vint(stream)]
    for _ in range(count - 2):
        octets = read_vint_octets(stream)
        bias = (1 << (7 * len(octets) - 1)) - 1
        size = sizes[-1] + vint_value(octets) - bias
        if size < 0:
            raise InvalidEncodingError(f"EBML lace produced negative frame size {size}", stage="block read")
        sizes.append(size)
    return sizes


def parse_block(data: bytes, simple: bool = True) -> Block:
    """
    Parse a SimpleBlock or Block payload and split its frames.

    Handles all four lacing modes: no lacing, Xiph, fixed-size and EBML.

    Args:
        data: The element payload (after ID + size).
        simple: True for SimpleBlock, False for a BlockGroup's Block.
    """
    stream = io.BytesIO(data)
    track_number = read_vint(stream)
    header = read_exact(stream, 3, stage="block read")
    timecode = bytes_to_int(header[:2])
    flags = header[2]
    lacing = (flags >> 1) & 0x03

    if lacing == LACING_NONE:
        return Block(track_number, timecode, flags, (stream.read(),), simple)

    count = read_exact(stream, 1, stage="block read")[0] + 1
    if lacing == LACING_XIPH:
        sizes = [_read_xiph_size(stream) for _ in range(count - 1)]
    elif lacing == LACING_EBML:
        sizes = _read_ebml_lace_sizes(stream, count) if count > 1 else []
    else:
        remaining = len(data) - stream.tell()
        if remaining % count:
            raise InvalidEncodingError(
                f"fixed-size lacing: {remaining} bytes do not split into {count} frames", stage="block read"
            )
        sizes = [remaining // count] * (count - 1)

    frames = [read_exact(stream, size, stage="block read") for size in sizes]
    frames.append(stream.read())
    return Block(track_number, timecode, flags, tuple(frames), simple)
