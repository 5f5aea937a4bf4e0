import pytest

from builders import block_payload
from ebmltree.ebml.blocks import LACING_EBML, LACING_FIXED, LACING_NONE, LACING_XIPH, parse_block
from ebmltree.ebml.errors import InvalidEncodingError, TruncatedInputError


def test_unlaced_block():
    block = parse_block(block_payload(1, -1, 0x80, b"\x00\x01\x02"))
    assert block.track_number == 1
    assert block.timecode == -1
    assert block.lacing == LACING_NONE
    assert block.is_keyframe
    assert not block.is_invisible
    assert not block.is_discardable
    assert block.frames == (b"\x00\x01\x02",)


def test_wide_track_number_and_flags():
    block = parse_block(block_payload(200, 300, 0x09, b"x"))
    assert block.track_number == 200
    assert block.timecode == 300
    assert not block.is_keyframe
    assert block.is_invisible
    assert block.is_discardable


def test_block_group_block_has_no_keyframe_bit():
    block = parse_block(block_payload(1, 0, 0x81, b"x"), simple=False)
    assert not block.is_keyframe
    assert not block.is_discardable


def test_xiph_lacing():
    frames = (b"a" * 300, b"bb", b"ccc")
    lace = bytes([2, 255, 45, 2])
    block = parse_block(block_payload(1, 0, 0x02, lace + b"".join(frames)))
    assert block.lacing == LACING_XIPH
    assert block.frames == frames


def test_fixed_lacing():
    block = parse_block(block_payload(1, 0, 0x04, bytes([2]) + b"aabbcc"))
    assert block.lacing == LACING_FIXED
    assert block.frames == (b"aa", b"bb", b"cc")


def test_fixed_lacing_uneven_split():
    with pytest.raises(InvalidEncodingError):
        parse_block(block_payload(1, 0, 0x04, bytes([2]) + b"aabbccd"))


@pytest.mark.parametrize(
    "lace, sizes",
    [
        (bytes([2, 0x8A, 0xC1]), (10, 12, 5)),
        (bytes([2, 0x8A, 0xBC]), (10, 7, 4)),
        (bytes([1, 0x83]), (3, 6)),
    ],
)
def test_ebml_lacing(lace, sizes):
    frames = tuple(bytes([index]) * size for index, size in enumerate(sizes))
    block = parse_block(block_payload(1, 0, 0x06, lace + b"".join(frames)))
    assert block.lacing == LACING_EBML
    assert block.frames == frames


def test_ebml_lacing_negative_size():
    # 2 + (58 - 63) < 0
    with pytest.raises(InvalidEncodingError):
        parse_block(block_payload(1, 0, 0x06, bytes([2, 0x82, 0xBA]) + b"\x00" * 8))


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x81\x00",
        block_payload(1, 0, 0x02, bytes([1, 0x10]) + b"abc"),
        block_payload(1, 0, 0x04),
    ],
)
def test_truncated_block(data):
    with pytest.raises(TruncatedInputError):
        parse_block(data)
