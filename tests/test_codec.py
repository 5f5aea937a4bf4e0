import io
import math

import pytest

from builders import encode_vint
from ebmltree.ebml.codec import (
    bytes_to_float,
    bytes_to_int,
    bytes_to_uint,
    bytes_to_utf8,
    is_unknown_size,
    leading_zero_run_length,
    read_element_id,
    read_exact,
    read_vint,
    vint_length,
)
from ebmltree.ebml.errors import InvalidEncodingError, TruncatedInputError


def _octet_class(value: int) -> int:
    """Smallest VINT width whose data bits can hold value."""
    length = 1
    while value >= 1 << (7 * length):
        length += 1
    return length


@pytest.mark.parametrize(
    "byte, expected",
    [(0x81, 0), (0x40, 1), (0x0E, 4), (0x01, 7), (0x00, 8), (0xFF, 0)],
)
def test_leading_zero_run_length(byte, expected):
    assert leading_zero_run_length(byte) == expected


@pytest.mark.parametrize("byte, expected", [(0x81, 1), (0x0E, 5), (0x01, 8), (0x00, 8)])
def test_vint_length(byte, expected):
    assert vint_length(byte) == expected


@pytest.mark.parametrize(
    "value, octets",
    [(0, 1), (127, 1), (128, 2), (16383, 2), (16384, 3)],
)
def test_vint_boundaries_land_in_expected_octet_class(value, octets):
    assert _octet_class(value) == octets

    stream = io.BytesIO(encode_vint(value, octets) + b"\xaa")
    assert read_vint(stream) == value
    assert stream.tell() == octets


@pytest.mark.parametrize("length", range(1, 9))
def test_read_vint_every_width(length):
    largest = (1 << (7 * length)) - 1
    for value in (0, largest // 3, largest):
        stream = io.BytesIO(encode_vint(value, length))
        assert read_vint(stream) == value
        assert stream.tell() == length


def test_read_vint_masks_length_prefix():
    assert read_vint(io.BytesIO(b"\x1a\x45\xdf\xa3")) == 0x0A45DFA3
    assert read_vint(io.BytesIO(b"\x81")) == 1


@pytest.mark.parametrize(
    "data, expected",
    [(b"\x1a\x45\xdf\xa3", 0x1A45DFA3), (b"\x18\x53\x80\x67", 0x18538067), (b"\x42\x86", 0x4286), (b"\xa3", 0xA3)],
)
def test_read_element_id_keeps_length_prefix(data, expected):
    assert read_element_id(io.BytesIO(data)) == expected


@pytest.mark.parametrize("data", [b"", b"\x40", b"\x10\x00\x00"])
def test_read_vint_truncated(data):
    with pytest.raises(TruncatedInputError) as exc_info:
        read_vint(io.BytesIO(data))
    assert exc_info.value.stage == "vint read"


def test_read_exact_reports_offset():
    stream = io.BytesIO(b"\x00\x01\x02")
    stream.seek(1)
    with pytest.raises(TruncatedInputError) as exc_info:
        read_exact(stream, 5)
    assert exc_info.value.offset == 1


@pytest.mark.parametrize(
    "octets, expected",
    [
        (b"\xff", True),
        (b"\x7f\xff", True),
        (b"\x01\xff\xff\xff\xff\xff\xff\xff", True),
        (b"\xfe", False),
        (b"\x40\x7f", False),
    ],
)
def test_is_unknown_size(octets, expected):
    assert is_unknown_size(octets) is expected


@pytest.mark.parametrize(
    "data, expected",
    [(b"", 0), (b"\x00", 0), (b"\xff", 255), (b"\x01\x00", 256), (b"\x0f\x42\x40", 1_000_000)],
)
def test_bytes_to_uint(data, expected):
    assert bytes_to_uint(data) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x01", 1),
        (b"\x7f", 127),
        (b"\xfe", -2),
        (b"\xff", -1),
        (b"\x00\x05", 5),
        (b"\x80", -128),
        (b"\x7f\xff", 32767),
        (b"\xff\xfe", -2),
        (b"\x00\x00\x00\x01", 1),
        (b"\x80\x00\x00\x00\x00\x00\x00\x00", -(2**63)),
    ],
)
def test_bytes_to_int(data, expected):
    assert bytes_to_int(data) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", 0.0),
        (bytes([0x47, 0xAE, 0x88, 0x80]), 89361.0),
        (bytes([0x40, 0x49, 0x0F, 0xD0]), 3.14159012),
        (bytes([0x40, 0x09, 0x21, 0xF9, 0xF0, 0x1B, 0x86, 0x6E]), 3.14159),
        (bytes([0x40, 0x29, 0, 0, 0, 0, 0, 0]), 12.5),
    ],
)
def test_bytes_to_float(data, expected):
    assert math.isclose(bytes_to_float(data), expected, rel_tol=1e-7)


def test_bytes_to_float_rejects_oversized_payload():
    with pytest.raises(InvalidEncodingError):
        bytes_to_float(b"\x00" * 9)


@pytest.mark.parametrize(
    "data, expected",
    [(b"", ""), (b"webm", "webm"), (bytes([0xE4, 0xBD, 0x95]), "何"), (b"a\x00", "a\x00")],
)
def test_bytes_to_utf8(data, expected):
    assert bytes_to_utf8(data) == expected


@pytest.mark.parametrize("data", [b"\xff", b"\xe4\xbd", b"\xc0\x80"])
def test_bytes_to_utf8_rejects_invalid(data):
    with pytest.raises(InvalidEncodingError) as exc_info:
        bytes_to_utf8(data)
    assert exc_info.value.stage == "utf-8 decode"
