"""
Generic EBML element tree.

TreeBuilder reads one element header (ID + declared size) at a time from a
seekable binary stream. Container elements are expanded into child nodes
until their declared span is consumed; every other element keeps its
payload bytes verbatim and is decoded lazily through ElementData.

Containers are expanded with an explicit work stack rather than Python
recursion, so nesting depth is bounded only by ``max_depth``.
"""

import io
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import BinaryIO

from ebmltree.configs import settings
from ebmltree.ebml import render
from ebmltree.ebml.codec import (
    bytes_to_float,
    bytes_to_int,
    bytes_to_uint,
    bytes_to_utf8,
    is_unknown_size,
    read_element_id,
    read_exact,
    read_vint_octets,
    vint_value,
)
from ebmltree.ebml.errors import (
    DepthLimitError,
    EBMLError,
    InvalidEncodingError,
    SpanMismatchError,
    TruncatedInputError,
    UnknownSizeError,
)
from ebmltree.ebml.registry import ElementKind, kind_of, name_of

logger = logging.getLogger(__name__)

# Matroska dates count nanoseconds from the start of the third millennium
MATROSKA_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ElementData:
    """Raw payload bytes with repeatable, non-destructive conversions."""

    raw: bytes = b""

    def __len__(self) -> int:
        return len(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def to_uint(self) -> int:
        return bytes_to_uint(self.raw)

    def to_int(self) -> int:
        return bytes_to_int(self.raw)

    def to_float(self) -> float:
        return bytes_to_float(self.raw)

    def to_str(self) -> str:
        return bytes_to_utf8(self.raw)

    def to_bytes(self) -> bytes:
        return self.raw

    def to_bool(self) -> bool:
        """True only when the payload decodes to exactly 1."""
        return self.to_uint() == 1

    def to_datetime(self) -> datetime:
        """Matroska date: signed nanoseconds since 2001-01-01T00:00:00 UTC."""
        if len(self.raw) > 8:
            raise InvalidEncodingError(
                f"date payload must be at most 8 bytes, got {len(self.raw)}", stage="value decode"
            )
        return MATROSKA_EPOCH + timedelta(microseconds=self.to_int() // 1000)


_DECODERS = {
    ElementKind.UNSIGNED_INT: ElementData.to_uint,
    ElementKind.SIGNED_INT: ElementData.to_int,
    ElementKind.DATE: ElementData.to_int,
    ElementKind.FLOAT: ElementData.to_float,
    ElementKind.STRING: ElementData.to_str,
    ElementKind.UTF8: ElementData.to_str,
    ElementKind.BINARY: ElementData.to_bytes,
    ElementKind.UNKNOWN: ElementData.to_bytes,
}


@dataclass(frozen=True)
class Element:
    """One EBML element header plus its payload (empty for containers)."""

    id: int
    size: int  # Declared payload size in bytes
    kind: ElementKind
    data: ElementData = field(default_factory=ElementData)
    offset: int = 0  # Absolute stream offset of the first ID byte
    header_size: int = 0  # ID bytes + size bytes

    @property
    def name(self) -> str:
        return name_of(self.id)

    @property
    def data_offset(self) -> int:
        """Absolute stream offset where the payload (or first child) begins."""
        return self.offset + self.header_size

    @property
    def encoded_size(self) -> int:
        return self.header_size + self.size

    def value(self):
        """Decode the payload according to the element kind (None for containers)."""
        if self.kind is ElementKind.CONTAINER:
            return None
        try:
            return _DECODERS[self.kind](self.data)
        except EBMLError as e:
            raise type(e)(e.message, offset=self.data_offset, element_id=self.id, stage=e.stage) from e


@dataclass(frozen=True)
class Node:
    element: Element
    children: tuple["Node", ...] = ()

    @property
    def id(self) -> int:
        return self.element.id

    @property
    def kind(self) -> ElementKind:
        return self.element.kind

    @property
    def name(self) -> str:
        return self.element.name

    def find(self, element_id: int) -> "Node | None":
        """First direct child with the given ID."""
        for child in self.children:
            if child.element.id == element_id:
                return child
        return None

    def find_all(self, element_id: int) -> list["Node"]:
        """All direct children with the given ID, in document order."""
        return [child for child in self.children if child.element.id == element_id]

    def __str__(self) -> str:
        return render.render_node(self)


@dataclass
class _OpenContainer:
    element: Element
    end: int
    children: list[Node] = field(default_factory=list)


def stream_length(stream: BinaryIO) -> int:
    """Total length of a seekable stream, leaving the position untouched."""
    position = stream.tell()
    length = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return length


class TreeBuilder:
    """
    Builds Node trees from a seekable binary stream.

    The builder owns the stream position for the duration of a parse; all
    reads are exact-length and sizes are checked against the stream length
    before any payload is read.
    """

    def __init__(self, stream: BinaryIO, max_depth: int | None = None) -> None:
        self._stream = stream
        self._max_depth = max_depth if max_depth is not None else settings.max_depth
        self._length = stream_length(stream)

    @property
    def position(self) -> int:
        return self._stream.tell()

    def parse_element(self, end: int | None = None) -> Element:
        """
        Read one element at the current position.

        Args:
            end: Absolute offset where the enclosing container ends. An
                element that would run past it raises SpanMismatchError.

        Returns:
            The Element; containers carry an empty payload and the stream is
            left at their first child.
        """
        offset = self._stream.tell()
        element_id = read_element_id(self._stream)
        size_octets = read_vint_octets(self._stream)
        if is_unknown_size(size_octets):
            raise UnknownSizeError("unknown-size elements are not supported", offset=offset, element_id=element_id)

        size = vint_value(size_octets)
        data_offset = self._stream.tell()
        element_end = data_offset + size

        if end is not None and element_end > end:
            raise SpanMismatchError(
                f"element ends at {element_end}, past the end of its parent at {end}",
                offset=offset,
                element_id=element_id,
            )
        if element_end > self._length:
            raise TruncatedInputError(
                f"element declares {size} bytes, only {self._length - data_offset} available",
                offset=offset,
                element_id=element_id,
            )

        kind = kind_of(element_id)
        data = ElementData()
        if kind is not ElementKind.CONTAINER:
            data = ElementData(read_exact(self._stream, size, element_id=element_id))

        return Element(
            id=element_id,
            size=size,
            kind=kind,
            data=data,
            offset=offset,
            header_size=data_offset - offset,
        )

    def build_tree(self, end: int | None = None) -> Node:
        """Parse the element at the current position together with all of its descendants."""
        element = self.parse_element(end)
        if element.kind is not ElementKind.CONTAINER:
            return Node(element)

        stack = [_OpenContainer(element, element.data_offset + element.size)]
        while True:
            current = stack[-1]
            if self._stream.tell() == current.end:
                stack.pop()
                node = Node(current.element, tuple(current.children))
                if not stack:
                    return node
                stack[-1].children.append(node)
                continue

            child = self.parse_element(current.end)
            if child.kind is ElementKind.CONTAINER:
                if len(stack) >= self._max_depth:
                    raise DepthLimitError(
                        f"containers nested deeper than {self._max_depth} levels",
                        offset=child.offset,
                        element_id=child.id,
                    )
                stack.append(_OpenContainer(child, child.data_offset + child.size))
            else:
                current.children.append(Node(child))
