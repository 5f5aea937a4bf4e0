"""
Top-level document parsing.

A document is the EBML header followed by exactly one Segment. The stream
must start with the EBML header signature; it is checked before any tree
construction is attempted.
"""

import io
import logging
import os
from dataclasses import dataclass
from typing import BinaryIO

from ebmltree.ebml.codec import read_exact
from ebmltree.ebml.errors import BadSignatureError, TruncatedInputError
from ebmltree.ebml.ids import EBML_SIGNATURE
from ebmltree.ebml.tree import TreeBuilder
from ebmltree.ebml.views import EBMLHeader, Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """An immutable parsed EBML document."""

    header: EBMLHeader
    root: Segment

    def __str__(self) -> str:
        return f"{self.header}\n{self.root}"


def check_signature(stream: BinaryIO) -> None:
    """Raise BadSignatureError unless the stream starts with the EBML header ID."""
    stream.seek(0)
    try:
        signature = read_exact(stream, len(EBML_SIGNATURE), stage="signature check")
    except TruncatedInputError as e:
        raise BadSignatureError("stream is shorter than the EBML signature", offset=0) from e
    if signature != EBML_SIGNATURE:
        raise BadSignatureError(f"not an EBML stream: leading bytes {signature.hex(' ')}", offset=0)


def parse_document(source: BinaryIO | bytes | bytearray | memoryview, max_depth: int | None = None) -> Document:
    """
    Parse an EBML header and Segment from a seekable binary stream or a buffer.

    The second top-level element is taken as the Segment without checking
    its ID. Bytes after the Segment are ignored.

    Raises:
        EBMLError: any subclass, describing the first malformed element.
    """
    stream = io.BytesIO(bytes(source)) if isinstance(source, (bytes, bytearray, memoryview)) else source

    check_signature(stream)
    stream.seek(0)

    builder = TreeBuilder(stream, max_depth=max_depth)
    header = builder.build_tree()
    root = builder.build_tree()

    trailing = stream.seek(0, io.SEEK_END) - root.element.offset - root.element.encoded_size
    if trailing > 0:
        logger.debug("[ebml] Ignoring %d bytes after the Segment", trailing)

    logger.debug(
        "[ebml] Parsed document: header=%d bytes, segment=%d bytes, %d segment children",
        header.element.encoded_size,
        root.element.encoded_size,
        len(root.children),
    )
    return Document(header=EBMLHeader(header), root=Segment(root))


def parse_file(path: str | os.PathLike, max_depth: int | None = None) -> Document:
    """Open a file in binary mode and parse it."""
    with open(path, "rb") as f:
        return parse_document(f, max_depth=max_depth)
