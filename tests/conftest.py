"""
Shared fixtures for the EBML parser tests.

Streams are assembled in memory by the helpers in builders.py, so the suite
needs no sample media files.
"""

import io

import pytest

from builders import minimal_document, rich_document
from ebmltree.ebml.document import parse_document


@pytest.fixture
def minimal_bytes() -> bytes:
    return minimal_document()


@pytest.fixture
def minimal_doc(minimal_bytes):
    return parse_document(io.BytesIO(minimal_bytes))


@pytest.fixture
def rich():
    """(document, layout) for the Segment built by builders.rich_document."""
    data, layout = rich_document()
    return parse_document(data), layout


@pytest.fixture
def rich_doc(rich):
    return rich[0]
