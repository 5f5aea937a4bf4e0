from ebmltree.ebml.document import Document, parse_document, parse_file
from ebmltree.ebml.errors import (
    BadSignatureError,
    DepthLimitError,
    EBMLError,
    InvalidEncodingError,
    MissingFieldError,
    SpanMismatchError,
    TruncatedInputError,
    UnknownSizeError,
)

__all__ = [
    "Document",
    "parse_document",
    "parse_file",
    "EBMLError",
    "BadSignatureError",
    "DepthLimitError",
    "InvalidEncodingError",
    "MissingFieldError",
    "SpanMismatchError",
    "TruncatedInputError",
    "UnknownSizeError",
]
