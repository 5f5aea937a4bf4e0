"""
Exceptions raised while decoding EBML documents.

Every error records the stage that failed and, where known, the absolute
byte offset and the element identifier involved, so a host application can
reject a bad file and report why.
"""


class EBMLError(Exception):
    """Base exception for all EBML decoding failures."""

    stage = "decode"

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        element_id: int | None = None,
        stage: str | None = None,
    ):
        self.message = message
        self.offset = offset
        self.element_id = element_id
        if stage is not None:
            self.stage = stage
        super().__init__(message)

    def __str__(self) -> str:
        details = [f"stage={self.stage}"]
        if self.offset is not None:
            details.append(f"offset={self.offset}")
        if self.element_id is not None:
            details.append(f"id=0x{self.element_id:X}")
        return f"{self.message} ({', '.join(details)})"


class TruncatedInputError(EBMLError):
    """The stream ended before a length field was satisfied."""

    stage = "element read"


class BadSignatureError(EBMLError):
    """The stream does not start with the EBML header signature."""

    stage = "signature check"


class InvalidEncodingError(EBMLError):
    """A payload cannot be decoded as its declared kind."""

    stage = "utf-8 decode"


class SpanMismatchError(EBMLError):
    """A child element does not fit the declared size of its parent."""

    stage = "element read"


class UnknownSizeError(EBMLError):
    """An element declares the reserved "unknown size", which is not supported."""

    stage = "vint read"


class DepthLimitError(EBMLError):
    """Containers are nested deeper than the configured limit."""

    stage = "element read"


class MissingFieldError(EBMLError):
    """A mandatory child element is absent."""

    stage = "field lookup"

    def __init__(self, view: str, field: str, element_id: int, *, offset: int | None = None):
        self.view = view
        self.field = field
        super().__init__(
            f"{view}.{field}: mandatory element 0x{element_id:X} not found",
            offset=offset,
            element_id=element_id,
        )
