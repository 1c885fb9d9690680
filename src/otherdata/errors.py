"""
Error types raised by the other-data codec.

All errors are synchronous and local to a single decode/classify call.
There is no retry policy anywhere in this package because there is no I/O.
"""

from typing import Optional


class CodecError(Exception):
    """Base class for all codec failures."""
    pass


class ContentTypeMismatchError(CodecError, ValueError):
    """Raised when an envelope is not tagged as delimited text."""

    def __init__(self, content_type: Optional[str], expected: str = "text/csv"):
        self.content_type = content_type
        self.expected = expected
        super().__init__(
            f"Other data content type must be '{expected}', got '{content_type}'"
        )


class NullPayloadError(CodecError, ValueError):
    """Raised when an envelope carries no raw text at all."""

    def __init__(self, message: str = "Other data payload is missing"):
        super().__init__(message)


class InvalidFormatError(CodecError, ValueError):
    """
    Raised when a value expected to be numeric cannot be parsed.

    Properties:
        text: The offending field text
        index: Position of the field in the decoded sequence (if known)
    """

    def __init__(self, text: str, index: Optional[int] = None):
        self.text = text
        self.index = index
        where = f" at position {index}" if index is not None else ""
        super().__init__(f"Invalid numeric value{where}: '{text}'")


__all__ = [
    "CodecError",
    "ContentTypeMismatchError",
    "NullPayloadError",
    "InvalidFormatError",
]
