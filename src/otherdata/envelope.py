"""
Envelope: the content-typed container a record field hands to the codec.

Decode path:
    Envelope → tokenize(',') → classify → [promote_numeric] → items

Encode path:
    items → encode_items → Envelope(content_type="text/csv", content_encoding="")

ARCHITECTURAL RULE:
    The codec keeps no state between calls. Every decode/encode is a pure
    function of its input; Envelope is the only thing that travels back
    into the record.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Iterable, List, Optional

from otherdata.classifier import classify_fields, promote_numeric
from otherdata.config import CodecSettings
from otherdata.encoder import encode_items
from otherdata.errors import ContentTypeMismatchError, NullPayloadError
from otherdata.items import Item
from otherdata.tokenizer import FIELD_DELIMITER, ScanState, scan

logger = logging.getLogger(__name__)


CSV_CONTENT_TYPE = "text/csv"


@dataclass
class Envelope:
    """
    Raw other-data text plus its content tags.

    Properties:
        raw_text:
            The opaque payload stored in the record (None if absent)

        content_type:
            MIME type of the payload. The codec only accepts "text/csv".

        content_encoding:
            Transfer encoding of the payload. Empty after encode().
    """

    raw_text: Optional[str] = None
    content_type: str = CSV_CONTENT_TYPE
    content_encoding: str = ""

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "Envelope":
        """Same as encode(items)."""
        return encode(items)

    def get_as_strings(self) -> List[Item]:
        """Decode without the numeric pass (StringValue / NamedValue only)."""
        return decode(self, numeric=False)

    def get_as_numbers(self) -> List[Item]:
        """
        Decode and promote every StringValue to NumericValue.

        Raises:
            InvalidFormatError: If any plain field is not a number
        """
        return decode(self, numeric=True)

    def set_items(self, items: Iterable[Item]) -> None:
        """Encode items into this envelope, overwriting its text and tags."""
        encoded = encode(items)
        self.raw_text = encoded.raw_text
        self.content_type = encoded.content_type
        self.content_encoding = encoded.content_encoding


def decode(
    envelope: Envelope,
    *,
    numeric: Optional[bool] = None,
    settings: Optional[CodecSettings] = None,
) -> List[Item]:
    """
    Decode an envelope into an ordered item sequence.

    Args:
        envelope: Envelope to decode
        numeric: Run promote_numeric on the result. None means use
            settings.promote_numeric (False without settings).
        settings: Explicit codec settings. The environment is never read
            here; callers wanting environment settings pass get_settings().

    Returns:
        List of Items in field order

    Raises:
        ContentTypeMismatchError: If content_type is not "text/csv"
        NullPayloadError: If raw_text is None
        InvalidFormatError: If the numeric pass fails (no partial result)
    """
    if settings is None:
        settings = CodecSettings()

    if envelope.content_type != CSV_CONTENT_TYPE:
        logger.debug("Refusing to decode content type %r", envelope.content_type)
        raise ContentTypeMismatchError(envelope.content_type, expected=CSV_CONTENT_TYPE)

    if envelope.raw_text is None:
        logger.debug("Refusing to decode an envelope without raw text")
        raise NullPayloadError()

    raw_fields, final_state = scan(envelope.raw_text, FIELD_DELIMITER)

    if final_state is ScanState.ESCAPED:
        logger.debug("Other data ends with a lone escape marker; kept as a literal backslash")
        if settings.warn_on_trailing_escape:
            warnings.warn(
                "Other data ends with a lone escape marker; keeping it as a literal backslash",
                UserWarning,
            )

    items = classify_fields(raw_fields)
    logger.debug("Decoded %d fields from other data", len(items))

    if numeric is None:
        numeric = settings.promote_numeric
    if numeric:
        items = promote_numeric(items)

    return items


def encode(items: Iterable[Item]) -> Envelope:
    """
    Encode an item sequence into a fresh "text/csv" envelope.

    Never fails for a well-formed sequence.

    Raises:
        TypeError: If items is None or contains a non-Item
    """
    raw_text = encode_items(items)
    logger.debug("Encoded other data (%d characters)", len(raw_text))
    return Envelope(raw_text=raw_text, content_type=CSV_CONTENT_TYPE, content_encoding="")


__all__ = [
    "CSV_CONTENT_TYPE",
    "Envelope",
    "decode",
    "encode",
]
