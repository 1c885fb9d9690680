"""
Other-Data Codec Package

Packs auxiliary "other data" payloads (sequences of plain, numeric or
name/value measurements) into the single escaped, comma-delimited text
blob a health record stores, and reads them back.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - The XML record object model
    - Network connections or authentication
    - Any UI

It only converts between raw text envelopes and typed item sequences.
"""

from otherdata.errors import (
    CodecError,
    ContentTypeMismatchError,
    NullPayloadError,
    InvalidFormatError,
)
from otherdata.items import Item, ItemKind, StringValue, NumericValue, NamedValue
from otherdata.envelope import CSV_CONTENT_TYPE, Envelope, decode, encode

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "ContentTypeMismatchError",
    "NullPayloadError",
    "InvalidFormatError",
    "Item",
    "ItemKind",
    "StringValue",
    "NumericValue",
    "NamedValue",
    "CSV_CONTENT_TYPE",
    "Envelope",
    "decode",
    "encode",
]
