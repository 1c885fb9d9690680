"""
Field Classifier (Layer 2: Fields → Typed Items).

Turns raw fields produced by the tokenizer into Items.

First pass (classify):
    1. Unescape the field against the field delimiter ','
    2. Re-tokenize against '='
    3. Two or more sub-fields  → NamedValue(sub[0], sub[1]); extras dropped
       Otherwise               → StringValue(sub[0])

Second pass (promote_numeric), optional:
    Every StringValue must parse as a number and becomes a NumericValue.
    NamedValue items pass through unchanged. One bad value fails the
    whole batch; no partial result is returned.

COMPATIBILITY NOTE:
    Only the first '=' sub-field is unescaped (for '\\=' and '\\\\'), and it
    is unescaped once per sub-field present. The value side keeps its
    escape markers. Stored payloads depend on this exact behavior.
"""

import logging
import math
import re
from typing import Iterable, List

from otherdata.errors import InvalidFormatError
from otherdata.items import Item, StringValue, NumericValue, NamedValue
from otherdata.tokenizer import (
    ESCAPE_MARKER,
    FIELD_DELIMITER,
    NAME_VALUE_DELIMITER,
    tokenize,
    unescape,
)

logger = logging.getLogger(__name__)


_NUMBER_RE = re.compile(
    r"""
    ^[+-]?
    (?:
        (?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?   # decimal, optional exponent
      | nan
      | inf(?:inity)?
    )$
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def classify(raw_field: str) -> Item:
    """
    Classify one raw field.

    Args:
        raw_field: A field exactly as produced by tokenize() at the ','
            level (escape markers still present)

    Returns:
        NamedValue if the field contains an unescaped '=', else StringValue
    """
    current = unescape(raw_field, FIELD_DELIMITER)

    parts = tokenize(current, NAME_VALUE_DELIMITER)

    for _ in range(len(parts)):
        parts[0] = unescape(parts[0], NAME_VALUE_DELIMITER)
        parts[0] = unescape(parts[0], ESCAPE_MARKER)

    if len(parts) >= 2:
        return NamedValue(name=parts[0], value=parts[1])
    return StringValue(parts[0])


def classify_fields(raw_fields: Iterable[str]) -> List[Item]:
    """Classify every field, preserving order."""
    return [classify(raw_field) for raw_field in raw_fields]


def parse_number(text: str) -> float:
    """
    Parse a culture-invariant decimal number.

    Accepts surrounding whitespace, an optional sign, plain or exponent
    notation, and the special values NaN / Infinity. Rejects thousands
    separators and underscore digit grouping.

    Raises:
        ValueError: If text is not a number
    """
    candidate = text.strip()
    if not _NUMBER_RE.match(candidate):
        raise ValueError(f"Not a number: {text!r}")

    value = float(candidate)
    if math.isnan(value):
        # float() keeps the sign bit of "-nan"; the wire has a single NaN
        return math.nan
    return value


def promote_numeric(items: Iterable[Item]) -> List[Item]:
    """
    Replace every StringValue with a NumericValue.

    Args:
        items: Output of the first classification pass

    Returns:
        New list; NamedValue items are passed through unchanged

    Raises:
        InvalidFormatError: If any StringValue is not a number
        TypeError: If an element is not an Item
    """
    promoted: List[Item] = []
    count = 0

    for index, item in enumerate(items):
        if isinstance(item, StringValue):
            try:
                value = parse_number(item.text)
            except ValueError as e:
                logger.debug("Numeric promotion failed at position %d: %r", index, item.text)
                raise InvalidFormatError(item.text, index=index) from e
            promoted.append(NumericValue(value))
            count += 1
        elif isinstance(item, (NamedValue, NumericValue)):
            promoted.append(item)
        else:
            raise TypeError(f"Unsupported item type: {type(item)}")

    logger.debug("Promoted %d of %d items to numeric values", count, len(promoted))
    return promoted


__all__ = [
    "classify",
    "classify_fields",
    "parse_number",
    "promote_numeric",
]
