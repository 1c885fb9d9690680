"""
Escaped Delimited-Text Tokenizer (Layer 1: Raw Text → Fields).

Splits a raw string on an unescaped delimiter character. A backslash
escapes exactly one following character, suppressing its role as a
delimiter or as a new escape.

Wire Format:
    - field delimiter:      ,
    - name/value delimiter: =
    - escape marker:        \\

The scanner is a two-state machine:

    NORMAL  --'\\'------->  ESCAPED
    ESCAPED --any char-->  NORMAL

ARCHITECTURAL RULE:
    The tokenizer never removes escape markers. Fields come out exactly
    as they appear in the input; unescape() is a separate step applied
    once per tokenization level.
"""

from enum import Enum
from typing import List, Tuple


ESCAPE_MARKER = "\\"
FIELD_DELIMITER = ","
NAME_VALUE_DELIMITER = "="


class ScanState(Enum):
    """States of the escape scanner."""

    NORMAL = "normal"
    ESCAPED = "escaped"


def scan(text: str, delimiter: str) -> Tuple[List[str], ScanState]:
    """
    Split text at every unescaped delimiter.

    Args:
        text: Raw text to split
        delimiter: Single delimiter character

    Returns:
        (fields, final_state). final_state is ESCAPED when the input ends
        with a lone escape marker; that marker stays in the last field.

    Raises:
        ValueError: If delimiter is not a single character, or is the
            escape marker itself
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    if delimiter == ESCAPE_MARKER:
        raise ValueError("The escape marker cannot be used as a delimiter")

    fields: List[str] = []
    state = ScanState.NORMAL
    start = 0

    for i, char in enumerate(text):
        if state is ScanState.ESCAPED:
            state = ScanState.NORMAL
        elif char == ESCAPE_MARKER:
            state = ScanState.ESCAPED
        elif char == delimiter:
            fields.append(text[start:i])
            start = i + 1

    # The last field is always emitted, even when empty
    fields.append(text[start:])

    return fields, state


def tokenize(text: str, delimiter: str = FIELD_DELIMITER) -> List[str]:
    """
    Split text into fields at every unescaped delimiter.

    Examples:
        tokenize("a,b")      → ["a", "b"]
        tokenize("a\\\\,b")  → ["a\\\\,b"]
        tokenize("")         → [""]
        tokenize("a,,")      → ["a", "", ""]
    """
    fields, _ = scan(text, delimiter)
    return fields


def unescape(field: str, escaped_char: str) -> str:
    """
    Replace every escape-marker + escaped_char pair with escaped_char.

    Only the given character is unescaped. An escape marker in front of
    any other character is passed through untouched, so callers must
    unescape exactly the delimiter they split on.
    """
    if len(escaped_char) != 1:
        raise ValueError(f"Escaped character must be a single character, got {escaped_char!r}")
    return field.replace(ESCAPE_MARKER + escaped_char, escaped_char)


def escape(text: str, char: str) -> str:
    """Prefix every occurrence of char in text with the escape marker."""
    return text.replace(char, ESCAPE_MARKER + char)


__all__ = [
    "ESCAPE_MARKER",
    "FIELD_DELIMITER",
    "NAME_VALUE_DELIMITER",
    "ScanState",
    "scan",
    "tokenize",
    "unescape",
    "escape",
]
