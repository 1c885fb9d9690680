"""
Item Encoder (Layer 3: Typed Items → Raw Text).

Inverse of the tokenizer + classifier. Renders each Item as one field and
joins the fields with ','.

Rendering rules:
    NamedValue(name, value) → name=value, with every '=' in both halves
                              escaped as '\\='
    NumericValue(value)     → culture-invariant, round-trippable number
    StringValue(text)       → text with every ',' escaped as '\\,'

COMPATIBILITY NOTE:
    StringValue text does NOT get '=' escaping, and NamedValue halves do
    NOT get ',' escaping. The escape marker itself is never escaped.
    Existing stored payloads were written this way, so a StringValue
    containing '=' decodes back as a NamedValue. Do not "fix" this here
    without a data migration.
"""

import math
from typing import Iterable

from otherdata.items import Item, StringValue, NumericValue, NamedValue
from otherdata.tokenizer import FIELD_DELIMITER, NAME_VALUE_DELIMITER, escape


def format_number(value: float) -> str:
    """
    Render a float so that parse_number() reads back the same value.

    Examples:
        3.0     → "3"
        0.1     → "0.1"
        1e20    → "1E+20"
        -0.0    → "-0"
        nan     → "NaN"
        inf     → "Infinity"
    """
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if mantissa.endswith(".0"):
            mantissa = mantissa[:-2]
        if not exponent.startswith("-"):
            exponent = "+" + exponent.lstrip("+")
        return f"{mantissa}E{exponent}"
    if text.endswith(".0"):
        return text[:-2]
    return text


def render_item(item: Item) -> str:
    """
    Render a single item as one field.

    Raises:
        TypeError: If item is not one of the three Item variants
    """
    if isinstance(item, NamedValue):
        name = escape(item.name, NAME_VALUE_DELIMITER)
        value = escape(item.value, NAME_VALUE_DELIMITER)
        return f"{name}{NAME_VALUE_DELIMITER}{value}"
    if isinstance(item, NumericValue):
        return format_number(item.value)
    if isinstance(item, StringValue):
        return escape(item.text, FIELD_DELIMITER)
    raise TypeError(f"Unsupported item type: {type(item)}")


def encode_items(items: Iterable[Item]) -> str:
    """
    Render an item sequence as one delimiter-joined string.

    The empty sequence encodes to the empty string.

    Raises:
        TypeError: If items is None or contains a non-Item
    """
    if items is None:
        raise TypeError("Cannot encode None; pass an empty sequence instead")
    return FIELD_DELIMITER.join(render_item(item) for item in items)


__all__ = [
    "format_number",
    "render_item",
    "encode_items",
]
