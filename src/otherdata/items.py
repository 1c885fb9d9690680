"""
Typed Items for Other-Data Payloads

A decoded payload is an ordered sequence of Items. There are exactly
three variants:

    - StringValue  (a plain field with no internal structure)
    - NumericValue (a scalar measurement, only produced by the numeric pass)
    - NamedValue   (a field that contained an unescaped '=')

ARCHITECTURAL RULE:
    Items are pure data.
    They know nothing about escaping, delimiters or envelopes.
    Decoding and encoding live in the tokenizer/classifier/encoder layers.

INVARIANTS:
    - A decoded sequence preserves field order
    - Duplicate values are permitted and never deduplicated
    - The empty sequence is valid
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List


class ItemKind(Enum):
    """
    Tag identifying an Item variant.

    The values double as the type tags used by the serialization layer.
    """

    STRING = "string"
    NUMERIC = "numeric"
    NAMED = "named"


class Item(ABC):
    """
    Base class for all decoded items.

    This class exists to close the set of variants. Code that dispatches
    on items must handle all three subclasses and raise TypeError on
    anything else.
    """

    @property
    @abstractmethod
    def kind(self) -> ItemKind:
        ...


@dataclass(frozen=True)
class StringValue(Item):
    """
    A plain string field.

    Example:
        raw text "walk,run" decodes to
        [StringValue("walk"), StringValue("run")]
    """

    text: str

    @property
    def kind(self) -> ItemKind:
        return ItemKind.STRING


@dataclass(frozen=True)
class NumericValue(Item):
    """
    A scalar measurement.

    Only produced by promote_numeric(); the first decode pass never
    creates numeric items on its own.

    NaN values compare unequal to each other, as floats do. Use
    serialization.items_equal to compare sequences that may hold NaN.
    """

    value: float

    @property
    def kind(self) -> ItemKind:
        return ItemKind.NUMERIC


@dataclass(frozen=True)
class NamedValue(Item):
    """
    A name/value pair.

    Example:
        raw text "unit=bpm" decodes to NamedValue(name="unit", value="bpm")
    """

    name: str
    value: str

    @property
    def kind(self) -> ItemKind:
        return ItemKind.NAMED


ItemSequence = List[Item]


__all__ = [
    "ItemKind",
    "Item",
    "StringValue",
    "NumericValue",
    "NamedValue",
    "ItemSequence",
]
