"""
Serialization helpers for decoded item sequences.

Provides lossless JSON/YAML round-trip via an intermediate dict
representation. This is an export/debugging surface; the wire format
stays the escaped delimited text produced by the encoder.

Dict shape:
    {"items": [
        {"type": "string", "text": "walk"},
        {"type": "numeric", "value": 72.5},
        {"type": "named", "name": "unit", "value": "bpm"},
    ]}
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List

import yaml

from otherdata.items import Item, ItemKind, StringValue, NumericValue, NamedValue


def item_to_dict(item: Item) -> Dict[str, Any]:
    if isinstance(item, StringValue):
        return {"type": ItemKind.STRING.value, "text": item.text}
    if isinstance(item, NumericValue):
        return {"type": ItemKind.NUMERIC.value, "value": item.value}
    if isinstance(item, NamedValue):
        return {"type": ItemKind.NAMED.value, "name": item.name, "value": item.value}
    raise TypeError(f"Unsupported item type: {type(item)}")


def item_from_dict(d: Dict[str, Any]) -> Item:
    t = d.get("type")
    if t == ItemKind.STRING.value:
        return StringValue(d["text"])
    if t == ItemKind.NUMERIC.value:
        return NumericValue(float(d["value"]))
    if t == ItemKind.NAMED.value:
        return NamedValue(name=d["name"], value=d["value"])
    raise TypeError(f"Unsupported item dict type: {t}")


def items_to_dict(items: Iterable[Item]) -> Dict[str, Any]:
    return {"items": [item_to_dict(item) for item in items]}


def items_from_dict(d: Dict[str, Any]) -> List[Item]:
    return [item_from_dict(entry) for entry in d.get("items", [])]


def items_to_json(items: Iterable[Item]) -> str:
    return json.dumps(items_to_dict(items), sort_keys=True)


def items_from_json(s: str) -> List[Item]:
    d = json.loads(s)
    return items_from_dict(d)


def items_to_yaml(items: Iterable[Item]) -> str:
    return yaml.safe_dump(items_to_dict(items), sort_keys=True, allow_unicode=True)


def items_from_yaml(s: str) -> List[Item]:
    d = yaml.safe_load(s)
    return items_from_dict(d or {})


def items_equal(left: Iterable[Item], right: Iterable[Item]) -> bool:
    """Compare two sequences, treating NaN numeric values as equal."""
    left, right = list(left), list(right)
    if len(left) != len(right):
        return False
    for a, b in zip(left, right):
        if (
            isinstance(a, NumericValue)
            and isinstance(b, NumericValue)
            and math.isnan(a.value)
            and math.isnan(b.value)
        ):
            continue
        if a != b:
            return False
    return True
