"""
Example payload builders.

Builds representative other-data item sequences of the kind health
records attach to their data sections: a run of exercise samples with a
sampling-interval marker, and a list of free-text labels.
"""
from typing import List, Sequence

from otherdata.items import Item, StringValue, NumericValue, NamedValue


def build_example_exercise_samples(
    values: Sequence[float] = (72.0, 75.5, 80.25, 78.0),
    sampling_interval: float = 5.0,
    unit: str = "bpm",
) -> List[Item]:
    """Heart-rate samples preceded by unit and interval markers."""
    items: List[Item] = [
        NamedValue(name="unit", value=unit),
        NamedValue(name="interval", value=f"{sampling_interval:g}"),
    ]
    items.extend(NumericValue(float(v)) for v in values)
    return items


def build_example_labels() -> List[Item]:
    """Plain labels, one of which needs comma escaping."""
    return [
        StringValue("warm-up"),
        StringValue("intervals, hard"),
        StringValue("cool-down"),
    ]
