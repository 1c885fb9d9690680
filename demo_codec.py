#!/usr/bin/env python3
"""
Demo: encode example payloads, decode them back, and dump them as YAML.
"""

from otherdata import Envelope, decode, encode
from otherdata.examples import build_example_exercise_samples, build_example_labels
from otherdata.serialization import items_to_yaml


def main():
    payloads = [
        ("EXERCISE SAMPLES", build_example_exercise_samples(), True),
        ("LABELS", build_example_labels(), False),
    ]

    print("=" * 80)
    print("OTHER DATA CODEC DEMO")
    print("=" * 80)

    for title, items, numeric in payloads:
        print(f"\n{title}:")
        print("-" * 80)

        envelope = encode(items)
        print(f"raw text:     {envelope.raw_text}")
        print(f"content type: {envelope.content_type}")

        restored = decode(envelope, numeric=numeric)
        print(f"round trip:   {'OK' if restored == items else 'MISMATCH'}")
        print(items_to_yaml(restored))

    print("-" * 80)
    print("Decoding a non-CSV envelope fails:")
    try:
        decode(Envelope(raw_text="1,2,3", content_type="text/plain"))
    except ValueError as e:
        print(f"  {type(e).__name__}: {e}")
    print("=" * 80)


if __name__ == "__main__":
    main()
