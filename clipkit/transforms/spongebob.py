#!/usr/bin/env python3
"""
aLtErNaTe the case of every character: even positions upper, odd lower.
"""


def transform(text: str) -> str:
    return "".join(
        ch.upper() if i % 2 == 0 else ch.lower()
        for i, ch in enumerate(text)
    )
