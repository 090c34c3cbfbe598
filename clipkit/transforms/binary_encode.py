#!/usr/bin/env python3
"""
Encode text as space-separated 8-bit binary octets, one per UTF-8 byte.
"""


def transform(text: str) -> str:
    return " ".join(f"{b:08b}" for b in text.encode("utf-8"))
