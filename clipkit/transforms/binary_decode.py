#!/usr/bin/env python3
"""
Decode space-separated binary octets (e.g. "01101000 01101001") back to text.
Each octet maps to the character with that code point (0-255).
"""
import re

from clipkit.errors import InvalidEncoding

_OCTET = re.compile(r"[01]+")


def transform(text: str) -> str:
    text = text.strip()
    if not text:
        return ""

    chars = []
    for token in text.split(" "):
        if not _OCTET.fullmatch(token):
            raise InvalidEncoding(f"Not a binary octet: {token!r}")
        value = int(token, 2)
        if value > 0xFF:
            raise InvalidEncoding(f"Octet out of byte range: {token!r}")
        chars.append(chr(value))
    return "".join(chars)
