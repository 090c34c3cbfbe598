#!/usr/bin/env python3
"""
Generate a random alphanumeric password. The clipboard may hold the wanted
length; anything that is not a plain decimal number gives DEFAULT_LENGTH.
"""
import secrets
import string

ALPHABET = string.ascii_letters + string.digits
DEFAULT_LENGTH = 32


def parse_length(text: str) -> int:
    text = text.strip()
    # ASCII digits only: no sign, underscores or non-ASCII numerals
    if not (text.isascii() and text.isdigit()):
        return DEFAULT_LENGTH
    return int(text)


def transform(text: str) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(parse_length(text)))
