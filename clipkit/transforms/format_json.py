#!/usr/bin/env python3
"""
Pretty-print JSON with 2-space indentation, key order and unicode preserved.
"""
import json

from clipkit.errors import InvalidJson

INDENT = 2


def _reject_constant(name: str):
    raise InvalidJson(f"JSON error: {name} is not valid JSON")


def transform(text: str) -> str:
    try:
        data = json.loads(text.strip(), parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidJson(f"JSON error: {e}") from e
    return json.dumps(data, indent=INDENT, ensure_ascii=False)
