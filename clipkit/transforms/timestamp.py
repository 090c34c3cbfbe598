#!/usr/bin/env python3
"""
Current UTC time as Unix epoch seconds.
"""
from clipkit.transforms._time_utils import NS_PER_SECOND, now_ns


def transform() -> str:
    return str(now_ns() // NS_PER_SECOND)
