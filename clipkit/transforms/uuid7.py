#!/usr/bin/env python3
"""
Time-ordered (version 7) UUID built from the current UTC time.

Layout: 48-bit Unix milliseconds, version nibble, 12 bits of sub-millisecond
fraction, RFC 4122 variant, 62 random bits. The fraction keeps UUIDs made
within the same millisecond in creation order.
"""
import secrets
import uuid

from clipkit.transforms._time_utils import NS_PER_MS, now_ns


def from_ns(timestamp_ns: int) -> uuid.UUID:
    millis, sub_ms = divmod(timestamp_ns, NS_PER_MS)
    fraction = sub_ms * 4096 // NS_PER_MS

    value = (millis & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= fraction << 64
    value |= 0b10 << 62
    value |= secrets.randbits(62)
    return uuid.UUID(int=value)


def transform() -> str:
    return str(from_ns(now_ns()))
