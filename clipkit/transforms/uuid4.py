#!/usr/bin/env python3
"""
Random (version 4) UUID.
"""
import uuid


def transform() -> str:
    return str(uuid.uuid4())
