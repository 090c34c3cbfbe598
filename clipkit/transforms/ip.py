#!/usr/bin/env python3
"""
Look up this machine's public IPv4 address.
"""
from urllib.error import URLError
from urllib.request import urlopen

from clipkit.errors import NetworkError

ENDPOINT = "https://ipv4.icanhazip.com/"
TIMEOUT = None


def fetch(url: str, timeout=None) -> bytes:
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urlopen(url, **kwargs) as resp:
            return resp.read()
    except (URLError, OSError) as e:
        raise NetworkError(f"Request to {url} failed: {e}") from e


def transform() -> str:
    body = fetch(ENDPOINT, TIMEOUT)
    try:
        return body.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise NetworkError(f"Response from {ENDPOINT} is not UTF-8") from e
