"""
clipboard.py - pyperclip-backed clipboard access.

Backend failures surface as InputUnavailable / OutputUnavailable.
"""

import pyperclip

from clipkit.errors import InputUnavailable, OutputUnavailable


def read_clipboard() -> str:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise InputUnavailable(f"Clipboard read error: {exc}") from exc


def write_clipboard(text: str):
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise OutputUnavailable(f"Clipboard write error: {exc}") from exc
