"""
clipkit - one-shot clipboard transformations.

Reads the clipboard, runs exactly one named transform over it, prints the
result and writes it back to the clipboard.
"""

__version__ = "0.3.0"
