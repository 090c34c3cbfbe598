"""
Transform modules. Each defines ``transform(...) -> str``; the module
docstring's first line is the command description shown in ``--help``.
"""
