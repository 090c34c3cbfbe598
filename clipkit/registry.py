"""
registry.py - the fixed, ordered table of clipkit commands.

Each command maps to one module in clipkit.transforms defining
``transform(text) -> str`` (input commands) or ``transform() -> str``.
Declaration order is the order used by --help and the espanso emitter.
"""

import importlib
from dataclasses import dataclass
from typing import Callable, Iterator

from clipkit.errors import UnknownCommand

TRANSFORMS_PACKAGE = "clipkit.transforms"

# (command name, transform module, needs clipboard input)
COMMANDS = (
    ("binary-decode", "binary_decode", True),
    ("binary-encode", "binary_encode", True),
    ("format-json",   "format_json",   True),
    ("ip",            "ip",            False),
    ("password",      "password",      True),
    ("reddit-top",    "reddit_top",    True),
    ("spongebob",     "spongebob",     True),
    ("timestamp",     "timestamp",     False),
    ("uuid4",         "uuid4",         False),
    ("uuid7",         "uuid7",         False),
)


@dataclass(frozen=True)
class Command:
    name: str
    requires_input: bool
    run: Callable[..., str]
    description: str


# ─── Transform loader ─────────────────────────────────────────────────────────

def _coerce(value: str):
    # Try int, then float, then leave as string
    for cast in (int, float):
        try:
            return cast(value)
        except (ValueError, TypeError):
            pass
    return value


def load_transform(module_name: str, overrides: dict = None):
    """
    Import a transform module.
    Returns (transform_fn, short_description).
    Applies overrides as upper-cased module-level constants before returning.
    """
    module = importlib.import_module(f"{TRANSFORMS_PACKAGE}.{module_name}")

    if not hasattr(module, "transform"):
        raise AttributeError(f"{module.__name__} must define a 'transform' function")

    for key, value in (overrides or {}).items():
        setattr(module, key.upper(), _coerce(value))

    description = (
        (module.__doc__ or "").strip()
        or (module.transform.__doc__ or "").strip()
        or "No description."
    )
    short_desc = next(
        (ln.strip() for ln in description.splitlines() if ln.strip()), description
    )
    return module.transform, short_desc


# ─── Registry ─────────────────────────────────────────────────────────────────

class Registry:
    """Immutable, ordered name -> Command table."""

    def __init__(self, commands):
        self._commands = {cmd.name: cmd for cmd in commands}

    def lookup(self, name: str) -> Command:
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommand(name) from None

    def __contains__(self, name) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list:
        return list(self._commands)


def load_registry(overrides: dict = None) -> Registry:
    """
    Build the registry from COMMANDS.
    *overrides* maps command name -> {key: raw value} (from [command:<name>]).
    """
    overrides = overrides or {}
    commands = []
    for name, module_name, requires_input in COMMANDS:
        fn, desc = load_transform(module_name, overrides.get(name))
        commands.append(Command(name, requires_input, fn, desc))
    return Registry(commands)
