"""
espanso.py - render an espanso match file for every registered command.

Each match binds the trigger ";<command>" to running this executable with the
command as its only argument; the script's stdout becomes the replacement.
Drop the output into espanso's match/ folder (e.g. match/clipkit.yml).
"""

import sys
from pathlib import Path

import yaml

from clipkit.registry import Registry

TRIGGER_PREFIX = ";"
MODULE_NAME = "clipkit"


def launcher_args() -> list:
    """Command prefix that starts clipkit the same way it is running now."""
    script = Path(sys.argv[0])
    # `python -m clipkit`: argv[0] is the package's __main__.py, not runnable
    if script.name == "__main__.py":
        return [sys.executable, "-m", MODULE_NAME]
    return [str(script.resolve())]


def match_entry(command_name: str, launcher: list) -> dict:
    return {
        "trigger": f"{TRIGGER_PREFIX}{command_name}",
        "replace": "{{output}}",
        "vars": [{
            "name": "output",
            "type": "script",
            "params": {"args": [*launcher, command_name]},
        }],
    }


def render(registry: Registry, executable: str = None) -> str:
    launcher = [executable] if executable else launcher_args()
    matches = [match_entry(cmd.name, launcher) for cmd in registry]
    return yaml.safe_dump(
        {"matches": matches},
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
        indent=2,
    )
