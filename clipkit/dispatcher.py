"""
dispatcher.py - run one registered command.

The clipboard reader is passed in, so nothing here touches the real clipboard.
"""

from typing import Callable

from clipkit.errors import InputUnavailable, TransformationFailed
from clipkit.registry import Registry


def _no_log(message: str, tag: str = "info"):
    pass


class Dispatcher:
    def __init__(self, registry: Registry, log: Callable = None):
        self.registry = registry
        self._log = log or _no_log

    def execute(self, name: str, read_clipboard: Callable[[], str]) -> str:
        """
        Resolve *name*, read the clipboard if the command needs input, run it.
        Returns the transform output unmodified.
        Raises UnknownCommand, InputUnavailable or TransformationFailed.
        """
        command = self.registry.lookup(name)
        source = "clipboard" if command.requires_input else "no input"
        self._log(f"▶ [{command.name}] via {source}", "info")

        args = ()
        if command.requires_input:
            try:
                text = read_clipboard()
            except InputUnavailable as exc:
                self._log(f"  ✗ {exc}", "err")
                raise
            except Exception as exc:
                self._log(f"  ✗ Clipboard read failed: {exc}", "err")
                raise InputUnavailable(f"Clipboard read failed: {exc}") from exc
            self._log(f"   In:  {len(text)} chars", "preview")
            args = (text,)

        try:
            result = command.run(*args)
        except Exception as exc:
            self._log(f"  ✗ Error in [{command.name}]: {exc}", "err")
            raise TransformationFailed(command.name, exc) from exc

        if not isinstance(result, str):
            result = str(result)
        self._log(f"   Out: {len(result)} chars", "ok")
        return result
