"""Shared pytest fixtures for clipkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from clipkit import cli
from clipkit.registry import Registry, load_registry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point clipkit at a throwaway ini whose run log lives in tmp_path."""
    ini = tmp_path / "clipkit.ini"
    ini.write_text(f"[clipkit]\nlog_db = {tmp_path / 'clipkit.db'}\n")
    monkeypatch.setenv("CLIPKIT_CONFIG", str(ini))
    return ini


@pytest.fixture
def registry() -> Registry:
    return load_registry()


class FakeClipboard:
    """In-memory clipboard; counts reads and writes."""

    def __init__(self, text: str = ""):
        self.text = text
        self.reads = 0
        self.writes = []

    def read(self) -> str:
        self.reads += 1
        return self.text

    def write(self, text: str) -> None:
        self.writes.append(text)
        self.text = text


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch) -> FakeClipboard:
    """Replace the real clipboard used by the CLI."""
    fake = FakeClipboard()
    monkeypatch.setattr(cli, "read_clipboard", fake.read)
    monkeypatch.setattr(cli, "write_clipboard", fake.write)
    return fake
