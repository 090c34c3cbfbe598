"""Tests for the espanso match file emitter."""

import sys

import pytest
import yaml

from clipkit import espanso
from clipkit.registry import Registry


class TestRender:
    def test_one_match_per_command_in_order(self, registry: Registry) -> None:
        doc = yaml.safe_load(espanso.render(registry, executable="/usr/local/bin/clipkit"))
        triggers = [m["trigger"] for m in doc["matches"]]
        assert triggers == [f";{name}" for name in registry.names()]
        assert ";config-espanso" not in triggers

    def test_match_shape(self, registry: Registry) -> None:
        doc = yaml.safe_load(espanso.render(registry, executable="/opt/clipkit"))
        match = doc["matches"][0]
        assert match["replace"] == "{{output}}"
        assert match["vars"] == [{
            "name": "output",
            "type": "script",
            "params": {"args": ["/opt/clipkit", "binary-decode"]},
        }]

    def test_each_block_names_its_command(self, registry: Registry) -> None:
        doc = yaml.safe_load(espanso.render(registry, executable="/opt/clipkit"))
        for name, match in zip(registry.names(), doc["matches"]):
            assert match["vars"][0]["params"]["args"][-1] == name

    def test_deterministic(self, registry: Registry) -> None:
        assert espanso.render(registry, "/x") == espanso.render(registry, "/x")

    def test_defaults_to_running_launcher(
        self, registry: Registry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(espanso, "launcher_args", lambda: ["/resolved/clipkit"])
        doc = yaml.safe_load(espanso.render(registry))
        assert doc["matches"][0]["vars"][0]["params"]["args"] == [
            "/resolved/clipkit",
            "binary-decode",
        ]


class TestLauncherArgs:
    def test_console_script(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        script = tmp_path / "bin" / "clipkit"
        monkeypatch.setattr(sys, "argv", [str(script), "config-espanso"])
        assert espanso.launcher_args() == [str(script.resolve())]

    def test_run_as_module(
        self, registry: Registry, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        main = tmp_path / "clipkit" / "__main__.py"
        monkeypatch.setattr(sys, "argv", [str(main), "config-espanso"])
        assert espanso.launcher_args() == [sys.executable, "-m", "clipkit"]

        doc = yaml.safe_load(espanso.render(registry))
        assert doc["matches"][-1]["vars"][0]["params"]["args"] == [
            sys.executable, "-m", "clipkit", "uuid7",
        ]
