"""Tests for clipkit.ini loading."""

from pathlib import Path

import pytest

from clipkit.config import DEFAULT_CONFIG, DEFAULT_DB, load_settings, resolve_config_path
from clipkit.errors import ConfigError


class TestConfigPath:
    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        assert resolve_config_path(str(tmp_path / "a.ini")) == tmp_path / "a.ini"

    def test_env_var(self, isolated_config: Path) -> None:
        assert resolve_config_path() == isolated_config

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLIPKIT_CONFIG", raising=False)
        assert resolve_config_path() == DEFAULT_CONFIG


class TestLoadSettings:
    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(str(tmp_path / "missing.ini"))
        assert settings.log is True
        assert settings.log_db == DEFAULT_DB
        assert settings.retain_days == 30
        assert settings.overrides == {}

    def test_main_section(self, tmp_path: Path) -> None:
        ini = tmp_path / "c.ini"
        ini.write_text(
            f"[clipkit]\nlog = no\nlog_db = {tmp_path / 'x.db'}\nretain_days = 7\n"
        )
        settings = load_settings(str(ini))
        assert settings.log is False
        assert settings.log_db == tmp_path / "x.db"
        assert settings.retain_days == 7
        assert settings.path == ini

    def test_command_sections(self, tmp_path: Path) -> None:
        ini = tmp_path / "c.ini"
        ini.write_text(
            "[command:password]\nDefault_Length = 20\n\n[command:ip]\ntimeout = 5\n"
        )
        settings = load_settings(str(ini))
        assert settings.overrides == {
            "password": {"default_length": "20"},
            "ip": {"timeout": "5"},
        }

    @pytest.mark.parametrize(
        "text", ["not an ini", "[clipkit]\nlog = perhaps\n", "[clipkit]\nretain_days = x\n"]
    )
    def test_bad_file(self, tmp_path: Path, text: str) -> None:
        ini = tmp_path / "c.ini"
        ini.write_text(text)
        with pytest.raises(ConfigError):
            load_settings(str(ini))
