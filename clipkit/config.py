"""
config.py - clipkit.ini loading.

clipkit.ini format:
    [clipkit]
    log = true                    # record runs in the SQLite run log
    log_db = ~/.clipkit/clipkit.db
    retain_days = 30

    [command:password]            # matches a registered command name
    default_length = 20

    [command:ip]
    timeout = 5

Keys in a [command:<name>] section override the upper-cased module constant
of that command's transform (default_length -> DEFAULT_LENGTH).
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path

from clipkit.errors import ConfigError

CONFIG_ENV = "CLIPKIT_CONFIG"
HOME_DIR = Path.home() / ".clipkit"
DEFAULT_CONFIG = HOME_DIR / "clipkit.ini"
DEFAULT_DB = HOME_DIR / "clipkit.db"
RETAIN_DAYS = 30

MAIN_SECTION = "clipkit"
COMMAND_PREFIX = "command:"


@dataclass(frozen=True)
class Settings:
    log: bool = True
    log_db: Path = DEFAULT_DB
    retain_days: int = RETAIN_DAYS
    overrides: dict = field(default_factory=dict)
    path: Path = None


def resolve_config_path(explicit: str = None) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    if os.environ.get(CONFIG_ENV):
        return Path(os.environ[CONFIG_ENV]).expanduser()
    return DEFAULT_CONFIG


def load_ini(path: Path) -> configparser.ConfigParser:
    """Load the ini file if it exists; a missing file means all defaults."""
    cfg = configparser.ConfigParser()
    if path.exists():
        cfg.read(path, encoding="utf-8")
    return cfg


def get_command_overrides(cfg: configparser.ConfigParser) -> dict:
    """Return {command name: {key: raw value}} from [command:<name>] sections."""
    overrides = {}
    for section in cfg.sections():
        if section.startswith(COMMAND_PREFIX):
            name = section[len(COMMAND_PREFIX):].strip()
            overrides[name] = dict(cfg[section])
    return overrides


def load_settings(explicit: str = None) -> Settings:
    path = resolve_config_path(explicit)
    try:
        cfg = load_ini(path)
        log_db = cfg.get(MAIN_SECTION, "log_db", fallback=None)
        return Settings(
            log=cfg.getboolean(MAIN_SECTION, "log", fallback=True),
            log_db=Path(log_db).expanduser() if log_db else DEFAULT_DB,
            retain_days=cfg.getint(MAIN_SECTION, "retain_days", fallback=RETAIN_DAYS),
            overrides=get_command_overrides(cfg),
            path=path,
        )
    except (configparser.Error, ValueError) as exc:
        raise ConfigError(f"Bad config file {path}: {exc}") from exc
