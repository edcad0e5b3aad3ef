"""Runtime settings for planning runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import read_env_flag, read_env_str

APP_NAME: Final[str] = "mdot"
DEFAULT_CONFIG_FILENAME: Final[str] = "config.toml"


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str
    config_dir: Path
    strict: bool = False
    override: bool = True
    config_filename: str = DEFAULT_CONFIG_FILENAME

    def resolve_config_dir(self) -> Path:
        return (self.config_dir / self.app_name).expanduser().resolve()

    def default_config_path(self) -> Path:
        return self.resolve_config_dir() / self.config_filename


def _default_config_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("APPDATA")
        return Path(base) if base else (Path.home() / "AppData" / "Roaming")
    base = os.getenv("XDG_CONFIG_HOME")
    return Path(base) if base else (Path.home() / ".config")


def get_settings() -> Settings:
    env_dir = os.getenv("MDOT_CONFIG_DIR")
    return Settings(
        app_name=read_env_str("MDOT_APPNAME", default=APP_NAME),
        config_dir=Path(env_dir) if env_dir else _default_config_dir(),
        strict=read_env_flag("MDOT_STRICT", default=False),
        override=read_env_flag("MDOT_OVERRIDE", default=True),
    )
