from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from mdot.config import Settings
from mdot.domain import Entry, EntrySet

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture(scope="session")
def sample_config_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "dotfiles.toml"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    def factory(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return factory


@pytest.fixture
def make_entry_set() -> Callable[..., EntrySet]:
    def factory(**depends: list[str]) -> EntrySet:
        return EntrySet.from_entries(
            Entry(name=name, depends=tuple(deps)) for name, deps in depends.items()
        )

    return factory


@pytest.fixture
def isolated_settings(tmp_path: Path) -> Settings:
    return Settings(app_name="mdot", config_dir=tmp_path / "config")


@pytest.fixture(autouse=True)
def _clear_mdot_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MDOT_APPNAME", "MDOT_CONFIG_DIR", "MDOT_STRICT", "MDOT_OVERRIDE"):
        monkeypatch.delenv(name, raising=False)
