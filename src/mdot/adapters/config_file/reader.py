"""Read raw configuration documents from disk."""

from __future__ import annotations

import json
import tomllib
from logging import getLogger
from typing import TYPE_CHECKING, Any

from mdot.config.errors import ConfigFileError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for key, value in pairs:
        if key in document:
            raise ValueError(f"duplicate key '{key}'")
        document[key] = value
    return document


def read_document(path: Path) -> Any:
    """Parse ``path`` as JSON when it ends in ``.json`` and as TOML otherwise."""

    try:
        with path.open("rb") as handle:
            if path.suffix.lower() == ".json":
                document = json.load(handle, object_pairs_hook=_reject_duplicate_keys)
            else:
                document = tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigFileError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigFileError(f"Cannot read configuration file {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, ValueError) as exc:
        raise ConfigFileError(f"Cannot parse configuration file {path}: {exc}") from exc

    log.debug("Read configuration document %s", path)
    return document
