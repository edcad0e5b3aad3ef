"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mdot.adapters.config_file import read_document, translate_document
from mdot.config import MissingConfigurationError, Settings, get_settings
from mdot.domain import EntrySet, Plan, resolve

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


log = getLogger(__name__)


def default_config_paths(settings: Settings) -> list[Path]:
    path = settings.default_config_path()
    if not path.is_file():
        raise MissingConfigurationError(f"No configuration file given and none found at {path}")
    return [path]


def load_entry_set(paths: Sequence[Path], *, override: bool = True) -> EntrySet:
    """Read every file in order and merge their top-level entries."""

    merged = EntrySet()
    for path in paths:
        entries = EntrySet.from_entries(translate_document(read_document(path), source=str(path)))
        overridden = [name for name in entries if name in merged]
        merged = merged.merge(entries, override=override)
        log.info("Loaded %d entries from %s", len(entries), path)
        if overridden:
            log.info("%s overrides: %s", path, ", ".join(overridden))
    return merged


def build_plan(
    paths: Sequence[Path] | None = None,
    *,
    strict: bool | None = None,
    override: bool | None = None,
    roots: Sequence[str] | None = None,
    settings: Settings | None = None,
) -> Plan:
    """Load configuration files and resolve their union into a ``Plan``.

    Unset options fall back to ``settings`` (environment driven by default).
    """

    effective_settings = settings or get_settings()
    effective_strict = effective_settings.strict if strict is None else strict
    effective_override = effective_settings.override if override is None else override
    effective_paths = list(paths) if paths else default_config_paths(effective_settings)

    log.info(
        "Planning: files=%s, strict=%s, override=%s, roots=%s",
        len(effective_paths),
        effective_strict,
        effective_override,
        list(roots) if roots else "all",
    )
    entries = load_entry_set(effective_paths, override=effective_override)
    plan = resolve(entries, strict=effective_strict, roots=roots)
    log.info("Planned %d of %d entries", len(plan), len(entries))
    return plan


__all__ = ["build_plan", "default_config_paths", "load_entry_set"]
