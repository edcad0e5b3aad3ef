"""Translate raw configuration documents into domain entries."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from pydantic import ValidationError

from mdot.domain import Entry, Link, MalformedEntryError

from .schema import EntryTable

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def _links_from_table(table: EntryTable) -> tuple[Link, ...]:
    if isinstance(table.links, list):
        return tuple(
            Link(
                source=link.source,
                targets=tuple(link.targets),
                overwrite=link.overwrite,
                backup=link.backup,
            )
            for link in table.links
        )
    return tuple(
        Link(source=source, targets=(targets,) if isinstance(targets, str) else tuple(targets))
        for source, targets in table.links.items()
    )


def _entry_from_table(name: str, raw: Mapping[str, Any], *, where: str) -> Entry:
    try:
        table = EntryTable.model_validate(raw)
    except ValidationError as exc:
        raise MalformedEntryError(name, _describe(exc)) from exc

    if table.name is not None and table.name != name:
        log.warning("%sKey '%s' overrides entry name '%s'", where, name, table.name)
    for key in table.ignored_keys:
        log.warning("%sKey '%s' of entry '%s' is ignored", where, key, name)

    try:
        links = _links_from_table(table)
    except ValueError as exc:
        raise MalformedEntryError(name, str(exc)) from exc

    return Entry(
        name=name,
        depends=tuple(table.depends),
        links=links,
        exclude=tuple(table.exclude_patterns),
        templates=tuple(table.templates),
        package_name=table.package,
        enabled=table.enabled,
    )


def translate_entry(key: str | None, value: object, *, where: str = "") -> Entry:
    """Build one ``Entry`` from a keyed or positional declaration.

    ``key`` is the table key the value was declared under, or ``None`` for
    items of a top-level array, which must name themselves.
    """

    if isinstance(value, str):
        if key is None:
            return Entry(name=value)
        return Entry(name=key, package_name=value)

    if not isinstance(value, Mapping):
        raise MalformedEntryError(
            key, f"expected a string or a table, got {type(value).__name__}"
        )

    raw = cast(Mapping[str, Any], value)
    if key is None:
        name = raw.get("name")
        if not isinstance(name, str):
            raise MalformedEntryError(None, "table entries in a list must have a 'name'")
        return _entry_from_table(name, raw, where=where)
    return _entry_from_table(key, raw, where=where)


def translate_document(document: object, *, source: str | None = None) -> list[Entry]:
    """Translate a whole configuration document into entries in declaration order."""

    where = f"{source}: " if source else ""
    if isinstance(document, Mapping):
        mapping = cast(Mapping[str, object], document)
        return [translate_entry(key, value, where=where) for key, value in mapping.items()]
    if isinstance(document, list):
        items = cast("Sequence[object]", document)
        return [translate_entry(None, item, where=where) for item in items]
    raise MalformedEntryError(
        None, f"{where}top level must be a table, got {type(document).__name__}"
    )


__all__ = ["translate_document", "translate_entry"]
