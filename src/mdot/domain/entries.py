"""Entry and entry set value types.

Entries are frozen once built. An ``EntrySet`` keeps declaration order and is
never mutated; merging returns a new set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import DuplicateEntryError, MalformedEntryError

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True, slots=True, kw_only=True)
class Link:
    """One source path linked to one or more destinations."""

    source: str
    targets: tuple[str, ...]
    overwrite: bool = False
    backup: bool = False

    def __post_init__(self) -> None:
        if not self.source:
            raise ValueError("Link source must be a non-empty path")
        if not self.targets:
            raise ValueError(f"Link '{self.source}' must have at least one target")


@dataclass(frozen=True, slots=True, kw_only=True)
class Entry:
    """A named unit of configuration.

    ``package_name`` and ``templates`` are opaque payload; nothing in the
    planning core interprets them.
    """

    name: str
    depends: tuple[str, ...] = ()
    links: tuple[Link, ...] = ()
    exclude: tuple[str, ...] = ()
    templates: tuple[str, ...] = ()
    package_name: Any = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise MalformedEntryError(None, "name must be a non-empty string")
        for dependency in self.depends:
            if not isinstance(dependency, str) or not dependency:
                raise MalformedEntryError(
                    self.name, "dependency names must be non-empty strings"
                )
        object.__setattr__(self, "depends", tuple(self.depends))
        object.__setattr__(self, "links", tuple(self.links))
        object.__setattr__(self, "exclude", _unique(self.exclude))
        object.__setattr__(self, "templates", _unique(self.templates))

    @property
    def link_map(self) -> dict[str, tuple[str, ...]]:
        """Links as ``source -> targets``; later links for a source win."""

        return {link.source: link.targets for link in self.links}


@dataclass(frozen=True, slots=True, eq=False)
class EntrySet(Mapping[str, Entry]):
    """Immutable, insertion-ordered mapping from entry name to ``Entry``."""

    _entries: dict[str, Entry] = field(default_factory=dict, repr=False)

    @classmethod
    def from_entries(cls, entries: Iterable[Entry], *, override: bool = False) -> EntrySet:
        collected: dict[str, Entry] = {}
        for entry in entries:
            if entry.name in collected:
                if not override:
                    raise DuplicateEntryError(entry.name)
                log.debug("Entry '%s' replaced by a later definition", entry.name)
            collected[entry.name] = entry
        return cls(collected)

    def merge(self, other: EntrySet, *, override: bool = False) -> EntrySet:
        """Return a new set with ``other`` layered on top of this one.

        A name present in both fails unless ``override`` is set, in which case
        the definition from ``other`` wins and keeps this set's position.
        """

        return EntrySet.from_entries((*self.values(), *other.values()), override=override)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __getitem__(self, name: str) -> Entry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries


__all__ = ["Entry", "EntrySet", "Link"]
