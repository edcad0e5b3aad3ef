"""Dependency resolution over an ``EntrySet``.

Resolution is a depth-first walk in declaration order:
- dependencies are visited in their declared order before the entry itself
- names missing from the set are external references (errors when strict)
- revisiting an entry that is still in progress is a cycle

The walk is pure; the same input always yields the same ``Plan``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from .errors import CyclicDependencyError, UnresolvedDependencyError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from .entries import Entry, EntrySet

log = logging.getLogger(__name__)


class _VisitState(Enum):
    IN_PROGRESS = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class Plan:
    """Entries in an order where each follows everything it depends on."""

    entries: tuple[Entry, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    def index(self, name: str) -> int:
        return self.names.index(name)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class _Walk:
    def __init__(self, entries: EntrySet, *, strict: bool) -> None:
        self._entries = entries
        self._strict = strict
        self._state: dict[str, _VisitState] = {}
        self._stack: list[str] = []
        self.ordered: list[Entry] = []

    def visit(self, root: str) -> None:
        """Walk ``root`` and its dependencies with an explicit frame stack."""

        frames: list[tuple[Entry, Iterator[str]]] = []
        self._enter(root, dependent=None, frames=frames)
        while frames:
            entry, dependencies = frames[-1]
            dependency = next(dependencies, None)
            if dependency is not None:
                self._enter(dependency, dependent=entry.name, frames=frames)
                continue
            frames.pop()
            self._stack.pop()
            self._state[entry.name] = _VisitState.DONE
            self.ordered.append(entry)

    def _enter(
        self,
        name: str,
        *,
        dependent: str | None,
        frames: list[tuple[Entry, Iterator[str]]],
    ) -> None:
        state = self._state.get(name)
        if state is _VisitState.DONE:
            return
        if state is _VisitState.IN_PROGRESS:
            start = self._stack.index(name)
            raise CyclicDependencyError([*self._stack[start:], name])

        entry = self._entries.get(name)
        if entry is None:
            if self._strict:
                raise UnresolvedDependencyError(name, dependent=dependent)
            log.debug("Treating '%s' (needed by '%s') as external", name, dependent)
            return

        if dependent is not None and not entry.enabled:
            log.warning("Disabled entry '%s' is planned because '%s' needs it", name, dependent)

        self._state[name] = _VisitState.IN_PROGRESS
        self._stack.append(name)
        frames.append((entry, iter(entry.depends)))


def resolve(
    entries: EntrySet,
    *,
    strict: bool = False,
    roots: Sequence[str] | None = None,
) -> Plan:
    """Return the install/link ``Plan`` for ``entries``.

    With ``roots`` only those entries and their transitive dependencies are
    planned. Disabled entries never start a walk but are still planned when
    something enabled depends on them.
    """

    if roots is None:
        starts = [entry.name for entry in entries.values() if entry.enabled]
    else:
        for root in roots:
            if root not in entries:
                raise UnresolvedDependencyError(root)
        starts = list(roots)

    walk = _Walk(entries, strict=strict)
    for name in starts:
        walk.visit(name)

    plan = Plan(tuple(walk.ordered))
    log.debug("Resolved %d of %d entries", len(plan), len(entries))
    return plan


__all__ = ["Plan", "resolve"]
