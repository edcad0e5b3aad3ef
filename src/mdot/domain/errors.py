"""Error taxonomy raised while building entry sets and resolving plans."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence


class ResolverError(Exception):
    """Base class for every failure reported by the planning core.

    ``kind`` is a stable identifier surfaced to users by the CLI.
    """

    kind: ClassVar[str] = "ResolverError"


class DuplicateEntryError(ResolverError):
    """Raised when two entries share the same name."""

    kind: ClassVar[str] = "DuplicateEntry"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"entry '{name}' is defined more than once")


class CyclicDependencyError(ResolverError):
    """Raised when entries depend on each other in a loop."""

    kind: ClassVar[str] = "CyclicDependency"

    def __init__(self, path: Sequence[str]) -> None:
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(f"dependency cycle: {' -> '.join(self.path)}")


class UnresolvedDependencyError(ResolverError):
    """Raised when a referenced entry does not exist and lookups are strict."""

    kind: ClassVar[str] = "UnresolvedDependency"

    def __init__(self, name: str, *, dependent: str | None = None) -> None:
        self.name = name
        self.dependent = dependent
        if dependent is None:
            message = f"unknown entry '{name}'"
        else:
            message = f"entry '{dependent}' depends on unknown entry '{name}'"
        super().__init__(message)


class MalformedEntryError(ResolverError):
    """Raised when an entry declaration has the wrong shape or field types."""

    kind: ClassVar[str] = "MalformedEntry"

    def __init__(self, name: str | None, reason: str) -> None:
        self.name = name
        self.reason = reason
        label = f"entry '{name}'" if name is not None else "entry"
        super().__init__(f"{label}: {reason}")


__all__ = [
    "CyclicDependencyError",
    "DuplicateEntryError",
    "MalformedEntryError",
    "ResolverError",
    "UnresolvedDependencyError",
]
