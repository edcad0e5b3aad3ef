"""Planning core: entries, entry sets and dependency resolution."""

from __future__ import annotations

from .entries import Entry, EntrySet, Link
from .errors import (
    CyclicDependencyError,
    DuplicateEntryError,
    MalformedEntryError,
    ResolverError,
    UnresolvedDependencyError,
)
from .resolver import Plan, resolve

__all__ = [
    "CyclicDependencyError",
    "DuplicateEntryError",
    "Entry",
    "EntrySet",
    "Link",
    "MalformedEntryError",
    "Plan",
    "ResolverError",
    "UnresolvedDependencyError",
    "resolve",
]
