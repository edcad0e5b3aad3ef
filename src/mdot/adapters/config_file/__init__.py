"""Public interface for the configuration file adapter."""

from __future__ import annotations

from .reader import read_document
from .schema import EntryTable, LinkTable
from .translator import translate_document, translate_entry

__all__ = [
    "EntryTable",
    "LinkTable",
    "read_document",
    "translate_document",
    "translate_entry",
]
