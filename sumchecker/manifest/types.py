"""
Dataclasses describing a parsed checksum manifest.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """Recorded digest for a single file."""

    digest: str
    binary: bool  # "*" marker; a space means text mode


class Manifest(Mapping[str, ManifestEntry]):
    """Read-only filename -> entry lookup built from a manifest text."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, ManifestEntry]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, filename: str) -> ManifestEntry:
        return self._entries[filename]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Manifest({dict(self._entries)!r})"


__all__ = ["ManifestEntry", "Manifest"]
