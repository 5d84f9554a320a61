"""The display set: every entity the renderer should draw this frame."""

from __future__ import annotations

import dataclasses
from typing import Iterator

from .models import DisplayRecord


class MissingEntityError(LookupError):
    """Raised when an entity that must be on screen is not in the scene."""


class Scene:
    """
    Named display records, keyed by entity name.

    Entities that are hidden are removed outright rather than flagged, so the
    host never draws or hit-tests them.
    """

    def __init__(self) -> None:
        self._records: dict[str, DisplayRecord] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DisplayRecord]:
        return iter(self._records.values())

    def add(self, record: DisplayRecord) -> None:
        """Insert a record, replacing any previous one with the same name."""
        self._records[record.name] = record

    def remove(self, name: str) -> None:
        self._records.pop(name, None)

    def get(self, name: str) -> DisplayRecord:
        try:
            return self._records[name]
        except KeyError:
            raise MissingEntityError(f"Entity '{name}' is not in the scene.") from None

    def update(self, name: str, **changes) -> DisplayRecord:
        """Change fields of an existing record; the entity must already exist."""
        record = dataclasses.replace(self.get(name), **changes)
        self._records[name] = record
        return record

    def snapshot(self) -> list[DisplayRecord]:
        """Records in draw order: lowest layer first, insertion order within a layer."""
        return sorted(self._records.values(), key=lambda r: r.layer)
