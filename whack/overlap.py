"""
Overlap detection for the host: compares collidable display records pairwise
and reports when pairs start or stop touching.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

import pygame

from .constants import ENEMY_SIZE, HAMMER_SIZE, HOLE_SIZE
from .models import CollisionEvent, DisplayRecord, EntityKind, parse_entity

DEFAULT_SIZES = {
    EntityKind.PLAYER: HAMMER_SIZE,
    EntityKind.HOLE: HOLE_SIZE,
    EntityKind.ENEMY: ENEMY_SIZE,
}


class OverlapTracker:
    """
    Axis-aligned box overlap between collidable entities, with enter/exit tracking.

    A pair produces one begin event on the first frame it overlaps and one end
    event on the first frame it no longer does (including when either side
    stops being collidable or leaves the scene).
    """

    def __init__(self, sizes: dict[EntityKind, tuple[int, int]] | None = None) -> None:
        self.sizes = dict(DEFAULT_SIZES if sizes is None else sizes)
        self._contacts: set[tuple[str, str]] = set()

    @property
    def contacts(self) -> frozenset[tuple[str, str]]:
        return frozenset(self._contacts)

    def clear(self) -> None:
        self._contacts.clear()

    def rect_for(self, record: DisplayRecord) -> pygame.Rect:
        ref = parse_entity(record.name)
        width, height = self.sizes.get(ref.kind if ref else None, (0, 0))
        rect = pygame.Rect(0, 0, int(width * record.scale), int(height * record.scale))
        rect.center = (int(record.position[0]), int(record.position[1]))
        return rect

    def step(self, records: Iterable[DisplayRecord]) -> list[CollisionEvent]:
        collidable = [r for r in records if r.collidable]
        rects = {r.name: self.rect_for(r) for r in collidable}

        current = set()
        for a, b in combinations(collidable, 2):
            if rects[a.name].colliderect(rects[b.name]):
                current.add(tuple(sorted((a.name, b.name))))

        events = [CollisionEvent.begin(*pair) for pair in sorted(current - self._contacts)]
        events += [CollisionEvent.end(*pair) for pair in sorted(self._contacts - current)]
        self._contacts = current
        return events
