"""Fixed spawn slots and the allocator that hands them out to spawners."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Iterator

from .constants import HOLE_LAYER, HOLE_SCALE
from .models import DisplayRecord, EntityKind, EntityRef, Point, hole_name, parse_entity
from .scene import Scene


class HoleState(Enum):
    FREE = "free"
    OCCUPIED = "occupied"


class NoFreeHoleError(RuntimeError):
    """Raised when a hole is requested while every hole is occupied."""


class Hole:
    """A single spawn slot with a fixed position for the whole round."""

    def __init__(self, id: int, pos: Point) -> None:
        self.id = id
        self.pos = pos
        self.state = HoleState.FREE

    @property
    def name(self) -> str:
        return hole_name(self.id)

    @property
    def is_free(self) -> bool:
        return self.state is HoleState.FREE

    def init(self, scene: Scene) -> None:
        scene.add(DisplayRecord(
            name=self.name,
            position=self.pos,
            layer=HOLE_LAYER,
            scale=HOLE_SCALE,
            collidable=True,
        ))

    def draw(self, scene: Scene) -> None:
        # An occupied hole is covered by its enemy, so only free holes can be struck
        scene.update(self.name, collidable=self.is_free)

    def __repr__(self) -> str:
        return f"Hole(id={self.id}, pos={self.pos}, state={self.state.name})"


class HolePool:
    """
    Allocator over the round's holes.

    Spawners call ``occupy`` when they pop up and ``release`` when they go
    away; the pool is the only place hole state changes.
    """

    def __init__(self, positions: Iterable[Point], rng: random.Random | None = None) -> None:
        positions = [tuple(p) for p in positions]
        if len(set(positions)) != len(positions):
            raise ValueError("Hole positions must be unique.")
        self.holes = [Hole(i, pos) for i, pos in enumerate(positions)]
        self.rng = rng or random.Random()

    def __iter__(self) -> Iterator[Hole]:
        return iter(self.holes)

    def __len__(self) -> int:
        return len(self.holes)

    def free_count(self) -> int:
        return sum(1 for hole in self.holes if hole.is_free)

    def occupy(self) -> Point:
        """
        Occupy a free hole chosen uniformly at random.

        Returns
        -------
        Point
            Position of the hole that was taken.

        Raises
        ------
        NoFreeHoleError
            If every hole is already occupied.
        """
        free = [hole for hole in self.holes if hole.is_free]
        if not free:
            raise NoFreeHoleError(f"All {len(self.holes)} holes are occupied.")
        hole = self.rng.choice(free)
        hole.state = HoleState.OCCUPIED
        return hole.pos

    def release(self, pos: Point) -> None:
        """Free the hole at exactly ``pos``; unknown positions are ignored."""
        for hole in self.holes:
            if hole.pos == pos:
                hole.state = HoleState.FREE
                return

    def get(self, index: int) -> Hole | None:
        if 0 <= index < len(self.holes):
            return self.holes[index]
        return None

    def find(self, name: str) -> Hole | None:
        """Resolve a ``hole_<id>`` entity name back to its hole."""
        ref = parse_entity(name)
        if ref is None or ref.kind is not EntityKind.HOLE:
            return None
        return self.get(ref.index)

    def hit(self, target: EntityRef | str) -> bool:
        """
        True when the struck hole exists and is free, i.e. the player hit bare ground.
        """
        if isinstance(target, str):
            hole = self.find(target)
        elif target.kind is EntityKind.HOLE:
            hole = self.get(target.index)
        else:
            hole = None
        return hole is not None and hole.is_free

    def init(self, scene: Scene) -> None:
        for hole in self.holes:
            hole.init(scene)

    def draw(self, scene: Scene) -> None:
        for hole in self.holes:
            hole.draw(scene)
