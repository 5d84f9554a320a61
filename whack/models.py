"""Lightweight data models used across the game."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .constants import ENEMY_PREFIX, HOLE_PREFIX, PLAYER_NAME

Point = tuple[float, float]

_INDEXED_NAME = re.compile(r"^(hole|enemy)_(0|[1-9][0-9]*)$")


class EntityKind(Enum):
    PLAYER = "player"
    HOLE = "hole"
    ENEMY = "enemy"


@dataclass(frozen=True)
class EntityRef:
    """
    Typed reference to a named entity.

    Attributes
    ----------
    kind : EntityKind
        Which family of entity the name belongs to.
    index : int | None
        Slot index for holes and enemies, ``None`` for the player.
    """
    kind: EntityKind
    index: int | None = None

    @property
    def name(self) -> str:
        if self.kind is EntityKind.PLAYER:
            return PLAYER_NAME
        prefix = HOLE_PREFIX if self.kind is EntityKind.HOLE else ENEMY_PREFIX
        return f"{prefix}{self.index}"


def hole_name(index: int) -> str:
    return f"{HOLE_PREFIX}{index}"


def enemy_name(index: int) -> str:
    return f"{ENEMY_PREFIX}{index}"


def parse_entity(name: str) -> EntityRef | None:
    """
    Parse an entity name into an ``EntityRef``.

    Only the exact spellings ``player``, ``hole_<i>`` and ``enemy_<i>`` are
    recognised (no leading zeros, no signs). Anything else returns ``None``.
    """
    if name == PLAYER_NAME:
        return EntityRef(EntityKind.PLAYER)
    match = _INDEXED_NAME.match(name)
    if match is None:
        return None
    return EntityRef(EntityKind(match.group(1)), int(match.group(2)))


class Sfx(Enum):
    """Sound effects the core can ask the host to play."""
    IMPACT = "impact"
    MISS = "forcefield"


@dataclass(frozen=True)
class CollisionEvent:
    """
    One overlap notification between two named entities.

    Attributes
    ----------
    pair : tuple[str, str]
        Entity names, in no particular order.
    is_end : bool
        True when the overlap stopped, False when it started.
    """
    pair: tuple[str, str]
    is_end: bool = False

    @classmethod
    def begin(cls, a: str, b: str) -> CollisionEvent:
        return cls((a, b), is_end=False)

    @classmethod
    def end(cls, a: str, b: str) -> CollisionEvent:
        return cls((a, b), is_end=True)

    def other_than(self, name: str) -> str | None:
        """Return the partner of ``name`` in this pair, or None if it is not in it."""
        first, second = self.pair
        if first == name:
            return second
        if second == name:
            return first
        return None


@dataclass(frozen=True)
class DisplayRecord:
    """
    Everything the renderer needs to draw one entity this frame.

    Attributes
    ----------
    name : str
        Entity name, also used for collision pairs.
    position : Point
        World position (origin at screen centre, y up).
    layer : float
        Depth; higher layers are drawn on top.
    scale : float
        Sprite scale factor.
    rotation : float
        Orientation in radians, counter-clockwise.
    collidable : bool
        Whether the host should report overlaps for this entity.
    """
    name: str
    position: Point
    layer: float
    scale: float
    rotation: float = 0.0
    collidable: bool = False
