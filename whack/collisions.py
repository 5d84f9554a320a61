"""Turns the frame's collision events into score, lives and hit effects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .constants import PLAYER_NAME
from .logger import GameLogger
from .models import CollisionEvent, EntityKind, EntityRef, Sfx, parse_entity

if TYPE_CHECKING:
    from .round import RoundState


def player_hit(event: CollisionEvent) -> EntityRef | None:
    """
    Return what the hammer struck in ``event``.

    End-of-overlap events, pairs without the player, and names that do not
    follow the entity naming convention all give None.
    """
    if event.is_end:
        return None
    other = event.other_than(PLAYER_NAME)
    if other is None:
        return None
    return parse_entity(other)


class CollisionResolver:
    """
    Applies collision events to a round.

    Enemy and hole events are handled independently: a strike that overlaps
    both an enemy and a free hole in the same frame scores and costs a life.
    """

    def __init__(self, logger: GameLogger | None = None) -> None:
        self.logger = logger

    def resolve(self, state: RoundState, events: Iterable[CollisionEvent]) -> list[Sfx]:
        """
        Apply every event in order.

        Parameters
        ----------
        state : RoundState
            Round to mutate
        events : Iterable[CollisionEvent]
            All collision events of the frame

        Returns
        -------
        list[Sfx]
            Sound effects to play, in the order they were triggered
        """
        sounds = []
        for event in events:
            sfx = self.apply(state, event)
            if sfx is not None:
                sounds.append(sfx)
        return sounds

    def apply(self, state: RoundState, event: CollisionEvent) -> Sfx | None:
        target = player_hit(event)
        if target is None:
            return None
        if target.kind is EntityKind.ENEMY:
            return self._hit_enemy(state, target)
        if target.kind is EntityKind.HOLE:
            return self._hit_hole(state, target)
        return None

    def _hit_enemy(self, state: RoundState, target: EntityRef) -> Sfx | None:
        spawner = state.find_spawner(target.name)
        if spawner is None or not spawner.hit(state.holes):
            return None
        state.score += 1
        if self.logger:
            self.logger.log_hit(target.name, state.score)
        return Sfx.IMPACT

    def _hit_hole(self, state: RoundState, target: EntityRef) -> Sfx | None:
        if state.lives == 0 or not state.holes.hit(target):
            return None
        state.lives -= 1
        if self.logger:
            self.logger.log_miss(target.name, state.lives)
        return Sfx.MISS
