"""Per-enemy spawner: pops its enemy in and out of holes on a random timer."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .constants import ENEMY_LAYER, ENEMY_SCALE, TIMER_MAX_S, TIMER_MIN_S
from .holes import HolePool
from .models import DisplayRecord, Point
from .scene import Scene
from .timer import Timer


@dataclass(frozen=True)
class Hidden:
    """Enemy is underground and not part of the scene."""


@dataclass(frozen=True)
class Showing:
    """Enemy is up at ``position``, holding the hole there."""
    position: Point


SpawnerState = Hidden | Showing


class Spawner:
    """
    Owns one enemy and toggles it between hidden and showing.

    Every reset draws a new countdown from ``timer_range`` so the next toggle
    comes at an unpredictable moment. A hit sends the enemy back down but keeps
    the running countdown.
    """

    def __init__(
        self,
        name: str,
        rng: random.Random | None = None,
        timer_range: tuple[float, float] = (TIMER_MIN_S, TIMER_MAX_S),
    ) -> None:
        low, high = timer_range
        if not 0 < low < high:
            raise ValueError(f"Invalid timer range {timer_range!r}.")
        self.name = name
        self.rng = rng or random.Random()
        self.timer_range = timer_range
        self.state: SpawnerState = Hidden()
        self.timer = Timer(self._draw_duration())

    def _draw_duration(self) -> float:
        return self.rng.uniform(*self.timer_range)

    @property
    def showing(self) -> bool:
        return isinstance(self.state, Showing)

    # ------------------------------- Update & State ----------------------------------

    def tick(self, delta: float, pool: HolePool) -> bool:
        """
        Advance the countdown and reset when it runs out.

        Returns
        -------
        bool
            True if the timer expired this frame and the spawner toggled.
        """
        if self.timer.tick(delta).just_finished():
            self.reset(pool)
            return True
        return False

    def reset(self, pool: HolePool) -> None:
        if isinstance(self.state, Showing):
            pool.release(self.state.position)
            self.state = Hidden()
        else:
            self.state = Showing(pool.occupy())
        self.timer = Timer(self._draw_duration())

    def hit(self, pool: HolePool) -> bool:
        """Knock the enemy down; False if it was already hidden."""
        if not isinstance(self.state, Showing):
            return False
        pool.release(self.state.position)
        self.state = Hidden()
        return True

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, scene: Scene) -> None:
        if isinstance(self.state, Showing):
            scene.add(DisplayRecord(
                name=self.name,
                position=self.state.position,
                layer=ENEMY_LAYER,
                scale=ENEMY_SCALE,
                collidable=True,
            ))
        else:
            scene.remove(self.name)

    def __repr__(self) -> str:
        return f"Spawner(name={self.name!r}, state={self.state!r}, remaining={self.timer.remaining:.2f})"
