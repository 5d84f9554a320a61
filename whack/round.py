"""Round state and the per-frame update that drives every other component."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .collisions import CollisionResolver
from .constants import (
    ENEMY_COUNT,
    GAME_OVER_MESSAGE,
    GAME_OVER_TEXT,
    HOLE_POSITIONS,
    INITIAL_LIVES,
    LIVES_TEXT,
    SCORE_TEXT,
    TIMER_MAX_S,
    TIMER_MIN_S,
)
from .hammer import Hammer
from .holes import HolePool
from .logger import GameLogger
from .models import CollisionEvent, DisplayRecord, Point, Sfx, enemy_name
from .scene import Scene
from .spawner import Spawner


@dataclass
class FrameInput:
    """
    What the host samples once per frame.

    Attributes
    ----------
    delta : float
        Seconds since the previous frame.
    cursor : Point | None
        Pointer position in world coordinates, None when unknown.
    pressed : bool
        Whether the primary button is down.
    collisions : Sequence[CollisionEvent]
        Every collision event reported since the previous frame.
    """
    delta: float
    cursor: Point | None = None
    pressed: bool = False
    collisions: Sequence[CollisionEvent] = ()


@dataclass
class FrameOutput:
    """What the host renders and plays after a frame."""
    records: list[DisplayRecord]
    texts: dict[str, str]
    sounds: list[Sfx] = field(default_factory=list)
    game_over: bool = False


class RoundState:
    """
    Owns the hammer, the holes, the spawners, score and lives.

    A round ends when lives reach zero; from then on ``update`` only returns
    the frozen scene plus the game-over message.
    """

    def __init__(
        self,
        hammer: Hammer,
        holes: HolePool,
        spawners: Iterable[Spawner],
        lives: int = INITIAL_LIVES,
        logger: GameLogger | None = None,
    ) -> None:
        self.hammer = hammer
        self.holes = holes
        self.spawners = list(spawners)
        if len(self.spawners) > len(self.holes):
            raise ValueError(
                f"{len(self.spawners)} spawners cannot share {len(self.holes)} holes."
            )
        if lives < 0:
            raise ValueError(f"Lives must be non-negative, got {lives}.")
        self._by_name = {spawner.name: spawner for spawner in self.spawners}
        self.score = 0
        self.lives = lives
        self.logger = logger
        self.resolver = CollisionResolver(logger)
        self.scene = Scene()
        self.texts: dict[str, str] = {}

        self.hammer.init(self.scene)
        self.holes.init(self.scene)
        self.publish_texts()

    @classmethod
    def new(
        cls,
        hole_positions: Iterable[Point] = HOLE_POSITIONS,
        enemy_count: int = ENEMY_COUNT,
        lives: int = INITIAL_LIVES,
        timer_range: tuple[float, float] = (TIMER_MIN_S, TIMER_MAX_S),
        rng: random.Random | None = None,
        logger: GameLogger | None = None,
    ) -> RoundState:
        """Build a round from configuration, sharing one random source."""
        rng = rng or random.Random()
        holes = HolePool(hole_positions, rng=rng)
        spawners = [
            Spawner(enemy_name(i), rng=rng, timer_range=timer_range)
            for i in range(enemy_count)
        ]
        return cls(Hammer(), holes, spawners, lives=lives, logger=logger)

    @property
    def game_over(self) -> bool:
        return self.lives == 0

    def find_spawner(self, name: str) -> Spawner | None:
        return self._by_name.get(name)

    def publish_texts(self) -> None:
        self.texts[SCORE_TEXT] = f"Score: {self.score}"
        self.texts[LIVES_TEXT] = f"Lives: {self.lives}"

    # ------------------------------- Frame ---------------------------------------------

    def update(self, frame: FrameInput) -> FrameOutput:
        """
        Run one frame: input, timers, display state, collisions, texts.

        Parameters
        ----------
        frame : FrameInput
            Input sampled by the host for this frame

        Returns
        -------
        FrameOutput
            Display records, sound requests and texts for the host
        """
        if self.game_over:
            self._announce_game_over()
            return self._output([])

        if frame.cursor is not None:
            self.hammer.set_position(frame.cursor)
        self.hammer.set_pressed(frame.pressed)

        for spawner in self.spawners:
            spawner.tick(frame.delta, self.holes)

        for spawner in self.spawners:
            spawner.draw(self.scene)
        self.holes.draw(self.scene)
        self.hammer.draw(self.scene)

        sounds = self.resolver.resolve(self, frame.collisions)

        self.publish_texts()
        return self._output(sounds)

    def _announce_game_over(self) -> None:
        if GAME_OVER_TEXT in self.texts:
            return
        self.texts[GAME_OVER_TEXT] = GAME_OVER_MESSAGE
        if self.logger:
            self.logger.log_game_over(self.score)

    def _output(self, sounds: list[Sfx]) -> FrameOutput:
        return FrameOutput(
            records=self.scene.snapshot(),
            texts=dict(self.texts),
            sounds=sounds,
            game_over=self.game_over,
        )
