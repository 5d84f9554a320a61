"""The player's hammer: follows the cursor and strikes on the press edge."""

from __future__ import annotations

from enum import Enum

from .constants import EAST, HAMMER_LAYER, HAMMER_SCALE, NORTH_EAST, PLAYER_NAME
from .models import DisplayRecord, Point
from .scene import Scene


class HammerState(Enum):
    HOLD = "hold"
    HIT = "hit"
    PRESSED = "pressed"


# (state, pressed) -> next state; pairs not listed keep the current state
_TRANSITIONS = {
    (HammerState.HOLD, True): HammerState.HIT,
    (HammerState.HIT, False): HammerState.HOLD,
    (HammerState.HIT, True): HammerState.PRESSED,
    (HammerState.PRESSED, False): HammerState.HOLD,
}


class Hammer:
    """
    Represents the hammer the player swings.

    Lifecycle:
    - HOLD:     button up, hammer resting, cannot strike.
    - HIT:      first frame the button is down; the only frame it collides.
    - PRESSED:  button still held after the strike; inert until released.
    """

    name = PLAYER_NAME

    def __init__(self, position: Point = (0.0, 0.0)) -> None:
        self.position = position
        self.state = HammerState.HOLD

    def set_position(self, position: Point) -> None:
        self.position = position

    def set_pressed(self, pressed: bool) -> None:
        self.state = _TRANSITIONS.get((self.state, pressed), self.state)

    @property
    def striking(self) -> bool:
        return self.state is HammerState.HIT

    @property
    def rotation(self) -> float:
        return EAST if self.state is HammerState.HOLD else NORTH_EAST

    # ------------------------------- Rendering ---------------------------------------

    def record(self) -> DisplayRecord:
        return DisplayRecord(
            name=self.name,
            position=self.position,
            layer=HAMMER_LAYER,
            scale=HAMMER_SCALE,
            rotation=self.rotation,
            collidable=self.striking,
        )

    def init(self, scene: Scene) -> None:
        scene.add(self.record())

    def draw(self, scene: Scene) -> None:
        scene.update(
            self.name,
            position=self.position,
            rotation=self.rotation,
            collidable=self.striking,
        )
