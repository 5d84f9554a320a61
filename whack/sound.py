"""Sound effects requested by the round."""

from __future__ import annotations

import os

import pygame

from .constants import FORCEFIELD_SFX_PATH, IMPACT_SFX_PATH, SFX_VOLUME
from .models import Sfx

SFX_PATHS = {
    Sfx.IMPACT: IMPACT_SFX_PATH,
    Sfx.MISS: FORCEFIELD_SFX_PATH,
}


class SoundEffect:
    """Loads one sound per ``Sfx`` and plays them on request (fire-and-forget)."""

    def __init__(self, volume: float = SFX_VOLUME) -> None:
        self.muted = False
        self.sfx_volume = volume
        self.sounds: dict[Sfx, pygame.mixer.Sound] = {}

        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio unavailable: {e}")
            return

        for sfx, path in SFX_PATHS.items():
            if not os.path.exists(path):
                print(f"Sound effect file not found: {path}")
                continue
            try:
                sound = pygame.mixer.Sound(path)
                sound.set_volume(self.sfx_volume)
                self.sounds[sfx] = sound
            except pygame.error as e:
                print(f"Failed to load {sfx.value} sound effect: {e}")

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    def play(self, sfx: Sfx) -> None:
        sound = self.sounds.get(sfx)
        if sound and not self.muted:
            sound.play()

    def set_sfx_volume(self, volume: float) -> None:
        """Set sound effects volume (0.0 to 1.0)"""
        self.sfx_volume = max(0.0, min(1.0, volume))  # Clamp between 0 and 1
        for sound in self.sounds.values():
            sound.set_volume(self.sfx_volume)
