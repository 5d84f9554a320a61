"""Tests for the game-over overlay."""

from __future__ import annotations

import pygame
import pytest

from ui import GameOverScreen


@pytest.fixture(autouse=True)
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


class TestGameOverScreen:
    """Test suite for GameOverScreen."""

    def test_fonts_built_once(self, monkeypatch):
        """Drawing reuses the fonts made at construction."""
        screen = GameOverScreen()
        assert screen.font_small is not None

        def no_new_fonts(*args, **kwargs):
            raise AssertionError("font created while drawing")

        monkeypatch.setattr(pygame.font, "Font", no_new_fonts)
        surf = pygame.Surface((1280, 720))
        for _ in range(3):
            screen.draw(surf, {"game_over": "GAME OVER: The UN condemn you"})

    def test_no_message_draws_nothing(self):
        """Without the game-over text the surface is untouched."""
        surf = pygame.Surface((64, 64))
        surf.fill((1, 2, 3))
        GameOverScreen().draw(surf, {"score": "Score: 0"})
        assert surf.get_at((10, 10))[:3] == (1, 2, 3)
