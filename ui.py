"""HUD and Game Over text"""

import pygame

from whack.constants import (
    FONT_NAME, FONT_SIZE_GAME_OVER, GAME_OVER_POS, GAME_OVER_TEXT,
    LIVES_POS, LIVES_TEXT, SCORE_POS, SCORE_TEXT, TEXT_COLOR,
)
from whack.models import Point


def to_screen(pos: Point, width: int, height: int) -> tuple[int, int]:
    """Convert a world position (origin at centre, y up) to pixel coordinates."""
    return int(width / 2 + pos[0]), int(height / 2 - pos[1])


class HUD:
    """Draws the score and lives texts at their world positions."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font

    def draw(self, surf: pygame.Surface, texts: dict[str, str]) -> None:
        width, height = surf.get_size()
        for key, pos in ((SCORE_TEXT, SCORE_POS), (LIVES_TEXT, LIVES_POS)):
            value = texts.get(key)
            if value is None:
                continue
            text_surf = self.font.render(value, True, TEXT_COLOR)
            surf.blit(text_surf, text_surf.get_rect(center=to_screen(pos, width, height)))


class GameOverScreen:
    """Game over message, shown once the round has run out of lives."""

    def __init__(self, font_big: pygame.font.Font | None = None):
        self.font_big = font_big or pygame.font.Font(FONT_NAME, FONT_SIZE_GAME_OVER)
        self.font_small = pygame.font.Font(FONT_NAME, 20)

    def draw(self, surf: pygame.Surface, texts: dict[str, str]) -> None:
        """
        Draw the terminal message if the round published one.
        """
        message = texts.get(GAME_OVER_TEXT)
        if message is None:
            return
        width, height = surf.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surf.blit(overlay, (0, 0))

        text_surf = self.font_big.render(message, True, (255, 100, 100))
        surf.blit(text_surf, text_surf.get_rect(center=to_screen(GAME_OVER_POS, width, height)))

        hint = self.font_small.render("Press R to restart or ESC to quit", True, (150, 150, 150))
        hint_pos = to_screen((GAME_OVER_POS[0], GAME_OVER_POS[1] - 80), width, height)
        surf.blit(hint, hint.get_rect(center=hint_pos))
