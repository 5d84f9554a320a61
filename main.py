"""Game entry point"""

from __future__ import annotations

import math
import os

import pygame

from whack.constants import *
from whack.logger import GameLogger
from whack.models import DisplayRecord, EntityKind, Point, parse_entity
from whack.overlap import OverlapTracker
from whack.round import FrameInput, FrameOutput, RoundState
from whack.sound import SoundEffect
from ui import HUD, GameOverScreen, to_screen

SPRITE_PATHS = {
    EntityKind.PLAYER: HAMMER_PATH,
    EntityKind.ENEMY: ENEMY_SPRITE_PATH,
    EntityKind.HOLE: HOLE_SPRITE_PATH,
}


class Game:
    """
    Host for one round at a time: samples input, steps the round, feeds
    overlaps back in as collision events, plays sounds and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and start the first round."""
        pygame.init()
        pygame.display.set_caption("Whack-a-Ninja")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.sprites: dict[EntityKind, pygame.Surface] = {}
        self.load_sprites()
        self.logger = GameLogger(LOG_FILE)
        self.sound = SoundEffect()

        self.hud = HUD(self.font)
        self.game_over_screen = GameOverScreen()
        self.paused = False
        self.reset_game()

    def reset_game(self) -> None:
        """Start a fresh round with a clean overlap state."""
        self.round = RoundState.new(logger=self.logger)
        self.tracker = OverlapTracker()
        self.pending_events = []
        self.output: FrameOutput | None = None
        pygame.mouse.set_visible(False)         # Hide system cursor for hammer display

    # --------------------------------- Setup ----------------------------------------

    def load_sprites(self) -> None:
        """Load entity sprites; missing files fall back to plain shapes."""
        for kind, path in SPRITE_PATHS.items():
            if not os.path.exists(path):
                print(f"Sprite not found: {path}")
                continue
            try:
                self.sprites[kind] = pygame.image.load(path).convert_alpha()
            except pygame.error as e:
                print(f"Failed to load sprite {path}: {e}")

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, step the round, render; exits on quit request."""
        running = True
        while running:
            delta = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and self.round.game_over:
                        self.reset_game()
                    elif event.key == pygame.K_m:
                        self.sound.toggle_mute()
                    elif event.key == pygame.K_p:
                        self.paused = not self.paused

            if not self.paused or self.output is None:
                self.step(delta)
            self.draw()

        pygame.quit()

    def step(self, delta: float) -> None:
        frame = FrameInput(
            delta=delta,
            cursor=self.cursor_world(),
            pressed=pygame.mouse.get_pressed()[0],
            collisions=self.pending_events,
        )
        self.output = self.round.update(frame)
        # Overlaps found now are delivered with the next frame's input
        self.pending_events = self.tracker.step(self.output.records)
        for sfx in self.output.sounds:
            self.sound.play(sfx)

    # --------------------------------- Input ----------------------------------------

    def cursor_world(self) -> Point | None:
        """Mouse position in world coordinates, or None when the window has no pointer."""
        if not pygame.mouse.get_focused():
            return None
        x, y = pygame.mouse.get_pos()
        width, height = self.screen.get_size()
        return float(x - width / 2), float(height / 2 - y)

    # --------------------------------- Rendering ------------------------------------

    def draw_record(self, record: DisplayRecord) -> None:
        ref = parse_entity(record.name)
        center = to_screen(record.position, *self.screen.get_size())
        sprite = self.sprites.get(ref.kind) if ref else None

        if sprite is not None:
            w, h = sprite.get_size()
            image = pygame.transform.scale(sprite, (int(w * record.scale), int(h * record.scale)))
            image = pygame.transform.rotate(image, math.degrees(record.rotation))
            self.screen.blit(image, image.get_rect(center=center))
            return

        if ref is None:
            return
        if ref.kind is EntityKind.HOLE:
            w, h = (int(v * record.scale) for v in HOLE_SIZE)
            rect = pygame.Rect(0, 0, w, h // 2)
            rect.center = center
            pygame.draw.ellipse(self.screen, HOLE_RING, rect.inflate(12, 12))
            pygame.draw.ellipse(self.screen, HOLE_COLOR, rect)
        elif ref.kind is EntityKind.ENEMY:
            w, h = (int(v * record.scale) for v in ENEMY_SIZE)
            rect = pygame.Rect(0, 0, w, h)
            rect.midbottom = (center[0], center[1] + h // 4)
            pygame.draw.rect(self.screen, ENEMY_COLOR, rect, border_radius=w // 3)
            pygame.draw.rect(self.screen, FLASH_COLOR, rect.inflate(-w // 3, -h + 16).move(0, -h // 4))
        else:
            length = int(HAMMER_SIZE[0] * record.scale)
            # Handle points from the head towards the lower right, tilted by the hammer's rotation
            angle = record.rotation - math.pi / 4
            end = (center[0] + length * math.cos(angle), center[1] - length * math.sin(angle))
            pygame.draw.line(self.screen, HAMMER_COLOR, center, end, 8)
            pygame.draw.circle(self.screen, HAMMER_COLOR, center, length // 4)

    def draw(self) -> None:
        """
        Compose the frame: background → entities by layer → HUD → game over.
        """
        self.screen.fill(BG_COLOR)
        if self.output is not None:
            for record in self.output.records:
                self.draw_record(record)
            self.hud.draw(self.screen, self.output.texts)
            self.game_over_screen.draw(self.screen, self.output.texts)

        if self.paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            self.screen.blit(pause_text, pause_text.get_rect(center=(self.screen.get_width() // 2, 80)))

        pygame.display.flip()


if __name__ == "__main__":
    Game().run()
