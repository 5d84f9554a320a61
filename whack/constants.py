"""
Screen dimensions, colors, font sizes, round tuning knobs, per-entity display
settings, asset paths, and logging configuration.

World coordinates put the origin at the screen centre with y pointing up.
"""

import math
import os

WIDTH, HEIGHT = 1280, 720
FPS = 60
BG_COLOR = (25, 28, 33)
TEXT_COLOR = (235, 235, 235)
HOLE_COLOR = (60, 65, 75)
HOLE_RING = (30, 33, 40)
ENEMY_COLOR = (40, 40, 48)
HAMMER_COLOR = (170, 120, 70)
FLASH_COLOR = (255, 235, 90)
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_MEDIUM = 24
FONT_SIZE_GAME_OVER = 90

# Round Settings
INITIAL_LIVES = 3
ENEMY_COUNT = 4
TIMER_MIN_S = 1.0                  # Spawner countdown is drawn from [min, max)
TIMER_MAX_S = 3.0

HOLE_POSITIONS = [
    (-300.0, 200.0),
    (0.0, 200.0),
    (300.0, 200.0),
    (-150.0, 0.0),
    (150.0, 0.0),
]

# Entity names (collision pairs are matched on these exact strings)
PLAYER_NAME = "player"
HOLE_PREFIX = "hole_"
ENEMY_PREFIX = "enemy_"

# Display settings: layer decides draw order, higher is on top
HOLE_LAYER, HOLE_SCALE = 1.0, 0.5
ENEMY_LAYER, ENEMY_SCALE = 2.0, 0.5
HAMMER_LAYER, HAMMER_SCALE = 3.0, 0.6

EAST = 0.0
NORTH_EAST = math.pi / 4

# Collision box size of each sprite before scaling (pixels)
HOLE_SIZE = (200, 160)
ENEMY_SIZE = (180, 220)
HAMMER_SIZE = (120, 120)

# Text entities
SCORE_TEXT = "score"
LIVES_TEXT = "lives"
GAME_OVER_TEXT = "game_over"
SCORE_POS = (550.0, 320.0)
LIVES_POS = (-550.0, 320.0)
GAME_OVER_POS = (0.0, -200.0)
GAME_OVER_MESSAGE = "GAME OVER: The UN condemn you"

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
HAMMER_PATH = os.path.join(ASSETS_DIR, "hammer.png")
ENEMY_SPRITE_PATH = os.path.join(ASSETS_DIR, "ninja.png")
HOLE_SPRITE_PATH = os.path.join(ASSETS_DIR, "hole.png")
IMPACT_SFX_PATH = os.path.join(ASSETS_DIR, "impact.wav")
FORCEFIELD_SFX_PATH = os.path.join(ASSETS_DIR, "forcefield.wav")
SFX_VOLUME = 0.2
