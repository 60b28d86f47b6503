# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, state transitions, spawns and
# pickups emit a timestamped trace to logs/debug.txt. Disabled by default for
# normal play sessions.
LOG_ENABLED = bool(int(os.getenv("SKYHOP_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Optional fixed seed for the platform spawner (reproducible runs)
_seed = os.getenv("SKYHOP_SEED")
SEED = int(_seed) if _seed else None

# Starting skin id (unknown ids fall back to DEFAULT_SKIN)
START_SKIN = os.getenv("SKYHOP_SKIN", "red")

# Visible area
WIDTH = 400
HEIGHT = 600

# Frames per second (physics is per tick, not per second)
FPS = 60

# Player
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 40
GRAVITY = 0.4
JUMP_POWER = -12          # bounce impulse, negative = upward
MOVE_SPEED = 5
MAX_HEIGHT = 100          # ceiling clamp for player.y
PLAYER_START_OFFSET = 150 # start height above the bottom edge

# World scroll: entities shift while the player is above this fraction of HEIGHT
SCROLL_BAND = 0.6

# Platforms
PLATFORM_WIDTH = 60
PLATFORM_HEIGHT = 12
PLATFORM_SPACING_MIN = 70
PLATFORM_SPACING_VARIANCE = 30
PLATFORM_INITIAL_COUNT = 8
FIRST_PLATFORM_OFFSET = 50     # first platform sits this far above the bottom
FALLBACK_PLATFORM_OFFSET = 100 # used when no previous platform exists

# Scoring / lives
POINTS_PER_PLATFORM = 10
INITIAL_LIVES = 3

# Collectibles
COLLECTIBLE_SIZE = 25
COLLECTIBLE_LIFT = 30          # spawn height above the platform top
SHIELD_SPAWN_CHANCE = 0.10
SHIELD_DURATION_MS = 5000
EXTRA_LIFE_SPAWN_CHANCE = 0.05

# Enemies
ENEMY_WIDTH = 35
ENEMY_HEIGHT = 35
ENEMY_SPAWN_CHANCE = 0.15
ENEMY_MOVE_SPEED = 2
ENEMY_SHOOT_INTERVAL_MS = 2000
ENEMY_LIFT = 80                # spawn height above the platform top
ENEMY_CULL_MARGIN = 100        # enemies survive this far below the bottom

# Projectiles
PROJECTILE_WIDTH = 10
PROJECTILE_HEIGHT = 10
PROJECTILE_SPEED = 4

# Colours (RGB)
COLOR_BG = (26, 26, 46)
COLOR_TEXT = (255, 255, 255)
COLOR_PLATFORM = (76, 175, 80)
COLOR_PLATFORM_BORDER = (46, 125, 50)
COLOR_SHIELD = (52, 152, 219)
COLOR_EXTRA_LIFE = (231, 76, 60)
COLOR_ENEMY = (231, 76, 60)
COLOR_ENEMY_BORDER = (192, 57, 43)
COLOR_PROJECTILE = (255, 71, 87)

# Settings dictionary read by the runtime each frame
settings_data = {
    "FPS": FPS,
    "SHIELD_SPAWN_CHANCE": SHIELD_SPAWN_CHANCE,
    "EXTRA_LIFE_SPAWN_CHANCE": EXTRA_LIFE_SPAWN_CHANCE,
    "ENEMY_SPAWN_CHANCE": ENEMY_SPAWN_CHANCE,
}
