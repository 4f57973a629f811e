"""
Fixed game constants for Power Pong.

Everything here is read-only configuration: the simulation core, the menus
and the pygame shell all read from this module.
"""

from __future__ import annotations

# Board
MAX_X = 600
MAX_Y = 600

# Base entity sizes (entities carry a scale factor on top of these)
BASE_PADDLE_HEIGHT = 80
BASE_PADDLE_WIDTH = 10
BASE_BALL_SIZE = 14
BASE_PICKUP_SIZE = 65

# Paddles
AI_PADDLE_X = 25
PLAYER_PADDLE_X = 565
PADDLE_START_Y = 100
PADDLE_SPEED = 5
BOOSTED_PADDLE_SPEED = 10
EXPANDED_PADDLE_SIZE = 2

# Goal lines: past these x values the ball is in a paddle's contact zone
AI_GOAL_LINE = 41
PLAYER_GOAL_LINE = 559

# Past these x values an untouched ball counts as a point
AI_SCORE_LINE = 38
PLAYER_SCORE_LINE = 562

# Past these x values the ball is taken out of play and respawned
RESPAWN_MARGIN = 30
RESPAWN_MEAN = 200.0
RESPAWN_SPREAD = 50.0
RESPAWN_BAND = (100.0, 300.0)

# Ball
BALL_START = (200.0, 198.0)
BALL_SPEED = 3.5
BALL_START_ANGLE = 1.0
FAST_BALL_FACTOR = 4.0

# Power-up pickup box
PICKUP_START = (400.0, 200.0)
PICKUP_SPEED = 0.4
PICKUP_BOUNDS = (100, 400)
PICKUP_SPAWN_CHANCE = 0.001

# Rules
WIN_SCORE = 7
POWER_UP_DURATION = 600

# Deterministic RNG
RNG_MULTIPLIER = 1103515245
RNG_INCREMENT = 12345
RNG_MODULUS = 0x80000000
SEED_STRIDE = 111
SEED_WRAP = 100_000_000_000

# Menu buttons, shared by all three menus: (left, right) and (top, bottom)
BUTTON_X_RANGE = (173, 443)
BUTTON_Y_RANGES = (
    (347, 407),
    (430, 490),
    (512, 574),
)

# Shell
TICK_MS = 5
FPS = 1000 // TICK_MS
WINDOW_SIZE = (MAX_X, MAX_Y)

BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
DIM = (140, 140, 140)
HIGHLIGHT = (255, 215, 0)
BUTTON_FILL = (30, 30, 30)
BUTTON_BORDER = (200, 200, 200)
