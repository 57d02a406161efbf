"""Game configuration constants for Star Catcher."""

from __future__ import annotations

import os

# Logical playfield (presentation scaling happens in the renderer)
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "Star Catcher"

# Basket
BASKET_WIDTH = 100
BASKET_HEIGHT = 30
BASKET_Y = FIELD_HEIGHT - BASKET_HEIGHT - 10
TRAIL_LENGTH = 10

# Basket physics (per tick)
EASING = 0.15
EASING_SNAP = EASING * 1.5  # used while more than EASING_SNAP_DISTANCE away
EASING_SNAP_DISTANCE = 5.0
ACCELERATION = 2.5 * 1.2
DECELERATION = 0.2
MAX_SPEED = 25.0
BOUNCE = -0.5
DRAG_MOMENTUM = 0.2

# Catch animation (ms, decremented once per tick)
CATCH_ANIMATION_MS = 200
CATCH_ANIMATION_STEP = 16

# Stars
STAR_SIZE = 20
SPAWN_CHANCE = 0.02
LEVEL_UP_BURST = 5

# Difficulty
INITIAL_FALL_SPEED = 2
LEVEL_INTERVAL_MS = 15000

# Particles
PARTICLE_COUNT = 10
PARTICLE_SPEED_MIN = 2.0
PARTICLE_SPEED_MAX = 4.0
PARTICLE_GRAVITY = 0.1
PARTICLE_DECAY = 0.02
PARTICLE_RADIUS = 3
PARTICLE_HUE_MIN = 30.0  # yellow to orange band, degrees
PARTICLE_HUE_SPAN = 60.0

# Session
WINNING_SCORE = 200

# Background decorations
SKY_SPECK_COUNT = 70
SKY_SEED = 2024

# Palette (warm night sky)
COL_BG_TOP = (8, 10, 32)
COL_BG_BOTTOM = (36, 22, 64)
COL_NEBULA = (120, 90, 200)
COL_SPECK = (225, 225, 245)
STAR_COLOR = (255, 255, 0)
STAR_GLOW = (255, 255, 0)
BASKET_TOP = (139, 69, 19)
BASKET_BOTTOM = (101, 67, 33)
BASKET_RIM = (160, 82, 45)
TRAIL_COLOR = (255, 220, 150)
HUD_COLOR = (240, 240, 240)
HUD_DIM = (190, 190, 205)
OVERLAY_ALPHA = int(0.7 * 255)
BUTTON_COLOR = (70, 130, 180)
BUTTON_HOVER = (95, 160, 215)
LETTERBOX_COLOR = (0, 0, 0)

# Restart button (logical coordinates, centred at 50% / 60%)
BUTTON_WIDTH = 200
BUTTON_HEIGHT = 48

# Persistence
HIGH_SCORE_FILE = os.environ.get(
    "STAR_CATCHER_HIGHSCORE",
    os.path.join(os.path.expanduser("~"), ".star_catcher", "highscore.json"),
)
