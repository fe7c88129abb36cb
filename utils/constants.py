"""
Global constants for Maze Dash
"""

# Window
GAME_TITLE = "Maze Dash"
GAME_VERSION = "1.0.0"

# Screen settings
TILE_SIZE = 40
GRID_WIDTH = 20
GRID_HEIGHT = 15
FPS = 60

# HUD panel height
PANEL_H = 60

# Cardinal steps, in the order enemies consider them
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRS = [UP, DOWN, LEFT, RIGHT]

# Movement (frames between moves)
PLAYER_MOVE_DELAY = 8
MOVE_SMOOTHING = 0.25  # Visual interpolation factor per frame

# Player settings
PLAYER_MAX_HEALTH = 3
PLAYER_START_DIRECTION = UP

# Stun gun
PROJECTILE_SPEED = 0.5  # Tiles per frame
PROJECTILE_HIT_RANGE = 0.5  # Half tile, per axis
FREEZE_DURATION = 120  # 2 seconds at 60 FPS

# Score constants
SCORE_ITEM = 100
SCORE_HIT_PENALTY = -50
SCORE_TIME_BONUS_BASE = 1000
SCORE_TIME_BONUS_PER_SECOND = 10

# Particles
MAX_PARTICLES = 500
CONFETTI_DURATION = 60  # Frames of continuous emission
CONFETTI_PER_FRAME = 5
CONFETTI_GRAVITY = 0.3
CONFETTI_LIFE = 200

# Difficulty names
DIFFICULTY_SLOW = 'slow'
DIFFICULTY_NORMAL = 'normal'
DIFFICULTY_FAST = 'fast'

DIFFICULTY_NAMES = [
    DIFFICULTY_SLOW,
    DIFFICULTY_NORMAL,
    DIFFICULTY_FAST,
]

# Save file
SAVE_DIR = "saves"
HIGH_SCORE_FILE = "highscore.json"
