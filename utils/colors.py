"""
Color palette for Maze Dash
"""

# Background colors
COLOR_BG = (26, 26, 46)           # Main background
COLOR_PANEL_BG = (15, 20, 40)     # HUD panel background

# Map colors
COLOR_WALL = (22, 33, 62)         # Wall fill
COLOR_WALL_EDGE = (15, 52, 96)    # Wall outline
COLOR_ITEM = (255, 153, 0)        # Collectible item

# UI colors
COLOR_TEXT = (255, 255, 255)              # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 215, 0)      # Highlighted text
COLOR_TEXT_DIM = (157, 78, 221)           # Dimmed text
COLOR_TEXT_DANGER = (233, 69, 96)         # Warnings
COLOR_MENU_SELECTION = (121, 14, 203)     # Selected menu item
COLOR_MENU_OVERLAY = (0, 0, 0, 180)       # Overlay (with alpha)

# Entity colors
COLOR_PLAYER = (121, 14, 203)     # Player
COLOR_PROJECTILE = (255, 215, 0)  # Stun projectile
COLOR_ENEMY = (233, 69, 96)       # Roaming enemy
COLOR_ENEMY_FROZEN = (0, 217, 255)  # Enemy hit by the stun gun
COLOR_ENEMY_EYES = (255, 255, 255)

# Particle palettes
TRAIL_COLORS = [
    (121, 14, 203),   # #790ECB
    (157, 78, 221),   # #9D4EDD
    (199, 125, 255),  # #C77DFF
]

EXPLOSION_COLORS = [
    (233, 69, 96),    # #e94560
    (255, 107, 107),  # #FF6B6B
    (255, 153, 0),    # #FF9900
]

SPARKLE_COLORS = [
    (255, 215, 0),    # #FFD700
    (255, 255, 0),    # #FFFF00
    (255, 255, 255),  # #FFFFFF
]

CONFETTI_COLORS = [
    (121, 14, 203),   # #790ECB
    (255, 107, 107),  # #FF6B6B
    (255, 215, 0),    # #FFD700
    (0, 217, 255),    # #00D9FF
    (127, 255, 0),    # #7FFF00
]
