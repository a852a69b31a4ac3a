# Game Configuration Constants

import os

# Screen dimensions
SCREEN_W = 1024
SCREEN_H = 700
FPS = 60

# Match defaults
DEFAULT_DIFFICULTY = "medium"
DIFFICULTIES = ("easy", "medium", "hard")

# Logging
LOG_LEVEL = os.environ.get("TANKS_LOG_LEVEL", "INFO")

# On-screen joystick and fire button
TOUCH_CONTROLS = os.environ.get("TANKS_TOUCH_CONTROLS", "0") == "1"

# Colors (battlefield palette)
PALETTE = {
    "ground": (138, 155, 86),           # Military green
    "grid": (120, 136, 74),
    "wall": (85, 85, 85),
    "rock": (70, 70, 70),
    "bush": (30, 80, 30),
    "player": (60, 120, 60),
    "player_turret": (136, 0, 0),
    "enemy": (150, 60, 50),
    "enemy_hard": (110, 40, 110),
    "enemy_turret": (85, 85, 85),
    "bullet": (255, 225, 0),
    "trail": (255, 204, 0),
    "explosion_outer": (255, 102, 0),
    "explosion_inner": (255, 204, 0),
    "hud_text": (255, 255, 255),
}

GROUND = PALETTE["ground"]
HUD_TEXT = PALETTE["hud_text"]

# Difficulty label colors
DIFFICULTY_COLORS = {
    "easy": (76, 175, 80),
    "medium": (255, 165, 0),
    "hard": (244, 67, 54),
}

# Health bar colors by remaining fraction
HEALTH_HIGH = (51, 204, 51)
HEALTH_MID = (255, 204, 0)
HEALTH_LOW = (255, 51, 51)
