"""
Game constants for the toroidal snake game.
"""

# Movement directions
UP = "up"
RIGHT = "right"
DOWN = "down"
LEFT = "left"
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

# (dx, dy) per direction; origin is the top-left cell so UP => y - 1
DIRECTION_DELTAS = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Key codes accepted by the input surface
KEY_DIRECTIONS = {
    "ArrowUp": UP,
    "ArrowRight": RIGHT,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "w": UP,
    "d": RIGHT,
    "s": DOWN,
    "a": LEFT,
}

START_DIRECTION = UP

# Default settings
DEFAULT_ROWS_COUNT = 21
DEFAULT_COLS_COUNT = 21
DEFAULT_SPEED = 2
DEFAULT_WIN_FOOD_COUNT = 50

# Inclusive (min, max) bounds per setting, in validation order
SETTING_BOUNDS = {
    "rows_count": (10, 30),
    "cols_count": (10, 30),
    "speed": (1, 10),
    "win_food_count": (5, 50),
}

# Play/pause button labels
LABEL_START = "Start"
LABEL_STOP = "Stop"
LABEL_GAME_OVER = "Game over"

# Finished-game outcomes
RESULT_WON = "won"
RESULT_LOST = "lost"
VALID_RESULTS = {RESULT_WON, RESULT_LOST}
