# soccer_constants.py — Static game data for Paper Soccer

BOARD_COLS = 15
BOARD_ROWS = 19
GOAL_COLUMNS = [6, 7, 8]

# Fixed iteration order: E, W, S, N, SE, NE, SW, NW
DIRECTIONS = [
    ("E", 1, 0),
    ("W", -1, 0),
    ("S", 0, 1),
    ("N", 0, -1),
    ("SE", 1, 1),
    ("NE", 1, -1),
    ("SW", -1, 1),
    ("NW", -1, -1),
]
DIRECTION_DELTAS = {name: (dx, dy) for name, dx, dy in DIRECTIONS}

PLAYER_NAMES = ["Red", "Blue"]
PLAYER_COLORS = ["#e54848", "#2c6be2"]

RESET_DELAY_SECONDS = 0.5
CPU_PLAYER = 1
CPU_ITERATION_CAP = 50

VERTICAL_WEIGHT   = 1.0
HORIZONTAL_WEIGHT = 0.2
BOUNCE_BONUS      = -0.5

GRID_SPACING = 32
GRID_MARGIN = 36
CLICK_TOLERANCE = GRID_SPACING / 3
