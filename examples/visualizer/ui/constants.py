"""Layout constants and color definitions."""

from gridtrace import Kind

# Timing
FPS = 60

# Layout dimensions
TILE_SIZE = 20
LANE_GAP = 20
LABEL_H = 24
GRID_ROWS = 25
GRID_W = 50 * TILE_SIZE + LANE_GAP  # two 25-column lanes plus the gap
GRID_H = LABEL_H + GRID_ROWS * TILE_SIZE
SIDEBAR_W = 260
TIMELINE_H = 36
STATUS_H = 30

SCREEN_W = GRID_W + SIDEBAR_W
SCREEN_H = GRID_H + TIMELINE_H + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
GRID_LINE = (45, 45, 60)
SIDEBAR_BG = (25, 25, 38)
TIMELINE_BG = (30, 30, 45)
TIMELINE_RAIL = (60, 60, 80)
TIMELINE_KNOB = (240, 200, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
WEIGHT_TEXT = (250, 220, 120)

STATUS_COLORS: dict[str, tuple[int, int, int]] = {
    "path found": (100, 255, 100),
    "no path found": (255, 120, 80),
    "no start/end": (255, 80, 80),
}

# Cell kind -> fill color
KIND_COLORS: dict[Kind, tuple[int, int, int]] = {
    Kind.EMPTY: (235, 235, 240),
    Kind.START: (60, 200, 90),
    Kind.END: (220, 60, 60),
    Kind.WALL: (40, 45, 60),
    Kind.VISITED: (110, 170, 235),
    Kind.PATH: (250, 210, 70),
    Kind.CURRENT: (200, 90, 220),
}

# Weighted empty cells get a warm tint
WEIGHT_TINT = (245, 225, 200)
