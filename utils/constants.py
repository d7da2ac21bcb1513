"""
Global constants for Raichu's Battery Rush
"""

# Screen settings
TILE_SIZE = 32
FPS = 30

# Fallback window used when no maze could be loaded
NOTICE_WINDOW_W = 300
NOTICE_WINDOW_H = 300

# Maze symbols
WALL = 'X'
FLOOR = '-'
EXIT = 'E'

# Player animation frames
FRAME_SYMBOLS = ('1', '2', '3', '4', '5', '6', '7', '8')
INITIAL_FRAME = '1'

# Directions
UP = 'up'
DOWN = 'down'
LEFT = 'left'
RIGHT = 'right'

# Direction vectors (dx, dy)
DIRS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Each direction alternates between two sprite frames
DIR_FRAMES = {
    DOWN: ('1', '2'),
    UP: ('3', '4'),
    LEFT: ('5', '6'),
    RIGHT: ('7', '8'),
}
