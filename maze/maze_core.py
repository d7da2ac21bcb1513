"""
Core maze functions - grid model, player lookup and the movement rule
"""

from enum import Enum, auto

import numpy as np

from utils.constants import WALL, FLOOR, EXIT, FRAME_SYMBOLS, DIRS, DIR_FRAMES


class MazeError(Exception):
    """Base error for maze model problems"""


class MazeFileError(MazeError):
    """
    Raised when a maze file is missing, unreadable or malformed
    """
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class MoveResult(Enum):
    """Outcome of a movement request"""
    BLOCKED = auto()
    MOVED = auto()
    EXIT_REACHED = auto()


class MazeGrid:
    """
    Fixed-size grid of single-character symbols, indexed [y, x]
    """
    def __init__(self, rows):
        """
        Args:
            rows: Sequence of equal-length strings, top row first
        """
        self.cells = np.array([list(row) for row in rows], dtype='<U1')
        self.rows, self.cols = self.cells.shape

    @property
    def width(self):
        return self.cols

    @property
    def height(self):
        return self.rows

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get(self, x, y):
        return str(self.cells[y, x])

    def set(self, x, y, symbol):
        self.cells[y, x] = symbol

    def count(self, symbol):
        """Number of cells holding symbol"""
        return int(np.count_nonzero(self.cells == symbol))

    def row_strings(self):
        """Grid as a list of strings, top row first"""
        return [''.join(row) for row in self.cells]

    def iter_cells(self):
        """Yield (x, y, symbol) in row-major order"""
        for y in range(self.rows):
            for x in range(self.cols):
                yield x, y, str(self.cells[y, x])

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"


def locate_player(grid, source="<maze>"):
    """
    Find the single cell holding a player frame symbol.

    Scans the whole grid, so call it once per level load only.

    Args:
        grid: MazeGrid
        source: Name used in error messages

    Returns:
        (x, y, frame) tuple
    """
    hits = np.argwhere(np.isin(grid.cells, FRAME_SYMBOLS))
    if len(hits) == 0:
        raise MazeFileError(source, "no player start found")
    if len(hits) > 1:
        raise MazeFileError(source, f"{len(hits)} player cells found, expected 1")

    y, x = (int(v) for v in hits[0])
    return x, y, grid.get(x, y)


def can_move(grid, x, y, dx, dy):
    """Check if the cell at (x + dx, y + dy) exists and is not a wall"""
    nx, ny = x + dx, y + dy
    if not grid.in_bounds(nx, ny):
        return False
    return grid.get(nx, ny) != WALL


def next_frame(frame, direction):
    """Alternate between the two sprite frames of a direction"""
    first, second = DIR_FRAMES[direction]
    if frame != first:
        return first
    return second


def try_move(grid, player, direction):
    """
    Apply one step of player movement to the grid.

    Blocked moves leave the grid and the player untouched. Stepping onto the
    exit only advances the sprite frame; the player stays where it is.

    Args:
        grid: MazeGrid
        player: Player entity
        direction: One of the DIRS keys

    Returns:
        MoveResult
    """
    dx, dy = DIRS[direction]
    if not can_move(grid, player.x, player.y, dx, dy):
        return MoveResult.BLOCKED

    nx, ny = player.x + dx, player.y + dy
    player.frame = next_frame(player.frame, direction)

    if grid.get(nx, ny) == EXIT:
        # Grid keeps the previous frame; the victory screen hides the grid
        return MoveResult.EXIT_REACHED

    grid.set(player.x, player.y, FLOOR)
    grid.set(nx, ny, player.frame)
    player.move_to(nx, ny)
    return MoveResult.MOVED
