"""
Level Manager - loads maze files and tracks level progression
"""

from maze.loader import load_maze
from maze.maze_core import MazeFileError, locate_player
from entities.player import Player


class Level:
    """
    Represents a single loaded maze
    """
    def __init__(self, grid, start=None, source=None):
        """
        Args:
            grid: MazeGrid holding exactly one player cell
            start: (x, y, frame) of the player, located from grid if omitted
            source: Path the maze was loaded from
        """
        self.grid = grid
        self.source = source
        self.cols = grid.cols
        self.rows = grid.rows

        if start is None:
            start = locate_player(grid, source or "<maze>")
        x, y, frame = start
        self.player = Player(x, y, frame)

    @classmethod
    def from_file(cls, path):
        grid, start = load_maze(path)
        return cls(grid, start, source=path)

    def __repr__(self):
        return f"Level({self.cols}x{self.rows}, source={self.source!r})"


class LevelManager:
    """
    Manages the ordered list of maze files and the current level
    """
    def __init__(self, maze_files):
        """
        Args:
            maze_files: Paths of maze files in play order
        """
        self.maze_files = list(maze_files)
        self.level_index = 0
        self.current_level = None

    def load_current_level(self):
        """
        Load the maze at the current index

        Returns:
            Level

        Raises:
            MazeFileError: maze file missing or malformed
        """
        if not self.maze_files:
            raise MazeFileError("<none>", "no maze files configured")
        path = self.maze_files[self.level_index]
        self.current_level = Level.from_file(path)
        print(f"Loaded level {self.level_index + 1}/{len(self.maze_files)}: "
              f"{self.current_level.cols}x{self.current_level.rows} from {path}")
        return self.current_level

    def has_next_level(self):
        """Check if another maze follows the current one"""
        return self.level_index + 1 < len(self.maze_files)

    def advance(self):
        """
        Move to the next maze and load it

        Returns:
            Level, or None when there is no next level
        """
        if not self.has_next_level():
            return None
        self.level_index += 1
        self.current_level = None
        return self.load_current_level()

    def get_current_level(self):
        """Get current level"""
        return self.current_level

    def __repr__(self):
        return f"LevelManager(level={self.level_index + 1}/{len(self.maze_files)})"
