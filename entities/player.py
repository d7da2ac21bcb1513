"""
Player entity - grid position and sprite frame
"""

from utils.constants import INITIAL_FRAME


class Player:
    """
    Player avatar on the maze grid
    """
    def __init__(self, x, y, frame=INITIAL_FRAME):
        self.x = x
        self.y = y

        # Sprite frame symbol ('1'-'8'), also the symbol stored in the grid
        self.frame = frame

        # Gameplay tracking
        self.moves = 0

    def move_to(self, x, y):
        """Record a completed step to (x, y)"""
        self.x = x
        self.y = y
        self.moves += 1

    @property
    def position(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Player(x={self.x}, y={self.y}, frame={self.frame!r})"
