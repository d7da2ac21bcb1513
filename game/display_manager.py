"""
Display Manager - creates the fixed-size game window
"""

import pygame

from utils.constants import TILE_SIZE, NOTICE_WINDOW_W, NOTICE_WINDOW_H


def window_size_for(cols, rows):
    """Window size that fits a cols x rows maze exactly"""
    return (cols * TILE_SIZE, rows * TILE_SIZE)


class DisplayManager:
    """
    Owns the pygame display surface; the window is not resizable
    """
    def __init__(self):
        # Screen dimensions
        self.screen_width = NOTICE_WINDOW_W
        self.screen_height = NOTICE_WINDOW_H

        # Pygame screen surface
        self.screen = None
        self.title = None

    def create_screen(self, width, height, title=None):
        """
        Create or recreate the display screen

        Args:
            width: Screen width
            height: Screen height
            title: Window title (optional)

        Returns:
            pygame.Surface: The screen surface
        """
        self.screen = pygame.display.set_mode((width, height))
        self.screen_width = width
        self.screen_height = height

        if title:
            self.title = title
            pygame.display.set_caption(title)

        return self.screen

    def fit_level(self, level, title=None):
        """
        Resize the window to a level's grid, if it differs

        Returns:
            pygame.Surface: The screen surface
        """
        width, height = window_size_for(level.cols, level.rows)
        if self.screen is not None and (width, height) == self.get_size():
            return self.screen
        return self.create_screen(width, height, title or self.title)

    def get_screen(self):
        """Get current screen surface"""
        return self.screen

    def get_size(self):
        """Get current screen size"""
        return (self.screen_width, self.screen_height)
