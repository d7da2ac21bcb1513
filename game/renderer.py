"""
Tile renderer - draws the view builder's tiles onto a pygame surface
"""

import os

import pygame

from game.view_builder import tile_rect
from utils.constants import WALL, FLOOR, EXIT, FRAME_SYMBOLS, TILE_SIZE
from utils.colors import (
    COLOR_BG, COLOR_NOTICE_BG, COLOR_TEXT,
    COLOR_WALL, COLOR_FLOOR, COLOR_EXIT, COLOR_PLAYER, COLOR_UNKNOWN
)


PLACEHOLDER_COLORS = {
    WALL: COLOR_WALL,
    FLOOR: COLOR_FLOOR,
    EXIT: COLOR_EXIT,
}


def placeholder_color(symbol):
    """Solid color drawn in place of missing artwork"""
    if symbol in FRAME_SYMBOLS:
        return COLOR_PLAYER
    return PLACEHOLDER_COLORS.get(symbol, COLOR_UNKNOWN)


class TileRenderer:
    """
    Loads, caches and blits tile images
    """
    def __init__(self, font_size=16):
        self.font_size = font_size
        self._font = None
        self._cache = {}

    def _get_font(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("consolas", self.font_size)
        return self._font

    def get_image(self, path):
        """
        Get a cached image

        Returns:
            pygame.Surface, or None if the file cannot be loaded
        """
        if path in self._cache:
            return self._cache[path]

        image = None
        if os.path.isfile(path):
            try:
                image = pygame.image.load(path)
                if pygame.display.get_init() and pygame.display.get_surface() is not None:
                    image = image.convert_alpha()
            except pygame.error as e:
                print(f"Image load failed: {path} ({e})")
        else:
            print(f"Image not found: {path}")

        self._cache[path] = image
        return image

    def draw(self, surface, tiles):
        """
        Draw a full view

        Args:
            surface: Target pygame.Surface
            tiles: Tiles from build_view
        """
        surface.fill(COLOR_BG)
        for tile in tiles:
            if tile.full_screen:
                self._draw_screen_tile(surface, tile)
            else:
                self._draw_grid_tile(surface, tile)

    def _draw_grid_tile(self, surface, tile):
        rect = pygame.Rect(tile_rect(tile))
        image = self.get_image(tile.asset)
        if image is None:
            pygame.draw.rect(surface, placeholder_color(tile.symbol), rect)
            return
        if image.get_size() != (TILE_SIZE, TILE_SIZE):
            image = pygame.transform.scale(image, (TILE_SIZE, TILE_SIZE))
        surface.blit(image, rect)

    def _draw_screen_tile(self, surface, tile):
        image = self.get_image(tile.asset) if tile.asset else None
        if image is None:
            if tile.text:
                self._draw_text_tile(surface, tile)
            return
        size = surface.get_size()
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        surface.blit(image, (0, 0))

    def _draw_text_tile(self, surface, tile):
        surface.fill(COLOR_NOTICE_BG)
        text = self._get_font().render(tile.text, True, COLOR_TEXT)
        text_rect = text.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
        surface.blit(text, text_rect)
