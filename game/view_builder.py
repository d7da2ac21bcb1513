"""
View builder - turns the maze model into a list of drawable tiles
"""

import os
from collections import namedtuple

from config import (
    ARTWORK_DIR, PLAYER_ARTWORK_DIR, TILE_EXTENSION,
    DIALOG_IMAGE, VICTORY_IMAGE, NOTICE_TEXT, DIALOG_TEXT, VICTORY_TEXT
)
from game.game_state import ScreenState
from utils.constants import FRAME_SYMBOLS, TILE_SIZE


# asset: image path or None; symbol: grid symbol for placeholders;
# full_screen: stretch over the whole window; text: message drawn when there
# is no asset or the asset cannot be loaded
Tile = namedtuple('Tile', ['asset', 'col', 'row', 'symbol', 'full_screen', 'text'])


def asset_for_symbol(symbol):
    """Image path for a grid symbol"""
    if symbol in FRAME_SYMBOLS:
        return os.path.join(PLAYER_ARTWORK_DIR, symbol + TILE_EXTENSION)
    return os.path.join(ARTWORK_DIR, symbol + TILE_EXTENSION)


def tile_rect(tile):
    """Pixel rectangle (x, y, w, h) of a grid tile"""
    return (tile.col * TILE_SIZE, tile.row * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def _screen_tile(asset, text):
    return Tile(asset, 0, 0, None, True, text)


def build_view(grid, screen_state, notice=None):
    """
    Build the tiles for one frame

    Args:
        grid: MazeGrid, may be None outside the playing screen
        screen_state: ScreenState
        notice: Message for the notice screen

    Returns:
        list of Tile, grid tiles in row-major order
    """
    if screen_state == ScreenState.DIALOG:
        return [_screen_tile(DIALOG_IMAGE, DIALOG_TEXT)]

    if screen_state == ScreenState.VICTORY:
        return [_screen_tile(VICTORY_IMAGE, VICTORY_TEXT)]

    if screen_state == ScreenState.NOTICE:
        return [_screen_tile(None, notice or NOTICE_TEXT)]

    return [
        Tile(asset_for_symbol(symbol), x, y, symbol, False, None)
        for x, y, symbol in grid.iter_cells()
    ]
