"""
Game configuration - titles, asset locations and level list
"""

import os

GAME_TITLE = "Raichu's Battery Rush"
GAME_VERSION = "1.0.0"

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

ARTWORK_DIR = os.path.join(BASE_DIR, "artwork")
PLAYER_ARTWORK_DIR = os.path.join(ARTWORK_DIR, "player")
AUDIO_DIR = os.path.join(BASE_DIR, "audio")

# Levels are played in this order; Enter on the victory screen loads the next
MAZE_FILES = [
    os.path.join(BASE_DIR, "maze.txt"),
    os.path.join(BASE_DIR, "maze2.txt"),
]

TILE_EXTENSION = ".png"
DIALOG_IMAGE = os.path.join(ARTWORK_DIR, "dialog.jpg")
VICTORY_IMAGE = os.path.join(ARTWORK_DIR, "forest_win.jpg")

BACKGROUND_MUSIC = os.path.join(AUDIO_DIR, "club_viridia.wav")
VICTORY_SOUND = os.path.join(AUDIO_DIR, "RaichuCry.wav")

NOTICE_TEXT = "maze.txt was corrupted or missing"

# Shown when the dialog/victory artwork is missing
DIALOG_TEXT = "Press Enter to start"
VICTORY_TEXT = "Battery reached! Press Enter"
