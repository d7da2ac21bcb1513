"""
Color palette for Raichu's Battery Rush
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Window background
COLOR_NOTICE_BG = (12, 14, 18)    # Notice screen background

# Text
COLOR_TEXT = (210, 210, 210)

# Placeholder tile colors (used when artwork is missing)
COLOR_WALL = (90, 70, 60)
COLOR_FLOOR = (40, 110, 50)
COLOR_EXIT = (255, 220, 60)
COLOR_PLAYER = (250, 200, 40)
COLOR_UNKNOWN = (128, 128, 128)
