"""
Raichu's Battery Rush
Tile maze game: guide Raichu to the battery with the arrow keys
"""

import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, MAZE_FILES, NOTICE_TEXT
from game.audio import AudioManager
from game.dispatcher import key_to_action, handle_action
from game.display_manager import DisplayManager
from game.game_state import GameContext, ScreenState
from game.level_manager import LevelManager
from game.renderer import TileRenderer
from game.view_builder import build_view
from maze.maze_core import MazeFileError
from utils.constants import FPS, NOTICE_WINDOW_W, NOTICE_WINDOW_H


class MazeGame:
    """
    Main game class
    """
    def __init__(self, maze_files=None):
        pygame.init()

        self.title = f"{GAME_TITLE} v{GAME_VERSION}"
        self.display_manager = DisplayManager()
        self.renderer = TileRenderer()

        self.context = GameContext(
            LevelManager(maze_files if maze_files is not None else MAZE_FILES),
            AudioManager()
        )

        self.clock = pygame.time.Clock()
        self.running = True
        self.needs_redraw = True

        self._load_first_level()

    def _load_first_level(self):
        """Load the first maze, falling back to the notice screen"""
        try:
            level = self.context.level_manager.load_current_level()
        except MazeFileError as e:
            print(f"Level load failed: {e}")
            self.context.show_notice(NOTICE_TEXT)
            self.display_manager.create_screen(NOTICE_WINDOW_W, NOTICE_WINDOW_H, self.title)
            return

        self.display_manager.fit_level(level, self.title)

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        """Run one key press through the state machine"""
        level_before = self.context.level
        if not handle_action(self.context, key_to_action(key)):
            return

        if self.context.screen_state == ScreenState.NOTICE:
            self.display_manager.create_screen(NOTICE_WINDOW_W, NOTICE_WINDOW_H, self.title)
        elif self.context.level is not level_before:
            self.display_manager.fit_level(self.context.level)

        self.needs_redraw = True

    def render(self):
        """Rebuild the view from the model and draw it"""
        level = self.context.level
        tiles = build_view(
            level.grid if level else None,
            self.context.screen_state,
            self.context.notice_message()
        )
        self.renderer.draw(self.display_manager.get_screen(), tiles)
        pygame.display.flip()
        self.needs_redraw = False

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)

            self.handle_events()
            if self.needs_redraw:
                self.render()

        self.context.audio.stop()
        pygame.quit()


def main():
    """Entry point"""
    game = MazeGame()
    game.run()
    sys.exit()


if __name__ == "__main__":
    main()
