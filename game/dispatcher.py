"""
Input dispatch - maps keys to actions and runs the screen state machine
"""

from enum import Enum

import pygame

from config import BACKGROUND_MUSIC, VICTORY_SOUND, NOTICE_TEXT
from game.game_state import ScreenState
from maze.maze_core import MazeFileError, MoveResult, try_move
from utils.constants import UP, DOWN, LEFT, RIGHT


class Action(Enum):
    """Player intents produced from key presses"""
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT
    CONFIRM = 'confirm'


KEY_ACTIONS = {
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_RETURN: Action.CONFIRM,
    pygame.K_KP_ENTER: Action.CONFIRM,
}


def key_to_action(key):
    """Return the Action for a pygame key code, or None if it is ignored"""
    return KEY_ACTIONS.get(key)


def start_level(context):
    """Enter the playing screen for the current level"""
    context.state_manager.transition_to(ScreenState.PLAYING)
    context.audio.play_music(BACKGROUND_MUSIC)


def handle_action(context, action):
    """
    Advance the state machine by one action

    Args:
        context: GameContext
        action: Action or None

    Returns:
        bool: True if the view has to be rebuilt
    """
    if action is None:
        return False

    state_manager = context.state_manager

    if action is Action.CONFIRM:
        if not state_manager.accepts_confirm():
            return False
        if state_manager.is_state(ScreenState.DIALOG):
            start_level(context)
            return True
        return _handle_victory_confirm(context)

    if not state_manager.accepts_movement():
        return False

    level = context.level
    result = try_move(level.grid, level.player, action.value)

    if result == MoveResult.BLOCKED:
        return False

    if result == MoveResult.EXIT_REACHED:
        # The step onto the exit is not recorded by Player.move_to
        print(f"Level {context.level_manager.level_index + 1} complete "
              f"in {level.player.moves + 1} moves")
        state_manager.transition_to(ScreenState.VICTORY)
        context.audio.play_effect(VICTORY_SOUND)

    return True


def _handle_victory_confirm(context):
    """Enter on the victory screen loads the next maze, if there is one"""
    level_manager = context.level_manager
    if not level_manager.has_next_level():
        return False

    try:
        level_manager.advance()
    except MazeFileError as e:
        print(f"Level load failed: {e}")
        context.show_notice(NOTICE_TEXT)
        return True

    start_level(context)
    return True
