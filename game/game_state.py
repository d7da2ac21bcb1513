"""
Game State Machine - screen states and the context shared by input handlers
"""

from enum import Enum, auto


class ScreenState(Enum):
    """Screen states"""
    DIALOG = auto()
    PLAYING = auto()
    VICTORY = auto()
    NOTICE = auto()


class GameStateManager:
    """
    Tracks the current screen and its transitions
    """
    def __init__(self, initial_state=ScreenState.DIALOG):
        self.current_state = initial_state
        self.state_data = {}  # For passing data between states

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: ScreenState enum value
            **kwargs: Additional data to pass to new state
        """
        self.current_state = new_state
        self.state_data = kwargs

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def accepts_movement(self):
        """Directional input is only handled while playing"""
        return self.current_state == ScreenState.PLAYING

    def accepts_confirm(self):
        """Enter advances the dialog and victory screens"""
        return self.current_state in (ScreenState.DIALOG, ScreenState.VICTORY)

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"


class GameContext:
    """
    Everything an input handler may read or change
    """
    def __init__(self, level_manager, audio, state_manager=None):
        """
        Args:
            level_manager: LevelManager with the level list
            audio: AudioManager (or anything with play_music/play_effect)
            state_manager: GameStateManager, a fresh one if omitted
        """
        self.level_manager = level_manager
        self.audio = audio
        self.state_manager = state_manager or GameStateManager()

    @property
    def level(self):
        return self.level_manager.get_current_level()

    @property
    def screen_state(self):
        return self.state_manager.current_state

    def show_notice(self, message):
        """Switch to the non-interactive notice screen"""
        self.state_manager.transition_to(ScreenState.NOTICE, message=message)

    def notice_message(self):
        return self.state_manager.state_data.get('message')

    def __repr__(self):
        return f"GameContext(state={self.state_manager.get_state_name()}, level={self.level})"
