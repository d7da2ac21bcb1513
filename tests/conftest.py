import os

# Headless SDL for renderer and audio tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from game.game_state import GameContext
from game.level_manager import LevelManager


class RecordingAudio:
    """Stands in for AudioManager and remembers what was played"""
    def __init__(self):
        self.music = []
        self.effects = []

    def play_music(self, path, loop=True):
        self.music.append(path)
        return True

    def play_effect(self, path):
        self.effects.append(path)
        return True

    def stop(self):
        pass


def maze_text(rows):
    width = len(rows[0]) if rows else 0
    return f"{width}\n{len(rows)}\n" + "\n".join(rows) + "\n"


@pytest.fixture
def write_maze(tmp_path):
    """Write rows to a maze file and return its path"""
    counter = {'n': 0}

    def _write(rows, name=None):
        counter['n'] += 1
        path = tmp_path / (name or f"maze{counter['n']}.txt")
        path.write_text(maze_text(rows), encoding='utf-8')
        return str(path)

    return _write


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def make_context(audio):
    """Build a GameContext over maze files with the first level loaded"""
    def _make(paths):
        level_manager = LevelManager(paths)
        level_manager.load_current_level()
        return GameContext(level_manager, audio)

    return _make
