import pytest

from game.level_manager import Level, LevelManager
from maze.maze_core import MazeFileError, MazeGrid


def test_level_locates_player():
    level = Level(MazeGrid(["X-E", "-1-"]))
    assert (level.cols, level.rows) == (3, 2)
    assert level.player.position == (1, 1)
    assert level.player.frame == '1'


def test_advance_through_levels(write_maze):
    paths = [write_maze(["1E"]), write_maze(["E-1"])]
    manager = LevelManager(paths)

    first = manager.load_current_level()
    assert manager.get_current_level() is first
    assert manager.has_next_level()

    second = manager.advance()
    assert second.source == paths[1]
    assert second.player.position == (2, 0)
    assert not manager.has_next_level()
    assert manager.advance() is None
    assert manager.get_current_level() is second


def test_missing_level_file(tmp_path):
    manager = LevelManager([str(tmp_path / "gone.txt")])
    with pytest.raises(MazeFileError):
        manager.load_current_level()
    assert manager.get_current_level() is None


def test_no_levels_configured():
    with pytest.raises(MazeFileError, match="no maze files"):
        LevelManager([]).load_current_level()


def test_level_from_file_reuses_loader_start(write_maze, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("grid scanned twice")

    monkeypatch.setattr("game.level_manager.locate_player", fail)
    level = Level.from_file(write_maze(["X-E", "-5-"]))

    assert level.player.position == (1, 1)
    assert level.player.frame == '5'
