import os

import pytest

from maze.loader import parse_maze, load_maze
from maze.maze_core import MazeFileError


def test_parse_maze():
    grid, start = parse_maze(["3\n", "2\n", "X-E\n", "-1-\n"])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.row_strings() == ["X-E", "-1-"]
    assert start == (1, 1, '1')


def test_parse_maze_ignores_trailing_blank_lines_and_crlf():
    grid, _ = parse_maze(["3\r\n", "2\r\n", "X-E\r\n", "-1-\r\n", "\n", "\n"])
    assert grid.row_strings() == ["X-E", "-1-"]


def test_load_maze_from_file(write_maze):
    path = write_maze(["XXXX", "X1-E", "XXXX"])
    grid, start = load_maze(path)
    assert grid.row_strings() == ["XXXX", "X1-E", "XXXX"]
    assert start == (1, 1, '1')


def test_load_missing_file(tmp_path):
    with pytest.raises(MazeFileError) as excinfo:
        load_maze(str(tmp_path / "nope.txt"))
    assert excinfo.value.path.endswith("nope.txt")


@pytest.mark.parametrize("lines, reason", [
    ([], "header"),
    (["3"], "header"),
    (["three", "2", "X-E", "-1-"], "width is not an integer"),
    (["3", "0"], "height must be positive"),
    (["3", "2", "X-E"], "expected 2 rows, found 1"),
    (["3", "2", "X-E", "-1-", "---"], "expected 2 rows, found 3"),
    (["3", "2", "X-E", "-1"], "row 1 has 2 cells"),
    (["3", "2", "X-E", "-1--"], "row 1 has 4 cells"),
    (["3", "2", "X-E", "---"], "no player"),
])
def test_corrupt_mazes(lines, reason):
    with pytest.raises(MazeFileError, match=reason):
        parse_maze(lines)


def test_bundled_mazes_load():
    import config
    from config import MAZE_FILES

    for path in MAZE_FILES:
        assert os.path.dirname(path) == os.path.dirname(os.path.abspath(config.__file__))
        grid, _ = load_maze(path)
        assert grid.count('E') == 1


def test_load_maze_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"3\n1\n\xff\xfe1\n")

    with pytest.raises(MazeFileError) as excinfo:
        load_maze(str(path))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
