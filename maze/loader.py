"""
Maze file loader

File format:
    line 1: width
    line 2: height
    next `height` lines: `width` symbols each
"""

from maze.maze_core import MazeGrid, MazeFileError, locate_player


def _parse_dimension(line, name, source):
    try:
        value = int(line.strip())
    except ValueError:
        raise MazeFileError(source, f"{name} is not an integer: {line.strip()!r}") from None
    if value <= 0:
        raise MazeFileError(source, f"{name} must be positive, got {value}")
    return value


def parse_maze(lines, source="<maze>"):
    """
    Build a MazeGrid from the lines of a maze file

    Args:
        lines: Iterable of text lines (newlines allowed)
        source: Name used in error messages

    Returns:
        (MazeGrid, (x, y, frame)) with the player start
    """
    lines = [line.rstrip('\r\n').rstrip() for line in lines]
    if len(lines) < 2:
        raise MazeFileError(source, "missing width/height header")

    width = _parse_dimension(lines[0], "width", source)
    height = _parse_dimension(lines[1], "height", source)

    body = lines[2:]
    # Ignore blank lines after the last row
    while body and not body[-1]:
        body.pop()

    if len(body) != height:
        raise MazeFileError(source, f"expected {height} rows, found {len(body)}")

    for row_no, row in enumerate(body):
        if len(row) != width:
            raise MazeFileError(
                source, f"row {row_no} has {len(row)} cells, expected {width}"
            )

    grid = MazeGrid(body)
    return grid, locate_player(grid, source)


def load_maze(path):
    """
    Read and parse a maze file

    Returns:
        (MazeGrid, (x, y, frame)) with the player start

    Raises:
        MazeFileError: file missing, unreadable or malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise MazeFileError(path, str(e)) from e

    return parse_maze(lines, source=str(path))
