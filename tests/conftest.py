import pytest

from robots_core.grid import Direction, add_wall, framed_cells
from robots_core.parser import parse_board_str
from robots_core.state import Goal, Piece, PieceId, Puzzle

D = Direction

# target R in the top-left corner, boxed in by G and Y; goal in the opposite corner
SMALL = """
+-+-+-+
|R G B|
+ + + +
|Y . .|
+ + + +
|. . r|
+-+-+-+
"""

# staircase corridor (0,0) → (0,3) → (3,3) → (3,6) → (6,6) → (6,9), walled off from the rest
CORRIDOR_WALLS = [
    ((0, 0), D.DOWN), ((0, 1), D.DOWN), ((0, 2), D.DOWN), ((0, 3), D.RIGHT),
    ((1, 3), D.LEFT), ((1, 3), D.RIGHT), ((2, 3), D.LEFT), ((2, 3), D.RIGHT),
    ((3, 3), D.LEFT), ((3, 3), D.DOWN),
    ((3, 4), D.UP), ((3, 4), D.DOWN), ((3, 5), D.UP), ((3, 5), D.DOWN),
    ((3, 6), D.UP), ((3, 6), D.RIGHT),
    ((4, 6), D.LEFT), ((4, 6), D.RIGHT), ((5, 6), D.LEFT), ((5, 6), D.RIGHT),
    ((6, 6), D.LEFT), ((6, 6), D.DOWN),
    ((6, 7), D.UP), ((6, 7), D.DOWN), ((6, 8), D.UP), ((6, 8), D.DOWN),
    ((6, 9), D.UP), ((6, 9), D.DOWN), ((6, 9), D.RIGHT),
]


def build_corridor_puzzle() -> Puzzle:
    w = h = 16
    cells = framed_cells(w, h)
    for (r, c), direction in CORRIDOR_WALLS:
        add_wall(cells, w, r * w + c, direction)
    pieces = (
        Piece(PieceId.RED, 0),
        Piece(PieceId.GREEN, 10 * w + 10),
        Piece(PieceId.BLUE, 12 * w + 3),
        Piece(PieceId.YELLOW, 15 * w + 15),
    )
    return Puzzle(cells=tuple(cells), width=w, height=h, pieces=pieces,
                  goal=Goal(PieceId.RED, 6 * w + 9))


@pytest.fixture
def small_puzzle() -> Puzzle:
    return parse_board_str(SMALL)


@pytest.fixture
def corridor_puzzle() -> Puzzle:
    return build_corridor_puzzle()
