from typing import Dict, Optional

from .grid import Direction, add_wall, framed_cells
from .state import MAX_CELLS, Goal, Piece, PieceId, Puzzle, PIECE_IDS

TOK_H_WALL = "-"
TOK_V_WALL = "|"
TOK_CORNER = "+"
TOK_EMPTY = "."

_PIECE_TOKENS = {p.value: p for p in PIECE_IDS}
_GOAL_TOKENS = {p.value.lower(): p for p in PIECE_IDS}


def parse_board_str(board_str: str) -> Puzzle:
    """Parses an ASCII board into a Puzzle.

    A W x H board is drawn on 2H+1 lines of 2W+1 characters:

      +-+-+-+
      |R G B|
      + + + +
      |Y . .|
      + +-+ +
      |. . r|
      +-+-+-+

    Cell (r, c) sits at line 2r+1, column 2c+1. Between cells:
      '|': wall between horizontal neighbors
      '-': wall between vertical neighbors
    Cell contents:
      'R', 'G', 'B', 'Y': piece
      'r', 'g', 'b', 'y': goal cell of that piece
      anything else: empty
    The outer frame is always walled.
    """
    lines = [line.rstrip("\n") for line in board_str.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty board")
    if len(lines) % 2 == 0:
        raise ValueError(f"Expected an odd number of lines, got {len(lines)}")
    height = len(lines) // 2
    width = max(len(line) for line in lines) // 2
    if width == 0 or height == 0:
        raise ValueError("Board has no cells")
    if width * height > MAX_CELLS:
        raise ValueError(f"Board has {width * height} cells, at most {MAX_CELLS} supported")
    lines = [line.ljust(2 * width + 1) for line in lines]

    cells = framed_cells(width, height)
    pieces: Dict[PieceId, int] = {}
    goal: Optional[Goal] = None

    for r in range(height):
        for c in range(width):
            idx = r * width + c
            line = lines[2 * r + 1]
            ch = line[2 * c + 1]
            if line[2 * c + 2] == TOK_V_WALL:
                add_wall(cells, width, idx, Direction.RIGHT)
            if lines[2 * r + 2][2 * c + 1] == TOK_H_WALL:
                add_wall(cells, width, idx, Direction.DOWN)

            if ch in _PIECE_TOKENS:
                piece = _PIECE_TOKENS[ch]
                if piece in pieces:
                    raise ValueError(f"Duplicate piece '{ch}'")
                pieces[piece] = idx
            elif ch in _GOAL_TOKENS:
                if goal is not None:
                    raise ValueError("More than one goal marker")
                goal = Goal(piece=_GOAL_TOKENS[ch], cell=idx)

    missing = [p.value for p in PIECE_IDS if p not in pieces]
    if missing:
        raise ValueError(f"Missing pieces: {', '.join(missing)}")
    if goal is None:
        raise ValueError("No goal marker found in board")

    return Puzzle(
        cells=tuple(cells),
        width=width,
        height=height,
        pieces=tuple(Piece(p, pieces[p]) for p in PIECE_IDS),
        goal=goal,
    )


def parse_board_file(path: str) -> Puzzle:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board_str(f.read())
