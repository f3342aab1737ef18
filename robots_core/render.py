from typing import Mapping, Optional

from .grid import Direction
from .state import PieceId, Puzzle


def render_ascii(puzzle: Puzzle, positions: Optional[Mapping[PieceId, int]] = None) -> str:
    """ASCII visualization in the format read by parse_board_str.

    `positions` defaults to the initial placement.
    """
    if positions is None:
        positions = puzzle.initial_positions()
    w, h = puzzle.width, puzzle.height
    cells = puzzle.cells
    at = {cell: piece for piece, cell in positions.items()}

    def edge_line(r: int) -> str:
        # horizontal edges above row r
        chars = ['+']
        for c in range(w):
            if r == 0 or r == h:
                wall = True
            else:
                wall = cells[r * w + c] & Direction.UP != 0
            chars.append('-' if wall else ' ')
            chars.append('+')
        return ''.join(chars)

    out_lines = [edge_line(0)]
    for r in range(h):
        row_chars = ['|']
        for c in range(w):
            idx = r * w + c
            if idx in at:
                row_chars.append(at[idx].value)
            elif idx == puzzle.goal.cell:
                row_chars.append(puzzle.goal.piece.value.lower())
            else:
                row_chars.append('.')
            if c == w - 1 or cells[idx] & Direction.RIGHT:
                row_chars.append('|')
            else:
                row_chars.append(' ')
        out_lines.append(''.join(row_chars))
        out_lines.append(edge_line(r + 1))
    return "\n".join(out_lines)
