from typing import Dict, Iterable, List, Optional

from .grid import Direction, Grid, ROBOT, reverse
from .state import PIECE_IDS, Move, PieceId, Piece, Puzzle, pack_positions


def slide_end(grid: Grid, start: int, direction: Direction) -> int:
    """Cell where a piece leaving `start` toward `direction` comes to rest.

    The piece advances while its current cell has no wall on that side and
    the next cell is free. Returns `start` when it cannot move at all.
    """
    step = grid.offset(direction)
    end = start
    while not grid.has_wall(end, direction) and not grid.has_robot(end + step):
        end += step
    return end


class Board:
    """Live, mutable play state: a grid with occupancy bits, the four piece
    positions and the stack of applied moves.

    Every mutation goes through `move_piece` and is reverted by `undo_move`,
    which replays the same occupancy toggles with start and end swapped.
    """

    def __init__(self, grid: Grid, pieces: Iterable[Piece]) -> None:
        self.grid = grid
        self.positions: Dict[PieceId, int] = {p.id: p.position for p in pieces}
        if sorted(self.positions, key=PIECE_IDS.index) != list(PIECE_IDS):
            raise ValueError(f"expected one of each piece {[p.value for p in PIECE_IDS]}, got {list(self.positions)}")
        for cell in self.positions.values():
            grid.cells[cell] |= ROBOT
        self.moves: List[Move] = []
        self._origins: List[int] = []

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "Board":
        grid = Grid(list(puzzle.cells), puzzle.width, puzzle.height)
        return cls(grid, puzzle.pieces)

    def position(self, piece: PieceId) -> int:
        try:
            return self.positions[piece]
        except KeyError:
            raise KeyError(f"unknown piece: {piece!r}") from None

    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def move_piece(self, piece: PieceId, direction: Direction) -> bool:
        """Slides `piece` toward `direction` and pushes the move.

        Returns False without touching any state when the move would undo
        the previous move of the same piece, or when the piece cannot move.
        """
        start = self.position(piece)
        last = self.last_move()
        if last is not None and last.piece == piece and reverse(last.direction) == direction:
            return False

        end = slide_end(self.grid, start, direction)
        if end == start:
            return False

        self.grid.toggle_robot(start)
        self.grid.toggle_robot(end)
        self.positions[piece] = end
        self.moves.append(Move(piece, direction))
        self._origins.append(start)
        return True

    def undo_move(self) -> Move:
        """Reverts the most recent move and pops it from the stack."""
        move = self.moves.pop()
        origin = self._origins.pop()
        end = self.positions[move.piece]
        self.grid.toggle_robot(end)
        self.grid.toggle_robot(origin)
        self.positions[move.piece] = origin
        return move

    def unwind(self) -> None:
        while self.moves:
            self.undo_move()

    def key(self) -> int:
        return pack_positions(self.positions)

    def occupancy(self) -> int:
        """Bitset of occupied cells, read back from the cell masks."""
        occ = 0
        for idx, mask in enumerate(self.grid.cells):
            if mask & ROBOT:
                occ |= 1 << idx
        return occ


def apply_moves(puzzle: Puzzle, moves: Iterable[Move]) -> Dict[PieceId, int]:
    """Replays `moves` from the initial placement; returns the final positions."""
    board = Board.from_puzzle(puzzle)
    for i, m in enumerate(moves):
        if not board.move_piece(m.piece, m.direction):
            raise ValueError(f"illegal move #{i}: {m}")
    return dict(board.positions)
