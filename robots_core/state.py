from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple

from .grid import Direction

__all__ = [
    "PieceId",
    "PIECE_IDS",
    "Piece",
    "Goal",
    "Move",
    "Puzzle",
    "KEY_BITS",
    "MAX_CELLS",
    "pack_positions",
]


class PieceId(Enum):
    RED = "R"
    GREEN = "G"
    BLUE = "B"
    YELLOW = "Y"


# fixed order: branch enumeration after the target, and field order of the state key
PIECE_IDS: Tuple[PieceId, ...] = (PieceId.RED, PieceId.GREEN, PieceId.BLUE, PieceId.YELLOW)


@dataclass(frozen=True, slots=True)
class Piece:
    id: PieceId
    position: int


@dataclass(frozen=True, slots=True)
class Goal:
    piece: PieceId
    cell: int


@dataclass(frozen=True, slots=True)
class Move:
    piece: PieceId
    direction: Direction

    def __str__(self) -> str:
        return f"{self.piece.value}{self.direction.name[0]}"


@dataclass(frozen=True, slots=True)
class Puzzle:
    """
    Immutable description of one solve: wall masks, initial pieces and the goal.

    cells hold wall bits only; occupancy is derived from `pieces` when a
    live board is built.
    """

    cells: Tuple[int, ...]
    width: int
    height: int
    pieces: Tuple[Piece, ...]
    goal: Goal

    def initial_positions(self) -> Dict[PieceId, int]:
        return {p.id: p.position for p in self.pieces}


# ---- state key

KEY_BITS = 8
MAX_CELLS = 1 << KEY_BITS  # 256 cells, e.g. a 16x16 board


def pack_positions(positions: Mapping[PieceId, int]) -> int:
    """Packs the four piece positions into one integer.

    Bits [0, 8) hold RED, [8, 16) GREEN, [16, 24) BLUE, [24, 32) YELLOW.
    Distinct configurations give distinct keys as long as every cell index
    is below MAX_CELLS.
    """
    key = 0
    for shift, piece in enumerate(PIECE_IDS):
        key |= positions[piece] << (shift * KEY_BITS)
    return key
