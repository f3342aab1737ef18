from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

__all__ = [
    "Direction",
    "DIRECTIONS",
    "ROBOT",
    "Grid",
    "reverse",
    "framed_cells",
    "add_wall",
]


class Direction(IntEnum):
    """Slide directions. The value doubles as the wall bit for that edge of a cell."""

    UP = 0x01
    DOWN = 0x02
    LEFT = 0x04
    RIGHT = 0x08


# canonical enumeration order
DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

# occupancy bit, disjoint from the wall bits
ROBOT = 0x10


def reverse(direction: Direction) -> Direction:
    if direction == Direction.UP:
        return Direction.DOWN
    if direction == Direction.DOWN:
        return Direction.UP
    if direction == Direction.LEFT:
        return Direction.RIGHT
    if direction == Direction.RIGHT:
        return Direction.LEFT
    raise ValueError(f"invalid direction: {direction!r}")


@dataclass(slots=True)
class Grid:
    """
    Wall topology of the board plus the occupancy bit of every cell.

    cells[idx] combines Direction bits (a wall on that edge of the cell)
    and ROBOT (a piece sits here). Cell indexing: idx = r*width + c.
    Piece identities are not stored here, only occupancy.
    """

    cells: List[int]
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    def idx_to_rc(self, idx: int) -> Tuple[int, int]:
        return (idx // self.width, idx % self.width)

    def rc_to_idx(self, r: int, c: int) -> int:
        return r * self.width + c

    def offset(self, direction: Direction) -> int:
        """Linear index delta of one step toward `direction`."""
        if direction == Direction.UP:
            return -self.width
        if direction == Direction.DOWN:
            return self.width
        if direction == Direction.LEFT:
            return -1
        if direction == Direction.RIGHT:
            return 1
        raise ValueError(f"invalid direction: {direction!r}")

    def has_wall(self, idx: int, direction: Direction) -> bool:
        return self.cells[idx] & direction != 0

    def has_robot(self, idx: int) -> bool:
        return self.cells[idx] & ROBOT != 0

    def toggle_robot(self, idx: int) -> None:
        self.cells[idx] ^= ROBOT


# ---- board authoring

def framed_cells(width: int, height: int) -> List[int]:
    """Cell masks of an empty board whose outer border is walled."""
    cells = [0] * (width * height)
    for c in range(width):
        cells[c] |= Direction.UP
        cells[(height - 1) * width + c] |= Direction.DOWN
    for r in range(height):
        cells[r * width] |= Direction.LEFT
        cells[r * width + width - 1] |= Direction.RIGHT
    return cells


def add_wall(cells: List[int], width: int, idx: int, direction: Direction) -> None:
    """Walls the edge of `idx` facing `direction`, on both cells sharing that edge.

    The neighbor is only marked when it exists: edges on the outer border
    have a single side.
    """
    cells[idx] |= direction
    height = len(cells) // width
    r, c = idx // width, idx % width
    if direction == Direction.UP and r > 0:
        cells[idx - width] |= Direction.DOWN
    elif direction == Direction.DOWN and r + 1 < height:
        cells[idx + width] |= Direction.UP
    elif direction == Direction.LEFT and c > 0:
        cells[idx - 1] |= Direction.RIGHT
    elif direction == Direction.RIGHT and c + 1 < width:
        cells[idx + 1] |= Direction.LEFT
