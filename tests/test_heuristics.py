from collections import deque

import numpy as np
import pytest

from robots_core.grid import DIRECTIONS, Direction, Grid, add_wall, framed_cells
from robots_core.moves import Board, slide_end
from heuristics.distance import INF, slide_distances, zero_distances
from heuristics.selector import get_heuristic


def _lone_piece_slides(grid: Grid, goal: int) -> list:
    """Exact slide counts for a single piece on an otherwise empty board (BFS per start)."""
    out = []
    for start in range(grid.size):
        seen = {start: 0}
        q = deque([start])
        best = INF
        while q:
            cur = q.popleft()
            if cur == goal:
                best = seen[cur]
                break
            for d in DIRECTIONS:
                nxt = slide_end(grid, cur, d)
                if nxt not in seen:
                    seen[nxt] = seen[cur] + 1
                    q.append(nxt)
        out.append(best)
    return out


def test_framed_3x3_table():
    g = Grid(framed_cells(3, 3), 3, 3)
    dist = slide_distances(g, 8)
    assert dist.dtype == np.int32
    assert dist.tolist() == [2, 2, 1, 2, 2, 1, 1, 1, 0]
    assert dist.tolist() == _lone_piece_slides(g, 8)


def test_pieces_do_not_change_table(small_puzzle):
    board = Board.from_puzzle(small_puzzle)
    empty = Grid(list(small_puzzle.cells), 3, 3)
    assert slide_distances(board.grid, 8).tolist() == slide_distances(empty, 8).tolist()


def test_enclosed_cell_unreachable():
    cells = framed_cells(3, 3)
    for d in DIRECTIONS:
        add_wall(cells, 3, 4, d)
    dist = slide_distances(Grid(cells, 3, 3), 8)
    assert dist.tolist() == [2, 2, 1, 2, INF, 1, 1, 1, 0]


def test_corridor_distances(corridor_puzzle):
    p = corridor_puzzle
    g = Grid(list(p.cells), p.width, p.height)
    dist = slide_distances(g, p.goal.cell)
    w = p.width
    assert dist[0] == 5
    assert dist[3] == 4          # (0, 3)
    assert dist[3 * w + 3] == 3
    assert dist[3 * w + 6] == 2
    assert dist[6 * w + 6] == 1
    assert dist[6 * w + 7] == 1
    # outside the corridor nothing reaches the goal
    assert dist[10 * w + 10] == INF
    assert dist[15 * w + 15] == INF


def test_admissible_against_lone_piece():
    cells = framed_cells(6, 6)
    add_wall(cells, 6, 8, Direction.RIGHT)
    add_wall(cells, 6, 20, Direction.DOWN)
    add_wall(cells, 6, 27, Direction.UP)
    g = Grid(cells, 6, 6)
    dist = slide_distances(g, 14).tolist()
    exact = _lone_piece_slides(g, 14)
    for h, true in zip(dist, exact):
        assert h <= true


def test_zero_table_and_selector():
    g = Grid(framed_cells(4, 4), 4, 4)
    assert zero_distances(g, 5).tolist() == [0] * 16
    assert get_heuristic("slides") is slide_distances
    assert get_heuristic("ZERO") is zero_distances
    with pytest.raises(ValueError):
        get_heuristic("manhattan")
