from __future__ import annotations
from typing import Dict

import numpy as np

from robots_core.grid import DIRECTIONS, Grid

INF = 10 ** 9  # unreachable


def slide_distances(grid: Grid, goal: int) -> np.ndarray:
    """Minimum number of slides from every cell to `goal`, walls only.

    Other pieces are ignored, so the value never overestimates the real
    number of target moves: a piece may stop anywhere along a corridor
    (another piece can act as a blocker), which is exactly what the
    relaxation assumes.

    Label-correcting relaxation seeded at the goal: each round walks every
    active cell's four corridors until a wall and lowers the distance of
    every cell passed to d+1. Cells that improved are active next round;
    stops at a fixed point. Unreached cells stay at INF.
    """
    dist = np.full(grid.size, INF, dtype=np.int32)
    dist[goal] = 0
    active = [goal]
    while active:
        improved: Dict[int, None] = {}
        for cell in active:
            d = int(dist[cell]) + 1
            for direction in DIRECTIONS:
                step = grid.offset(direction)
                cur = cell
                while not grid.has_wall(cur, direction):
                    cur += step
                    if d < dist[cur]:
                        dist[cur] = d
                        improved[cur] = None
        active = list(improved)
    return dist


def zero_distances(grid: Grid, goal: int) -> np.ndarray:
    return np.zeros(grid.size, dtype=np.int32)
