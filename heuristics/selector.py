from __future__ import annotations
from typing import Callable

import numpy as np

from robots_core.grid import Grid
from heuristics.distance import slide_distances, zero_distances

HeuristicFn = Callable[[Grid, int], np.ndarray]


def get_heuristic(name: str) -> HeuristicFn:
    name = name.lower()
    if name == "slides":
        return slide_distances
    if name == "zero":
        return zero_distances
    raise ValueError(f"unknown heuristic: {name}")
