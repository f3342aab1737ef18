from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging
import time

from robots_core.grid import DIRECTIONS
from robots_core.moves import Board
from robots_core.state import MAX_CELLS, PIECE_IDS, Move, PieceId, Puzzle
from heuristics.distance import slide_distances
from heuristics.selector import HeuristicFn
from .transposition import Transposition

logger = logging.getLogger(__name__)

Result = Dict[str, object]


def piece_order(target: PieceId) -> Tuple[PieceId, ...]:
    """Target first, then the remaining pieces in their fixed order."""
    return (target,) + tuple(p for p in PIECE_IDS if p != target)


class Solver:
    """Iterative-deepening DFS for the shortest move sequence bringing the
    goal piece onto the goal cell.

    Each depth limit runs a bounded DFS over the live board. A branch is cut
    when the slide-distance lower bound of the target exceeds the remaining
    budget, or when the same configuration was already searched with at
    least as much budget left. The heuristic table and the transposition
    cache are rebuilt on every `solve` call.
    """

    def __init__(self, puzzle: Puzzle, heuristic: HeuristicFn = slide_distances) -> None:
        if puzzle.width * puzzle.height > MAX_CELLS:
            raise ValueError(f"board has {puzzle.width * puzzle.height} cells, state key supports {MAX_CELLS}")
        self.puzzle = puzzle
        self.goal = puzzle.goal
        self.board = Board.from_puzzle(puzzle)
        self.heuristic = heuristic
        self.order = piece_order(self.goal.piece)
        self.solution: List[Move] = []
        self.stats: Dict[str, int] = {}
        self._bound: List[int] = []
        self._trans: Optional[Transposition] = None

    def solve(self, max_depth: int) -> bool:
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.solution = []
        self.stats = {"nodes": 0, "heuristic_prunes": 0, "tt_prunes": 0, "tt_size": 0, "depth": 0}
        self._bound = self.heuristic(self.board.grid, self.goal.cell).tolist()
        self._trans = Transposition()

        solved = False
        for limit in range(1, max_depth + 1):
            self.stats["depth"] = limit
            logger.debug("depth limit %d (nodes so far: %d)", limit, self.stats["nodes"])
            if self._dfs(0, limit):
                solved = True
                break

        self.stats["tt_size"] = len(self._trans)
        if solved:
            self.solution = list(self.board.moves)
            self.board.unwind()
            logger.info("solved in %d moves, nodes=%d", len(self.solution), self.stats["nodes"])
        else:
            logger.info("no solution within %d moves, nodes=%d", max_depth, self.stats["nodes"])
        self._trans = None
        return solved

    def _dfs(self, depth: int, limit: int) -> bool:
        self.stats["nodes"] += 1
        board = self.board
        cell = board.positions[self.goal.piece]
        if cell == self.goal.cell:
            return True
        if depth >= limit:
            return False

        remaining = limit - depth
        if self._bound[cell] > remaining:
            self.stats["heuristic_prunes"] += 1
            return False
        if self._trans.seen_better(board.key(), remaining):
            self.stats["tt_prunes"] += 1
            return False

        for piece in self.order:
            for direction in DIRECTIONS:
                if not board.move_piece(piece, direction):
                    continue
                if self._dfs(depth + 1, limit):
                    return True
                board.undo_move()
        return False


def iddfs(puzzle: Puzzle, max_depth: int, heuristic: HeuristicFn = slide_distances) -> Result:
    t0 = time.time()
    solver = Solver(puzzle, heuristic)
    ok = solver.solve(max_depth)
    runtime = time.time() - t0
    res: Result = {
        "success": ok,
        "nodes": solver.stats["nodes"],
        "runtime": runtime,
        "depth": solver.stats["depth"],
    }
    if ok:
        res["solution_len"] = len(solver.solution)
        res["moves"] = solver.solution
    return res
