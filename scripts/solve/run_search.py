from __future__ import annotations
import argparse
import logging

from robots_core.levels.resolve import load_board_by_id
from robots_core.moves import Board
from robots_core.render import render_ascii
from search.iddfs import iddfs
from heuristics.selector import get_heuristic


def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "board_id",
        nargs="?",
        default=None,
        help="Board id like 'path/to/boards.txt#idx'.",
    )
    p.add_argument("--max_depth", type=int, default=8)
    p.add_argument("--h", type=str, default="slides", choices=["zero", "slides"], help="heuristic")
    p.add_argument("--log_level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    if args.board_id is not None:
        puzzle = load_board_by_id(args.board_id)
    else:
        raise ValueError("Board id is required")

    res = iddfs(puzzle, args.max_depth, get_heuristic(args.h))
    print("Result:", {k: v for k, v in res.items() if k != "moves"})
    if res.get("success"):
        board = Board.from_puzzle(puzzle)
        print(f"\n-- step 0 --\n{render_ascii(puzzle, board.positions)}")
        for i, m in enumerate(res["moves"], start=1):  # type: ignore
            board.move_piece(m.piece, m.direction)
            print(f"\n-- step {i}: {m} --\n{render_ascii(puzzle, board.positions)}")

if __name__ == "__main__":
    main()
