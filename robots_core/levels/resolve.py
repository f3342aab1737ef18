from __future__ import annotations
from itertools import groupby
from pathlib import Path
from typing import List, Tuple

from ..parser import parse_board_str
from ..state import Puzzle

ID_SEP = "#"


def parse_board_id(board_id: str) -> Tuple[str, int]:
    """'boards.txt#3' -> ('boards.txt', 3); a bare path means board 0."""
    path, sep, index = board_id.rpartition(ID_SEP)
    if not sep:
        return board_id, 0
    if not index.strip().isdigit():
        raise ValueError(f"Bad board index {index!r} in {board_id!r}")
    return path, int(index)


def split_on_blank_lines(text: str) -> List[str]:
    """Board blocks of a multi-board file, in file order."""
    return [
        "\n".join(lines)
        for filled, lines in groupby(text.splitlines(), key=lambda ln: ln.strip() != "")
        if filled
    ]


def load_board_by_id(board_id: str) -> Puzzle:
    path, wanted = parse_board_id(board_id)
    blocks = split_on_blank_lines(Path(path).read_text(encoding="utf-8"))
    if not blocks:
        raise ValueError(f"No boards found in {path}")
    if wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_board_str(blocks[wanted])
