from __future__ import annotations
import argparse, csv, logging, os, time
from typing import Dict

import yaml
from tqdm import tqdm

from robots_core.levels.resolve import load_board_by_id
from search.iddfs import iddfs
from heuristics.selector import get_heuristic

FIELDS = ["board_id", "heuristic", "max_depth", "success", "nodes", "runtime", "solution_len", "moves"]


def _run_one(board_id: str, heur_name: str, max_depth: int) -> Dict[str, object]:
    try:
        puzzle = load_board_by_id(board_id)
        res = iddfs(puzzle, max_depth, get_heuristic(heur_name))
        return {
            "board_id": board_id,
            "heuristic": heur_name,
            "max_depth": max_depth,
            "success": bool(res.get("success", False)),
            "nodes": int(res.get("nodes", 0)),
            "runtime": float(res.get("runtime", 0.0)),
            "solution_len": int(res.get("solution_len", -1)),
            "moves": " ".join(str(m) for m in res.get("moves", [])),
        }
    except (OSError, ValueError, IndexError) as e:
        tqdm.write(f"[skip] {board_id}: {e}")
        return {"board_id": board_id, "heuristic": heur_name, "max_depth": max_depth, "success": False,
                "nodes": 0, "runtime": 0.0, "solution_len": -1, "moves": ""}


def main():
    p = argparse.ArgumentParser(description="Batch IDDFS runs → CSV")
    p.add_argument("--list", required=True, help="file with one board id per line")
    p.add_argument("--config", type=str, default="configs/search.yaml")
    p.add_argument("--h", default=None, choices=["zero", "slides"])
    p.add_argument("--max_depth", type=int, default=None)
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--log_level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    cfg = {}
    if os.path.exists(args.config):
        with open(args.config, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    heur_name = args.h or cfg.get("heuristic", "slides")
    max_depth = args.max_depth or int(cfg.get("max_depth", 8))

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        board_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    print(f"[INFO] {len(board_ids)} boards, heuristic={heur_name}, max_depth={max_depth}")
    started = time.time()
    rows = [_run_one(bid, heur_name, max_depth) for bid in tqdm(board_ids, desc="Running IDDFS", unit="board")]

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s")


if __name__ == "__main__":
    main()
