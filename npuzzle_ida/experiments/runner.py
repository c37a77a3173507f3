#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from npuzzle_ida.config import MAXITER, SearchConfig, positive_int
from npuzzle_ida.domains.grid_io import is_solvable
from npuzzle_ida.domains.puzzle_state import PuzzleState
from npuzzle_ida.errors import ParseError
from npuzzle_ida.search.ida_star import IDASearch

HEADER = [
    "instance", "side", "h0", "solved", "moves",
    "iterations", "bound_final", "expanded", "generated", "peak_recursion",
    "time_sec", "termination", "solvable",
]


@dataclass
class Instance:
    name: str
    state: PuzzleState


def load_instances(paths: List[Path]) -> List[Instance]:
    out: List[Instance] = []
    for p in paths:
        try:
            out.append(Instance(name=p.name, state=PuzzleState.from_file(p)))
        except (ParseError, OSError) as e:
            print(f"skip {p}: {e}")
    return out


def solve_row(inst: Instance, config: SearchConfig) -> list:
    root = inst.state
    h0 = root.heuristic
    search = IDASearch(config)
    res = search.run(root)
    st = search.stats
    return [
        inst.name, root.side, h0, int(res.solved()), res.move_count if res.solved() else "",
        st.iterations, st.bound_final if st.bound_final is not None else "", st.expanded, st.generated,
        st.peak_recursion, f"{st.time:.6f}", st.termination, int(is_solvable(root.grid)),
    ]


def run(paths: List[Path], out: Path, max_iter: int = MAXITER) -> int:
    insts = load_instances(paths)
    config = SearchConfig(max_iter=max_iter)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            w.writerow(solve_row(inst, config))
    return len(insts)


def main():
    ap = argparse.ArgumentParser(description="Solve a batch of puzzle files with IDA* and record search statistics")
    ap.add_argument("puzzles", type=Path, nargs="+", help="Grid files (one comma-separated row per line)")
    ap.add_argument("--max-iter", type=positive_int, default=MAXITER)
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args()

    n = run(args.puzzles, args.out, args.max_iter)
    print(f"Wrote {args.out} ({n} instances)")


if __name__ == "__main__":
    main()
