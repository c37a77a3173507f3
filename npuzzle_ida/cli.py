#!/usr/bin/env python3
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from npuzzle_ida.config import MAXITER, SearchConfig, positive_int, setup_logging
from npuzzle_ida.domains.grid_io import is_solvable
from npuzzle_ida.domains.puzzle_state import PuzzleState
from npuzzle_ida.errors import ParseError
from npuzzle_ida.search.ida_star import IDASearch


def format_path(path: List[int]) -> str:
    return "".join(f"{tile}->" for tile in path) + "COMPLETE"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="npuzzle-ida",
                                 description="Solve an N-puzzle grid file optimally with IDA* + Manhattan distance.")
    ap.add_argument("puzzle", type=Path, nargs="?", default=Path("puzzle.txt"),
                    help="Comma-separated grid file (default: puzzle.txt)")
    ap.add_argument("--max-iter", type=positive_int, default=MAXITER,
                    help=f"Bound increments before giving up (default: {MAXITER})")
    ap.add_argument("--trace", action="store_true", help="Log bounds, expanded nodes and moves")
    ap.add_argument("--show-grid", action="store_true", help="Print the start grid before solving")
    ap.add_argument("--stats", action="store_true", help="Print search statistics")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.trace)

    try:
        root = PuzzleState.from_file(args.puzzle)
    except ParseError as e:
        print(f"{args.puzzle}: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"{args.puzzle}: {e.strerror or e}", file=sys.stderr)
        return 2

    if args.show_grid:
        print(root.format())

    search = IDASearch(SearchConfig(max_iter=args.max_iter, trace=args.trace))
    solved = search.run(root)

    if args.stats:
        st = search.stats
        print(f"iterations={st.iterations} bounds={st.bounds} expanded={st.expanded} "
              f"generated={st.generated} peak_recursion={st.peak_recursion} time={st.time:.6f}s")

    if solved.solved():
        print(format_path(solved.path))
        print(f"# of moves: {solved.move_count}")
        return 0

    print("No solution for puzzle configuration.")
    if not is_solvable(root.grid):
        print("(configuration is unsolvable: wrong permutation parity)")
    return 1


if __name__ == "__main__":
    sys.exit(main())
