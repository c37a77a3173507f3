#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np

from npuzzle_ida.config import MAXITER, positive_int
from npuzzle_ida.domains.grid_io import apply_moves
from npuzzle_ida.domains.puzzle_state import PuzzleState
from npuzzle_ida.heuristics.manhattan import Grid
from npuzzle_ida.search.ida_star import ida_star


def draw_board(grid: Grid, out_path: Path, title: str = "", moved: int = 0):
    """Tiles as shaded squares; the tile that just moved is highlighted."""
    side = grid.shape[0]
    fig, ax = plt.subplots(figsize=(0.9 * side + 0.6, 0.9 * side + 0.6))
    ax.set_xlim(0, side); ax.set_ylim(side, 0)
    ax.set_aspect("equal"); ax.axis("off")
    for (r, c), t in np.ndenumerate(grid):
        if t == 0:
            continue
        face = "#f4c542" if t == moved else "#d9e4f5"
        ax.add_patch(Rectangle((c + 0.05, r + 0.05), 0.9, 0.9, facecolor=face, edgecolor="#34495e"))
        ax.text(c + 0.5, r + 0.5, str(int(t)), ha="center", va="center", fontsize=14)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def save_frames(root: PuzzleState, path: List[int], outdir: Path) -> List[Path]:
    """One PNG per grid along `path`, starting with the root."""
    frames = []
    for i, g in enumerate(apply_moves(root.grid, path)):
        p = outdir / f"step_{i:03d}.png"
        moved = path[i - 1] if i else 0
        draw_board(g, p, title=f"move {i}: tile {moved}" if i else "start", moved=moved)
        frames.append(p)
    return frames


def main():
    p = argparse.ArgumentParser(description="Solve one puzzle file and save board images along the path.")
    p.add_argument("puzzle", type=Path)
    p.add_argument("--max-iter", type=positive_int, default=MAXITER)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args()

    root = PuzzleState.from_file(args.puzzle)
    res = ida_star(root, max_iter=args.max_iter)

    if not res.solved():
        print("No path (bound increments exhausted). Try a larger --max-iter.")
        return

    frames = save_frames(root, res.path, Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
