from __future__ import annotations
import numpy as np

Grid = np.ndarray  # side x side, 0 is blank, goal is row-major 0..side*side-1


def tile_distance(value: int, row: int, col: int, side: int) -> int:
    """Moves needed for one tile to reach its goal cell, ignoring other tiles."""
    gr, gc = divmod(value, side)
    return abs(gc - col) + abs(gr - row)


def manhattan(grid: Grid) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    side = grid.shape[0]
    rows, cols = np.indices(grid.shape)
    goal_rows, goal_cols = np.divmod(grid, side)
    dist = np.abs(goal_cols - cols) + np.abs(goal_rows - rows)
    return int(dist[grid != 0].sum())
