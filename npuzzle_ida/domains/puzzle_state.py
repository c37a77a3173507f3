from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple, Union
import logging

import numpy as np

from npuzzle_ida.domains.grid_io import Grid, format_grid, parse_grid_text, read_grid
from npuzzle_ida.errors import InvariantViolation
from npuzzle_ida.heuristics.manhattan import manhattan, tile_distance

log = logging.getLogger(__name__)

# Blank moves in this order; "UP" means the tile above the blank slides down.
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("UP", -1, 0),
    ("DOWN", 1, 0),
    ("LEFT", 0, -1),
    ("RIGHT", 0, 1),
)
_OFFSETS = {name: (dr, dc) for name, dr, dc in DIRECTIONS}


class PuzzleState:
    """
    One configuration of an N x N sliding puzzle (0 is the blank).

    Holds the grid, its Manhattan heuristic, the f-cost assigned by the
    current search and the tile values moved since the root. The grid is
    owned by this state; successors always get their own copy.
    """

    def __init__(self, grid: Grid, path: Optional[List[int]] = None):
        self.grid: Grid = np.array(grid, dtype=np.int64)
        self.n = self.grid.shape[0] - 1
        self.heuristic = self.total_manhattan_distance()
        self.cost_bound = self.heuristic
        self.path: List[int] = list(path) if path is not None else []

    # ---------- Construction ----------
    @classmethod
    def from_grid(cls, grid: Grid) -> "PuzzleState":
        return cls(grid)

    @classmethod
    def from_text(cls, text: str) -> "PuzzleState":
        return cls(parse_grid_text(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PuzzleState":
        return cls(read_grid(path))

    @property
    def side(self) -> int:
        return self.n + 1

    @property
    def move_count(self) -> int:
        return len(self.path)

    # ---------- Heuristic ----------
    def total_manhattan_distance(self) -> int:
        return manhattan(self.grid)

    def manhattan_distance(self, value: int, row: int, col: int) -> int:
        return tile_distance(value, row, col, self.side)

    def solved(self) -> bool:
        return bool(np.array_equal(self.grid.ravel(), np.arange(self.grid.size)))

    # ---------- Moves ----------
    def number_location(self, value: int) -> Tuple[int, int]:
        found = np.argwhere(self.grid == value)
        if len(found) == 0:
            raise InvariantViolation(f"could not locate {value} in puzzle")
        r, c = found[0]
        return int(r), int(c)

    def copy(self) -> "PuzzleState":
        """Independent copy: own grid array, own path list."""
        q = PuzzleState.__new__(PuzzleState)
        q.grid = self.grid.copy()
        q.n = self.n
        q.heuristic = self.heuristic
        q.cost_bound = self.cost_bound
        q.path = list(self.path)
        return q

    def swap(self, direction: str, blank: Tuple[int, int], trace: bool = False) -> "PuzzleState":
        """Slide the tile next to the blank (in `direction`) into it, in place."""
        try:
            dr, dc = _OFFSETS[direction]
        except KeyError:
            raise InvariantViolation(f"improper direction given: {direction!r}") from None
        y, x = blank
        ty, tx = y + dr, x + dc
        if not (0 <= ty <= self.n and 0 <= tx <= self.n):
            raise InvariantViolation(f"cannot move blank {direction} from {blank}")
        tile = int(self.grid[ty, tx])
        self.grid[y, x] = tile
        self.grid[ty, tx] = 0
        self.path.append(tile)
        self.heuristic = self.total_manhattan_distance()
        if trace:
            log.debug("moved 0 tile %s\n%s", direction, self.format())
        return self

    def successors(self, trace: bool = False) -> List["PuzzleState"]:
        """All states one move away, in UP, DOWN, LEFT, RIGHT order."""
        zero = self.number_location(0)
        out: List[PuzzleState] = []
        for name, dr, dc in DIRECTIONS:
            r, c = zero[0] + dr, zero[1] + dc
            if 0 <= r <= self.n and 0 <= c <= self.n:
                out.append(self.copy().swap(name, zero, trace=trace))
        return out

    # ---------- Display ----------
    def format(self) -> str:
        return format_grid(self.grid)

    def __repr__(self) -> str:
        rows = "/".join(",".join(str(int(v)) for v in row) for row in self.grid)
        return f"PuzzleState({rows}, h={self.heuristic}, f={self.cost_bound}, moves={len(self.path)})"
