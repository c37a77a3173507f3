from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import numpy as np

from npuzzle_ida.errors import InvariantViolation, ParseError
from npuzzle_ida.heuristics.manhattan import Grid

SEPARATOR = "-" * 10


def _parse_row(line: str, lineno: int) -> List[int]:
    row: List[int] = []
    for tok in line.split(","):
        tok = tok.strip()
        try:
            v = int(tok)
        except ValueError:
            raise ParseError(f"not an integer: {tok!r}", line=lineno) from None
        if v < 0:
            raise ParseError(f"negative value: {v}", line=lineno)
        row.append(v)
    return row


def parse_grid(lines: Iterable[str]) -> Grid:
    """
    Parse comma-separated rows into a square grid.

    The side is taken from the first row. Trailing blank lines are ignored;
    anything else that does not fit (ragged rows, bad tokens, wrong row
    count, values that are not a permutation of 0..side*side-1) raises
    ParseError.
    """
    raw = [ln.rstrip("\r\n") for ln in lines]
    while raw and not raw[-1].strip():
        raw.pop()
    if not raw:
        raise ParseError("empty puzzle")

    rows: List[List[int]] = []
    for lineno, line in enumerate(raw, start=1):
        row = _parse_row(line, lineno)
        if rows and len(row) != len(rows[0]):
            raise ParseError(f"expected {len(rows[0])} values, got {len(row)}", line=lineno)
        rows.append(row)

    side = len(rows[0])
    if len(rows) != side:
        raise ParseError(f"grid is not square: {len(rows)} rows of {side} values")

    grid = np.array(rows, dtype=np.int64)
    if not np.array_equal(np.sort(grid, axis=None), np.arange(side * side)):
        raise ParseError(f"values must be 0..{side * side - 1}, each exactly once")
    return grid


def parse_grid_text(text: str) -> Grid:
    return parse_grid(text.splitlines())


def read_grid(path: Union[str, Path]) -> Grid:
    with open(path, "r", newline="") as f:
        return parse_grid(f)


def format_grid(grid: Grid) -> str:
    """Rows of space-separated values followed by a separator line."""
    lines = [" ".join(str(int(v)) for v in row) for row in grid]
    lines.append(SEPARATOR)
    return "\n".join(lines)


def is_solvable(grid: Grid) -> bool:
    """
    Reachability of the row-major 0,1,2,... goal.

    Every move is one transposition (blank with a tile) and shifts the blank
    by one cell, so the permutation parity and the parity of the blank's
    distance to (0, 0) flip together.
    """
    flat = [int(v) for v in grid.ravel()]
    inv = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inv += 1
    zr, zc = divmod(flat.index(0), grid.shape[0])
    return (inv % 2) == ((zr + zc) % 2)


def apply_moves(grid: Grid, path: Sequence[int]) -> List[Grid]:
    """Replay tile moves from `grid`; returns every grid along the way, start included."""
    cur = grid.copy()
    out = [cur.copy()]
    for tile in path:
        (zr, zc), = np.argwhere(cur == 0)
        found = np.argwhere(cur == tile)
        if len(found) != 1 or tile == 0:
            raise InvariantViolation(f"tile {tile} is not on the board")
        tr, tc = found[0]
        if abs(int(tr) - int(zr)) + abs(int(tc) - int(zc)) != 1:
            raise InvariantViolation(f"tile {tile} is not next to the blank")
        cur[zr, zc], cur[tr, tc] = tile, 0
        out.append(cur.copy())
    return out
