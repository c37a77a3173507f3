from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

State = Tuple[int, ...]


def _neighbors(s: State, side: int) -> List[Tuple[State, int]]:
    """(next_state, moved_tile) pairs, blank moving UP, DOWN, LEFT, RIGHT."""
    z = s.index(0)
    r, c = divmod(z, side)
    out = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        rr, cc = r + dr, c + dc
        if 0 <= rr < side and 0 <= cc < side:
            j = rr * side + cc
            lst = list(s)
            lst[z], lst[j] = lst[j], 0
            out.append((tuple(lst), s[j]))
    return out


def bfs(grid, max_depth: Optional[int] = None):
    """
    Breadth-first reference solver towards the row-major 0,1,2,... goal.
    Returns a dict; "path" holds the moved tile values, "g" the optimal move
    count, both None when the goal is unreachable within max_depth.
    """
    t0 = perf_counter()
    grid = np.asarray(grid)
    side = grid.shape[0]
    start: State = tuple(int(v) for v in grid.ravel())
    goal: State = tuple(range(side * side))

    q = deque([(start, 0)])
    parent: Dict[State, Optional[Tuple[State, int]]] = {start: None}
    seen: Set[State] = {start}
    expanded = generated = 0
    while q:
        s, d = q.popleft()
        if s == goal:
            path: List[int] = []
            while parent[s] is not None:
                s, tile = parent[s]
                path.append(tile)
            path.reverse()
            return {"path": path, "g": len(path), "expanded": expanded, "generated": generated,
                    "time": perf_counter() - t0, "algorithm": "BFS", "termination": "ok"}
        if max_depth is not None and d >= max_depth:
            continue
        expanded += 1
        for s2, tile in _neighbors(s, side):
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = (s, tile); q.append((s2, d + 1))
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter() - t0, "algorithm": "BFS", "termination": "exhausted"}
