from __future__ import annotations
from dataclasses import dataclass, field
from time import perf_counter
from typing import List, Optional
import logging
import math

from npuzzle_ida.config import MAXITER, SearchConfig
from npuzzle_ida.domains.puzzle_state import PuzzleState
from npuzzle_ida.errors import InvariantViolation

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    iterations: int = 0
    bounds: List[int] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0
    peak_recursion: int = 0
    time: float = 0.0
    termination: str = ""

    @property
    def bound_final(self) -> Optional[int]:
        return self.bounds[-1] if self.bounds else None


class IDASearch:
    """
    Iterative-deepening A* over PuzzleState.

    Each iteration runs a bounded depth-first search with f = g + h pruning;
    the next bound is the smallest f that overshot the current one. After
    `config.max_iter` iterations without a solution the last best-overshoot
    state is returned unsolved, so callers must check `solved()`.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.stats = SearchStats()

    def run(self, root: PuzzleState) -> PuzzleState:
        self.stats = SearchStats()
        t0 = perf_counter()
        trace = self.config.trace

        bound = root.heuristic
        if trace:
            log.debug("initial bound => %d", bound)

        result = root
        for _ in range(0 if root.solved() else self.config.max_iter):
            self.stats.bounds.append(bound)
            self.stats.iterations += 1
            result = self.bounded_search(root, 0, bound)
            if result.solved():
                break
            bound = result.cost_bound
            if trace:
                log.debug("bound => %d", bound)

        self.stats.time = perf_counter() - t0
        self.stats.termination = "ok" if result.solved() else "exhausted"
        return result

    def bounded_search(self, state: PuzzleState, g: int, bound: int, depth: int = 0) -> PuzzleState:
        """
        One depth-first step.

        - f = g + h stored on the state; pruned or solved states are leaves
        - a solved result from any successor is returned at once
        - otherwise the non-solved result with the smallest f (first seen on
          ties) is returned; its f is the next iteration's bound
        """
        stats = self.stats
        stats.peak_recursion = max(stats.peak_recursion, depth)

        state.cost_bound = g + state.heuristic
        if state.cost_bound > bound or state.solved():
            return state

        trace = self.config.trace
        if trace:
            log.debug("%s\nf = %d, g = %d, h = %d", state.format(), state.cost_bound, g, state.heuristic)

        stats.expanded += 1
        min_f = math.inf
        best: Optional[PuzzleState] = None
        for successor in state.successors(trace=trace):
            stats.generated += 1
            t = self.bounded_search(successor, g + 1, bound, depth + 1)
            if t.solved():
                return t
            if t.cost_bound < min_f:
                min_f = t.cost_bound
                best = t

        if best is None:
            raise InvariantViolation(f"no successors for unsolved state {state!r}")
        return best


def ida_star(root: PuzzleState, max_iter: int = MAXITER, trace: bool = False) -> PuzzleState:
    return IDASearch(SearchConfig(max_iter=max_iter, trace=trace)).run(root)
