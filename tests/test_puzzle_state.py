import itertools
import unittest

import numpy as np

from npuzzle_ida.domains.puzzle_state import PuzzleState
from npuzzle_ida.errors import InvariantViolation


def state(text):
    return PuzzleState.from_text(text)


class HeuristicTestCase(unittest.TestCase):
    def test_from_grid_matches_from_text(self):
        arr = np.array([[3, 1, 2], [6, 4, 5], [0, 7, 8]])
        s = PuzzleState.from_grid(arr)
        t = state("3,1,2\n6,4,5\n0,7,8")
        np.testing.assert_array_equal(t.grid, s.grid)
        self.assertEqual((t.heuristic, t.cost_bound, t.path), (s.heuristic, s.cost_bound, s.path))
        arr[0, 0] = 9
        self.assertEqual(3, s.grid[0, 0])

    def test_root_fields(self):
        s = state("1,0,2\n3,4,5\n6,7,8")
        self.assertEqual(2, s.n)
        self.assertEqual(3, s.side)
        self.assertEqual(1, s.heuristic)
        self.assertEqual(1, s.cost_bound)
        self.assertEqual([], s.path)
        self.assertEqual(0, s.move_count)

    def test_total_manhattan_distance(self):
        self.assertEqual(0, state("0,1,2\n3,4,5\n6,7,8").total_manhattan_distance())
        self.assertEqual(4, state("0,1,5\n3,2,4\n6,7,8").total_manhattan_distance())
        self.assertEqual(12, state("1,2,3\n4,5,6\n7,8,0").total_manhattan_distance())

    def test_manhattan_distance_of_one_tile(self):
        s = state("1,2,3\n4,5,6\n7,8,0")
        self.assertEqual(3, s.manhattan_distance(3, 0, 2))
        self.assertEqual(0, s.manhattan_distance(4, 1, 1))

    def test_heuristic_zero_iff_solved(self):
        for perm in itertools.permutations(range(4)):
            s = PuzzleState(np.array(perm).reshape(2, 2))
            self.assertGreaterEqual(s.heuristic, 0)
            self.assertEqual(s.heuristic == 0, s.solved(), perm)

    def test_solved_requires_row_major_order(self):
        self.assertTrue(state("0,1,2\n3,4,5\n6,7,8").solved())
        self.assertFalse(state("1,2,3\n4,5,6\n7,8,0").solved())


class SuccessorsTestCase(unittest.TestCase):
    def test_corner_edge_and_centre_counts(self):
        self.assertEqual(2, len(state("0,1,2\n3,4,5\n6,7,8").successors()))
        self.assertEqual(3, len(state("1,0,2\n3,4,5\n6,7,8").successors()))
        self.assertEqual(4, len(state("4,1,2\n3,0,5\n6,7,8").successors()))

    def test_fixed_order_up_down_left_right(self):
        succ = state("4,1,2\n3,0,5\n6,7,8").successors()
        self.assertEqual([[1], [7], [3], [5]], [s.path for s in succ])

    def test_blank_moves_one_orthogonal_step(self):
        parent = state("4,1,2\n3,0,5\n6,7,8")
        pr, pc = parent.number_location(0)
        for s in parent.successors():
            r, c = s.number_location(0)
            self.assertEqual(1, abs(r - pr) + abs(c - pc))
            # the moved tile now sits where the blank was
            self.assertEqual(s.path[-1], s.grid[pr, pc])

    def test_successor_heuristic_recomputed(self):
        succ = state("1,0,2\n3,4,5\n6,7,8").successors()
        by_tile = {s.path[-1]: s for s in succ}
        self.assertEqual(0, by_tile[1].heuristic)
        self.assertTrue(by_tile[1].solved())
        self.assertEqual(2, by_tile[4].heuristic)

    def test_successors_do_not_share_grid_or_path(self):
        parent = state("4,1,2\n3,0,5\n6,7,8")
        parent.path.append(99)
        before = parent.grid.copy()
        succ = parent.successors()
        succ[0].grid[0, 0] = 42
        succ[0].path.append(7)
        np.testing.assert_array_equal(before, parent.grid)
        self.assertEqual([99], parent.path)
        self.assertEqual([99, 7], succ[1].path)
        self.assertNotEqual(42, succ[1].grid[0, 0])

    def test_single_cell_grid_has_no_successors(self):
        s = PuzzleState(np.array([[0]]))
        self.assertTrue(s.solved())
        self.assertEqual([], s.successors())


class InvariantTestCase(unittest.TestCase):
    def test_number_location(self):
        s = state("4,1,2\n3,0,5\n6,7,8")
        self.assertEqual((1, 1), s.number_location(0))
        self.assertEqual((0, 0), s.number_location(4))

    def test_number_location_missing_value(self):
        with self.assertRaises(InvariantViolation):
            state("0,1\n2,3").number_location(9)

    def test_swap_unknown_direction(self):
        s = state("4,1,2\n3,0,5\n6,7,8")
        with self.assertRaises(InvariantViolation):
            s.copy().swap("NORTH", (1, 1))

    def test_swap_off_the_board(self):
        s = state("0,1,2\n3,4,5\n6,7,8")
        with self.assertRaises(InvariantViolation):
            s.copy().swap("UP", (0, 0))

    def test_format(self):
        self.assertEqual("0 1\n2 3\n----------", state("0,1\n2,3").format())


if __name__ == "__main__":
    unittest.main()
