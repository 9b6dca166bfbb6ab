import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wilson_maze.core.grid import Grid
from wilson_maze.core.errors import DegenerateGrid
from wilson_maze.algo.walk import LoopErasedWalk, erase_loops

class NoSteps:
    def candidates(self, x, y):
        return []

class TestEraseLoops(unittest.TestCase):
    def test_loop_is_removed(self):
        # Circles the (4, 4) block once before heading for the seed
        walk = [
            (5, 5), (4, 5), (3, 5), (3, 4), (3, 3), (4, 3), (5, 3), (5, 4),
            (5, 5), (4, 5), (3, 5), (2, 5), (1, 5), (1, 4), (1, 3), (1, 2), (1, 1),
        ]
        self.assertEqual(erase_loops(walk), [
            (5, 5), (4, 5), (3, 5), (2, 5), (1, 5), (1, 4), (1, 3), (1, 2), (1, 1),
        ])

    def test_jumps_to_furthest_occurrence(self):
        a, b, c, d, t = (1, 1), (2, 1), (3, 1), (4, 1), (9, 9)
        walk = [a, b, a, c, a, d, t]
        self.assertEqual(erase_loops(walk), [a, d, t])

    def test_nested_loops(self):
        a, b, c, t = (1, 1), (2, 1), (3, 1), (9, 9)
        walk = [a, b, c, b, a, b, c, t]
        # a jumps to index 4, then b to index 5, c to index 6
        self.assertEqual(erase_loops(walk), [a, b, c, t])

    def test_terminal_is_not_a_jump_target(self):
        # The terminal repeats the start; the start must not jump onto it
        walk = [(1, 1), (2, 1), (3, 1), (2, 1), (1, 1)]
        self.assertEqual(erase_loops(walk), [(1, 1), (2, 1), (1, 1)])

    def test_idempotent(self):
        walk = [(5, 5), (4, 5), (3, 5), (3, 4), (3, 3), (4, 3), (5, 3), (5, 4), (5, 5), (5, 6), (5, 7)]
        once = erase_loops(walk)
        self.assertEqual(erase_loops(once), once)
        self.assertEqual(len(set(once)), len(once))

    def test_empty_and_single(self):
        self.assertEqual(erase_loops([]), [])
        self.assertEqual(erase_loops([(1, 1)]), [(1, 1)])

class TestLoopErasedWalk(unittest.TestCase):
    def test_walk_reaches_maze(self):
        grid = Grid(15, 11)
        walker = LoopErasedWalk(grid, random.Random(3))
        start = (13, 9)
        walk = walker.walk(start)

        self.assertEqual(walk[0], start)
        self.assertTrue(grid.is_path(*walk[-1]))
        # Only the final cell is in the maze
        for cell in walk[:-1]:
            self.assertFalse(grid.is_path(*cell))
        # Alternates node, separator, node...
        self.assertEqual(len(walk) % 2, 1)
        for i, (x, y) in enumerate(walk):
            self.assertEqual(Grid.is_node(x, y), i % 2 == 0)

    def test_erased_walk_is_simple_and_contiguous(self):
        grid = Grid(21, 21)
        for seed in range(5):
            path = LoopErasedWalk(grid, random.Random(seed)).run((19, 19))
            self.assertEqual(len(set(path)), len(path))
            self.assertEqual(path[0], (19, 19))
            self.assertEqual(path[-1], (1, 1))  # Only the seed is in the maze
            for (x1, y1), (x2, y2) in zip(path, path[1:]):
                self.assertEqual(abs(x1 - x2) + abs(y1 - y2), 1)

    def test_same_rng_same_walk(self):
        grid = Grid(11, 11)
        w1 = LoopErasedWalk(grid, random.Random(99)).walk((9, 9))
        w2 = LoopErasedWalk(grid, random.Random(99)).walk((9, 9))
        self.assertEqual(w1, w2)

    def test_no_candidates_fails_fast(self):
        grid = Grid(5, 5)
        walker = LoopErasedWalk(grid, random.Random(0), steps=NoSteps())
        with self.assertRaises(DegenerateGrid):
            walker.run((3, 3))

if __name__ == '__main__':
    unittest.main()
