import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wilson_maze.core.grid import Grid, CellType
from wilson_maze.core.errors import InvalidDimension, DegenerateGrid
from wilson_maze.core.analysis import MazeAnalyzer
from wilson_maze.algo.wilson import WilsonsAlgorithm, BuildState, build_maze

class TestWilsonsAlgorithm(unittest.TestCase):
    def test_spanning_tree(self):
        for w, h in [(5, 5), (7, 9), (21, 15), (31, 31)]:
            for seed in (1, 2, 3):
                grid = build_maze(w, h, seed=seed)
                stats = MazeAnalyzer.calculate_stats(grid)

                self.assertEqual(stats["path_nodes"], stats["nodes"], f"{w}x{h} seed {seed}: every node should be in the maze")
                self.assertTrue(stats["connected"], f"{w}x{h} seed {seed}: maze is not connected")
                self.assertEqual(stats["connectors"], stats["nodes"] - 1, f"{w}x{h} seed {seed}: maze has a cycle")
                self.assertEqual(stats["stray_paths"], 0)
                self.assertTrue(stats["is_perfect"])

    def test_borders_and_corners_stay_wall(self):
        w, h = 15, 11
        grid = build_maze(w, h, seed=5)
        for y in range(h):
            for x in range(w):
                on_border = x in (0, w - 1) or y in (0, h - 1)
                both_even = x % 2 == 0 and y % 2 == 0
                if on_border or both_even:
                    self.assertEqual(grid.get_cell(x, y), CellType.WALL, f"({x}, {y}) should stay a wall")

    def test_single_node_grid(self):
        grid = Grid(3, 3)
        algo = WilsonsAlgorithm(grid, seed=0)
        algo.run_all()

        self.assertEqual(algo.walk_count, 0)
        self.assertEqual(algo.state, BuildState.COMPLETE)
        path_cells = [(x, y) for y in range(3) for x in range(3) if grid.is_path(x, y)]
        self.assertEqual(path_cells, [(1, 1)])

    def test_four_node_grid(self):
        grid = build_maze(5, 5, seed=11)
        connectors = [(2, 1), (1, 2), (3, 2), (2, 3)]
        carved = [c for c in connectors if grid.is_path(*c)]
        self.assertEqual(len(carved), 3)
        for node in [(1, 1), (3, 1), (1, 3), (3, 3)]:
            self.assertTrue(grid.is_path(*node))
        self.assertTrue(MazeAnalyzer.is_connected(grid))

    def test_invalid_dimensions(self):
        for w, h in [(4, 5), (5, 4), (4, 4)]:
            with self.assertRaises(InvalidDimension):
                build_maze(w, h, seed=1)

    def test_minimal_dimensions(self):
        for w, h in [(1, 1), (1, 7), (7, 1)]:
            with self.assertRaises(DegenerateGrid):
                build_maze(w, h, seed=1)

    def test_determinism(self):
        grid1 = build_maze(25, 19, seed=12345)

        grid2 = Grid(25, 19)
        algo = WilsonsAlgorithm(grid2, seed=12345)
        for _ in algo.run(): pass

        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_interrupted_run_resumes(self):
        grid = Grid(41, 41)
        algo = WilsonsAlgorithm(grid, seed=7)
        algo.PROGRESS_EVERY = 5
        it = algo.run()
        next(it)
        # Finishing later continues the same run instead of starting a new one
        algo.run_all()

        self.assertEqual(algo.state, BuildState.COMPLETE)
        self.assertEqual(grid.cells.tobytes(), build_maze(41, 41, seed=7).cells.tobytes())

        # A finished run stays finished
        algo.run_all()
        self.assertEqual(grid.cells.tobytes(), build_maze(41, 41, seed=7).cells.tobytes())

    def test_injected_rng(self):
        grid1 = build_maze(15, 15, rng=random.Random(7))
        grid2 = build_maze(15, 15, rng=random.Random(7))
        grid3 = build_maze(15, 15, seed=7)
        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())
        self.assertEqual(grid1.cells.tobytes(), grid3.cells.tobytes())

    def test_different_seeds_differ(self):
        grid1 = build_maze(31, 31, seed=1)
        grid2 = build_maze(31, 31, seed=2)
        self.assertNotEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_states_and_progress(self):
        grid = Grid(41, 41)
        algo = WilsonsAlgorithm(grid, seed=3)
        self.assertEqual(algo.state, BuildState.INITIALIZING)

        updates = list(algo.run())
        self.assertEqual(updates[-1], "Done")
        self.assertEqual(algo.state, BuildState.COMPLETE)
        self.assertGreater(algo.walk_count, 0)
        self.assertLess(algo.walk_count, grid.node_count())

        # Every carved cell is one new PATH cell
        path_count = sum(1 for v in grid.cells if v == CellType.PATH)
        self.assertEqual(algo.step_count, path_count - 1)

if __name__ == '__main__':
    unittest.main()
