import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wilson_maze.core.grid import Grid
from wilson_maze.core.analysis import MazeAnalyzer
from wilson_maze.algo.wilson import WilsonsAlgorithm

def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({(width // 2) * (height // 2):,} nodes) ---")

    start_time = time.time()
    grid = Grid(width, height)
    print(f"Grid Init: {time.time() - start_time:.4f}s")

    algo = WilsonsAlgorithm(grid, seed=seed)
    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Walks: {algo.walk_count:,}, cells carved: {algo.step_count:,}")
    if gen_time > 0:
        print(f"Speed: {grid.node_count() / gen_time:,.0f} nodes/sec")

    # The first walks are the long ones: the tree starts as a single cell
    stats = MazeAnalyzer.calculate_stats(grid)
    print(f"Dead ends: {stats['dead_end_percent']:.1f}% of nodes, perfect: {stats['is_perfect']}")

def run_suite():
    sizes = [
        (51, 51),
        (101, 101),
        (201, 201),
        (301, 301),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
