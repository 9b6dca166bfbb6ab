from collections import deque
from typing import Dict, Any, Iterator, Tuple

from wilson_maze.core.grid import Grid, CellType

class MazeAnalyzer:
    @staticmethod
    def open_neighbors(grid: Grid, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yields the 4-connected PATH neighbours of (x, y)."""
        if y > 0 and grid.is_path(x, y - 1):
            yield (x, y - 1)
        if y < grid.height - 1 and grid.is_path(x, y + 1):
            yield (x, y + 1)
        if x < grid.width - 1 and grid.is_path(x + 1, y):
            yield (x + 1, y)
        if x > 0 and grid.is_path(x - 1, y):
            yield (x - 1, y)

    @staticmethod
    def is_connector(grid: Grid, x: int, y: int) -> bool:
        """
        A separator cell that sits between two node cells, i.e. exactly one
        coordinate is even and both flanking cells are in bounds.
        """
        if x % 2 == 0 and y % 2 == 1:
            return 0 < x < grid.width - 1
        if x % 2 == 1 and y % 2 == 0:
            return 0 < y < grid.height - 1
        return False

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        """BFS over PATH cells from the seed; True if every PATH cell is reached."""
        sx, sy = Grid.SEED
        seen = {(sx, sy)}
        queue = deque([(sx, sy)])

        while queue:
            cx, cy = queue.popleft()
            for nxt in MazeAnalyzer.open_neighbors(grid, cx, cy):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)

        total_path = sum(1 for val in grid.cells if val == CellType.PATH)
        return len(seen) == total_path

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        nodes = grid.node_count()
        path_nodes = 0
        dead_ends = 0
        corridors = 0
        junctions = 0
        connectors = 0
        stray_paths = 0

        for y in range(grid.height):
            for x in range(grid.width):
                if not grid.is_path(x, y):
                    continue

                if Grid.is_node(x, y):
                    path_nodes += 1
                    exits = sum(1 for _ in MazeAnalyzer.open_neighbors(grid, x, y))
                    if exits == 1: dead_ends += 1
                    elif exits == 2: corridors += 1
                    elif exits >= 3: junctions += 1
                elif MazeAnalyzer.is_connector(grid, x, y):
                    connectors += 1
                else:
                    stray_paths += 1

        connected = MazeAnalyzer.is_connected(grid)
        return {
            "nodes": nodes,
            "path_nodes": path_nodes,
            "connectors": connectors,
            "stray_paths": stray_paths,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / nodes) * 100 if nodes > 0 else 0,
            "connected": connected,
            "is_perfect": (
                path_nodes == nodes
                and connected
                and connectors == nodes - 1
                and stray_paths == 0
            ),
        }
