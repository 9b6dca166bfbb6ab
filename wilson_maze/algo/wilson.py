import logging
import random
from enum import Enum
from typing import Iterator, Optional

from wilson_maze.core.grid import Grid, CellType
from wilson_maze.algo.base import Generator
from wilson_maze.algo.walk import LoopErasedWalk

logger = logging.getLogger(__name__)

class BuildState(Enum):
    INITIALIZING = "initializing"
    GROWING = "growing"
    COMPLETE = "complete"

class WilsonsAlgorithm(Generator):
    """
    Wilson's algorithm: loop-erased random walks from every node outside the
    maze until each one hits the growing tree. Produces a uniform spanning
    tree over the node cells.
    """
    # Yield a progress update every N walks
    PROGRESS_EVERY = 50

    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        super().__init__(grid, seed=seed, rng=rng)
        self.state = BuildState.INITIALIZING
        self.walk_count = 0
        self.walker = LoopErasedWalk(grid, self.rng)

    def generate(self) -> Iterator[str]:
        logger.info(f"Starting maze generation ({self.grid.width}x{self.grid.height})")
        logger.info(f"Initial cell: {Grid.SEED}")

        # Cells that must be part of the maze eventually. Also the walk start points.
        necessary_cells = list(self.grid.node_cells())
        # Visiting order has no effect on the distribution, only on how growth looks
        self.rng.shuffle(necessary_cells)

        self.state = BuildState.GROWING
        for start in necessary_cells:
            if self.grid.is_path(*start):
                continue

            for x, y in self.walker.run(start):
                # The terminal cell is already in the maze
                if self.grid.is_path(x, y):
                    continue
                self.grid.set_cell(x, y, CellType.PATH)
                self.step_count += 1

            self.walk_count += 1
            if self.walk_count % self.PROGRESS_EVERY == 0:
                yield f"Walks: {self.walk_count}"

        self.state = BuildState.COMPLETE
        logger.info(f"Maze generation complete: {self.walk_count} walks, {self.step_count} cells carved")
        yield "Done"

def build_maze(width: int, height: int, seed: Optional[int] = None,
               rng: Optional[random.Random] = None, event_writer=None) -> Grid:
    """
    Generates a complete maze with Wilson's algorithm.
    Sizes must be odd and at least 3. Raises InvalidDimension or
    DegenerateGrid; no grid is returned unless generation finished.
    """
    grid = Grid(width, height, event_writer=event_writer)
    WilsonsAlgorithm(grid, seed=seed, rng=rng).run_all()
    return grid
