import logging
import random
from typing import Dict, List, Optional

from wilson_maze.core.errors import DegenerateGrid
from wilson_maze.core.grid import Grid
from wilson_maze.algo.steps import CandidateStepGenerator, Cell

logger = logging.getLogger(__name__)

def erase_loops(walk: List[Cell]) -> List[Cell]:
    """
    Removes every loop from a recorded walk.

    Scanning left to right, each cell jumps straight to its furthest later
    occurrence, dropping everything in between. The last cell is the terminal
    that was already part of the maze and is never used as a jump target.
    The result visits no cell twice.
    """
    if not walk:
        return []

    last_seen: Dict[Cell, int] = {}
    for idx, cell in enumerate(walk[:-1]):
        last_seen[cell] = idx

    erased: List[Cell] = []
    i = 0
    while i < len(walk):
        cell = walk[i]
        # Only the terminal can map back to an earlier index
        i = max(i, last_seen.get(cell, i))
        erased.append(cell)
        i += 1

    return erased

class LoopErasedWalk:
    """
    Random walk over node cells from a cell outside the maze until it reaches
    a PATH cell, followed by loop erasure.
    """
    def __init__(self, grid: Grid, rng: random.Random, steps: Optional[CandidateStepGenerator] = None):
        self.grid = grid
        self.rng = rng
        self.steps = steps if steps is not None else CandidateStepGenerator(grid.width, grid.height)

    def walk(self, start: Cell) -> List[Cell]:
        """Returns the raw walk: start, then (separator, node) pairs up to the first PATH node."""
        writer = self.grid.event_writer
        if writer:
            writer.log_walk_start(*start)

        random_walk: List[Cell] = [start]
        current = start

        while not self.grid.is_path(*current):
            candidates = self.steps.candidates(*current)
            if not candidates:
                raise DegenerateGrid(f"No legal step from {current} on a {self.grid.width}x{self.grid.height} grid")

            wall, current = self.rng.choice(candidates)
            random_walk.append(wall)
            random_walk.append(current)

            if writer:
                writer.log_walk_step(*current)

        return random_walk

    def run(self, start: Cell) -> List[Cell]:
        logger.debug(f"Starting random walk at: {start}")
        random_walk = self.walk(start)
        path = erase_loops(random_walk)
        logger.debug(f"Walk from {start}: {len(random_walk)} cells, {len(path)} after loop erasure")
        return path
