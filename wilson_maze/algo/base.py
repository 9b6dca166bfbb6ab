import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from wilson_maze.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.seed = seed
        # One stream for every random decision of a run
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self._run_iter: Optional[Iterator[str]] = None

    @abstractmethod
    def generate(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run(self) -> Iterator[str]:
        """
        Returns the run in progress, starting it on first call.
        A run stopped part way (e.g. a closed window) resumes where it left
        off, so the rng stream and the result match an uninterrupted run.
        """
        if self._run_iter is None:
            self._run_iter = self.generate()
        return self._run_iter

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
