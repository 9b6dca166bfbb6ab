from typing import List, Tuple

Cell = Tuple[int, int]
# (intermediate separator cell, destination node cell)
Step = Tuple[Cell, Cell]

class CandidateStepGenerator:
    """
    Generates valid two-cell steps for a random walk, given a node cell to
    step from. Stepping two cells at a time keeps walls between the paths.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def candidates(self, x: int, y: int) -> List[Step]:
        steps: List[Step] = []
        # Left
        if x - 2 >= 1:
            steps.append(((x - 1, y), (x - 2, y)))
        # Right
        if x + 2 <= self.width - 2:
            steps.append(((x + 1, y), (x + 2, y)))
        # Up
        if y - 2 >= 1:
            steps.append(((x, y - 1), (x, y - 2)))
        # Down
        if y + 2 <= self.height - 2:
            steps.append(((x, y + 1), (x, y + 2)))
        return steps
