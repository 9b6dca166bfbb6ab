class MazeError(ValueError):
    """Base class for failures that abort a maze build."""


class InvalidDimension(MazeError):
    def __init__(self, width: int, height: int):
        super().__init__(f"Maze sizes must be odd numbers, got {width}x{height}")
        self.width = width
        self.height = height


class DegenerateGrid(MazeError):
    """
    Raised when the grid is too small to hold a walkable maze, or when a walk
    reaches a node with no legal step out of it.
    """
    pass
