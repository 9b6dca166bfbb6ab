from array import array
from enum import IntEnum
from typing import Iterator, Tuple

from wilson_maze.core.errors import InvalidDimension, DegenerateGrid

class CellType(IntEnum):
    WALL = 0
    PATH = 1

class Grid:
    # Every walk grows the maze from this node
    SEED = (1, 1)
    MIN_SIZE = 3

    __slots__ = ('width', 'height', 'cells', 'event_writer')

    def __init__(self, width: int, height: int, event_writer=None):
        if width % 2 == 0 or height % 2 == 0:
            raise InvalidDimension(width, height)
        if width < self.MIN_SIZE or height < self.MIN_SIZE:
            raise DegenerateGrid(
                f"Maze {width}x{height} is too small, both sizes must be at least {self.MIN_SIZE}"
            )

        self.width = width
        self.height = height
        self.event_writer = event_writer
        # 'B' (unsigned char) -> 1 byte per cell, all walls
        self.cells = array('B', [CellType.WALL] * (width * height))

        sx, sy = self.SEED
        self.cells[sy * width + sx] = CellType.PATH

        if self.event_writer:
            self.event_writer.write_header(width, height)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_cell(self, x: int, y: int) -> CellType:
        return CellType(self.cells[self.get_index(x, y)])

    def set_cell(self, x: int, y: int, state: CellType):
        self.cells[self.get_index(x, y)] = state
        if self.event_writer and state == CellType.PATH:
            self.event_writer.log_carve(x, y)

    def is_path(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == CellType.PATH

    @staticmethod
    def is_node(x: int, y: int) -> bool:
        return x % 2 == 1 and y % 2 == 1

    def node_cells(self) -> Iterator[Tuple[int, int]]:
        """
        Yields the (odd, odd) cells in row-major order.
        These are the vertices the finished maze has to span.
        """
        for y in range(1, self.height, 2):
            for x in range(1, self.width, 2):
                yield (x, y)

    def node_count(self) -> int:
        return (self.width // 2) * (self.height // 2)
