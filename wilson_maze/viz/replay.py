from typing import Iterator, List, Optional, Tuple
from wilson_maze.core.grid import Grid, CellType
from wilson_maze.core.events import EventReader, EVT_WALK_START, EVT_WALK_STEP, EVT_CARVE

class EventAdapter:
    """
    Adapts an EventReader stream to look like a Generator for the Renderer.
    Applies carves to the Grid as it iterates and tracks the walk in flight
    so it can be drawn before it is loop-erased.
    """
    # Yield every N events
    EVENTS_PER_YIELD = 50

    def __init__(self, grid: Grid, reader: EventReader):
        self.grid = grid
        self.reader = reader

        self.walk: List[Tuple[int, int]] = []
        self.walk_count = 0
        self.carve_count = 0
        self.head: Optional[Tuple[int, int]] = None

    def run(self) -> Iterator[str]:
        count = 0
        for type_code, (x, y) in self.reader.stream_events():
            count += 1

            if type_code == EVT_WALK_START:
                self.walk = [(x, y)]
                self.head = (x, y)
                self.walk_count += 1

            elif type_code == EVT_WALK_STEP:
                self.walk.append((x, y))
                self.head = (x, y)

            elif type_code == EVT_CARVE:
                # Carves follow the walk they came from; once they start the raw walk is stale
                self.walk = []
                self.head = None
                self.grid.set_cell(x, y, CellType.PATH)
                self.carve_count += 1

            if count % self.EVENTS_PER_YIELD == 0:
                yield "Replay"

        yield "Done"
