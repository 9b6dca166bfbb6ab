import struct
from typing import Iterator, Tuple

# Event Types
EVT_WALK_START = 0x01
EVT_WALK_STEP = 0x02
EVT_CARVE = 0x03

EVENT_TYPES = (EVT_WALK_START, EVT_WALK_STEP, EVT_CARVE)

MAGIC = b"WALKLOG"
HEADER = struct.Struct(">II")
# 1 byte type + 2b X + 2b Y. Coordinates fit an unsigned short (< 65536).
RECORD = struct.Struct(">BHH")
MAX_COORD = 0xFFFF

class EventWriter:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def write_header(self, width: int, height: int):
        if width - 1 > MAX_COORD or height - 1 > MAX_COORD:
            raise ValueError(f"Event logs hold coordinates up to {MAX_COORD}, maze is {width}x{height}")
        self.file.write(MAGIC)
        self.file.write(HEADER.pack(width, height))

    def _write(self, type_code: int, x: int, y: int):
        self.file.write(RECORD.pack(type_code, x, y))

    def log_walk_start(self, x: int, y: int):
        self._write(EVT_WALK_START, x, y)

    def log_walk_step(self, x: int, y: int):
        self._write(EVT_WALK_STEP, x, y)

    def log_carve(self, x: int, y: int):
        self._write(EVT_CARVE, x, y)

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.width = 0
        self.height = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(HEADER.size)
        if len(data) != HEADER.size:
            raise ValueError("Truncated event log header")
        self.width, self.height = HEADER.unpack(data)
        return self.width, self.height

    def stream_events(self) -> Iterator[Tuple[int, Tuple[int, int]]]:
        while True:
            data = self.file.read(RECORD.size)
            if not data:
                break
            if len(data) != RECORD.size:
                raise ValueError("Truncated event record")

            type_code, x, y = RECORD.unpack(data)
            if type_code not in EVENT_TYPES:
                raise ValueError(f"Unknown event type 0x{type_code:02x}")
            yield (type_code, (x, y))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
