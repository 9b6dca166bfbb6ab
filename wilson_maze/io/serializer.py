import struct
import json
import zlib
from typing import Dict, Any, Tuple
from array import array
from wilson_maze.core.grid import Grid, CellType

class MazeSerializer:
    MAGIC = b"WMAZ"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1
    FLAG_SEED_ONLY = 2

    @staticmethod
    def save(grid: Grid, filepath: str, meta: Dict[str, Any] = None, seed_only=False, compress=False):
        """
        Saves the maze to a binary file.
        Format (little endian):
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - WIDTH (4 bytes)
        - HEIGHT (4 bytes)
        - META_LEN (2 bytes)
        - META_JSON (META_LEN bytes)
        - DATA_LEN (4 bytes, 0 if seed_only)
        - DATA (one CellType byte per cell, row-major, optionally zlib)

        A seed-only file stores no cells; loading it regenerates the maze
        from meta['seed'].
        """
        if meta is None:
            meta = {}
        if seed_only and not isinstance(meta.get("seed"), int):
            raise ValueError("Seed-only files need an integer 'seed' in meta")

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED
        if seed_only:
            flags |= MazeSerializer.FLAG_SEED_ONLY

        meta_bytes = json.dumps(meta).encode('utf-8')

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.MAGIC)
            f.write(struct.pack("<BB", MazeSerializer.VERSION, flags))
            f.write(struct.pack("<II", grid.width, grid.height))
            f.write(struct.pack("<H", len(meta_bytes)))
            f.write(meta_bytes)

            if seed_only:
                f.write(struct.pack("<I", 0))
            else:
                data = grid.cells.tobytes()
                if compress:
                    data = zlib.compress(data)

                f.write(struct.pack("<I", len(data)))
                f.write(data)

    @staticmethod
    def _read(f, size: int) -> bytes:
        data = f.read(size)
        if len(data) != size:
            raise ValueError("Truncated maze file")
        return data

    @staticmethod
    def load(filepath: str) -> Tuple[Grid, Dict[str, Any]]:
        read = MazeSerializer._read
        with open(filepath, "rb") as f:
            magic = f.read(4)
            if magic != MazeSerializer.MAGIC:
                raise ValueError("Invalid file format")

            version, flags = struct.unpack("<BB", read(f, 2))
            if version != MazeSerializer.VERSION:
                raise ValueError(f"Unsupported maze file version {version}")

            width, height = struct.unpack("<II", read(f, 8))
            meta_len = struct.unpack("<H", read(f, 2))[0]
            meta = json.loads(read(f, meta_len).decode('utf-8'))
            data_len = struct.unpack("<I", read(f, 4))[0]

            if flags & MazeSerializer.FLAG_SEED_ONLY:
                # Generation is deterministic for a given seed
                if not isinstance(meta.get("seed"), int):
                    raise ValueError("Seed-only maze file has no seed")
                from wilson_maze.algo.wilson import build_maze
                return build_maze(width, height, seed=meta["seed"]), meta

            data = read(f, data_len)
            if flags & MazeSerializer.FLAG_COMPRESSED:
                try:
                    data = zlib.decompress(data)
                except zlib.error as e:
                    raise ValueError(f"Corrupt maze data: {e}") from e

            # Sizes are checked against the stored cells before any grid is allocated
            if len(data) != width * height:
                raise ValueError(f"Expected {width * height} cells, found {len(data)}")
            if any(b > CellType.PATH for b in data):
                raise ValueError("Maze data contains unknown cell states")

            grid = Grid(width, height)
            # Replace cells completely
            grid.cells = array('B', data)
            return grid, meta
