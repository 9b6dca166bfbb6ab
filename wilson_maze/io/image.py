import logging
import cv2
import numpy as np
from wilson_maze.core.grid import Grid

logger = logging.getLogger(__name__)

WALL_PIXEL = 0
PATH_PIXEL = 255

def to_array(grid: Grid) -> np.ndarray:
    """
    One pixel per cell: walls black, paths white.
    Returns a (height, width) uint8 array, the layout OpenCV expects.
    """
    cells = np.frombuffer(grid.cells.tobytes(), dtype=np.uint8)
    cells = cells.reshape((grid.height, grid.width))
    return np.where(cells > 0, PATH_PIXEL, WALL_PIXEL).astype(np.uint8)

def export_image(grid: Grid, filepath: str):
    logger.info(f"Starting image generation ({grid.width}x{grid.height})")
    if not cv2.imwrite(filepath, to_array(grid)):
        raise OSError(f"Could not write image to {filepath}")
    logger.info(f"Image saved to {filepath}")
