"""Grid builders shared by the test modules."""
import numpy as np

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.services.transform_service import apply_transform


def distinct_grid(size: int) -> PixelGrid:
    """Grid whose pixels are pairwise distinct, so its period equals the matrix order mod N."""
    idx = np.arange(size * size)
    arr = np.zeros((size * size, 4), dtype=np.uint8)
    arr[:, 0] = idx % 256
    arr[:, 1] = idx // 256
    arr[:, 2] = 7
    arr[:, 3] = 255
    return PixelGrid(arr.reshape(size, size, 4))


def apply_n(grid: PixelGrid, matrix: TransformMatrix, times: int) -> PixelGrid:
    for _ in range(times):
        grid = apply_transform(grid, matrix)
    return grid
