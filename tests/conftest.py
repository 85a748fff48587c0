import pytest

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid

from grids import distinct_grid


@pytest.fixture
def grid4() -> PixelGrid:
    return distinct_grid(4)


@pytest.fixture
def grid5() -> PixelGrid:
    return distinct_grid(5)


@pytest.fixture
def cat() -> TransformMatrix:
    return TransformMatrix.default()
