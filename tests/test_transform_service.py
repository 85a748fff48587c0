import numpy as np

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.services.transform_service import _scatter_indices, apply_transform, grids_equal

from grids import distinct_grid


class TestApplyTransform:
    def test_identity_matrix_keeps_grid(self, grid5):
        assert grids_equal(apply_transform(grid5, TransformMatrix.identity()), grid5)

    def test_deterministic(self, grid5, cat):
        first = apply_transform(grid5, cat)
        second = apply_transform(grid5, cat)
        assert grids_equal(first, second)

    def test_input_not_mutated(self, grid5, cat):
        before = grid5.pixels.copy()
        result = apply_transform(grid5, cat)
        assert np.array_equal(grid5.pixels, before)
        assert result is not grid5

    def test_moves_whole_record_to_destination(self, cat):
        grid = distinct_grid(3)
        result = apply_transform(grid, cat)
        # (x, y) = (1, 0) -> (1 + 0, 1) mod 3
        assert result.pixel(1, 1) == grid.pixel(1, 0)
        # (x, y) = (2, 2) -> (4, 2) mod 3 = (1, 2)
        assert result.pixel(1, 2) == grid.pixel(2, 2)

    def test_negative_entries_use_mathematical_modulo(self, grid5):
        mirror = TransformMatrix(-1, 0, 0, 1)
        result = apply_transform(grid5, mirror)
        for y in range(5):
            assert result.pixel(4, y) == grid5.pixel(1, y)
            assert result.pixel(0, y) == grid5.pixel(0, y)

    def test_large_entries_match_reduced(self, grid5):
        big = TransformMatrix(10**12 + 1, 5 * 10**9 + 1, 1, -10**15)
        small = TransformMatrix(1, 1, 1, 0)
        assert grids_equal(apply_transform(grid5, big), apply_transform(grid5, small))

    def test_singular_matrix_last_write_wins(self, grid4):
        collapse = TransformMatrix(1, 0, 0, 0)
        result = apply_transform(grid4, collapse)
        for x in range(4):
            # every row lands on row 0; row 3 is scanned last
            assert result.pixel(x, 0) == grid4.pixel(x, 3)
            for y in range(1, 4):
                assert result.pixel(x, y) == (0, 0, 0, 0)

    def test_singular_matrix_custom_fill(self, grid4):
        result = apply_transform(grid4, TransformMatrix(0, 0, 0, 0), fill=(9, 9, 9, 9))
        assert result.pixel(0, 0) == grid4.pixel(3, 3)
        assert result.pixel(2, 1) == (9, 9, 9, 9)

    def test_index_map_cache_is_small(self, grid4):
        _scatter_indices.cache_clear()
        for a12 in range(12):
            apply_transform(grid4, TransformMatrix(1, a12, 1, 1))
        info = _scatter_indices.cache_info()
        assert info.maxsize <= 8
        assert info.currsize <= info.maxsize


class TestGridsEqual:
    def test_equal_copies(self, grid4):
        assert grids_equal(grid4, PixelGrid.from_array(grid4.pixels))

    def test_different_sizes(self):
        assert not grids_equal(distinct_grid(3), distinct_grid(4))

    def test_single_component_differs(self, grid4):
        changed = grid4.pixels.copy()
        changed[2, 3, 3] = 0
        assert not grids_equal(grid4, PixelGrid(changed))
