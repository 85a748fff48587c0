import numpy as np
import pytest

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.models.playback import PlaybackSettings
from catmap.models.results import PeriodResult


class TestPixelGrid:
    def test_rejects_non_square(self):
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((3, 4, 4), dtype=np.uint8))

    def test_rejects_too_small(self):
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((1, 1, 4), dtype=np.uint8))

    def test_rejects_wrong_dtype(self):
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((2, 2, 4), dtype=np.int32))

    def test_from_buffer_checks_length(self):
        with pytest.raises(ValueError):
            PixelGrid.from_buffer(bytes(4 * 3 * 3 - 1), 3)
        grid = PixelGrid.from_buffer(bytes(range(16)), 2)
        assert grid.size == 2
        assert grid.pixel(1, 0) == (4, 5, 6, 7)
        assert grid.to_bytes() == bytes(range(16))

    def test_from_array_clamps(self):
        grid = PixelGrid.from_array(np.full((2, 2, 4), 300))
        assert grid.pixel(0, 0) == (255, 255, 255, 255)
        grid = PixelGrid.from_array(np.full((2, 2, 4), -5))
        assert grid.pixel(1, 1) == (0, 0, 0, 0)

    def test_is_read_only(self):
        grid = PixelGrid.filled(3, (1, 2, 3, 4))
        with pytest.raises(ValueError):
            grid.pixels[0, 0, 0] = 9

    def test_source_array_writes_do_not_reach_grid(self):
        source = np.zeros((4, 4, 4), dtype=np.uint8)
        grid = PixelGrid(source)
        source[0, 0, 0] = 200
        assert grid.pixel(0, 0) == (0, 0, 0, 0)
        assert source.flags.writeable

    def test_from_array_does_not_alias_uint8_input(self):
        source = np.full((2, 2, 4), 5, dtype=np.uint8)
        grid = PixelGrid.from_array(source)
        source[1, 1] = 99
        assert grid.pixel(1, 1) == (5, 5, 5, 5)


class TestTransformMatrix:
    def test_default_is_classic(self):
        assert TransformMatrix.default().as_tuple() == (1, 1, 1, 0)

    def test_from_fields_falls_back_per_field(self):
        matrix = TransformMatrix.from_fields("2", "abc", "", " -3 ")
        assert matrix.as_tuple() == (2, 1, 1, -3)

    def test_from_fields_keeps_zero(self):
        assert TransformMatrix.from_fields("0", "0", "0", "0").as_tuple() == (0, 0, 0, 0)

    def test_reduced_is_non_negative(self):
        assert TransformMatrix(-1, 7, -6, 0).reduced(5) == (4, 2, 4, 0)


class TestPlaybackSettings:
    def test_default_interval(self):
        assert PlaybackSettings().interval_ms == 300
        assert PlaybackSettings().label == "300ms"

    def test_bounds(self):
        fast = PlaybackSettings(interval_ms=60).faster().faster()
        assert fast.interval_ms == 50
        slow = PlaybackSettings(interval_ms=980).slower()
        assert slow.interval_ms == 1000


def test_period_result_label():
    assert PeriodResult(period=6, limit=1500).label() == "period = 6"
    missing = PeriodResult(period=None, limit=300)
    assert not missing.found
    assert missing.label() == "period = >limit"
