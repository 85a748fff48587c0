import numpy as np
import pytest

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.services import history_service
from catmap.services.history_service import HistorySession
from catmap.services.transform_service import apply_transform, grids_equal

from grids import apply_n


class TestStepping:
    def test_starts_at_original(self, grid5, cat):
        session = HistorySession(grid5, cat)
        assert session.position == 0
        assert session.history_length == 1
        assert grids_equal(session.current, grid5)
        assert session.period.period == 20

    def test_forward_back_forward_matches_direct(self, grid5, cat):
        session = HistorySession(grid5, cat)
        for _ in range(5):
            session.step_forward()
        for _ in range(2):
            session.step_backward()
        for _ in range(2):
            result = session.step_forward()
        assert result.position == 5
        assert session.position == 5
        assert grids_equal(session.current, apply_n(grid5, cat, 5))

    def test_backward_at_zero_is_noop(self, grid5, cat):
        session = HistorySession(grid5, cat)
        result = session.step_backward()
        assert result.position == 0
        assert grids_equal(result.grid, grid5)

    def test_replay_reuses_snapshots(self, grid5, cat, monkeypatch):
        session = HistorySession(grid5, cat)
        for _ in range(4):
            session.step_forward()

        calls = []

        def counting(grid, matrix):
            calls.append(1)
            return apply_transform(grid, matrix)

        monkeypatch.setattr(history_service, "apply_transform", counting)
        session.step_backward()
        session.step_backward()
        session.step_forward()
        session.step_forward()
        assert calls == []
        assert session.history_length == 5

        session.step_forward()
        assert len(calls) == 1
        assert session.history_length == 6

    def test_snapshots_match_direct_application(self, grid5, cat):
        session = HistorySession(grid5, cat)
        for k in range(1, 8):
            result = session.step_forward()
            assert grids_equal(result.grid, apply_n(grid5, cat, k))


class TestPeriodWrap:
    def test_wraps_to_original_at_period(self, grid4, cat):
        session = HistorySession(grid4, cat)
        assert session.period.period == 6
        for _ in range(5):
            assert not session.step_forward().wrapped
        result = session.step_forward()
        assert result.wrapped
        assert result.position == 0
        assert session.history_length == 1
        assert grids_equal(result.grid, grid4)

    def test_progress(self, grid4, cat):
        session = HistorySession(grid4, cat)
        assert session.progress == 0
        for _ in range(3):
            session.step_forward()
        assert session.progress == pytest.approx(0.5)

    def test_no_wrap_without_period(self, grid4):
        session = HistorySession(grid4, TransformMatrix(1, 0, 0, 0), limit=20)
        assert not session.period.found
        assert session.progress is None
        for _ in range(30):
            assert not session.step_forward().wrapped
        assert session.position == 30


class TestSnapshots:
    def test_frontier_growth_after_replay_stays_contiguous(self, grid5, cat):
        session = HistorySession(grid5, cat)
        for _ in range(3):
            session.step_forward()
        session.step_backward()
        session.step_backward()
        for _ in range(4):
            session.step_forward()
        assert session.position == 5
        assert session.history_length == 6
        for k in range(5, -1, -1):
            assert grids_equal(session.current, apply_n(grid5, cat, k))
            session.step_backward()

    def test_original_is_isolated_from_caller_array(self, cat):
        source = np.zeros((4, 4, 4), dtype=np.uint8)
        source[..., 3] = 255
        session = HistorySession(PixelGrid(source), cat)
        source[0, 0, 0] = 200
        assert session.original.pixel(0, 0) == (0, 0, 0, 255)
        assert session.step_forward().grid.pixel(0, 0) == (0, 0, 0, 255)


class TestInvalidation:
    def test_reset_keeps_only_original(self, grid5, cat):
        session = HistorySession(grid5, cat)
        for _ in range(3):
            session.step_forward()
        result = session.reset()
        assert result.position == 0
        assert session.history_length == 1
        assert grids_equal(session.current, grid5)

    def test_matrix_change_clears_history(self, grid5, cat):
        session = HistorySession(grid5, cat)
        for _ in range(5):
            session.step_forward()
        session.step_backward()
        session.step_backward()

        other = TransformMatrix(2, 1, 1, 1)
        session.on_matrix_or_image_change(matrix=other)
        assert session.history_length == 1
        assert session.period.period == 10

        result = session.step_forward()
        assert result.position == 1
        assert grids_equal(result.grid, apply_transform(grid5, other))

    def test_image_change_recomputes_period(self, grid5, grid4, cat):
        session = HistorySession(grid5, cat)
        session.step_forward()
        result = session.on_matrix_or_image_change(original=grid4)
        assert result.position == 0
        assert grids_equal(result.grid, grid4)
        assert session.period.period == 6
        assert session.matrix == cat
