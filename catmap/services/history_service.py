"""Интерактивная сессия: история итераций с шагом вперёд/назад.

Принципы:
- Состояние явно принадлежит объекту сессии, а не глобальным переменным.
- Шаг вперёд переиспользует уже вычисленные снимки; пересчёт только на границе.
- Сессия ничего не знает о таймерах и отрисовке: она возвращает `StepResult`.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.models.results import PeriodResult, StepResult
from catmap.services.period_service import detect_period
from catmap.services.transform_service import apply_transform

logger = logging.getLogger(__name__)


class HistorySession:
    """История снимков 0..k над фиксированной парой (оригинал, матрица).

    Не потокобезопасна: владелец — один контроллер.
    """

    def __init__(self, original: PixelGrid, matrix: TransformMatrix, limit: Optional[int] = None) -> None:
        self._limit = limit
        self._original = original
        self._matrix = matrix
        self._history: List[PixelGrid] = [original]
        self._position = 0
        self._period = detect_period(original, matrix, limit)

    # ---- Properties ----
    @property
    def original(self) -> PixelGrid:
        return self._original

    @property
    def matrix(self) -> TransformMatrix:
        return self._matrix

    @property
    def current(self) -> PixelGrid:
        return self._history[self._position]

    @property
    def position(self) -> int:
        return self._position

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def period(self) -> PeriodResult:
        return self._period

    @property
    def progress(self) -> Optional[float]:
        """Доля пройденного цикла в [0, 1) или None, если период неизвестен."""
        if not self._period.found:
            return None
        period = self._period.period
        return (self._position % period) / period

    # ---- Operations ----
    def step_forward(self) -> StepResult:
        """Шаг вперёд: берёт кэшированный снимок или вычисляет новый на границе.

        По достижении периода сессия возвращается к оригиналу (`wrapped=True`).
        """
        nxt = self._position + 1
        if nxt < len(self._history):
            self._position = nxt
        else:
            snapshot = apply_transform(self.current, self._matrix)
            self._history.append(snapshot)
            self._position = nxt

        if self._period.found and self._position >= self._period.period:
            logger.debug("Reached period %d, wrapping to original", self._period.period)
            self._truncate_to_original()
            return StepResult(grid=self.current, position=0, wrapped=True)
        return StepResult(grid=self.current, position=self._position)

    def step_backward(self) -> StepResult:
        """Шаг назад по кэшу; на позиции 0 ничего не делает."""
        if self._position > 0:
            self._position -= 1
        return StepResult(grid=self.current, position=self._position)

    def reset(self) -> StepResult:
        """Оставляет только оригинал и возвращается на позицию 0."""
        self._truncate_to_original()
        return StepResult(grid=self.current, position=0)

    def on_matrix_or_image_change(
        self,
        original: Optional[PixelGrid] = None,
        matrix: Optional[TransformMatrix] = None,
    ) -> StepResult:
        """Сбрасывает историю под новые входные данные и пересчитывает период."""
        if original is not None:
            self._original = original
        if matrix is not None:
            self._matrix = matrix
        self._truncate_to_original()
        self._period = detect_period(self._original, self._matrix, self._limit)
        logger.info("Session rebuilt: N=%d, matrix %s, %s", self._original.size, self._matrix, self._period.label())
        return StepResult(grid=self.current, position=0)

    # ---- Helpers ----
    def _truncate_to_original(self) -> None:
        self._history = [self._original]
        self._position = 0
