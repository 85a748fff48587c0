"""Поиск периода перебором: применяем шаг, пока сетка не вернётся к исходной."""
from __future__ import annotations

import logging
from typing import Optional

from catmap.config import PERIOD_LIMIT_MAX, PERIOD_LIMIT_MIN, PERIOD_SEARCH_BUDGET
from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.models.results import PeriodResult
from catmap.services.transform_service import apply_transform, grids_equal

logger = logging.getLogger(__name__)


def default_search_limit(size: int) -> int:
    """Лимит шагов поиска, обратно пропорциональный N² (каждый шаг стоит O(N²))."""
    limit = PERIOD_SEARCH_BUDGET // max(1, size * size)
    return max(PERIOD_LIMIT_MIN, min(PERIOD_LIMIT_MAX, limit))


def detect_period(original: PixelGrid, matrix: TransformMatrix, limit: Optional[int] = None) -> PeriodResult:
    """Находит наименьшее i ≥ 1, при котором transform^i(original) == original.

    Args:
        original: Исходная сетка.
        matrix: Матрица отображения.
        limit: Максимум шагов; None — `default_search_limit(N)`.

    Returns:
        `PeriodResult`; `period=None`, если возврат не найден за `limit` шагов
        (это не доказательство апериодичности).

    Raises:
        ValueError: если limit < 1.
    """
    if limit is None:
        limit = default_search_limit(original.size)
    if limit < 1:
        raise ValueError(f"limit должен быть ≥ 1, получено {limit}")

    current = original
    for i in range(1, limit + 1):
        current = apply_transform(current, matrix)
        if grids_equal(current, original):
            logger.debug("Period %d found for N=%d, matrix %s", i, original.size, matrix)
            return PeriodResult(period=i, limit=limit)

    logger.debug("No period within %d steps for N=%d, matrix %s", limit, original.size, matrix)
    return PeriodResult(period=None, limit=limit)
