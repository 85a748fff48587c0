"""Генерация всех итераций 0..count с отметкой первого возврата к оригиналу."""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from catmap.config import MAX_ITERATIONS
from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.models.results import IterationSequence
from catmap.services.transform_service import apply_transform, grids_equal

logger = logging.getLogger(__name__)


class FrameSequence:
    """Ленивая конечная последовательность кадров длиной count + 1.

    Каждый вызов `iter()` начинает заново с оригинала, поэтому кадры можно
    отрисовывать по мере вычисления, не храня их все в памяти.
    """

    def __init__(self, original: PixelGrid, matrix: TransformMatrix, count: int) -> None:
        if count < 0:
            raise ValueError(f"count должен быть ≥ 0, получено {count}")
        self._original = original
        self._matrix = matrix
        self._count = count

    def __len__(self) -> int:
        return self._count + 1

    def __iter__(self) -> Iterator[PixelGrid]:
        current = self._original
        yield current
        for _ in range(self._count):
            current = apply_transform(current, self._matrix)
            yield current


def generate(
    original: PixelGrid,
    matrix: TransformMatrix,
    count: int,
    max_count: int = MAX_ITERATIONS,
) -> IterationSequence:
    """Строит кадры 0..count и находит первый индекс возврата к оригиналу.

    Запрос больше `max_count` урезается, и в результате выставляется `capped=True`.

    Raises:
        ValueError: если count < 0.
    """
    if count < 0:
        raise ValueError(f"count должен быть ≥ 0, получено {count}")
    effective = min(count, max_count)
    capped = effective < count
    if capped:
        logger.info("Iteration count %d capped to %d", count, effective)

    frames = []
    period_index: Optional[int] = None
    for i, frame in enumerate(FrameSequence(original, matrix, effective)):
        frames.append(frame)
        if i > 0 and period_index is None and grids_equal(frame, original):
            period_index = i

    return IterationSequence(
        frames=tuple(frames),
        period_index=period_index,
        requested=count,
        capped=capped,
    )
