"""Один шаг отображения кота Арнольда и сравнение сеток.

Преобразование — перестановка (или, для вырожденной матрицы, «сжатие») пикселей:
    [nx]   [a11  a12] [x]
    [ny] = [a21  a22] [y]  mod N

Карта индексов зависит только от (N, матрица), поэтому вычисляется один раз
и кэшируется; сам шаг — одно векторизованное копирование numpy.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np

from catmap.config import TRANSPARENT
from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import CHANNELS, PixelGrid


@lru_cache(maxsize=8)
def _scatter_indices(n: int, coeffs: Tuple[int, int, int, int]) -> Tuple[np.ndarray, np.ndarray]:
    """Возвращает (dst, src) — плоские индексы назначения и источника.

    Источники перебираются построчно (y внешний, x внутренний). При коллизиях
    остаётся последний источник в этом порядке, так что в dst нет повторов.
    """
    a11, a12, a21, a22 = coeffs
    src = np.arange(n * n, dtype=np.int64)
    ys, xs = np.divmod(src, n)
    nx = np.mod(a11 * xs + a12 * ys, n)
    ny = np.mod(a21 * xs + a22 * ys, n)
    dst = ny * n + nx

    # last write wins: first occurrence in reversed order
    uniq, first_in_reversed = np.unique(dst[::-1], return_index=True)
    last_src = (n * n - 1) - first_in_reversed

    uniq.flags.writeable = False
    last_src.flags.writeable = False
    return uniq, last_src


def apply_transform(
    grid: PixelGrid,
    matrix: TransformMatrix,
    fill: Tuple[int, int, int, int] = TRANSPARENT,
) -> PixelGrid:
    """Применяет один шаг отображения и возвращает новую сетку.

    Args:
        grid: Исходная сетка N×N (не изменяется).
        matrix: Целочисленная матрица; коэффициенты могут быть отрицательными или ≥ N.
        fill: Цвет клеток, в которые не попал ни один пиксель (только для
            вырожденных матриц). По умолчанию прозрачный чёрный.

    Returns:
        Новая `PixelGrid` того же размера.
    """
    n = grid.size
    # reduce first so products stay small for huge coefficients
    dst, src = _scatter_indices(n, matrix.reduced(n))

    flat_in = grid.pixels.reshape(-1, CHANNELS)
    out = np.empty_like(flat_in)
    if dst.size < n * n:
        out[:] = fill
    out[dst] = flat_in[src]
    return PixelGrid(out.reshape(n, n, CHANNELS))


def grids_equal(a: PixelGrid, b: PixelGrid) -> bool:
    """Точное совпадение размеров и всех компонент всех пикселей."""
    if a.size != b.size:
        return False
    return bool(np.array_equal(a.pixels, b.pixels))
