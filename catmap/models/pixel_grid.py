"""Модель квадратной пиксельной сетки N×N (RGBA, uint8).

Принципы:
- SRP: только структура данных и проверка формы, без логики преобразований.
- Неизменяемость: массив помечается как read-only, все операции создают новые сетки.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from catmap.config import MIN_SIZE

CHANNELS = 4


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Неизменяемая сетка пикселей.

    Fields:
        pixels: Массив формы (N, N, 4), dtype uint8, индексация [y, x, канал].
    """
    pixels: np.ndarray

    def __post_init__(self) -> None:
        arr = self.pixels
        if not isinstance(arr, np.ndarray) or arr.dtype != np.uint8:
            raise ValueError("Ожидается numpy-массив uint8; используйте PixelGrid.from_array")
        if arr.ndim != 3 or arr.shape[0] != arr.shape[1] or arr.shape[2] != CHANNELS:
            raise ValueError(f"Ожидается форма (N, N, {CHANNELS}), получено {arr.shape}")
        if arr.shape[0] < MIN_SIZE:
            raise ValueError(f"Размер сетки должен быть не меньше {MIN_SIZE}, получено {arr.shape[0]}")
        # own copy: writes through the caller's array must not reach the grid
        owned = np.array(arr, dtype=np.uint8, copy=True)
        owned.flags.writeable = False
        object.__setattr__(self, "pixels", owned)

    # ---- Constructors ----
    @classmethod
    def from_array(cls, values: Union[np.ndarray, Sequence]) -> "PixelGrid":
        """Создаёт сетку из произвольного массива (N, N, 4), обрезая компоненты в [0, 255]."""
        arr = np.asarray(values)
        if arr.dtype != np.uint8:
            arr = np.clip(np.rint(arr.astype(np.float64)), 0, 255)
        return cls(arr.astype(np.uint8, copy=False))

    @classmethod
    def from_buffer(cls, data: Union[bytes, bytearray, Iterable[int]], size: int) -> "PixelGrid":
        """Создаёт сетку из плоского буфера длиной ровно 4·N·N."""
        if isinstance(data, (bytes, bytearray)):
            flat = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            flat = np.asarray(list(data))
        expected = CHANNELS * size * size
        if flat.size != expected:
            raise ValueError(f"Длина буфера {flat.size} не равна 4·N·N = {expected} для N={size}")
        return cls.from_array(flat.reshape(size, size, CHANNELS))

    @classmethod
    def filled(cls, size: int, rgba: Tuple[int, int, int, int]) -> "PixelGrid":
        """Сетка, залитая одним цветом."""
        arr = np.empty((size, size, CHANNELS), dtype=np.uint8)
        arr[:, :] = rgba
        return cls(arr)

    # ---- Properties ----
    @property
    def size(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return r, g, b, a

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()
