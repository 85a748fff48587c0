"""Результаты операций ядра: период, шаг истории, последовательность итераций."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from catmap.models.pixel_grid import PixelGrid


@dataclass(frozen=True)
class PeriodResult:
    """Найденный период или «не найден в пределах limit» (period=None)."""
    period: Optional[int]
    limit: int

    @property
    def found(self) -> bool:
        return self.period is not None

    def label(self) -> str:
        return f"period = {self.period}" if self.found else "period = >limit"


@dataclass(frozen=True)
class StepResult:
    """Состояние сессии после шага.

    Fields:
        grid: Текущая сетка.
        position: Номер итерации (0 — оригинал).
        wrapped: True, если шаг достиг периода и сессия вернулась к оригиналу.
    """
    grid: PixelGrid
    position: int
    wrapped: bool = False


@dataclass(frozen=True)
class IterationSequence:
    """Кадры 0..count и индекс первого возврата к оригиналу.

    Fields:
        frames: Кадры, frames[0] — оригинал.
        period_index: Первый i в [1, count] с frames[i] == оригинал, иначе None.
        requested: Запрошенное число итераций.
        capped: True, если запрос был урезан до верхней границы.
    """
    frames: Tuple[PixelGrid, ...]
    period_index: Optional[int]
    requested: int
    capped: bool = False

    @property
    def count(self) -> int:
        return len(self.frames) - 1


@dataclass(frozen=True)
class SizeInput:
    """Размер стороны после ограничения диапазоном."""
    size: int
    out_of_range: bool = False
