"""Целочисленная матрица 2×2 отображения кота Арнольда."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from catmap.config import DEFAULT_MATRIX


def _parse_int(text: object, fallback: int) -> int:
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return fallback


@dataclass(frozen=True)
class TransformMatrix:
    """Матрица (x, y) -> (a11·x + a12·y, a21·x + a22·y) mod N.

    Обратимость не проверяется: вырожденная матрица допустима, просто сетка
    может никогда не вернуться к исходной.
    """
    a11: int
    a12: int
    a21: int
    a22: int

    @classmethod
    def default(cls) -> "TransformMatrix":
        return cls(*DEFAULT_MATRIX)

    @classmethod
    def identity(cls) -> "TransformMatrix":
        return cls(1, 0, 0, 1)

    @classmethod
    def from_fields(
        cls,
        a11: Optional[object],
        a12: Optional[object],
        a21: Optional[object],
        a22: Optional[object],
    ) -> "TransformMatrix":
        """Разбирает четыре текстовых поля; нераспознанное поле берётся из матрицы по умолчанию."""
        d11, d12, d21, d22 = DEFAULT_MATRIX
        return cls(
            _parse_int(a11, d11),
            _parse_int(a12, d12),
            _parse_int(a21, d21),
            _parse_int(a22, d22),
        )

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.a11, self.a12, self.a21, self.a22

    def reduced(self, n: int) -> Tuple[int, int, int, int]:
        """Коэффициенты по модулю n (всегда в [0, n))."""
        return self.a11 % n, self.a12 % n, self.a21 % n, self.a22 % n

    def __str__(self) -> str:
        return f"[[{self.a11}, {self.a12}], [{self.a21}, {self.a22}]]"
