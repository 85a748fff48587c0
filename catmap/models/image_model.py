"""Модель исходного изображения, из которого строится сетка.

Принципы:
- SRP: только структура данных, без логики масштабирования.
- Неизменяемость (`frozen=True`): смена источника — новая модель.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class SourceImage:
    """Загруженное изображение и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Изображение PIL в режиме RGBA.
        width: Ширина, px.
        height: Высота, px.
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    size_bytes: Optional[int]

    @property
    def name(self) -> str:
        return self.path.name
