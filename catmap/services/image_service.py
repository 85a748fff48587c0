"""Получение сетки из изображения и экспорт кадров.

Принципы:
- SRP: только ввод/вывод изображений и масштабирование в сетку, без математики отображения.
- Узкий интерфейс: наружу отдаются `SourceImage` и `PixelGrid`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from catmap.config import (
    BACKGROUND_COLOR,
    DEFAULT_IMAGE_PATH,
    DEFAULT_SIZE,
    EXPORT_STEM,
    FALLBACK_COLOR,
    MAX_SIZE,
    MIN_SIZE,
)
from catmap.models.image_model import SourceImage
from catmap.models.pixel_grid import PixelGrid
from catmap.models.results import SizeInput

logger = logging.getLogger(__name__)


def clamp_size(value: object) -> SizeInput:
    """Приводит введённый размер к [MIN_SIZE, MAX_SIZE].

    Нечисловой ввод заменяется на DEFAULT_SIZE; `out_of_range` выставляется,
    если запрошено больше максимума.
    """
    try:
        requested = int(str(value).strip())
    except (TypeError, ValueError):
        requested = DEFAULT_SIZE
    size = max(MIN_SIZE, min(MAX_SIZE, requested))
    return SizeInput(size=size, out_of_range=requested > MAX_SIZE)


class ImageService:
    def __init__(self, default_image_path: Optional[Path] = None) -> None:
        self._default_image_path = Path(default_image_path) if default_image_path else DEFAULT_IMAGE_PATH

    def load_image(self, file_path: str | Path) -> SourceImage:
        """Загружает изображение с диска.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `SourceImage` c изображением в режиме RGBA и метаданными.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as img:
                pil_image = img.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.info("Loaded %s (%dx%d)", path.name, width, height)
        return SourceImage(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            size_bytes=size_bytes,
        )

    def to_grid(self, image: Image.Image, size: int) -> PixelGrid:
        """Масштабирует изображение в сетку size×size (ближайший сосед, белый фон)."""
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        resized = rgba.resize((size, size), Image.Resampling.NEAREST)
        canvas = Image.new("RGBA", (size, size), BACKGROUND_COLOR)
        canvas.alpha_composite(resized)
        return PixelGrid(np.array(canvas, dtype=np.uint8))

    def default_grid(self, size: int) -> PixelGrid:
        """Сетка из изображения по умолчанию или однотонная заливка, если его нет."""
        path = self._default_image_path
        try:
            with Image.open(path) as img:
                rgba = img.convert("RGBA")
        except (OSError, UnidentifiedImageError):
            logger.warning("Could not load %s, using solid fallback", path)
            return PixelGrid.filled(size, FALLBACK_COLOR)
        # default asset has no background fill: keep its pixels as-is
        return PixelGrid(np.array(rgba.resize((size, size), Image.Resampling.NEAREST), dtype=np.uint8))

    def to_pil(self, grid: PixelGrid) -> Image.Image:
        return Image.fromarray(np.array(grid.pixels))

    def save_frame(
        self,
        grid: PixelGrid,
        directory: str | Path,
        iteration: int,
        source_name: Optional[str] = None,
    ) -> Path:
        """Сохраняет кадр в PNG с именем `<stem>-iteration-<k>.png`."""
        target = Path(directory) / self.export_filename(iteration, source_name)
        self.write_png(grid, target)
        return target

    def write_png(self, grid: PixelGrid, target: str | Path) -> None:
        self.to_pil(grid).save(Path(target), format="PNG")
        logger.info("Saved frame to %s", target)

    def export_filename(self, iteration: int, source_name: Optional[str] = None) -> str:
        stem = Path(source_name).stem if source_name else EXPORT_STEM
        return f"{stem}-iteration-{iteration}.png"
