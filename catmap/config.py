"""Конфигурация и пути: единый реестр констант приложения.

Все значения по умолчанию (размеры, матрица, лимиты поиска периода, скорость
анимации) собраны здесь, чтобы не размазывать «магические числа» по UI и сервисам.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple

# Grid size
DEFAULT_SIZE: int = 16
MIN_SIZE: int = 2
MAX_SIZE: int = 500

# Classic cat map (Fibonacci form)
DEFAULT_MATRIX: Tuple[int, int, int, int] = (1, 1, 1, 0)

# Period search: limit = budget // N², clamped to [min, max]
PERIOD_LIMIT_MIN: int = 300
PERIOD_LIMIT_MAX: int = 1500
PERIOD_SEARCH_BUDGET: int = PERIOD_LIMIT_MAX * 128 * 128

# Iterations gallery
DEFAULT_ITERATIONS: int = 12
MAX_ITERATIONS: int = 100
GALLERY_STAGGER_MS: int = 80

# Playback, ms
PLAYBACK_INTERVAL_MS: int = 300
PLAYBACK_INTERVAL_MIN_MS: int = 50
PLAYBACK_INTERVAL_MAX_MS: int = 1000
PLAYBACK_INTERVAL_STEP_MS: int = 50

# Colors (RGBA)
TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)
FALLBACK_COLOR: Tuple[int, int, int, int] = (0x3B, 0xBF, 0xBF, 255)
BACKGROUND_COLOR: Tuple[int, int, int, int] = (255, 255, 255, 255)

EXPORT_STEM: str = "arnold-cat-map"

# Paths: config.py lives in <root>/catmap/
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
ASSETS_PATH: Path = PROJECT_ROOT / "assets"
DEFAULT_IMAGE_PATH: Path = Path(os.environ.get("CATMAP_DEFAULT_IMAGE", str(ASSETS_PATH / "default.png")))
