"""Параметры воспроизведения анимации (только интервал; таймер — на стороне UI)."""
from __future__ import annotations

from dataclasses import dataclass, replace

from catmap.config import (
    PLAYBACK_INTERVAL_MAX_MS,
    PLAYBACK_INTERVAL_MIN_MS,
    PLAYBACK_INTERVAL_MS,
    PLAYBACK_INTERVAL_STEP_MS,
)


@dataclass(frozen=True)
class PlaybackSettings:
    interval_ms: int = PLAYBACK_INTERVAL_MS

    def adjusted(self, delta_ms: int) -> "PlaybackSettings":
        value = max(PLAYBACK_INTERVAL_MIN_MS, min(PLAYBACK_INTERVAL_MAX_MS, self.interval_ms + delta_ms))
        return replace(self, interval_ms=value)

    def faster(self) -> "PlaybackSettings":
        return self.adjusted(-PLAYBACK_INTERVAL_STEP_MS)

    def slower(self) -> "PlaybackSettings":
        return self.adjusted(PLAYBACK_INTERVAL_STEP_MS)

    @property
    def label(self) -> str:
        return f"{self.interval_ms}ms"
