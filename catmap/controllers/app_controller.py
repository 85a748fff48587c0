"""Контроллер приложения: связывает UI с сессией истории и сервисами.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без математики отображения).
- DIP: сессия и сервисы передаются как роли; расчёты инкапсулированы в них.
Clean Code:
- Обработчики компактны; воспроизведение — внешний драйвер через `after`,
  который просто вызывает шаг вперёд.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from tkinter import filedialog, TclError
from typing import Optional

import customtkinter as ctk

from catmap.config import DEFAULT_SIZE
from catmap.models.image_model import SourceImage
from catmap.models.matrix import TransformMatrix
from catmap.models.pixel_grid import PixelGrid
from catmap.models.playback import PlaybackSettings
from catmap.models.results import StepResult
from catmap.services.history_service import HistorySession
from catmap.services.image_service import ImageService, clamp_size
from catmap.services.sequence_service import generate
from catmap.ui.bottom_bar import BottomBar
from catmap.ui.grid_viewer import GridViewer
from catmap.ui.iterations_view import IterationsView
from catmap.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Получение исходной сетки через `ImageService` (файл или изображение по умолчанию).
    - Шаги, сброс и пересборка `HistorySession` при смене размера, матрицы или изображения.
    - Воспроизведение по таймеру Tk и галерея итераций.
    """
    viewer: GridViewer
    sidebar: Sidebar
    bottom: BottomBar
    iterations: IterationsView
    window: ctk.CTk

    _image_service: ImageService = ImageService()
    _session: Optional[HistorySession] = None
    _source: Optional[SourceImage] = None
    _size: int = DEFAULT_SIZE
    _playback: PlaybackSettings = PlaybackSettings()
    _timer_id: Optional[str] = None
    _playing: bool = False

    def bind_events(self) -> None:
        """Регистрирует обработчики событий и строит начальную сессию."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_size_change = self._handle_size_change
        self.sidebar.on_matrix_change = self._handle_matrix_change
        self.viewer.on_cursor_move = self._handle_cursor_move

        self.bottom.on_step_back = self._handle_step_back
        self.bottom.on_step_forward = self._handle_step_forward
        self.bottom.on_toggle_play = self._handle_toggle_play
        self.bottom.on_reset = self._handle_reset
        self.bottom.on_speed_change = self._handle_speed_change
        self.bottom.on_save_frame = self._handle_save_frame
        self.bottom.set_speed_label(self._playback.label)

        self.iterations.on_generate = self._handle_generate

        self._rebuild_session(self._image_service.default_grid(self._size))

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            source = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            logger.error("Could not load image: %s", exc)
            return

        self._source = source
        self.sidebar.set_source_info(source)
        self._rebuild_session(self._image_service.to_grid(source.pil_image, self._size))

    def _handle_size_change(self, text: str) -> None:
        size_input = clamp_size(text)
        self.sidebar.set_size_value(size_input.size, size_input.out_of_range)
        if size_input.size == self._size:
            return
        self._size = size_input.size
        # new size drops the uploaded image, as in a fresh session
        self._source = None
        self.sidebar.set_source_info(None)
        self._rebuild_session(self._image_service.default_grid(self._size))

    def _handle_matrix_change(self) -> None:
        if self._session is None:
            return
        matrix = self._read_matrix()
        if matrix == self._session.matrix:
            return
        self._stop()
        self._show(self._session.on_matrix_or_image_change(matrix=matrix))
        self.sidebar.set_period(self._session.period)

    def _handle_step_forward(self) -> None:
        if self._session is None:
            return
        result = self._session.step_forward()
        if result.wrapped:
            self._stop()
        self._show(result)

    def _handle_step_back(self) -> None:
        if self._session is None:
            return
        self._show(self._session.step_backward())

    def _handle_reset(self) -> None:
        self._stop()
        if self._session is None:
            return
        self._show(self._session.reset())

    def _handle_toggle_play(self) -> None:
        if self._playing:
            self._stop()
        else:
            self._play()

    def _handle_speed_change(self, direction: int) -> None:
        self._playback = self._playback.slower() if direction > 0 else self._playback.faster()
        self.bottom.set_speed_label(self._playback.label)
        if self._playing:
            self._stop()
            self._play()

    def _handle_save_frame(self) -> None:
        if self._session is None:
            return
        source_name = self._source.name if self._source else None
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить кадр",
                defaultextension=".png",
                initialfile=self._image_service.export_filename(self._session.position, source_name),
                filetypes=(("PNG", "*.png"),),
            )
        except TclError:
            return
        if not file_path:
            return
        try:
            self._image_service.write_png(self._session.current, file_path)
        except OSError as exc:
            logger.error("Could not save frame: %s", exc)

    def _handle_generate(self, count: int) -> None:
        if self._session is None:
            return
        sequence = generate(self._session.original, self._session.matrix, count)
        frames = [self._image_service.to_pil(frame) for frame in sequence.frames]
        self.iterations.show_frames(frames, sequence.period_index)

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int]) -> None:
        if self._session is None or x is None or y is None:
            self.sidebar.update_cursor_info(None, None, None)
            return
        self.sidebar.update_cursor_info(x, y, self._session.current.pixel(x, y))

    # ---- Playback ----
    def _play(self) -> None:
        if self._session is None:
            return
        self._playing = True
        self.bottom.set_playing(True)
        self._timer_id = self.window.after(self._playback.interval_ms, self._tick)

    def _tick(self) -> None:
        self._timer_id = None
        if not self._playing:
            return
        # a wrap at the period stops playback inside the step
        self._handle_step_forward()
        if self._playing:
            self._timer_id = self.window.after(self._playback.interval_ms, self._tick)

    def _stop(self) -> None:
        self._playing = False
        if self._timer_id is not None:
            self.window.after_cancel(self._timer_id)
            self._timer_id = None
        self.bottom.set_playing(False)

    # ---- Helpers ----
    def _read_matrix(self) -> TransformMatrix:
        return TransformMatrix.from_fields(*self.sidebar.get_matrix_fields())

    def _rebuild_session(self, original: PixelGrid) -> None:
        self._stop()
        matrix = self._read_matrix()
        if self._session is None:
            self._session = HistorySession(original, matrix)
            result = StepResult(grid=original, position=0)
        else:
            result = self._session.on_matrix_or_image_change(original=original, matrix=matrix)
        self.sidebar.set_period(self._session.period)
        self.iterations.clear()
        self._show(result)

    def _show(self, result: StepResult) -> None:
        self.viewer.set_image(self._image_service.to_pil(result.grid))
        period = self._session.period.period if self._session else None
        self.viewer.set_caption(result.position, period)
        self.viewer.set_progress(self._session.progress if self._session else None)
        self.bottom.set_iteration(result.position)
