"""Виджет отображения текущей сетки: масштаб «вписать» без сглаживания и курсор.

Принципы:
- SRP: отвечает только за представление сетки, математики здесь нет.
- Публичный API (`set_image`, `set_caption`) отделён от обработчиков событий.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk


class GridViewer(ctk.CTkFrame):
    """Канва с текущим кадром и подписью «Iteration k of p»."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._caption = ctk.StringVar(value="Iteration 0")
        self._caption_label = ctk.CTkLabel(self, textvariable=self._caption, anchor="center")
        self._caption_label.grid(row=1, column=0, padx=8, pady=(4, 2), sticky="ew")

        self._progress = ctk.CTkProgressBar(self)
        self._progress.set(0)
        self._progress.grid(row=2, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._scale_factor: float = 1.0
        self._image_top_left: Tuple[int, int] = (0, 0)

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int]], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<Leave>", self._on_mouse_leave)

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Показывает кадр, вписывая его в доступную область."""
        self._image = image
        self._render_image()

    def set_caption(self, position: int, period: Optional[int]) -> None:
        self._caption.set(f"Iteration {position}" + (f" of {period}" if period else ""))

    def set_progress(self, fraction: Optional[float]) -> None:
        self._progress.set(fraction if fraction is not None else 0)

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            return

        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size
        self._scale_factor = max(0.01, min(canvas_w / img_w, canvas_h / img_h))

        scaled_w = max(1, int(img_w * self._scale_factor))
        scaled_h = max(1, int(img_h * self._scale_factor))
        # nearest keeps single pixels crisp at large zoom
        resized = self._image.resize((scaled_w, scaled_h), Image.Resampling.NEAREST)

        x = (canvas_w - scaled_w) // 2
        y = (canvas_h - scaled_h) // 2
        self._image_top_left = (x, y)
        self._tk_image = ImageTk.PhotoImage(resized)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _on_mouse_move(self, event: tk.Event) -> None:
        if self._image is None or self.on_cursor_move is None:
            return
        ox, oy = self._image_top_left
        x = int((event.x - ox) / self._scale_factor)
        y = int((event.y - oy) / self._scale_factor)
        img_w, img_h = self._image.size
        if event.x < ox or event.y < oy or x >= img_w or y >= img_h:
            self.on_cursor_move(None, None)
            return
        self.on_cursor_move(x, y)

    def _on_mouse_leave(self, _event: tk.Event) -> None:
        if self.on_cursor_move:
            self.on_cursor_move(None, None)

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
