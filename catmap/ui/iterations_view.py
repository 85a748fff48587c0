"""Галерея «Все итерации»: карточки кадров 0..count с отметкой периода.

Карточки добавляются с задержкой (GALLERY_STAGGER_MS на кадр), сами кадры
вычисляются заранее в сервисе последовательностей.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import customtkinter as ctk
from PIL import Image

from catmap.config import DEFAULT_ITERATIONS, GALLERY_STAGGER_MS, MAX_ITERATIONS

THUMB_SIZE = 112
COLUMNS = 5


class IterationsView(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)

        self.on_generate: Optional[Callable[[int], None]] = None

        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        # Controls
        self._count_title = ctk.CTkLabel(self, text="Итераций")
        self._count_title.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._count_val = ctk.StringVar(value=str(DEFAULT_ITERATIONS))
        self._count_slider = ctk.CTkSlider(
            self, from_=1, to=MAX_ITERATIONS, number_of_steps=MAX_ITERATIONS - 1, command=self._on_slider_change
        )
        self._count_slider.set(DEFAULT_ITERATIONS)
        self._count_slider.grid(row=0, column=1, padx=6, pady=8, sticky="ew")
        self._count_label = ctk.CTkLabel(self, textvariable=self._count_val, width=40, anchor="w")
        self._count_label.grid(row=0, column=2, padx=(6, 12), pady=8, sticky="w")

        self._generate_btn = ctk.CTkButton(self, text="Сгенерировать", command=self._emit_generate)
        self._generate_btn.grid(row=0, column=3, padx=6, pady=8, sticky="e")

        self._period_val = ctk.StringVar(value="")
        self._period_label = ctk.CTkLabel(self, textvariable=self._period_val, anchor="w")
        self._period_label.grid(row=0, column=4, padx=(6, 10), pady=8, sticky="w")

        # Gallery
        self._gallery = ctk.CTkScrollableFrame(self)
        self._gallery.grid(row=1, column=0, columnspan=5, padx=10, pady=(0, 10), sticky="nsew")
        for col in range(COLUMNS):
            self._gallery.grid_columnconfigure(col, weight=1)

        self._pending: List[str] = []
        self._thumbs: List[ctk.CTkImage] = []

    # public API
    def show_frames(self, frames: Sequence[Image.Image], period_index: Optional[int]) -> None:
        """Очищает галерею и добавляет карточки по одной с задержкой."""
        self.clear()
        if period_index is not None:
            self._period_val.set(f"Период: {period_index}")
        for i, frame in enumerate(frames):
            after_id = self.after(i * GALLERY_STAGGER_MS, self._add_card, i, frame, period_index)
            self._pending.append(after_id)

    def clear(self) -> None:
        for after_id in self._pending:
            self.after_cancel(after_id)
        self._pending.clear()
        for child in self._gallery.winfo_children():
            child.destroy()
        self._thumbs.clear()
        self._period_val.set("")

    # events
    def _on_slider_change(self, value: float) -> None:
        self._count_val.set(str(int(round(value))))

    def _emit_generate(self) -> None:
        if self.on_generate:
            self.on_generate(int(round(self._count_slider.get())))

    # helpers
    def _add_card(self, index: int, frame: Image.Image, period_index: Optional[int]) -> None:
        is_period = period_index is not None and index == period_index
        card = ctk.CTkFrame(self._gallery, border_width=2 if is_period else 0, border_color="#3bbfbf")
        card.grid(row=index // COLUMNS, column=index % COLUMNS, padx=6, pady=6, sticky="n")

        thumb = frame.resize((THUMB_SIZE, THUMB_SIZE), Image.Resampling.NEAREST)
        ctk_image = ctk.CTkImage(light_image=thumb, dark_image=thumb, size=(THUMB_SIZE, THUMB_SIZE))
        self._thumbs.append(ctk_image)
        ctk.CTkLabel(card, image=ctk_image, text="").grid(row=0, column=0, padx=4, pady=(4, 2))

        if index == 0:
            caption = "Оригинал"
        elif is_period:
            caption = f"n = {index}  ← период"
        else:
            caption = f"n = {index}"
        ctk.CTkLabel(card, text=caption).grid(row=1, column=0, padx=4, pady=(0, 4))
