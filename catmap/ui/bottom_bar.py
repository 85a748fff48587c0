from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        # callbacks
        self.on_step_back: Optional[Callable[[], None]] = None
        self.on_step_forward: Optional[Callable[[], None]] = None
        self.on_toggle_play: Optional[Callable[[], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None
        self.on_speed_change: Optional[Callable[[int], None]] = None
        self.on_save_frame: Optional[Callable[[], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(4, weight=1)  # spacer stretches

        # Stepping
        self._back_btn = ctk.CTkButton(self, text="◀", width=40, command=self._emit_step_back)
        self._back_btn.grid(row=0, column=0, padx=(10, 4), pady=8, sticky="w")

        self._play_btn = ctk.CTkButton(self, text="▶ Анимация", width=120, command=self._emit_toggle_play)
        self._play_btn.grid(row=0, column=1, padx=4, pady=8, sticky="w")

        self._forward_btn = ctk.CTkButton(self, text="▶", width=40, command=self._emit_step_forward)
        self._forward_btn.grid(row=0, column=2, padx=4, pady=8, sticky="w")

        self._reset_btn = ctk.CTkButton(self, text="Сброс", width=80, command=self._emit_reset)
        self._reset_btn.grid(row=0, column=3, padx=4, pady=8, sticky="w")

        # Iteration counter
        self._iteration_val = ctk.StringVar(value="n = 0")
        self._iteration_label = ctk.CTkLabel(self, textvariable=self._iteration_val, width=80, anchor="w")
        self._iteration_label.grid(row=0, column=4, padx=(12, 6), pady=8, sticky="w")

        # Speed: interval in ms, "-" makes it faster
        self._faster_btn = ctk.CTkButton(self, text="−", width=32, command=lambda: self._emit_speed(-1))
        self._faster_btn.grid(row=0, column=5, padx=(6, 2), pady=8)
        self._speed_val = ctk.StringVar(value="300ms")
        self._speed_label = ctk.CTkLabel(self, textvariable=self._speed_val, width=64)
        self._speed_label.grid(row=0, column=6, padx=2, pady=8)
        self._slower_btn = ctk.CTkButton(self, text="+", width=32, command=lambda: self._emit_speed(1))
        self._slower_btn.grid(row=0, column=7, padx=(2, 6), pady=8)

        self._save_btn = ctk.CTkButton(self, text="Сохранить кадр", width=120, command=self._emit_save_frame)
        self._save_btn.grid(row=0, column=8, padx=(6, 10), pady=8, sticky="e")

    # public API (sync from controller)
    def set_iteration(self, position: int) -> None:
        self._iteration_val.set(f"n = {position}")

    def set_playing(self, playing: bool) -> None:
        self._play_btn.configure(text="⏹ Стоп" if playing else "▶ Анимация")

    def set_speed_label(self, label: str) -> None:
        self._speed_val.set(label)

    # events
    def _emit_step_back(self) -> None:
        if self.on_step_back:
            self.on_step_back()

    def _emit_step_forward(self) -> None:
        if self.on_step_forward:
            self.on_step_forward()

    def _emit_toggle_play(self) -> None:
        if self.on_toggle_play:
            self.on_toggle_play()

    def _emit_reset(self) -> None:
        if self.on_reset:
            self.on_reset()

    def _emit_speed(self, direction: int) -> None:
        if self.on_speed_change:
            self.on_speed_change(direction)

    def _emit_save_frame(self) -> None:
        if self.on_save_frame:
            self.on_save_frame()
