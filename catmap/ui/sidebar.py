"""Боковая панель: источник изображения, размер сетки, матрица, период, курсор.

Принципы:
- SRP: управляет только полями ввода, не содержит математики.
- ISP: значения отдаются через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from catmap.config import DEFAULT_MATRIX, DEFAULT_SIZE, MAX_SIZE, MIN_SIZE
from catmap.models.image_model import SourceImage
from catmap.models.results import PeriodResult


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, размер, матрица, период, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_size_change: Optional[Callable[[str], None]] = None
        self.on_matrix_change: Optional[Callable[[], None]] = None

        # File
        self._title = ctk.CTkLabel(self, text="Изображение", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Загрузить изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._file_val = ctk.StringVar(value="По умолчанию")
        self._file_label = ctk.CTkLabel(self, textvariable=self._file_val, wraplength=250, anchor="w", justify="left")
        self._file_label.grid(row=2, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Size
        self._size_title = ctk.CTkLabel(self, text=f"Размер N ({MIN_SIZE}–{MAX_SIZE})", font=ctk.CTkFont(size=16, weight="bold"))
        self._size_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._size_entry = ctk.CTkEntry(self)
        self._size_entry.insert(0, str(DEFAULT_SIZE))
        self._size_entry.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._size_entry.bind("<Return>", self._emit_size_change)
        self._size_entry.bind("<FocusOut>", self._emit_size_change)

        self._size_error = ctk.CTkLabel(self, text=f"Максимум {MAX_SIZE}", text_color="#d9534f", anchor="w")
        self._size_error.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._size_error.grid_remove()

        # Matrix
        self._matrix_title = ctk.CTkLabel(self, text="Матрица", font=ctk.CTkFont(size=16, weight="bold"))
        self._matrix_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        matrix_frame = ctk.CTkFrame(self, fg_color="transparent")
        matrix_frame.grid(row=7, column=0, padx=8, pady=(0, 6), sticky="ew")
        matrix_frame.grid_columnconfigure((0, 1), weight=1)
        self._matrix_entries = []
        for idx, value in enumerate(DEFAULT_MATRIX):
            entry = ctk.CTkEntry(matrix_frame, width=60, justify="center")
            entry.insert(0, str(value))
            entry.grid(row=idx // 2, column=idx % 2, padx=4, pady=4, sticky="ew")
            entry.bind("<Return>", self._emit_matrix_change)
            entry.bind("<FocusOut>", self._emit_matrix_change)
            self._matrix_entries.append(entry)

        self._formula = ctk.CTkLabel(
            self,
            text="x' = (a11·x + a12·y) mod N\ny' = (a21·x + a22·y) mod N",
            anchor="w",
            justify="left",
        )
        self._formula.grid(row=8, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Period
        self._period_title = ctk.CTkLabel(self, text="Период", font=ctk.CTkFont(size=16, weight="bold"))
        self._period_title.grid(row=9, column=0, padx=8, pady=(8, 4), sticky="w")
        self._period_val = ctk.StringVar(value="—")
        self._period_label = ctk.CTkLabel(self, textvariable=self._period_val, anchor="w", justify="left")
        self._period_label.grid(row=10, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=11, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgba = ctk.CTkLabel(self, textvariable=self._cursor_rgba_val, anchor="w", justify="left")
        self._cursor_xy.grid(row=12, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgba.grid(row=13, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def get_size_text(self) -> str:
        return self._size_entry.get()

    def set_size_value(self, size: int, out_of_range: bool) -> None:
        """Записывает ограниченный размер обратно в поле и показывает ошибку при переполнении."""
        self._size_entry.delete(0, "end")
        self._size_entry.insert(0, str(size))
        if out_of_range:
            self._size_error.grid()
        else:
            self._size_error.grid_remove()

    def get_matrix_fields(self) -> Tuple[str, str, str, str]:
        """Возвращает сырые значения (a11, a12, a21, a22) из полей ввода."""
        a11, a12, a21, a22 = (entry.get() for entry in self._matrix_entries)
        return a11, a12, a21, a22

    def set_source_info(self, source: Optional[SourceImage]) -> None:
        if source is None:
            self._file_val.set("По умолчанию")
            return
        self._file_val.set(f"{source.name}\n{source.width} × {source.height} px")

    def set_period(self, result: PeriodResult) -> None:
        if result.found:
            self._period_val.set(result.label())
        else:
            self._period_val.set(f"{result.label()} ({result.limit})")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGBA, HEX)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}  {_rgba_to_hex(rgba)}")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_size_change(self, _event: object = None) -> None:
        if self.on_size_change:
            self.on_size_change(self._size_entry.get())

    def _emit_matrix_change(self, _event: object = None) -> None:
        if self.on_matrix_change:
            self.on_matrix_change()
