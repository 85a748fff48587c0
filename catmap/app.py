import customtkinter as ctk

from catmap.controllers.app_controller import AppController
from catmap.ui.bottom_bar import BottomBar
from catmap.ui.grid_viewer import GridViewer
from catmap.ui.iterations_view import IterationsView
from catmap.ui.sidebar import Sidebar


class CatMapApp(ctk.CTk):
    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Arnold Cat Map")
        self.minsize(960, 640)

        # root layout: left tabs, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._tabs = ctk.CTkTabview(self)
        self._tabs.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=12)
        anim_tab = self._tabs.add("Анимация")
        iter_tab = self._tabs.add("Все итерации")

        # animation tab: viewer on top, playback bar below
        anim_tab.grid_columnconfigure(0, weight=1)
        anim_tab.grid_rowconfigure(0, weight=1)
        self._viewer = GridViewer(anim_tab)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=6, pady=(6, 6))
        self._bottom = BottomBar(anim_tab)
        self._bottom.grid(row=1, column=0, sticky="ew", padx=6, pady=(0, 6))

        iter_tab.grid_columnconfigure(0, weight=1)
        iter_tab.grid_rowconfigure(0, weight=1)
        self._iterations = IterationsView(iter_tab)
        self._iterations.grid(row=0, column=0, sticky="nsew")

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=12)

        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            bottom=self._bottom,
            iterations=self._iterations,
            window=self,
        )
        self._controller.bind_events()
