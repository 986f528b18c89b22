from __future__ import annotations
from typing import TYPE_CHECKING
import tkinter as tk

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    from cutviz.views.view_app import AppView


class Menubar:
    def __init__(self, app: "AppView"):
        self.app = app

        # Disable menu tear off
        self.app.option_add("*tearOff", tk.FALSE)

        self.create_menubar()

    def create_menubar(self) -> None:
        self.menubar = tk.Menu(self.app)
        self.app.config(menu=self.menubar)

        self.file_menu = tk.Menu(self.menubar)
        self.view_menu = tk.Menu(self.menubar)
        self.menubar.add_cascade(menu=self.file_menu, label="File")
        self.menubar.add_cascade(menu=self.view_menu, label="View")

        self.add_file_menu_items()
        self.add_view_menu_items()

    def add_file_menu_items(self):
        self.file_menu.add_command(
            label="Export PNG...",
            command=self.app.export_current,
        )
        self.file_menu.add_separator()
        self.file_menu.add_command(
            label="Quit",
            command=self.app.destroy,
        )

    def add_view_menu_items(self):
        self.view_menu.add_command(
            label="Redraw",
            command=self.app.redraw_all,
        )
