from __future__ import annotations
import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional
from cutviz.pages.pages import PAGE_KINDS, create_page
from cutviz.render2d.mpl_surface import export_png
from cutviz.views.menubar import Menubar
from cutviz.views.view_2d import View2D
from cutviz.views.view_constants import WINDOW_MIN_SIZE, WINDOW_SIZE, WINDOW_TITLE

logger = logging.getLogger(__name__)


class AppView(tk.Tk):
    def __init__(self, initial_page: str = "basic"):
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")
        self.minsize(*WINDOW_MIN_SIZE)

        style = ttk.Style(self)
        if "clam" in style.theme_names():
            style.theme_use("clam")

        # Create main menubar
        self.menubar = Menubar(self)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.notebook = ttk.Notebook(self)
        self.notebook.grid(row=0, column=0, sticky="nsew")

        # One tab per page, the requested one selected
        for kind in PAGE_KINDS:
            self.add_view(kind)
        self.select_view(initial_page)

    def add_view(self, kind: str) -> View2D:
        page = create_page(kind)
        frame = View2D(self.notebook, self, page)
        frame.kind = kind
        self.notebook.add(frame, text=page.title)
        logger.info("Added page %s", page.title)
        return frame

    def select_view(self, kind: str) -> None:
        for tab in self.notebook.tabs():
            widget = self.nametowidget(tab)
            if getattr(widget, "kind", None) == kind:
                self.notebook.select(widget)
                return
        raise ValueError(f"Unknown page kind: {kind}")

    def current_view(self) -> Optional[View2D]:
        cur = self.notebook.select()
        if not cur:
            return None
        return self.nametowidget(cur)

    def redraw_all(self):
        for tab in self.notebook.tabs():
            widget = self.nametowidget(tab)
            if hasattr(widget, "redraw"):
                widget.redraw()

    def export_current(self):
        view = self.current_view()
        if view is None:
            return
        path = filedialog.asksaveasfilename(
            title="Export view as PNG",
            defaultextension=".png",
            filetypes=[("PNG Files", "*.png"), ("All Files", "*.*")],
        )
        if not path:
            return

        w = max(1, view.canvas.winfo_width())
        h = max(1, view.canvas.winfo_height())
        try:
            export_png(view.display_list, path, w, h)
        except OSError as e:
            messagebox.showerror("Error", f"Failed to export {path}:\n{e}")
            return
        logger.info("Exported %s to %s", view.page.title, path)
