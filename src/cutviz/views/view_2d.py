from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional
from cutviz.pages.pages import Page
from cutviz.render2d.display_list import DisplayList
from cutviz.render2d.mouse_event import CanvasMouseEvent
from cutviz.render2d.renderer import Renderer
from cutviz.render2d.screen_project import ScreenProject2d
from cutviz.render2d.tk_surface import TkCanvasSurface
from cutviz.views.view_base import BaseView
from cutviz.render2d.render_constants import PRIMARY_BUTTON

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    from cutviz.views.view_app import AppView

logger = logging.getLogger(__name__)

# Tk event.state bit set while mouse button 1 is held
TK_BUTTON1_MASK = 0x0100


class View2D(BaseView):
    """Canvas tab showing one page and feeding it pointer events."""

    def __init__(self, master, app: "AppView", page: Page):
        super().__init__(master, app)
        self.page = page
        self.surface = TkCanvasSurface(self.canvas)
        self.display_list: DisplayList = page.display_list
        # Projection of the last frame, used to map pointer pixels to model space
        self.projection: Optional[ScreenProject2d] = None

        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<ButtonPress-1>", lambda e: self._dispatch(e.x, e.y, PRIMARY_BUTTON))
        self.canvas.bind("<B1-Motion>", lambda e: self._dispatch(e.x, e.y, PRIMARY_BUTTON))
        self.canvas.bind("<ButtonRelease-1>", lambda e: self._dispatch(e.x, e.y, 0))

    # Events
    def _on_motion(self, event):
        buttons = PRIMARY_BUTTON if event.state & TK_BUTTON1_MASK else 0
        self._dispatch(event.x, event.y, buttons)

    def _dispatch(self, pixel_x: float, pixel_y: float, buttons: int) -> None:
        # Nothing drawn yet, so there is no model space to map into
        if self.projection is None:
            return
        event = CanvasMouseEvent.from_pixel(self.projection, pixel_x, pixel_y, buttons)
        new_list = self.page.on_mouse_event(event)
        if new_list is not None:
            self.set_display_list(new_list)

    def set_display_list(self, display_list: DisplayList) -> None:
        if display_list == self.display_list:
            return
        self.display_list = display_list
        self.redraw()

    # Drawing
    def redraw(self):
        w = self.canvas.winfo_width()
        h = self.canvas.winfo_height()
        self.projection = Renderer.render(self.surface, self.display_list, w, h)
