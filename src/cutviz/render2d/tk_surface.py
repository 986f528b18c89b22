import tkinter as tk
import tkinter.font as tkfont
from cutviz.render2d.surface import PathSurface, SubPath
from cutviz.render2d.render_constants import BACKGROUND_COLOR, LABEL_FONT


class TkCanvasSurface(PathSurface):
    """Drawing surface on top of a tkinter Canvas."""

    def __init__(self, canvas: tk.Canvas):
        super().__init__()
        self.canvas = canvas
        self.font = tkfont.Font(root=canvas, font=LABEL_FONT)

    def clear(self, width: float, height: float) -> None:
        self.canvas.delete("all")
        self.canvas.configure(background=BACKGROUND_COLOR)
        self.begin_path()

    def _stroke_subpath(self, sub: SubPath) -> None:
        c = self.canvas
        if sub.circle is not None:
            x, y, r = sub.circle
            c.create_oval(x - r, y - r, x + r, y + r, outline=self.stroke_style)
            return

        # Must be at least 2 points to have any line segments
        if len(sub.points) < 2:
            return
        coords = [v for pt in sub.points for v in pt]
        if sub.closed:
            c.create_polygon(*coords, outline=self.stroke_style, fill="")
        else:
            c.create_line(*coords, fill=self.stroke_style)

    def _fill_subpath(self, sub: SubPath) -> None:
        c = self.canvas
        if sub.circle is not None:
            x, y, r = sub.circle
            c.create_oval(x - r, y - r, x + r, y + r, outline="", fill=self.fill_style)
            return
        if len(sub.points) < 3:
            return
        coords = [v for pt in sub.points for v in pt]
        c.create_polygon(*coords, outline="", fill=self.fill_style)

    def fill_text(self, text: str, x: float, y: float) -> None:
        # Tk anchors "sw" at the bottom of the descender, so lift it onto the baseline
        descent = self.font.metrics("descent")
        self.canvas.create_text(x, y - descent, text=text, anchor="sw", fill=self.fill_style, font=self.font)

    def measure_text(self, text: str) -> float:
        return float(self.font.measure(text))
