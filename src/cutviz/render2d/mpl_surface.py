from pathlib import Path
from typing import Union
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure as MplFigure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import Circle, Polygon
from cutviz.render2d.renderer import Renderer
from cutviz.render2d.surface import PathSurface, SubPath
from cutviz.render2d.render_constants import BACKGROUND_COLOR, EXPORT_DPI, LABEL_FONT_SIZE_PT


class MatplotlibSurface(PathSurface):
    """
    Off-screen surface backed by a matplotlib Agg figure.

    The axes fill the whole figure and use pixel coordinates with y pointing
    down, so the renderer's pixel output maps one to one onto the image.
    """

    def __init__(self, width: int, height: int, dpi: int = EXPORT_DPI):
        super().__init__()
        self.width = width
        self.height = height
        self.dpi = dpi
        self.figure = MplFigure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.figure.patch.set_facecolor(BACKGROUND_COLOR)
        self.agg = FigureCanvasAgg(self.figure)
        self.font = FontProperties(size=LABEL_FONT_SIZE_PT)
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self._reset_axes()

    def _reset_axes(self) -> None:
        self.ax.cla()
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_facecolor(BACKGROUND_COLOR)
        self.ax.axis("off")

    def clear(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._reset_axes()
        self.begin_path()

    def _stroke_subpath(self, sub: SubPath) -> None:
        if sub.circle is not None:
            x, y, r = sub.circle
            self.ax.add_patch(Circle((x, y), r, fill=False, edgecolor=self.stroke_style, linewidth=1.0))
            return
        if len(sub.points) < 2:
            return
        if sub.closed:
            self.ax.add_patch(Polygon(sub.points, closed=True, fill=False, edgecolor=self.stroke_style, linewidth=1.0))
        else:
            xs = [pt[0] for pt in sub.points]
            ys = [pt[1] for pt in sub.points]
            self.ax.plot(xs, ys, color=self.stroke_style, linewidth=1.0)

    def _fill_subpath(self, sub: SubPath) -> None:
        if sub.circle is not None:
            x, y, r = sub.circle
            self.ax.add_patch(Circle((x, y), r, facecolor=self.fill_style, edgecolor="none"))
            return
        if len(sub.points) < 3:
            return
        self.ax.add_patch(Polygon(sub.points, closed=True, facecolor=self.fill_style, edgecolor="none"))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self.ax.text(x, y, text, color=self.fill_style, fontproperties=self.font,
                     ha="left", va="baseline")

    def measure_text(self, text: str) -> float:
        renderer = self.agg.get_renderer()
        width, _, _ = renderer.get_text_width_height_descent(text, self.font, ismath=False)
        # Renderer works in display pixels at the figure dpi
        return float(width)

    def save(self, path: Union[str, Path]) -> None:
        self.figure.savefig(str(path), dpi=self.dpi, facecolor=self.figure.get_facecolor())


def export_png(display_list, path: Union[str, Path], width: int, height: int, dpi: int = EXPORT_DPI):
    """Render a display list off-screen and write it as a PNG; returns the projection used."""
    surface = MatplotlibSurface(width, height, dpi=dpi)
    projection = Renderer.render(surface, display_list, width, height)
    surface.save(path)
    return projection
