from cutviz.main import build_parser, main
from cutviz.pages.basic2d import Basic2dPage
from cutviz.render2d.display_list import DisplayList
from cutviz.render2d.mpl_surface import MatplotlibSurface, export_png

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_export_png(tmp_path):
    out = tmp_path / "basic.png"
    projection = export_png(Basic2dPage().display_list, out, 240, 180)
    assert projection is not None
    assert projection.scale > 0
    assert out.read_bytes()[:8] == PNG_SIGNATURE


def test_export_empty_scene(tmp_path):
    out = tmp_path / "empty.png"
    assert export_png(DisplayList(), out, 100, 100) is None
    assert out.exists()


def test_matplotlib_surface_measures_text():
    surface = MatplotlibSurface(200, 100)
    assert surface.measure_text("-100") > surface.measure_text("1") > 0


def test_cli_defaults():
    args = build_parser().parse_args([])
    assert args.page == "basic"
    assert args.export is None
    assert args.log_level == "INFO"


def test_cli_export(tmp_path):
    out = tmp_path / "cut.png"
    assert main(["--page", "triangle-cut", "--export", str(out), "--width", "320", "--height", "240"]) == 0
    assert out.read_bytes()[:8] == PNG_SIGNATURE


def test_cli_rejects_bad_size(tmp_path):
    out = tmp_path / "bad.png"
    assert main(["--export", str(out), "--width", "0"]) == 2
    assert not out.exists()


def test_cli_reports_unwritable_path(tmp_path):
    out = tmp_path / "missing" / "dir" / "cut.png"
    assert main(["--export", str(out), "--width", "100", "--height", "100"]) == 1
