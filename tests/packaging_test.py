import os

import pytest

PYPROJECT = os.path.join(os.path.dirname(__file__), "..", "pyproject.toml")


def load():
    tomllib = pytest.importorskip("tomllib")
    with open(PYPROJECT, "rb") as f:
        return tomllib.load(f)


def test_package_discovery_finds_namespace_packages():
    find = load()["tool"]["setuptools"]["packages"]["find"]
    assert find == {"where": ["src"], "namespaces": True}


def test_console_script_points_at_main():
    project = load()["project"]
    assert project["scripts"]["cutviz"] == "cutviz.main:main"
    assert {"numpy", "pyclipper", "matplotlib"} <= set(project["dependencies"])


def test_render_core_does_not_import_views():
    render_dir = os.path.join(os.path.dirname(__file__), "..", "src", "cutviz", "render2d")
    for name in sorted(os.listdir(render_dir)):
        if name.endswith(".py"):
            with open(os.path.join(render_dir, name), encoding="utf-8") as f:
                assert "cutviz.views" not in f.read(), name
