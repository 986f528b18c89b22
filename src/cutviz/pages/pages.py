from typing import Dict, Type, Union
from cutviz.pages.basic2d import Basic2dPage
from cutviz.pages.triangle_cut_2d import TriangleCut2dPage

Page = Union[Basic2dPage, TriangleCut2dPage]

PAGE_KINDS: Dict[str, Type] = {
    "basic": Basic2dPage,
    "triangle-cut": TriangleCut2dPage,
}


def create_page(kind: str) -> Page:
    if kind not in PAGE_KINDS:
        raise ValueError(f"Unknown page kind: {kind}")
    return PAGE_KINDS[kind]()
