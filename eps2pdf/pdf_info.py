from __future__ import annotations

from dataclasses import dataclass

import fitz

from .utils import pt_to_mm


@dataclass
class PageInfo:
    width_pt: float
    height_pt: float

    @property
    def width_mm(self) -> float:
        return pt_to_mm(self.width_pt)

    @property
    def height_mm(self) -> float:
        return pt_to_mm(self.height_pt)

    def describe(self) -> str:
        return (
            f"{self.width_pt:.0f} x {self.height_pt:.0f} pt "
            f"({self.width_mm:.2f} mm x {self.height_mm:.2f} mm)"
        )


@dataclass
class Preview:
    ppm: bytes
    width: int
    height: int


def _first_page(doc: fitz.Document) -> fitz.Page:
    if doc.page_count < 1:
        raise ValueError("PDF has no pages")
    return doc[0]


def read_page_info(pdf_path: str) -> PageInfo:
    with fitz.open(pdf_path) as doc:
        rect = _first_page(doc).rect
        return PageInfo(width_pt=rect.width, height_pt=rect.height)


def render_preview(pdf_path: str, max_width: int, max_height: int) -> Preview:
    """Render the first page scaled to fit inside ``max_width`` x ``max_height`` pixels."""
    with fitz.open(pdf_path) as doc:
        page = _first_page(doc)
        rect = page.rect
        if rect.is_empty:
            raise ValueError("PDF page is empty")
        zoom = min(max_width / rect.width, max_height / rect.height)
        pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
        return Preview(ppm=pix.tobytes("ppm"), width=pix.width, height=pix.height)
