from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from .. import config

# never rasterize below twice the PDF's native 72 dpi
MIN_ZOOM = 2.0


def preview_zoom(width: float, height: float, min_px: int) -> float:
    return max(MIN_ZOOM, min_px / float(min(width, height)))


def render_preview(pdf_path: Path, out_path: Path, min_px: int = config.PREVIEW_MIN_PX) -> Path:
    """Rasterize the single page of a sheet PDF to PNG, short side at least ``min_px`` pixels."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with fitz.open(pdf_path) as doc:
        sheet = doc.load_page(0)
        zoom = preview_zoom(sheet.rect.width, sheet.rect.height, min_px)
        sheet.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False).save(str(out_path))
    return out_path
