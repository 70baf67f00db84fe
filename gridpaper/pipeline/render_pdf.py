from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

from reportlab.lib import colors, units
from reportlab.pdfgen import canvas

from ..models import Document, Dot, Drawable, Label, Line, Rect


logger = logging.getLogger(__name__)

FONT_NAME = "Helvetica"
# 14px label text at 96 px per inch
FONT_SIZE_PT = 14 * 0.75


def _color(value: str, default=colors.black) -> colors.Color:
    if not value:
        return default
    try:
        return colors.toColor(value)
    except ValueError:
        logger.warning("Unknown color %r, falling back to black", value)
        return default


def page_size(doc: Document) -> tuple[float, float]:
    return doc.width * units.mm, doc.height * units.mm


def _draw_dot(canv: canvas.Canvas, item: Dot, ph: float) -> None:
    canv.setFillColor(_color(item.fill))
    canv.circle(item.cx * units.mm, ph - item.cy * units.mm, units.toLength(item.r), stroke=0, fill=1)


def _draw_rect(canv: canvas.Canvas, item: Rect, ph: float) -> None:
    canv.setStrokeColor(_color(item.stroke))
    canv.setLineWidth(units.toLength(item.stroke_width))
    w = item.width * units.mm
    h = item.height * units.mm
    canv.rect(item.x * units.mm, ph - item.y * units.mm - h, w, h, stroke=1, fill=0)


def _draw_line(canv: canvas.Canvas, item: Line, ph: float) -> None:
    canv.setStrokeColor(_color(item.stroke))
    canv.setLineWidth(units.toLength(item.stroke_width))
    canv.line(
        item.x1 * units.mm,
        ph - item.y1 * units.mm,
        item.x2 * units.mm,
        ph - item.y2 * units.mm,
    )


def _draw_label(canv: canvas.Canvas, item: Label, ph: float) -> None:
    if not item.content:
        return
    canv.setFillColor(_color(item.color))
    canv.setFont(FONT_NAME, FONT_SIZE_PT)
    canv.drawString(item.x * units.mm, ph - item.y * units.mm, item.content)


DRAWERS: Dict[type, Callable[[canvas.Canvas, Drawable, float], None]] = {
    Dot: _draw_dot,
    Rect: _draw_rect,
    Line: _draw_line,
    Label: _draw_label,
}


def render_pdf(doc: Document, output_path: Path) -> Path:
    """
    Draw the document on a single PDF page of the exact paper size.

    Coordinates are flipped from the top-left origin used by the layout to
    the bottom-left origin of PDF. ``invariant`` keeps repeated renders
    byte-identical.
    """
    size = page_size(doc)
    canv = canvas.Canvas(str(output_path), pagesize=size, invariant=1)
    ph = size[1]
    for item in doc:
        DRAWERS[type(item)](canv, item, ph)
    canv.showPage()
    canv.save()
    return output_path
