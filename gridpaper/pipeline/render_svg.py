from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List

import svg

from ..models import Document, Dot, Drawable, Label, Line, Rect
from .primitives import mm


def _circle(item: Dot) -> svg.Element:
    return svg.Circle(
        cx=mm(item.cx),
        cy=mm(item.cy),
        r=item.r,
        fill=item.fill,
        stroke_width=item.stroke_width,
    )


def _rect(item: Rect) -> svg.Element:
    return svg.Rect(
        x=mm(item.x),
        y=mm(item.y),
        width=mm(item.width),
        height=mm(item.height),
        fill=item.fill,
        stroke=item.stroke,
        stroke_width=item.stroke_width,
    )


def _line(item: Line) -> svg.Element:
    return svg.Line(
        x1=mm(item.x1),
        y1=mm(item.y1),
        x2=mm(item.x2),
        y2=mm(item.y2),
        stroke=item.stroke,
        stroke_width=item.stroke_width,
    )


def _text(item: Label) -> svg.Element:
    return svg.Text(x=mm(item.x), y=mm(item.y), style=item.style, text=item.content)


ELEMENT_BUILDERS: Dict[type, Callable[..., svg.Element]] = {
    Dot: _circle,
    Rect: _rect,
    Line: _line,
    Label: _text,
}


def to_element(item: Drawable) -> svg.Element:
    return ELEMENT_BUILDERS[type(item)](item)


def build_svg(doc: Document) -> svg.SVG:
    elements: List[svg.Element] = [to_element(item) for item in doc]
    # no viewBox: user units stay at the default scale, so mm coordinates are physical
    return svg.SVG(width=mm(doc.width), height=mm(doc.height), elements=elements)


def render_svg(doc: Document) -> str:
    return str(build_svg(doc))


def write_svg(doc: Document, output_path: Path) -> Path:
    output_path.write_text(render_svg(doc) + "\n", encoding="utf-8")
    return output_path
