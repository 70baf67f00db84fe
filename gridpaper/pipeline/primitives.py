from __future__ import annotations

from .. import config
from ..models import Dot, Label, Line, Rect


def mm(value: float) -> str:
    return f"{value}mm"


def make_dot(color: str, cx: float = 0.0, cy: float = 0.0) -> Dot:
    # stroke width is set but there is no stroke color, so it never paints
    return Dot(
        cx=cx,
        cy=cy,
        r=config.DOT_RADIUS,
        fill=color,
        stroke_width=config.DOT_STROKE_WIDTH,
    )


def make_rect(x: float, y: float, width: float, height: float, color: str) -> Rect:
    return Rect(
        x=x,
        y=y,
        width=width,
        height=height,
        stroke=color,
        stroke_width=config.STROKE_WIDTH,
    )


def make_line(x1: float, y1: float, x2: float, y2: float, color: str) -> Line:
    return Line(x1=x1, y1=y1, x2=x2, y2=y2, stroke=color, stroke_width=config.STROKE_WIDTH)


def make_text(content: str, x: float, y: float, color: str) -> Label:
    return Label(
        content=content,
        x=x,
        y=y,
        color=color,
        style=config.LABEL_STYLE.format(color=color),
    )
