from __future__ import annotations

import math
from functools import partial
from typing import Callable, Dict, List, Sequence, Tuple

from .. import config
from ..config import PageGeometry
from ..models import Document, GridSettings, PageKind
from .primitives import make_dot, make_line, make_rect, make_text


Offset = Tuple[float, float]


def quadrant_area(geometry: PageGeometry) -> Tuple[float, float]:
    """Usable area of one quadrant: a quarter page minus outer margin and half the gutter."""
    pw, ph = geometry.paper_size
    return (
        pw / 2 - geometry.outer_margins[0] - geometry.inner_margins[0],
        ph / 2 - geometry.outer_margins[1] - geometry.inner_margins[1],
    )


def cells_for_area(area: Tuple[float, float], cell_size: Tuple[float, float]) -> Tuple[int, int]:
    # ceiling, so the lattice may overflow the area by less than one cell
    return (
        int(math.ceil(area[0] / cell_size[0])),
        int(math.ceil(area[1] / cell_size[1])),
    )


def quadrant_cells(geometry: PageGeometry) -> Tuple[int, int]:
    return cells_for_area(quadrant_area(geometry), geometry.cell_size)


def draw_grid(doc: Document, settings: GridSettings, geometry: PageGeometry) -> None:
    cw, ch = geometry.cell_size
    ox, oy = settings.offset
    cols, rows = settings.num_cells
    for x in range(cols):
        for y in range(rows):
            doc.add(make_dot(settings.color, cx=x * cw + ox, cy=y * ch + oy))


def header_widths(columns: int) -> Tuple[int, int, int]:
    """
    Left, mid and right header box widths in cells.

    One cell at the right end of the row stays unboxed, so the three widths
    add up to ``columns - 1``. With fewer than 8 columns the left width goes
    negative; it is returned as is.
    """
    right = config.HEADER_RIGHT_CELLS
    mid = config.HEADER_MID_CELLS
    left = columns - right - mid - config.HEADER_MARGIN_CELLS
    return left, mid, right


def draw_header(doc: Document, settings: GridSettings, geometry: PageGeometry) -> None:
    cw, ch = geometry.cell_size
    ox, oy = settings.offset
    left, mid, right = header_widths(settings.num_cells[0])

    doc.add(make_rect(ox, oy, cw * left, ch, settings.color))
    doc.add(make_rect(ox + cw * left, oy, cw * mid, ch, settings.color))
    doc.add(make_rect(ox + cw * (left + mid), oy, cw * right, ch, settings.color))


def calendar_anchor(settings: GridSettings, geometry: PageGeometry) -> Offset:
    cw, ch = geometry.cell_size
    span = config.DAY_BOX_CELLS * len(config.DAY_LABELS)
    return (
        cw * (settings.num_cells[0] - span - 1) + settings.offset[0],
        ch * config.CALENDAR_TOP_CELLS + settings.offset[1],
    )


def draw_calendar(
    doc: Document,
    settings: GridSettings,
    geometry: PageGeometry,
    row_labels: Sequence[str] = tuple(config.DEFAULT_ROW_LABELS),
) -> None:
    cw, ch = geometry.cell_size
    box_w = config.DAY_BOX_CELLS * cw
    lift = config.LABEL_BASELINE_LIFT
    start_x, start_y = calendar_anchor(settings, geometry)

    for c, day in enumerate(config.DAY_LABELS):
        doc.add(make_text(day, start_x + box_w * c, start_y - lift, settings.color))

    for r, label in enumerate(row_labels):
        doc.add(make_text(label, settings.offset[0], start_y + ch * (r + 1) - lift, settings.color))
        for c in range(len(config.DAY_LABELS)):
            doc.add(make_rect(start_x + box_w * c, start_y + ch * r, box_w, ch, settings.color))


def _settings(offset: Offset, color: str, geometry: PageGeometry) -> GridSettings:
    return GridSettings(color=color, offset=offset, num_cells=quadrant_cells(geometry))


def draw_default_quadrant(
    doc: Document,
    offset: Offset,
    color: str,
    geometry: PageGeometry,
) -> None:
    settings = _settings(offset, color, geometry)
    draw_grid(doc, settings, geometry)
    draw_header(doc, settings, geometry)


def draw_calendar_quadrant(
    doc: Document,
    offset: Offset,
    color: str,
    geometry: PageGeometry,
    row_labels: Sequence[str] = tuple(config.DEFAULT_ROW_LABELS),
) -> None:
    settings = _settings(offset, color, geometry)
    draw_grid(doc, settings, geometry)
    draw_header(doc, settings, geometry)
    draw_calendar(doc, settings, geometry, row_labels)


QUADRANT_RENDERERS: Dict[PageKind, Callable[[Document, Offset, str, PageGeometry], None]] = {
    PageKind.GRID: draw_default_quadrant,
    PageKind.CALENDAR: draw_calendar_quadrant,
}


def quadrant_offsets(geometry: PageGeometry) -> List[Offset]:
    """Top-left anchors in paint order: top-left, top-right, bottom-left, bottom-right."""
    pw, ph = geometry.paper_size
    (outer_x, outer_y), (inner_x, _) = geometry.outer_margins, geometry.inner_margins
    right_x = pw / 2 + inner_x + geometry.mid_split_width / 2
    bottom_y = ph / 2 + outer_y
    return [
        (outer_x, outer_y),
        (right_x, outer_y),
        (outer_x, bottom_y),
        (right_x, bottom_y),
    ]


def draw_cut_lines(doc: Document, color: str, geometry: PageGeometry) -> None:
    pw, ph = geometry.paper_size
    half_split = geometry.mid_split_width / 2

    doc.add(make_line(pw / 2 - half_split, 0.0, pw / 2 - half_split, ph, color))
    doc.add(make_line(pw / 2 + half_split, 0.0, pw / 2 + half_split, ph, color))
    doc.add(make_line(0.0, ph / 2, pw, ph / 2, color))


def build_page(
    kind: PageKind | str,
    color: str,
    geometry: PageGeometry = config.DEFAULT_GEOMETRY,
    row_labels: Sequence[str] | None = None,
) -> Document:
    try:
        renderer = QUADRANT_RENDERERS[PageKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown page kind: {kind}") from None
    if PageKind(kind) == PageKind.CALENDAR:
        labels = tuple(config.DEFAULT_ROW_LABELS if row_labels is None else row_labels)
        renderer = partial(renderer, row_labels=labels)

    doc = Document(width=geometry.paper_size[0], height=geometry.paper_size[1])
    for offset in quadrant_offsets(geometry):
        renderer(doc, offset, color, geometry)
    draw_cut_lines(doc, color, geometry)
    return doc
