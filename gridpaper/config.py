from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple


# resolved against the working directory at write time
DEFAULT_OUT_DIR = Path("out")
OUT_DIR = DEFAULT_OUT_DIR

Pair = Tuple[float, float]


@dataclass(frozen=True)
class PageGeometry:
    """Physical constants of one sheet, all in millimeters."""

    paper_size: Pair = (215.9, 279.4)
    outer_margins: Pair = (10.0, 10.0)
    inner_margins: Pair = (5.0, 5.0)
    cell_size: Pair = (5.0, 5.0)
    mid_split_width: float = 4.0


PAPER_PRESETS: Dict[str, Pair] = {
    "letter": (215.9, 279.4),
    "a4": (210.0, 297.0),
}

DEFAULT_GEOMETRY = PageGeometry()

# Primitive styling
DOT_RADIUS = "0.25mm"
DOT_STROKE_WIDTH = 1
STROKE_WIDTH = "0.25mm"
LABEL_STYLE = "fill: {color}; font-weight: lighter; font-size: 14px;"

# Header boxes, in cells
HEADER_RIGHT_CELLS = 5
HEADER_MID_CELLS = 2
HEADER_MARGIN_CELLS = 1

# Calendar overlay
DAY_LABELS: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DAY_BOX_CELLS = 2
CALENDAR_TOP_CELLS = 3
LABEL_BASELINE_LIFT = 1.0

DEFAULT_ROW_LABELS: List[str] = [
    "Art",
    "Brush Teeth",
    "Chores",
    "Dread",
    "Entropy",
    "Flee",
    "Grand",
    "Immediate",
    "",
    "",
    "",
    "",
    "",
]
SHORT_ROW_LABELS: List[str] = DEFAULT_ROW_LABELS[:8]

# (kind, color) pairs written when nothing else is requested
DEFAULT_OUTPUTS: List[Tuple[str, str]] = [
    ("grid", "red"),
    ("grid", "green"),
    ("grid", "blue"),
    ("calendar", "blue"),
]

PREVIEW_MIN_PX = 2200


def geometry_for_paper(name: str) -> PageGeometry:
    key = (name or "").strip().lower()
    if key not in PAPER_PRESETS:
        raise ValueError(f"Unknown paper preset: {name}")
    return PageGeometry(paper_size=PAPER_PRESETS[key])


def set_out_dir(path: Path) -> None:
    global OUT_DIR
    OUT_DIR = path
