from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Tuple, Union


class PageKind(str, Enum):
    GRID = "grid"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class GridSettings:
    color: str
    offset: Tuple[float, float]
    num_cells: Tuple[int, int]


@dataclass(frozen=True)
class Dot:
    cx: float
    cy: float
    r: str
    fill: str
    stroke_width: int


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    stroke: str
    stroke_width: str
    fill: str = "none"


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: str


@dataclass(frozen=True)
class Label:
    content: str
    x: float
    y: float
    color: str
    style: str


Drawable = Union[Dot, Rect, Line, Label]


@dataclass
class Document:
    """Append-only list of drawables on a page of ``width`` x ``height`` mm."""

    width: float
    height: float
    items: List[Drawable] = field(default_factory=list)

    def add(self, item: Drawable) -> "Document":
        self.items.append(item)
        return self

    def extend(self, items: Iterable[Drawable]) -> "Document":
        self.items.extend(items)
        return self

    def of_type(self, kind: type) -> List[Drawable]:
        return [item for item in self.items if isinstance(item, kind)]

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
