"""Shape descriptors produced by the markup extractor.

One frozen dataclass per supported element. Built fresh on every extraction
call and discarded once converted to path data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    tag: ClassVar[str] = "rect"

    x: float
    y: float
    width: float
    height: float
    # None = attribute absent (inherits the other radius)
    rx: float | None = None
    ry: float | None = None


@dataclass(frozen=True)
class Circle:
    tag: ClassVar[str] = "circle"

    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class Ellipse:
    tag: ClassVar[str] = "ellipse"

    cx: float
    cy: float
    rx: float
    ry: float


@dataclass(frozen=True)
class Line:
    tag: ClassVar[str] = "line"

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Polyline:
    tag: ClassVar[str] = "polyline"

    points: tuple[Point, ...]


@dataclass(frozen=True)
class Polygon:
    tag: ClassVar[str] = "polygon"

    points: tuple[Point, ...]


@dataclass(frozen=True)
class Path:
    tag: ClassVar[str] = "path"

    d: str


ShapeDescriptor = Union[Rect, Circle, Ellipse, Line, Polyline, Polygon, Path]
