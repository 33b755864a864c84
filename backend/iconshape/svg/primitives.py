"""Primitive-to-path conversion.

Every function returns a path-command string that starts with an absolute
``M`` and renders the same silhouette as the source element. Closed
primitives (rect, circle, ellipse) all run clockwise on screen, so several of
them concatenated into one compound path still fill as a union under the
``nonzero`` rule.
"""

from __future__ import annotations

import math
import re

from iconshape.svg.shapes import (
    Circle,
    Ellipse,
    Line,
    Path,
    Point,
    Polygon,
    Polyline,
    Rect,
    ShapeDescriptor,
)

NUMBER_PATTERN = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

_NUMBER_RE = re.compile(NUMBER_PATTERN)
# Anything besides digits, separators, signs, dots and exponents makes a points list malformed
_POINTS_JUNK_RE = re.compile(r"[^\d\s,.eE+-]")


def format_number(value: float, precision: int = 10) -> str:
    """Format a coordinate without float noise: 7.0 -> "7", 0.1 + 0.2 -> "0.3"."""
    value = round(float(value), precision)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def rect_to_path(
    x: float,
    y: float,
    width: float,
    height: float,
    rx: float | None = None,
    ry: float | None = None,
    precision: int = 10,
) -> str:
    """Rectangle, optionally with rounded corners.

    A missing radius inherits the other one. Radii are clamped to half the
    side they round. Square corners give ``M h v h z``; rounded corners give
    four edges alternating with four quarter arcs (flags ``0 0 1``).
    """
    if rx is None and ry is None:
        rx = ry = 0.0
    elif rx is None:
        rx = ry
    elif ry is None:
        ry = rx

    rx = min(rx, width / 2)
    ry = min(ry, height / 2)

    def f(v: float) -> str:
        return format_number(v, precision)

    if rx <= 0 or ry <= 0:
        return f"M{f(x)},{f(y)}h{f(width)}v{f(height)}h{f(-width)}z"

    inner_w = width - 2 * rx
    inner_h = height - 2 * ry
    arc = f"a{f(rx)},{f(ry)} 0 0 1"
    return (
        f"M{f(x + rx)},{f(y)}"
        f"h{f(inner_w)}"
        f"{arc} {f(rx)},{f(ry)}"
        f"v{f(inner_h)}"
        f"{arc} {f(-rx)},{f(ry)}"
        f"h{f(-inner_w)}"
        f"{arc} {f(-rx)},{f(-ry)}"
        f"v{f(-inner_h)}"
        f"{arc} {f(rx)},{f(-ry)}"
        "z"
    )


def ellipse_to_path(cx: float, cy: float, rx: float, ry: float, precision: int = 10) -> str:
    """Two half-ellipse arcs from the leftmost point, over the top and back, closed."""

    def f(v: float) -> str:
        return format_number(v, precision)

    arc = f"a{f(rx)},{f(ry)} 0 1,1"
    return f"M{f(cx - rx)},{f(cy)}{arc} {f(2 * rx)},0{arc} {f(-2 * rx)},0z"


def circle_to_path(cx: float, cy: float, r: float, precision: int = 10) -> str:
    """Circle as two half-circle arcs; a single 360 degree arc renders as nothing."""
    return ellipse_to_path(cx, cy, r, r, precision=precision)


def line_to_path(x1: float, y1: float, x2: float, y2: float, precision: int = 10) -> str:
    def f(v: float) -> str:
        return format_number(v, precision)

    return f"M{f(x1)},{f(y1)}L{f(x2)},{f(y2)}"


def parse_points(text: str) -> tuple[Point, ...]:
    """Parse a ``points`` attribute into coordinate pairs.

    Returns an empty tuple for non-numeric or non-finite input. A trailing unpaired
    coordinate is ignored, as renderers draw up to the last complete pair.
    """
    if _POINTS_JUNK_RE.search(text):
        return ()
    values = [float(v) for v in _NUMBER_RE.findall(text)]
    if not all(math.isfinite(v) for v in values):
        return ()
    return tuple(zip(values[0::2], values[1::2]))


def polyline_to_path(points: tuple[Point, ...], precision: int = 10) -> str:
    """Open path through the points; empty string when there are none."""
    if not points:
        return ""

    def f(v: float) -> str:
        return format_number(v, precision)

    (x0, y0), rest = points[0], points[1:]
    return f"M{f(x0)},{f(y0)}" + "".join(f"L{f(x)},{f(y)}" for x, y in rest)


def polygon_to_path(points: tuple[Point, ...], precision: int = 10) -> str:
    """Same as a polyline, closed."""
    path = polyline_to_path(points, precision=precision)
    return path + "Z" if path else ""


def shape_to_path(shape: ShapeDescriptor, precision: int = 10) -> str:
    """Convert any shape descriptor to path data (``<path>`` data passes through)."""
    if isinstance(shape, Path):
        return shape.d
    if isinstance(shape, Rect):
        return rect_to_path(shape.x, shape.y, shape.width, shape.height, shape.rx, shape.ry, precision)
    if isinstance(shape, Circle):
        return circle_to_path(shape.cx, shape.cy, shape.r, precision)
    if isinstance(shape, Ellipse):
        return ellipse_to_path(shape.cx, shape.cy, shape.rx, shape.ry, precision)
    if isinstance(shape, Line):
        return line_to_path(shape.x1, shape.y1, shape.x2, shape.y2, precision)
    if isinstance(shape, Polygon):
        return polygon_to_path(shape.points, precision)
    if isinstance(shape, Polyline):
        return polyline_to_path(shape.points, precision)
    raise TypeError(f"Unsupported shape descriptor: {type(shape).__name__}")
