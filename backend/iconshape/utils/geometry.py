"""Leaf-node geometry measurement for path data. No engine imports.

Coordinates follow SVG screen space (y grows downward): a positive signed
area means the outline runs clockwise on screen.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from shapely.ops import unary_union
from svgpathtools import Path, parse_path

# Samples per subpath for area / winding estimates
_SUBPATH_SAMPLES = 720


def _subpaths(d: str) -> list[Path]:
    if not d.strip():
        return []
    return [sp for sp in parse_path(d).continuous_subpaths() if len(sp) > 0]


def _sample(subpath: Path, n: int = _SUBPATH_SAMPLES) -> NDArray[np.float64]:
    pts = [subpath.point(t) for t in np.linspace(0, 1, n)]
    return np.array([[p.real, p.imag] for p in pts])


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed point ring."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def path_length(d: str) -> float:
    """Total arc length of every subpath."""
    return float(sum(sp.length() for sp in _subpaths(d)))


def subpath_starts(d: str) -> list[tuple[float, float]]:
    """Absolute start point of each subpath, as a renderer resolves them."""
    return [(sp.start.real, sp.start.imag) for sp in _subpaths(d)]


def winding_directions(d: str) -> list[int]:
    """Per subpath: 1 = clockwise on screen, -1 = counter-clockwise, 0 = degenerate."""
    directions = []
    for sp in _subpaths(d):
        area = signed_area(_sample(sp))
        directions.append(1 if area > 1e-9 else -1 if area < -1e-9 else 0)
    return directions


def path_area(d: str) -> float:
    """Filled area of the union of all subpaths.

    Matches the rendered area under ``nonzero`` when the subpaths share
    one orientation.
    """
    polygons = []
    for sp in _subpaths(d):
        poly = Polygon(_sample(sp))
        if not poly.is_valid:
            poly = poly.buffer(0)
        if not poly.is_empty:
            polygons.append(poly)
    if not polygons:
        return 0.0
    return float(unary_union(polygons).area)


def path_bbox(d: str) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) over every subpath."""
    subpaths = _subpaths(d)
    if not subpaths:
        return (0.0, 0.0, 0.0, 0.0)
    boxes = [sp.bbox() for sp in subpaths]  # (xmin, xmax, ymin, ymax)
    return (
        min(b[0] for b in boxes),
        min(b[2] for b in boxes),
        max(b[1] for b in boxes),
        max(b[3] for b in boxes),
    )
