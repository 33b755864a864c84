"""SVG markup extractor — raw SVG string → CanonicalIconGeometry.

Structural text scanning, not a DOM parser: hand-edited and generated icons
are often slightly malformed (unclosed tags, mixed quoting) and a strict XML
parser would reject the whole document. Elements that cannot be understood
are dropped and scanning continues.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable

from iconshape.engine.config import DEFAULT_CONFIG, EngineConfig
from iconshape.models.geometry import FILL_RULES, CanonicalIconGeometry
from iconshape.svg.normalizer import join_fragments, normalize_path_start, starts_absolute
from iconshape.svg.primitives import NUMBER_PATTERN, format_number, parse_points, shape_to_path
from iconshape.svg.shapes import (
    Circle,
    Ellipse,
    Line,
    Path,
    Polygon,
    Polyline,
    Rect,
    ShapeDescriptor,
)

logger = logging.getLogger(__name__)

# Fixed output order of element kinds; source order is kept within a kind
EXTRACTION_ORDER: tuple[str, ...] = ("path", "rect", "circle", "line", "polyline", "polygon", "ellipse")

COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

# "<tag ...>" where "\b" keeps <line from matching <linearGradient>; a tag cut off
# before its ">" ends at the next "<" or at end of input
_ELEMENT_RES: dict[str, re.Pattern[str]] = {
    tag: re.compile(rf"<{tag}\b([^<>]*)(?:>|(?=<)|$)", re.IGNORECASE) for tag in EXTRACTION_ORDER
}

# Attribute names must follow whitespace: "r" never matches inside "stroke-width=",
# "x" never inside "rx=". Double, single or missing quotes are accepted.
_ATTR_RE = re.compile(
    r"""(?<![^\s])([A-Za-z_:][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>/]+))"""
)

_NUMBER_VALUE_RE = re.compile(rf"\s*({NUMBER_PATTERN})\s*(?:px)?\s*")
_VIEWBOX_RE = re.compile(r"""(?<![\w-])viewBox\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_FILL_RULE_RE = re.compile(r"""(?<![\w-])fill-rule\s*[=:]\s*["']?\s*([\w-]+)""", re.IGNORECASE)


class _Malformed(Exception):
    """An element attribute is present but unusable."""


def strip_comments(svg_text: str) -> str:
    """Remove ``<!-- ... -->`` comments; an unterminated comment is left as is."""
    return COMMENT_RE.sub("", svg_text)


def extract_attributes(tag_text: str) -> dict[str, str]:
    """Extract ``name=value`` attributes from an SVG tag string (first occurrence wins)."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        name = m.group(1)
        if name in attrs:
            continue
        value = next((g for g in m.groups()[1:] if g is not None), "")
        attrs[name] = value
    return attrs


def parse_number(value: str | None) -> float | None:
    """Parse a plain (or ``px``) SVG number; anything else is None."""
    if value is None:
        return None
    m = _NUMBER_VALUE_RE.fullmatch(value)
    if m is None:
        return None
    number = float(m.group(1))
    return number if math.isfinite(number) else None


def _required(attrs: dict[str, str], name: str) -> float:
    number = parse_number(attrs.get(name))
    if number is None:
        raise _Malformed(f"missing or non-numeric {name}={attrs.get(name)!r}")
    return number


def _optional(attrs: dict[str, str], name: str, default: float = 0.0) -> float:
    """Positional attributes default to 0 when absent, but not when garbled."""
    if name not in attrs:
        return default
    return _required(attrs, name)


def _positive(attrs: dict[str, str], name: str) -> float:
    number = _required(attrs, name)
    if number <= 0:
        raise _Malformed(f"non-positive {name}={number}")
    return number


def _radius(attrs: dict[str, str], name: str) -> float | None:
    """Rect corner radius; unusable values count as absent."""
    number = parse_number(attrs.get(name))
    if number is None or number < 0:
        return None
    return number


def _build_path(attrs: dict[str, str]) -> Path:
    d = attrs.get("d", "").strip()
    if not d:
        raise _Malformed("empty d")
    return Path(d=d)


def _build_rect(attrs: dict[str, str]) -> Rect:
    return Rect(
        x=_optional(attrs, "x"),
        y=_optional(attrs, "y"),
        width=_positive(attrs, "width"),
        height=_positive(attrs, "height"),
        rx=_radius(attrs, "rx"),
        ry=_radius(attrs, "ry"),
    )


def _build_circle(attrs: dict[str, str]) -> Circle:
    return Circle(cx=_optional(attrs, "cx"), cy=_optional(attrs, "cy"), r=_positive(attrs, "r"))


def _build_ellipse(attrs: dict[str, str]) -> Ellipse:
    return Ellipse(
        cx=_optional(attrs, "cx"),
        cy=_optional(attrs, "cy"),
        rx=_positive(attrs, "rx"),
        ry=_positive(attrs, "ry"),
    )


def _build_line(attrs: dict[str, str]) -> Line:
    return Line(
        x1=_optional(attrs, "x1"),
        y1=_optional(attrs, "y1"),
        x2=_optional(attrs, "x2"),
        y2=_optional(attrs, "y2"),
    )


def _points(attrs: dict[str, str]) -> tuple[tuple[float, float], ...]:
    points = parse_points(attrs.get("points", ""))
    if not points:
        raise _Malformed(f"unusable points={attrs.get('points')!r}")
    return points


def _build_polyline(attrs: dict[str, str]) -> Polyline:
    return Polyline(points=_points(attrs))


def _build_polygon(attrs: dict[str, str]) -> Polygon:
    return Polygon(points=_points(attrs))


_BUILDERS: dict[str, Callable[[dict[str, str]], ShapeDescriptor]] = {
    "path": _build_path,
    "rect": _build_rect,
    "circle": _build_circle,
    "line": _build_line,
    "polyline": _build_polyline,
    "polygon": _build_polygon,
    "ellipse": _build_ellipse,
}


def extract_shapes(svg_text: str) -> list[ShapeDescriptor]:
    """Scan the markup for supported elements, in extraction order."""
    text = strip_comments(svg_text)
    shapes: list[ShapeDescriptor] = []

    for tag in EXTRACTION_ORDER:
        build = _BUILDERS[tag]
        for match in _ELEMENT_RES[tag].finditer(text):
            attrs = extract_attributes(match.group(1))
            try:
                shapes.append(build(attrs))
            except _Malformed as e:
                logger.warning("Dropping <%s> at offset %d: %s", tag, match.start(), e)

    return shapes


def extract_view_box(svg_text: str, default: str = DEFAULT_CONFIG.default_view_box) -> str:
    """First viewBox outside comments as "minX minY width height", or the default."""
    m = _VIEWBOX_RE.search(strip_comments(svg_text))
    if m is None:
        return default

    raw = (m.group(1) if m.group(1) is not None else m.group(2)).strip()
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(raw) if p]
    numbers = [parse_number(p) for p in parts]
    if len(numbers) != 4 or any(n is None for n in numbers):
        logger.warning("Malformed viewBox %r, using %s", raw, default)
        return default

    # Positivity is checked on the formatted values: 1e-12 prints as "0"
    formatted = [format_number(n) for n in numbers]
    if float(formatted[2]) <= 0 or float(formatted[3]) <= 0:
        logger.warning("Degenerate viewBox %r, using %s", raw, default)
        return default
    return " ".join(formatted)


def extract_fill_rule(svg_text: str) -> str | None:
    """First valid fill-rule (attribute or inline style) outside comments."""
    for m in _FILL_RULE_RE.finditer(strip_comments(svg_text)):
        value = m.group(1).lower()
        if value in FILL_RULES:
            return value
    return None


def extract_fragments(svg_text: str, config: EngineConfig | None = None) -> list[str]:
    """Normalized path fragments, one per extracted element, in extraction order."""
    config = config or DEFAULT_CONFIG
    fragments: list[str] = []

    for shape in extract_shapes(svg_text):
        fragment = normalize_path_start(shape_to_path(shape, precision=config.number_precision))
        if not fragment:
            continue
        if not starts_absolute(fragment):
            logger.warning("Dropping <%s>: path data does not start with a move command", shape.tag)
            continue
        fragments.append(fragment)

    return fragments


def extract_geometry(svg_text: str, config: EngineConfig | None = None) -> CanonicalIconGeometry:
    """Extract the canonical single-path geometry of an SVG icon.

    No extractable element yields an empty ``path_data``; that is the
    "no geometry" state, not an error.
    """
    config = config or DEFAULT_CONFIG
    fragments = extract_fragments(svg_text, config)

    geometry = CanonicalIconGeometry(
        path_data=join_fragments(fragments),
        view_box=extract_view_box(svg_text, config.default_view_box),
        fill_rule=extract_fill_rule(svg_text),
    )
    logger.debug("Extracted %d fragments, viewBox %s", len(fragments), geometry.view_box)
    return geometry
