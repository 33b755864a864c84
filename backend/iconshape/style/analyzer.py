"""Style signature analyzer — reference SVGs → StyleSignature.

Each sample votes once per attribute (its own most frequent value); the
signature takes the majority vote, ties going to the value seen first.
The confidence score is the mean share of voting samples that agree with
the chosen value, over every attribute at least one sample expresses.

The style summary adds a descriptive profile on top of the signature:
paint style, median corner radius, dominant shapes and detail level.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from iconshape.engine.config import DEFAULT_CONFIG, EngineConfig
from iconshape.errors import EmptySampleSetError
from iconshape.models.geometry import STROKE_LINECAPS, STROKE_LINEJOINS, StyleSignature, StyleSummary
from iconshape.svg.parser import extract_shapes, extract_view_box, parse_number, strip_comments
from iconshape.svg.shapes import Circle, Ellipse, Line, Path, Polygon, Polyline, Rect, ShapeDescriptor

logger = logging.getLogger(__name__)

# Attribute (stroke-width="2") or inline style (stroke-width: 2) declarations
_STROKE_WIDTH_RE = re.compile(r"""(?<![\w-])stroke-width\s*[=:]\s*["']?\s*([^"';>\s]+)""", re.IGNORECASE)
_LINECAP_RE = re.compile(r"""(?<![\w-])stroke-linecap\s*[=:]\s*["']?\s*([\w-]+)""", re.IGNORECASE)
_LINEJOIN_RE = re.compile(r"""(?<![\w-])stroke-linejoin\s*[=:]\s*["']?\s*([\w-]+)""", re.IGNORECASE)
_SVG_ROOT_RE = re.compile(r"<svg\b", re.IGNORECASE)

# Paint declarations; "stroke-width=" and "fill-rule=" do not match
_FILL_PAINT_RE = re.compile(r"""(?<![\w-])fill\s*[=:]\s*["']?\s*([^"';>\s]+)""", re.IGNORECASE)
_STROKE_PAINT_RE = re.compile(r"""(?<![\w-])stroke\s*[=:]\s*["']?\s*([^"';>\s]+)""", re.IGNORECASE)

_PATH_COMMAND_RE = re.compile(r"[MLHVCSQTAZ]", re.IGNORECASE)
_CURVE_COMMAND_RE = re.compile(r"[CSQTA]", re.IGNORECASE)
_LINE_COMMAND_RE = re.compile(r"[LHV]", re.IGNORECASE)

_FILL_USAGE = {"outline": "none", "filled": "solid", "mixed": "partial"}

# Free-text style manifest patterns
_MANIFEST_LINECAP_RES = (
    re.compile(r"stroke-linecap[=:]\s*[\"']?(butt|round|square)", re.IGNORECASE),
    re.compile(r"linecap[:\s]+(butt|round|square)", re.IGNORECASE),
    re.compile(r"terminals?[:\s]+(butt|round|square)", re.IGNORECASE),
)
_MANIFEST_LINEJOIN_RES = (
    re.compile(r"stroke-linejoin[=:]\s*[\"']?(miter|round|bevel)", re.IGNORECASE),
    re.compile(r"linejoin[:\s]+(miter|round|bevel)", re.IGNORECASE),
    re.compile(r"joins?[:\s]+(miter|round|bevel)", re.IGNORECASE),
)
_MANIFEST_STROKE_WIDTH_RES = (
    re.compile(r"stroke-width[=:]\s*[\"']?(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"stroke[:\s]+(\d+(?:\.\d+)?)\s*px", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*px\s*(?:uniform\s+)?stroke", re.IGNORECASE),
    re.compile(r"weight[:\s]+(\d+(?:\.\d+)?)\s*px", re.IGNORECASE),
)
_MANIFEST_GRID_RES = (
    re.compile(r"viewBox[=:]\s*[\"']?\s*0\s+0\s+(\d+)\s+(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*[x×]\s*(\d+)\s*(?:px)?\s*(?:grid|viewBox|canvas)", re.IGNORECASE),
    re.compile(r"canvas[:\s]+(\d+)\s*[x×]\s*(\d+)", re.IGNORECASE),
)


@dataclass(frozen=True)
class SampleStyle:
    """One reference sample's vote per attribute (None = not expressed)."""

    stroke_width: float | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None
    view_box_size: float | None = None


def _majority(values: Iterable[Any]) -> Any:
    """Most frequent value; ties go to the first one seen."""
    counts: dict[Any, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    if not counts:
        return None
    return max(counts, key=lambda v: counts[v])


def _stroke_widths(svg: str) -> list[float]:
    widths = []
    for m in _STROKE_WIDTH_RE.finditer(svg):
        value = parse_number(m.group(1))
        if value is not None and value > 0:
            widths.append(value)
    return widths


def _keywords(pattern: re.Pattern[str], svg: str, allowed: tuple[str, ...]) -> list[str]:
    values = (m.group(1).lower() for m in pattern.finditer(svg))
    return [v for v in values if v in allowed]


def _grid_size(svg: str) -> float | None:
    view_box = extract_view_box(svg, default="")
    if not view_box:
        return None
    _, _, width, height = (float(p) for p in view_box.split())
    return max(width, height)


def sample_style(svg: str) -> SampleStyle:
    """Collect one sample's stroke attributes and grid size."""
    svg = strip_comments(svg)
    return SampleStyle(
        stroke_width=_majority(_stroke_widths(svg)),
        stroke_linecap=_majority(_keywords(_LINECAP_RE, svg, STROKE_LINECAPS)),
        stroke_linejoin=_majority(_keywords(_LINEJOIN_RE, svg, STROKE_LINEJOINS)),
        view_box_size=_grid_size(svg),
    )


def _is_usable(sample: Any) -> bool:
    return isinstance(sample, str) and bool(sample.strip()) and bool(_SVG_ROOT_RE.search(sample))


def default_signature(config: EngineConfig | None = None, confidence: float = 0.0) -> StyleSignature:
    """Hardcoded fallback signature built from the engine defaults."""
    config = config or DEFAULT_CONFIG
    return StyleSignature(
        stroke_width=config.default_stroke_width,
        stroke_linecap=config.default_stroke_linecap,
        stroke_linejoin=config.default_stroke_linejoin,
        view_box_size=config.default_view_box_size,
        confidence_score=confidence,
    )


def analyze_style(samples: Iterable[str], config: EngineConfig | None = None) -> StyleSignature:
    """Derive a style signature from reference SVGs of one icon set.

    Raises:
        EmptySampleSetError: ``samples`` is empty.
    """
    config = config or DEFAULT_CONFIG
    samples = list(samples)
    if not samples:
        raise EmptySampleSetError("Cannot analyze style of an empty SVG set")

    styles: list[SampleStyle] = []
    for i, sample in enumerate(samples):
        if not _is_usable(sample):
            logger.warning("Skipping style sample %d: empty or not SVG markup", i)
            continue
        styles.append(sample_style(sample))

    if not styles:
        logger.warning("No usable style samples out of %d, using defaults", len(samples))
        return default_signature(config, confidence=0.0)

    fields = ("stroke_width", "stroke_linecap", "stroke_linejoin", "view_box_size")
    chosen: dict[str, Any] = {}
    agreements: list[float] = []
    for name in fields:
        votes = [getattr(s, name) for s in styles if getattr(s, name) is not None]
        winner = _majority(votes)
        chosen[name] = winner
        if votes:
            agreements.append(votes.count(winner) / len(votes))

    confidence = float(np.mean(agreements)) if agreements else 1.0
    signature = StyleSignature(
        stroke_width=chosen["stroke_width"] or config.default_stroke_width,
        stroke_linecap=chosen["stroke_linecap"] or config.default_stroke_linecap,
        stroke_linejoin=chosen["stroke_linejoin"] or config.default_stroke_linejoin,
        view_box_size=chosen["view_box_size"] or config.default_view_box_size,
        confidence_score=confidence,
    )
    logger.info(
        "Style signature from %d/%d samples: width=%s cap=%s join=%s confidence=%.2f",
        len(styles),
        len(samples),
        signature.stroke_width,
        signature.stroke_linecap,
        signature.stroke_linejoin,
        confidence,
    )
    return signature


# ---------------------------------------------------------------------------
# Style summary
# ---------------------------------------------------------------------------

def _paints(pattern: re.Pattern[str], svg: str) -> bool:
    return any(m.group(1).lower() != "none" for m in pattern.finditer(svg))


def detect_stroke_style(svgs: Iterable[str]) -> str:
    """Classify a set as "outline", "filled" or "mixed" from its paint declarations.

    Markup that declares neither paint counts as filled, since SVG fills
    shapes black by default.
    """
    texts = [strip_comments(s) for s in svgs]
    has_fill = any(_paints(_FILL_PAINT_RE, s) for s in texts)
    has_stroke = any(_paints(_STROKE_PAINT_RE, s) for s in texts)
    if has_stroke and not has_fill:
        return "outline"
    if has_stroke and has_fill:
        return "mixed"
    return "filled"


def _corner_radii(shapes: list[ShapeDescriptor]) -> list[float]:
    return [
        r
        for shape in shapes
        if isinstance(shape, Rect)
        for r in (shape.rx, shape.ry)
        if r is not None and r > 0
    ]


def _command_count(shapes: list[ShapeDescriptor]) -> int:
    return sum(len(_PATH_COMMAND_RE.findall(s.d)) for s in shapes if isinstance(s, Path))


def _describe_shapes(shapes: list[ShapeDescriptor]) -> str:
    kinds = {type(s) for s in shapes}
    path_data = " ".join(s.d for s in shapes if isinstance(s, Path))
    rects = [s for s in shapes if isinstance(s, Rect)]

    labels = []
    if kinds & {Circle, Ellipse}:
        labels.append("circles")
    if any(r.rx or r.ry for r in rects):
        labels.append("rounded rectangles")
    elif rects:
        labels.append("rectangles")
    if _CURVE_COMMAND_RE.search(path_data):
        labels.append("curves")
    if _LINE_COMMAND_RE.search(path_data) or kinds & {Line, Polyline, Polygon}:
        labels.append("straight lines")

    if not labels:
        return "mixed geometric shapes"
    return " and ".join(labels[:2])


def _detail_level(shapes: list[ShapeDescriptor]) -> str:
    path_count = sum(1 for s in shapes if isinstance(s, Path))
    per_path = _command_count(shapes) / path_count if path_count else 0.0
    if len(shapes) <= 2 and per_path <= 10:
        return "low"
    if len(shapes) <= 5 and per_path <= 20:
        return "medium"
    return "high"


def dominant_shapes(svg: str) -> str:
    """Short description of the shapes an icon is built from ("circles and curves")."""
    return _describe_shapes(extract_shapes(svg))


def detail_level(svg: str) -> str:
    """Detail level of an icon, from its element count and commands per path."""
    return _detail_level(extract_shapes(svg))


def path_complexity(svg: str) -> int:
    """Path commands plus two per non-path element; lower is simpler."""
    shapes = extract_shapes(svg)
    return _command_count(shapes) + 2 * sum(1 for s in shapes if not isinstance(s, Path))


def rank_by_complexity(svgs: Iterable[str]) -> list[str]:
    """Samples ordered simplest first; equal scores keep their input order."""
    return sorted(svgs, key=path_complexity)


def summarize_style(samples: Iterable[str], config: EngineConfig | None = None) -> StyleSummary:
    """Style signature plus a descriptive profile of the set.

    Raises:
        EmptySampleSetError: ``samples`` is empty.
    """
    config = config or DEFAULT_CONFIG
    samples = list(samples)
    signature = analyze_style(samples, config)

    usable = [s for s in samples if _is_usable(s)]
    shape_sets = [extract_shapes(s) for s in usable]
    stroke_style = detect_stroke_style(usable)
    radii = [r for shapes in shape_sets for r in _corner_radii(shapes)]

    summary = StyleSummary(
        signature=signature,
        stroke_style=stroke_style,
        fill_usage=_FILL_USAGE[stroke_style],
        corner_radius=float(np.median(radii)) if radii else config.default_corner_radius,
        dominant_shapes=_majority(_describe_shapes(s) for s in shape_sets) or "geometric shapes",
        detail_level=_majority(_detail_level(s) for s in shape_sets) or "medium",
        sample_count=len(usable),
    )
    logger.info(
        "Style summary from %d samples: %s, %s detail, %s",
        summary.sample_count,
        summary.stroke_style,
        summary.detail_level,
        summary.dominant_shapes,
    )
    return summary


# ---------------------------------------------------------------------------
# Style manifests
# ---------------------------------------------------------------------------

def _first_match(patterns: tuple[re.Pattern[str], ...], text: str) -> re.Match[str] | None:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return m
    return None


def parse_style_manifest(manifest: str, config: EngineConfig | None = None) -> StyleSignature:
    """Read a free-text style description ("style DNA") into a signature.

    Values the manifest does not state come from the engine defaults; the
    confidence score is the share of the four values it does state.
    """
    config = config or DEFAULT_CONFIG
    found = 0

    linecap = config.default_stroke_linecap
    if m := _first_match(_MANIFEST_LINECAP_RES, manifest):
        linecap = m.group(1).lower()
        found += 1

    linejoin = config.default_stroke_linejoin
    if m := _first_match(_MANIFEST_LINEJOIN_RES, manifest):
        linejoin = m.group(1).lower()
        found += 1

    stroke_width = config.default_stroke_width
    if m := _first_match(_MANIFEST_STROKE_WIDTH_RES, manifest):
        value = float(m.group(1))
        if value > 0:
            stroke_width = value
            found += 1

    view_box_size = config.default_view_box_size
    if m := _first_match(_MANIFEST_GRID_RES, manifest):
        size = max(int(m.group(1)), int(m.group(2)))
        if size > 0:
            view_box_size = float(size)
            found += 1

    return StyleSignature(
        stroke_width=stroke_width,
        stroke_linecap=linecap,
        stroke_linejoin=linejoin,
        view_box_size=view_box_size,
        confidence_score=found / 4,
    )
