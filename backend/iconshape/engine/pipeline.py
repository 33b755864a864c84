"""Normalization and adaptation entry points.

Every call is a pure function of its arguments, so icons can be processed
in parallel by the caller.
"""

from __future__ import annotations

import logging

from iconshape.engine.config import DEFAULT_CONFIG, EngineConfig
from iconshape.models.geometry import AdaptationResult, CanonicalIconGeometry, StyleSignature
from iconshape.style.adapter import adapt_style
from iconshape.style.analyzer import detect_stroke_style
from iconshape.svg.parser import extract_geometry

logger = logging.getLogger(__name__)


def normalize_icon(svg_text: str, config: EngineConfig | None = None) -> CanonicalIconGeometry:
    """Extract canonical geometry from untrusted SVG markup."""
    geometry = extract_geometry(svg_text, config or DEFAULT_CONFIG)
    if geometry.is_empty:
        logger.info("No geometry produced from %d characters of markup", len(svg_text))
    return geometry


def adapt_icon(
    svg_text: str,
    target: StyleSignature,
    config: EngineConfig | None = None,
) -> AdaptationResult:
    """Adapt an icon to ``target`` and re-extract its geometry.

    If the adapted markup yields no geometry, the original markup is
    extracted instead and ``used_fallback`` is set.
    """
    config = config or DEFAULT_CONFIG
    if detect_stroke_style([svg_text]) == "filled":
        logger.info("Adapting a filled icon: forcing fill=\"none\" leaves only its strokes visible")
    adapted = adapt_style(svg_text, target)
    geometry = extract_geometry(adapted, config)

    used_fallback = False
    if geometry.is_empty:
        fallback = extract_geometry(svg_text, config)
        if not fallback.is_empty:
            logger.warning("Adapted markup produced no geometry, falling back to the original")
            geometry = fallback
            used_fallback = True
        else:
            logger.info("Neither adapted nor original markup produced geometry")

    return AdaptationResult(
        adapted_svg=adapted,
        geometry=geometry,
        target=target,
        used_fallback=used_fallback,
    )
