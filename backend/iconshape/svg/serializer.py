"""Render canonical geometry back into a standalone SVG document."""

from __future__ import annotations

from html import escape

from iconshape.models.geometry import CanonicalIconGeometry
from iconshape.svg.primitives import format_number


def render_icon(
    geometry: CanonicalIconGeometry,
    size: float = 24,
    color: str = "currentColor",
    stroke_width: float | None = None,
    render_style: str = "stroke",
    stroke_linecap: str = "round",
    stroke_linejoin: str = "round",
) -> str:
    """Wrap ``path_data`` in ``<svg viewBox=...><path d=.../></svg>`` with caller overrides.

    ``render_style="fill"`` fills the path with ``color`` and disables the
    stroke; the default strokes it and leaves it unfilled.
    """
    svg_attrs: dict[str, str] = {
        "xmlns": "http://www.w3.org/2000/svg",
        "width": format_number(size),
        "height": format_number(size),
        "viewBox": geometry.view_box,
    }
    if render_style == "fill":
        svg_attrs.update({"fill": color, "stroke": "none"})
    else:
        svg_attrs.update(
            {
                "fill": "none",
                "stroke": color,
                "stroke-width": format_number(2 if stroke_width is None else stroke_width),
                "stroke-linecap": stroke_linecap,
                "stroke-linejoin": stroke_linejoin,
            }
        )

    path_attrs = {"d": geometry.path_data}
    if geometry.fill_rule:
        path_attrs["fill-rule"] = geometry.fill_rule

    def attr_str(attrs: dict[str, str]) -> str:
        return " ".join(f'{k}="{escape(v, quote=True)}"' for k, v in attrs.items())

    return f"<svg {attr_str(svg_attrs)}><path {attr_str(path_attrs)}/></svg>"
