"""Style adapter — rewrite an SVG's stroke attributes to a target signature.

Works on the markup text and never raises: input without a recognizable
root ``<svg>`` tag only gets the in-place rewrites. Comments are carried
through untouched and never count as a declaration. The caller re-extracts
geometry from the result and falls back to the original markup if that
comes back empty.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from iconshape.models.geometry import StyleSignature
from iconshape.svg.parser import COMMENT_RE
from iconshape.svg.primitives import format_number

logger = logging.getLogger(__name__)

_SVG_ROOT_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_STYLE_ATTR_RE = re.compile(r"""(?<![\w:-])(style\s*=\s*)("[^"]*"|'[^']*')""")


def _attribute_re(name: str) -> re.Pattern[str]:
    # Name must not be the tail of a longer one (data-stroke-width, fill-rule)
    return re.compile(rf"""(?<![\w:-])({re.escape(name)}\s*=\s*)(?:"[^"]*"|'[^']*'|[^\s"'>/]+)""")


def _declaration_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"""(?<![\w-])({re.escape(name)}\s*:\s*)[^;"'<>]+""")


def _outside_comments(svg: str, rewrite: Callable[[str], tuple[str, int]]) -> tuple[str, int]:
    """Apply ``rewrite`` to every stretch of markup between comments."""
    parts: list[str] = []
    total = 0
    pos = 0
    for comment in COMMENT_RE.finditer(svg):
        chunk, count = rewrite(svg[pos : comment.start()])
        parts.extend((chunk, comment.group(0)))
        total += count
        pos = comment.end()
    chunk, count = rewrite(svg[pos:])
    parts.append(chunk)
    return "".join(parts), total + count


def _rewrite(svg: str, name: str, value: str) -> tuple[str, int]:
    """Replace every attribute and inline style declaration of ``name`` outside comments."""
    attribute = _attribute_re(name)
    declaration = _declaration_re(name)

    def rewrite(chunk: str) -> tuple[str, int]:
        chunk, attr_count = attribute.subn(lambda m: f'{m.group(1)}"{value}"', chunk)
        chunk, decl_count = declaration.subn(lambda m: f"{m.group(1)}{value}", chunk)
        return chunk, attr_count + decl_count

    return _outside_comments(svg, rewrite)


def _find_root(svg: str) -> re.Match[str] | None:
    """First ``<svg ...>`` tag that is not inside a comment."""
    comments = [m.span() for m in COMMENT_RE.finditer(svg)]
    for root in _SVG_ROOT_TAG_RE.finditer(svg):
        if not any(start <= root.start() < end for start, end in comments):
            return root
    return None


def _set_root_attribute(svg: str, name: str, value: str) -> str:
    """Set ``name`` on the root ``<svg>`` tag, replacing rather than duplicating."""
    root = _find_root(svg)
    if root is None:
        return svg

    tag = root.group(0)
    pattern = _attribute_re(name)
    if pattern.search(tag):
        new_tag = pattern.sub(lambda m: f'{m.group(1)}"{value}"', tag, count=1)
    else:
        new_tag = f'{tag[:4]} {name}="{value}"{tag[4:]}'
    return svg[: root.start()] + new_tag + svg[root.end() :]


def _set_root_declaration(svg: str, name: str, value: str) -> str:
    """Rewrite ``name`` inside the root tag's ``style`` attribute, if declared there."""
    root = _find_root(svg)
    if root is None:
        return svg

    declaration = _declaration_re(name)

    def rewrite_style(m: re.Match[str]) -> str:
        return m.group(1) + declaration.sub(lambda d: f"{d.group(1)}{value}", m.group(2))

    new_tag = _STYLE_ATTR_RE.sub(rewrite_style, root.group(0), count=1)
    return svg[: root.start()] + new_tag + svg[root.end() :]


def adapt_style(svg_text: str, target: StyleSignature) -> str:
    """Rewrite stroke-width, linecap and linejoin to ``target``; force ``fill="none"`` on the root.

    Existing stroke-width values are rewritten but none is injected. Linecap
    and linejoin are rewritten where present and otherwise injected on the
    root element. A ``fill`` declaration in the root's inline style would
    override the presentation attribute, so it is set to ``none`` as well.
    """
    adapted, widths = _rewrite(svg_text, "stroke-width", format_number(target.stroke_width))

    adapted, caps = _rewrite(adapted, "stroke-linecap", target.stroke_linecap)
    if not caps:
        adapted = _set_root_attribute(adapted, "stroke-linecap", target.stroke_linecap)

    adapted, joins = _rewrite(adapted, "stroke-linejoin", target.stroke_linejoin)
    if not joins:
        adapted = _set_root_attribute(adapted, "stroke-linejoin", target.stroke_linejoin)

    adapted = _set_root_attribute(adapted, "fill", "none")
    adapted = _set_root_declaration(adapted, "fill", "none")

    logger.debug(
        "Adapted style: %d stroke-width, %d linecap, %d linejoin rewrites",
        widths,
        caps,
        joins,
    )
    return adapted
