"""Tests for the SVG markup extractor."""

from __future__ import annotations

import pytest

from iconshape.engine.config import EngineConfig
from iconshape.models.geometry import CanonicalIconGeometry
from iconshape.svg.parser import (
    extract_attributes,
    extract_fill_rule,
    extract_fragments,
    extract_geometry,
    extract_shapes,
    extract_view_box,
    parse_number,
)
from iconshape.svg.shapes import Circle, Line, Path, Rect
from tests.conftest import (
    ALL_PRIMITIVES_FRAGMENTS,
    ALL_PRIMITIVES_SVG,
    BAR_CHART_SVG,
    CIRCLE_SVG,
    FILLED_BADGE_SVG,
    HOME_SVG,
    SMILEY_SVG,
)


def _svg(body: str, root: str = 'viewBox="0 0 24 24"') -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" {root}>{body}</svg>'


# ---------------------------------------------------------------------------
# Completeness and ordering
# ---------------------------------------------------------------------------

class TestExtractionOrder:
    def test_all_primitives_yield_seven_fragments(self):
        fragments = extract_fragments(ALL_PRIMITIVES_SVG)
        assert len(fragments) == 7
        assert fragments == ALL_PRIMITIVES_FRAGMENTS

    def test_path_data_is_space_joined(self):
        geometry = extract_geometry(ALL_PRIMITIVES_SVG)
        assert geometry.path_data == " ".join(ALL_PRIMITIVES_FRAGMENTS)
        assert geometry.path_data.count("M") == 7
        assert geometry.view_box == "0 0 100 100"

    def test_shape_kinds_in_fixed_order(self):
        tags = [s.tag for s in extract_shapes(ALL_PRIMITIVES_SVG)]
        assert tags == ["path", "rect", "circle", "line", "polyline", "polygon", "ellipse"]

    def test_source_order_within_kind(self):
        shapes = extract_shapes(BAR_CHART_SVG)
        assert shapes == [Line(18, 20, 18, 10), Line(12, 20, 12, 4), Line(6, 20, 6, 14)]

    def test_deterministic(self):
        assert extract_geometry(SMILEY_SVG) == extract_geometry(SMILEY_SVG)


# ---------------------------------------------------------------------------
# Real icons
# ---------------------------------------------------------------------------

class TestIcons:
    def test_circle_icon(self):
        geometry = extract_geometry(CIRCLE_SVG)
        assert geometry.path_data == "M2,12a10,10 0 1,1 20,0a10,10 0 1,1 -20,0z"
        assert geometry.view_box == "0 0 24 24"
        assert geometry.fill_rule is None

    def test_smiley_paths_before_circles(self):
        fragments = extract_fragments(SMILEY_SVG)
        assert len(fragments) == 4
        assert fragments[0] == "M8 14s1.5 2 4 2 4-2 4-2"
        assert fragments[1].startswith("M2,12a10,10")

    def test_home_paths_kept_verbatim(self):
        fragments = extract_fragments(HOME_SVG)
        assert fragments[0] == "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"
        assert len(fragments) == 2

    def test_filled_badge_keeps_fill_rule(self):
        geometry = extract_geometry(FILLED_BADGE_SVG)
        assert geometry.fill_rule == "evenodd"
        assert geometry.view_box == "0 0 32 32"
        assert geometry.path_data.startswith("M16 2a14 14")


# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------

class TestEmpty:
    def test_empty_svg(self):
        geometry = extract_geometry("<svg></svg>")
        assert geometry == CanonicalIconGeometry(path_data="", view_box="0 0 24 24")
        assert geometry.is_empty
        assert geometry.to_record() == {"pathData": "", "viewBox": "0 0 24 24"}

    def test_not_svg_at_all(self):
        assert extract_geometry("<not-svg>").is_empty

    def test_custom_default_view_box(self):
        geometry = extract_geometry("<svg></svg>", EngineConfig(default_view_box="0 0 16 16"))
        assert geometry.view_box == "0 0 16 16"


# ---------------------------------------------------------------------------
# Attribute disambiguation
# ---------------------------------------------------------------------------

class TestAttributeBoundaries:
    def test_r_not_taken_from_stroke_width(self):
        shapes = extract_shapes(_svg('<circle stroke-width="3" cx="12" cy="12" r="5"/>'))
        assert shapes == [Circle(12, 12, 5)]

    def test_circle_without_r_dropped(self):
        assert extract_shapes(_svg('<circle cx="12" cy="12" stroke-width="3"/>')) == []

    def test_x_not_taken_from_rx(self):
        shapes = extract_shapes(_svg('<rect rx="3" ry="3" width="10" height="10"/>'))
        assert shapes == [Rect(0, 0, 10, 10, 3, 3)]

    def test_width_not_taken_from_prefixed_names(self):
        shapes = extract_shapes(_svg('<rect data-width="99" stroke-width="2" x="2" y="2" width="10" height="8"/>'))
        assert shapes == [Rect(2, 2, 10, 8)]

    def test_cx_not_taken_from_rx(self):
        shapes = extract_shapes(_svg('<ellipse rx="4" ry="2" cx="10" cy="6" stroke-width="4"/>'))
        assert shapes[0].cx == 10
        assert shapes[0].rx == 4

    def test_attribute_order_independent(self):
        assert extract_shapes(_svg('<circle r="5" cy="12" cx="12"/>')) == [Circle(12, 12, 5)]

    def test_mixed_quoting(self):
        assert extract_shapes(_svg("<circle cx='12' cy=\"12\" r=5 />")) == [Circle(12, 12, 5)]

    def test_line_does_not_match_gradients_or_polylines(self):
        body = (
            '<defs><linearGradient id="g" x1="0" y1="0" x2="1" y2="1"/></defs>'
            '<polyline points="0,0 1,1"/>'
        )
        assert [s.tag for s in extract_shapes(_svg(body))] == ["polyline"]

    def test_extract_attributes(self):
        attrs = extract_attributes(' cx="1" stroke-width=\'2\' r=3 cx="9"')
        assert attrs == {"cx": "1", "stroke-width": "2", "r": "3"}


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------

class TestMalformed:
    def test_bad_elements_dropped_rest_kept(self):
        body = (
            '<circle cx="a" cy="12" r="5"/>'
            '<rect width="abc" height="10"/>'
            '<polyline points="x,y"/>'
            '<path d=""/>'
            '<path d="L1 1"/>'
            '<ellipse cx="5" cy="5" rx="0" ry="2"/>'
            '<circle cx="4" cy="4" r="2"/>'
        )
        assert extract_fragments(_svg(body)) == ["M2,4a2,2 0 1,1 4,0a2,2 0 1,1 -4,0z"]

    def test_unterminated_tag(self):
        svg = '<svg viewBox="0 0 24 24"><circle cx="12" cy="12" r="4"<path d="M1 1L2 2"/></svg>'
        fragments = extract_fragments(svg)
        assert fragments == ["M1 1L2 2", "M8,12a4,4 0 1,1 8,0a4,4 0 1,1 -8,0z"]

    def test_truncated_input(self):
        assert extract_fragments('<svg><line x1="0" y1="0" x2="5" y2="5"') == ["M0,0L5,5"]

    def test_comments_ignored(self):
        svg = _svg('<!-- <circle cx="1" cy="1" r="1"/> --><line x1="0" y1="0" x2="1" y2="1"/>')
        assert extract_fragments(svg) == ["M0,0L1,1"]

    def test_non_finite_sizes_dropped(self):
        body = '<rect width="1e400" height="5"/><polygon points="0,0 1e400,0 5,5"/>'
        assert extract_fragments(_svg(body)) == []

    def test_px_units_accepted(self):
        assert extract_shapes(_svg('<circle cx="12px" cy="12" r="4px"/>')) == [Circle(12, 12, 4)]

    def test_positional_attributes_default_to_zero(self):
        assert extract_shapes(_svg('<circle r="3"/>')) == [Circle(0, 0, 3)]
        assert extract_shapes(_svg('<rect width="4" height="4"/>')) == [Rect(0, 0, 4, 4)]

    def test_negative_radius_treated_as_absent(self):
        assert extract_shapes(_svg('<rect width="4" height="4" rx="-1" ry="1"/>')) == [Rect(0, 0, 4, 4, None, 1)]

    def test_relative_path_normalized(self):
        shapes = extract_shapes(_svg('<path d="  m4 4 l2 2 "/>'))
        assert shapes == [Path("m4 4 l2 2")]
        assert extract_fragments(_svg('<path d="m4 4 l2 2"/>')) == ["M4 4 l2 2"]


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "svg, expected",
    [
        ('<svg viewBox="0 0 48 48"></svg>', "0 0 48 48"),
        ("<svg viewBox='0 0 16 16'></svg>", "0 0 16 16"),
        ('<svg viewBox="0,0,32,32"></svg>', "0 0 32 32"),
        ('<svg viewBox=" -2 -2 28.5 28 "></svg>', "-2 -2 28.5 28"),
        ('<svg viewBox="0 0 24"></svg>', "0 0 24 24"),
        ('<svg viewBox="0 0 -5 10"></svg>', "0 0 24 24"),
        ('<svg viewBox="a b c d"></svg>', "0 0 24 24"),
        ('<svg viewBox="0 0 1e-12 1e-12"></svg>', "0 0 24 24"),
        ('<svg viewBox="0 0 1e400 24"></svg>', "0 0 24 24"),
        ('<!-- viewBox="0 0 10 10" --><svg viewBox="0 0 48 48"></svg>', "0 0 48 48"),
        ("<svg></svg>", "0 0 24 24"),
    ],
)
def test_extract_view_box(svg, expected):
    assert extract_view_box(svg) == expected


@pytest.mark.parametrize(
    "svg, expected",
    [
        ('<svg fill-rule="evenodd"></svg>', "evenodd"),
        ('<svg><path fill-rule="nonzero" d="M0 0"/></svg>', "nonzero"),
        ('<svg><path style="fill-rule:evenodd" d="M0 0"/></svg>', "evenodd"),
        ('<svg><path fill-rule="bogus" d="M0 0"/></svg>', None),
        ('<svg clip-rule="evenodd"></svg>', None),
        ('<svg><!-- fill-rule="evenodd" --><path d="M0 0"/></svg>', None),
        ("<svg></svg>", None),
    ],
)
def test_extract_fill_rule(svg, expected):
    assert extract_fill_rule(svg) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2", 2.0),
        ("2px", 2.0),
        (" 1e2 ", 100.0),
        ("-.5", -0.5),
        ("1e400", None),
        ("-1e400", None),
        ("50%", None),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value) == expected


def test_commented_metadata_ignored():
    svg = (
        '<!-- viewBox="0 0 10 10" fill-rule="evenodd" -->'
        '<svg viewBox="0 0 48 48"><circle cx="24" cy="24" r="20"/></svg>'
    )
    geometry = extract_geometry(svg)
    assert geometry.view_box == "0 0 48 48"
    assert geometry.fill_rule is None
