"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Lucide-style stroke icons

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# One of every supported element, deliberately in reverse of extraction order
ALL_PRIMITIVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" fill="none" stroke="currentColor" stroke-width="2">
  <ellipse cx="50" cy="80" rx="20" ry="10"/>
  <polygon points="10,10 20,10 15,20"/>
  <polyline points="30,10 40,20 50,10"/>
  <line x1="60" y1="10" x2="90" y2="40"/>
  <circle cx="50" cy="50" r="10"/>
  <rect x="5" y="60" width="20" height="30" rx="4"/>
  <path d="m70 70 l10 10"/>
</svg>'''

ALL_PRIMITIVES_FRAGMENTS = [
    "M70 70 l10 10",
    "M9,60h12a4,4 0 0 1 4,4v22a4,4 0 0 1 -4,4h-12a4,4 0 0 1 -4,-4v-22a4,4 0 0 1 4,-4z",
    "M40,50a10,10 0 1,1 20,0a10,10 0 1,1 -20,0z",
    "M60,10L90,40",
    "M30,10L40,20L50,10",
    "M10,10L20,10L15,20Z",
    "M30,80a20,10 0 1,1 40,0a20,10 0 1,1 -40,0z",
]

# Filled two-tone icon with an even-odd cut-out
FILLED_BADGE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32" fill="currentColor">
  <path fill-rule="evenodd" d="M16 2a14 14 0 1 1 0 28a14 14 0 1 1 0-28zm0 6a8 8 0 1 0 0 16a8 8 0 1 0 0-16z"/>
</svg>'''


def stroke_icon(width: str = "2", cap: str = "round", join: str = "round", size: int = 24) -> str:
    """Minimal stroke icon with the given root stroke attributes."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" fill="none" '
        f'stroke="currentColor" stroke-width="{width}" stroke-linecap="{cap}" stroke-linejoin="{join}">'
        f'<path d="M4 12h16"/></svg>'
    )


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def all_primitives_svg() -> str:
    return ALL_PRIMITIVES_SVG


@pytest.fixture
def filled_badge_svg() -> str:
    return FILLED_BADGE_SVG
