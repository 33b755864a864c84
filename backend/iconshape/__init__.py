"""iconshape — SVG icon normalization and style adaptation engine."""

__version__ = "0.1.0"
