"""Engine exceptions."""

from __future__ import annotations


class IconShapeError(Exception):
    """Base class for errors raised by the engine."""


class EmptySampleSetError(IconShapeError, ValueError):
    """A style signature was requested from no reference samples at all."""
