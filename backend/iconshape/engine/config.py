"""Engine configuration — explicit defaults passed into every engine call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Defaults applied when the input markup leaves a value unspecified."""

    # Canonical geometry
    default_view_box: str = "0 0 24 24"

    # Style signature fallbacks (used when no sample expresses a value)
    default_stroke_width: float = 2.0
    default_stroke_linecap: str = "round"
    default_stroke_linejoin: str = "round"
    default_view_box_size: float = 24.0

    # Style summary fallback when no sample has a rounded rect corner
    default_corner_radius: float = 3.0

    # Decimal places kept when formatting generated path numbers
    number_precision: int = 10


DEFAULT_CONFIG = EngineConfig()
