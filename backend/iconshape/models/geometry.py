"""Canonical icon geometry, style signature and style summary models.

All serialize as camelCase records (``pathData``, ``strokeWidth``, ...)
and accept either camelCase or snake_case field names on input.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FillRule = Literal["nonzero", "evenodd"]
StrokeLinecap = Literal["butt", "round", "square"]
StrokeLinejoin = Literal["miter", "round", "bevel"]
StrokeStyle = Literal["outline", "filled", "mixed"]
FillUsage = Literal["none", "solid", "partial"]
DetailLevel = Literal["low", "medium", "high"]

FILL_RULES: tuple[str, ...] = ("nonzero", "evenodd")
STROKE_LINECAPS: tuple[str, ...] = ("butt", "round", "square")
STROKE_LINEJOINS: tuple[str, ...] = ("miter", "round", "bevel")


class CanonicalIconGeometry(BaseModel):
    """Single-path normalized representation stored per icon."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    path_data: str = ""
    view_box: str = "0 0 24 24"
    fill_rule: FillRule | None = None

    @property
    def is_empty(self) -> bool:
        """True when extraction produced no geometry."""
        return not self.path_data.strip()

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class StyleSignature(BaseModel):
    """Visual parameters summarizing an icon set's stroke language."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    stroke_width: float = Field(default=2.0, gt=0)
    stroke_linecap: StrokeLinecap = "round"
    stroke_linejoin: StrokeLinejoin = "round"
    view_box_size: float | None = 24.0
    confidence_score: float = Field(default=1.0, ge=0.0, le=1.0)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class AdaptationResult(BaseModel):
    """Outcome of adapting one icon to a target style signature."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    adapted_svg: str
    geometry: CanonicalIconGeometry
    target: StyleSignature
    # True when the adapted markup yielded no geometry and the original was re-extracted
    used_fallback: bool = False


class StyleSummary(BaseModel):
    """Descriptive profile of an icon set, wrapping its style signature."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    signature: StyleSignature
    stroke_style: StrokeStyle = "outline"
    fill_usage: FillUsage = "none"
    corner_radius: float = Field(default=3.0, ge=0)
    dominant_shapes: str = "geometric shapes"
    detail_level: DetailLevel = "medium"
    sample_count: int = Field(default=0, ge=0)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
