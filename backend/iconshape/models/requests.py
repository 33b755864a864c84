"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from iconshape.models.geometry import CanonicalIconGeometry, StrokeLinecap, StrokeLinejoin, StyleSignature


class ExtractRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class StyleAnalyzeRequest(BaseModel):
    svgs: list[str] = Field(..., description="Reference SVG codes from the destination icon set")


class AdaptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    svg: str = Field(..., description="Raw SVG code of the icon to adapt")
    target: StyleSignature | None = Field(default=None, description="Target style signature")
    style_manifest: str | None = Field(
        default=None,
        alias="styleManifest",
        description="Free-text style DNA, used when no explicit target is given",
    )


class RenderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    geometry: CanonicalIconGeometry
    size: float = Field(default=24, gt=0, description="Rendered width/height")
    color: str = Field(default="currentColor")
    stroke_width: float | None = Field(default=None, gt=0, alias="strokeWidth")
    render_style: str = Field(default="stroke", alias="renderStyle", pattern="^(stroke|fill)$")
    stroke_linecap: StrokeLinecap = Field(default="round", alias="strokeLinecap")
    stroke_linejoin: StrokeLinejoin = Field(default="round", alias="strokeLinejoin")
