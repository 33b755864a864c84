"""POST /api/extract — raw SVG → canonical geometry."""

from __future__ import annotations

from fastapi import APIRouter

from iconshape.engine.pipeline import normalize_icon
from iconshape.models.geometry import CanonicalIconGeometry
from iconshape.models.requests import ExtractRequest

router = APIRouter()


@router.post("/extract", response_model=CanonicalIconGeometry, response_model_exclude_none=True)
async def extract(req: ExtractRequest) -> CanonicalIconGeometry:
    return normalize_icon(req.svg)
