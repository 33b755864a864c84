"""POST /api/render — canonical geometry → standalone SVG."""

from __future__ import annotations

from fastapi import APIRouter

from iconshape.models.requests import RenderRequest
from iconshape.models.responses import RenderResponse
from iconshape.svg.serializer import render_icon

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    svg = render_icon(
        req.geometry,
        size=req.size,
        color=req.color,
        stroke_width=req.stroke_width,
        render_style=req.render_style,
        stroke_linecap=req.stroke_linecap,
        stroke_linejoin=req.stroke_linejoin,
    )
    return RenderResponse(svg=svg)
