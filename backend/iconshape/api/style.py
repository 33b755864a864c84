"""POST /api/style/* — style signature analysis, summary and adaptation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from iconshape.engine.pipeline import adapt_icon
from iconshape.errors import EmptySampleSetError
from iconshape.models.geometry import AdaptationResult, StyleSignature, StyleSummary
from iconshape.models.requests import AdaptRequest, StyleAnalyzeRequest
from iconshape.style.analyzer import analyze_style, default_signature, parse_style_manifest, summarize_style

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/style")


@router.post("/analyze", response_model=StyleSignature)
async def analyze(req: StyleAnalyzeRequest) -> StyleSignature:
    try:
        return analyze_style(req.svgs)
    except EmptySampleSetError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/summary", response_model=StyleSummary)
async def summary(req: StyleAnalyzeRequest) -> StyleSummary:
    try:
        return summarize_style(req.svgs)
    except EmptySampleSetError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/adapt", response_model=AdaptationResult)
async def adapt(req: AdaptRequest) -> AdaptationResult:
    if req.target is not None:
        target = req.target
    elif req.style_manifest:
        target = parse_style_manifest(req.style_manifest)
        logger.info(
            "Using style manifest: linecap=%s, linejoin=%s",
            target.stroke_linecap,
            target.stroke_linejoin,
        )
    else:
        target = default_signature()
    return adapt_icon(req.svg, target)
