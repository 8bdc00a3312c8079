"""Bias analysis routes: health, synthetic analysis and industry formats."""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from biasmeter.api.dependencies import get_report_generator, get_settings
from biasmeter.core.config import Settings
from biasmeter.core.errors import AnalysisFailure
from biasmeter.demo import catalogs
from biasmeter.services.report_service import ReportGenerator

logger = logging.getLogger(__name__)

router = APIRouter()


def _now_ms() -> int:
    return int(time.time() * 1000)


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "UP",
        "service": settings.service_name,
        "version": settings.version,
        "message": "Ready to analyze bias in AI systems",
        "timestamp": _now_ms(),
    }


@router.post("/analyze")
async def analyze(
    file: Optional[UploadFile] = File(None),
    industry: Optional[str] = Form(None),
    generator: ReportGenerator = Depends(get_report_generator),
):
    """
    Accept an uploaded dataset and return a bias report for it.

    The file content is read only to measure its size; the report itself is
    synthetic (see ReportGenerator).
    """
    try:
        if file is None:
            raise AnalysisFailure("Required part 'file' is not present")
        if industry is None:
            raise AnalysisFailure("Required parameter 'industry' is not present")

        content = await file.read()
        file_size = len(content)
        logger.info("📁 Received file: %s | industry: %s | size: %d bytes", file.filename, industry, file_size)

        report = generator.analyze(industry, file_size)
    except AnalysisFailure as e:
        logger.error("❌ Error analyzing file: %s", e.detail)
        return JSONResponse(status_code=e.status_code, content=e.to_response())
    except Exception as e:
        logger.exception("❌ Error analyzing file")
        failure = AnalysisFailure(str(e))
        return JSONResponse(status_code=failure.status_code, content=failure.to_response())

    return {
        **report.model_dump(),
        "fileName": file.filename,
        "fileSize": file_size,
        "industry": industry,
        "analysisTime": _now_ms(),
    }


@router.get("/format/{industry}")
async def industry_format(industry: str):
    return {
        "industry": industry,
        "format": catalogs.get_format(industry),
        "description": catalogs.get_description(industry),
    }
