"""Static analytics page."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from biasmeter.api.dependencies import get_settings
from biasmeter.core.config import Settings

router = APIRouter()

ANALYTICS_PAGE = "analytics.html"


@router.get("/analytics")
async def analytics_page(settings: Settings = Depends(get_settings)):
    page = Path(settings.static_dir) / ANALYTICS_PAGE
    if not page.is_file():
        return JSONResponse(status_code=404, content={"success": False, "message": "Analytics page not found"})
    return FileResponse(page, media_type="text/html")
