"""API router composition.

JSON endpoints live under `/api/auth/*` and `/api/bias/*`; the analytics
page is served at `/analytics`.
"""

from fastapi import APIRouter

from biasmeter.api.routes.analytics import router as analytics_router
from biasmeter.api.routes.auth import router as auth_router
from biasmeter.api.routes.bias import router as bias_router


api_router = APIRouter()
page_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(bias_router, prefix="/bias", tags=["bias"])

page_router.include_router(analytics_router, tags=["analytics"])
