"""
BiasMeter AI — FastAPI Main Application
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from biasmeter.api.router import api_router, page_router
from biasmeter.core.config import Settings, configure_logging, settings as default_settings
from biasmeter.core.errors import InvalidCredentialsError, InvalidEmailError
from biasmeter.services.report_service import ReportGenerator
from biasmeter.services.user_store import UserStore

logger = logging.getLogger(__name__)

# Auth bodies that cannot be bound at all fail like their first check
AUTH_BODY_ERRORS = {
    "/api/auth/register": InvalidEmailError,
    "/api/auth/login": InvalidCredentialsError,
}


async def auth_body_error_handler(request: Request, exc: RequestValidationError):
    error_cls = AUTH_BODY_ERRORS.get(request.url.path)
    if error_cls is None:
        return await request_validation_exception_handler(request, exc)
    error = error_cls()
    logger.info("Unreadable body on %s: %s", request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content=error.to_response())


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: UserStore = app.state.user_store
    logger.info("🛡️  %s v%s starting...", app.state.settings.app_name, app.state.settings.version)
    logger.info("✅ User store ready: %d accounts", store.count())
    yield
    logger.info("Shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    report_generator: Optional[ReportGenerator] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Demo bias meter backend: auth, synthetic bias analysis and analytics page",
        version=settings.version,
        lifespan=lifespan,
    )

    # Process-wide collaborators
    app.state.settings = settings
    app.state.user_store = user_store if user_store is not None else UserStore.with_demo_accounts()
    app.state.report_generator = report_generator or ReportGenerator()

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, auth_body_error_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(page_router)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.version,
            "docs": "/docs",
            "health": "/api/bias/health",
        }

    return app


app = create_app()
