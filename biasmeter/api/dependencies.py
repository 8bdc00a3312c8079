"""
Shared API dependencies.

The user store, report generator and settings live on `app.state` (created
by `create_app`) so tests can swap them per application instance.
"""

from __future__ import annotations

from fastapi import Request

from biasmeter.core.config import Settings
from biasmeter.services.report_service import ReportGenerator
from biasmeter.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_report_generator(request: Request) -> ReportGenerator:
    return request.app.state.report_generator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
