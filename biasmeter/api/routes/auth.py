"""Auth routes backed by the in-memory user store and cookie sessions."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from biasmeter.api.dependencies import get_user_store
from biasmeter.core.errors import BiasMeterError, InvalidCredentialsError
from biasmeter.models.user_model import LoginRequest, RegisterRequest
from biasmeter.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register")
async def register(body: Optional[RegisterRequest] = None, store: UserStore = Depends(get_user_store)):
    body = body or RegisterRequest()
    try:
        profile = store.register(body.email, body.password, body.name, body.company)
    except BiasMeterError as e:
        logger.info("Registration rejected for %s: %s", body.email, e.message)
        return JSONResponse(status_code=e.status_code, content=e.to_response())

    return {
        "success": True,
        "message": "Account created successfully",
        "user": profile.model_dump(),
    }


@router.post("/login")
async def login(request: Request, body: Optional[LoginRequest] = None, store: UserStore = Depends(get_user_store)):
    body = body or LoginRequest()
    try:
        profile = store.login(body.email, body.password)
    except InvalidCredentialsError as e:
        logger.warning("Failed login for %s", body.email)
        return JSONResponse(status_code=e.status_code, content=e.to_response())

    user = profile.model_dump()
    request.session["user"] = user
    request.session["authenticated"] = True
    logger.info("User %s logged in", profile.email)

    return {
        "success": True,
        "message": "Login successful",
        "user": user,
        "redirect": "/",
    }


@router.post("/logout")
async def logout(request: Request):
    user = request.session.get("user")
    request.session.clear()
    if user:
        logger.info("User %s logged out", user.get("email"))
    return {"success": True, "message": "Logged out successfully"}


@router.get("/check")
async def check(request: Request):
    user = request.session.get("user")
    return {"authenticated": user is not None, "user": user}


@router.get("/users")
async def users(store: UserStore = Depends(get_user_store)):
    return {"totalUsers": store.count(), "userEmails": sorted(store.list_emails())}
